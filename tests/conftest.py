"""Shared fixtures for highlighter tests."""

import os

import pytest

from highlight_profile import (
    BlockKind, BlockRule, EscapeRule, KeywordGroup, Profile, TokenGroup, TokenRule
)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def c_like_profile():
    """Small C-style profile: one keyword group, /* */ comments with wrapper style, strings."""
    return Profile(
        name="c_like",
        delimiters=" \t",
        back_delimiters="();,=",
        keyword_groups=(KeywordGroup("keywords", "K", ("if", "int", "return")),),
        multi_line_blocks=(
            BlockRule("comment", "C", "/*", "*/", kind=BlockKind.MULTI_LINE, wrapper_style="W"),
        ),
        single_line_blocks=(
            BlockRule("line_comment", "C", "//"),
            BlockRule("string", "S", '"', '"', escape=EscapeRule(prefix="\\")),
        ),
        token_rules=(
            TokenRule.compile("function", "K", r"def\s+(?P<name>\w+)",
                              groups=(TokenGroup("name", "F"),)),
            TokenRule.compile("number", "N", r"\d+\b"),
        ),
    )


@pytest.fixture(scope="session")
def qapp():
    qt_widgets = pytest.importorskip("PySide6.QtWidgets")
    app = qt_widgets.QApplication.instance() or qt_widgets.QApplication([])
    yield app
