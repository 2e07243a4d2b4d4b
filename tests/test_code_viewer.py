"""Tests for the Qt highlighter adapter and the code viewer widget."""

import pytest

pytest.importorskip("PySide6")

from PySide6.QtGui import QTextCursor  # noqa: E402
from PySide6.QtWidgets import QPlainTextEdit  # noqa: E402

from code_viewer import CodeViewer, ProfileHighlighter, format_for_style, utf16_positions  # noqa: E402
from profile_factory import ProfileFactory  # noqa: E402

THEME = {"K": {"color": "blue", "bold": True}, "C": {"color": "darkgreen"}, "W": {"color": "green"}}


def block_formats(document, number):
    layout = document.findBlockByNumber(number).layout()
    return sorted((r.start, r.length) for r in layout.formats())


def highlighted_editor(profile, theme=THEME):
    editor = QPlainTextEdit()
    editor.highlighter = ProfileHighlighter(editor.document(), profile=profile, theme=theme)
    return editor


class TestProfileHighlighter:
    def test_block_state_carries_open_comment(self, qapp, c_like_profile):
        editor = highlighted_editor(c_like_profile)
        editor.setPlainText("a /* start\nmiddle\nend */ int")
        document = editor.document()
        states = [document.findBlockByNumber(i).userState() for i in range(3)]
        assert states == [0, 0, -1]

    def test_formats_follow_spans(self, qapp, c_like_profile):
        editor = highlighted_editor(c_like_profile)
        editor.setPlainText("a /* start\nmiddle\nend */ int")
        document = editor.document()
        assert block_formats(document, 0) == [(2, 2), (4, 6)]
        assert block_formats(document, 1) == [(0, 6)]
        assert block_formats(document, 2) == [(0, 4), (4, 2), (7, 3)]

    def test_edit_closing_block_updates_following_lines(self, qapp, c_like_profile):
        editor = highlighted_editor(c_like_profile)
        editor.setPlainText("/* open\nint x;")
        document = editor.document()
        assert document.findBlockByNumber(1).userState() == 0

        cursor = QTextCursor(document.findBlockByNumber(0))
        cursor.movePosition(QTextCursor.EndOfBlock)
        cursor.insertText(" */")
        assert document.findBlockByNumber(1).userState() == -1
        assert block_formats(document, 1) == [(0, 3)]

    def test_styles_missing_from_theme_are_skipped(self, qapp, c_like_profile):
        editor = highlighted_editor(c_like_profile, theme={"K": {"color": "blue"}})
        editor.setPlainText('"text" int')
        assert block_formats(editor.document(), 0) == [(7, 3)]

    def test_no_profile(self, qapp):
        editor = highlighted_editor(None)
        editor.setPlainText("int x")
        assert block_formats(editor.document(), 0) == []

    def test_set_profile_rehighlights(self, qapp, c_like_profile):
        editor = highlighted_editor(None)
        editor.setPlainText("int x")
        editor.highlighter.set_profile(c_like_profile)
        assert block_formats(editor.document(), 0) == [(0, 3)]

    def test_format_for_style(self, qapp):
        fmt = format_for_style("K", THEME)
        assert fmt.foreground().color().name() == "#0000ff"
        assert format_for_style("unknown", THEME) is None


def test_utf16_positions():
    to_qt = utf16_positions("\U0001F600ab")
    assert to_qt(1) == 2
    assert to_qt(3) == 4
    assert utf16_positions("abc")(2) == 2


class TestCodeViewer:
    def test_load_file_picks_profile_by_extension(self, qapp, tmp_path):
        source = tmp_path / "demo.py"
        source.write_text("class Demo:\n    pass\n", encoding="utf-8")
        viewer = CodeViewer(factory=ProfileFactory())
        profile = viewer.load_file(str(source))
        assert profile.name == "python"
        assert viewer.isReadOnly()
        assert viewer.property("file_path") == str(source)
        results = viewer.line_results()
        assert [r.line_number for r in results] == [1, 2]
        assert results[0].spans[1] == (6, 4, "class_name")

    def test_unmapped_file_is_plain(self, qapp, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_text("class Demo", encoding="utf-8")
        viewer = CodeViewer()
        assert viewer.load_file(str(source)) is None
        assert viewer.line_results()[0].spans == []

    def test_line_results_keep_form_feed_in_its_line(self, qapp):
        viewer = CodeViewer()
        viewer.set_source("x = 1\n\x0c\nimport os\n")
        results = viewer.line_results()
        assert [r.line_number for r in results] == [1, 2, 3]
        assert results[1].text == "\x0c"

    def test_line_number_area_grows_with_lines(self, qapp):
        viewer = CodeViewer()
        viewer.set_source("x")
        narrow = viewer.line_number_area_width()
        viewer.set_source("\n".join("x" for _ in range(1000)))
        assert viewer.line_number_area_width() > narrow


class TestMain:
    def test_html_mode_needs_two_paths(self, capsys):
        from main import main

        assert main(["--html", "only-input.py"]) == 2
        assert "specify input and output file!" in capsys.readouterr().err

    def test_html_mode_writes_file(self, tmp_path, capsys):
        from main import main

        source = tmp_path / "query.sql"
        source.write_text("SELECT 1;\n", encoding="utf-8")
        output = tmp_path / "query.html"
        assert main(["--html", str(source), str(output)]) == 0
        assert ">SELECT</span>" in output.read_text(encoding="utf-8")
        assert "Wrote 1 lines" in capsys.readouterr().out

    def test_html_mode_reports_missing_input(self, tmp_path, capsys):
        from main import main

        assert main(["--html", str(tmp_path / "missing.py"), str(tmp_path / "out.html")]) == 1
        assert "Export failed" in capsys.readouterr().err
