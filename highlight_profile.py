# highlight_profile.py
# Data model for a declarative highlight profile: delimiters, keyword groups,
# single/multi-line block rules and regex token rules. Profiles are immutable
# once constructed and are validated here, so the scanner never has to.

import re
from dataclasses import dataclass, field, replace
from enum import Enum


class ProfileError(ValueError):
    """Raised when a highlight profile (or its configuration) is malformed."""


class BlockKind(Enum):
    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"


def fold(text: str, ignore_case: bool) -> str:
    return text.lower() if ignore_case else text


@dataclass(frozen=True)
class EscapeRule:
    """
    Escape handling inside a block.

    prefix: when found, the prefix and the single character after it are skipped
            (e.g. a backslash before a quote).
    items:  literal sequences skipped verbatim (e.g. a doubled quote '').
    """
    prefix: str = ""
    items: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(item for item in self.items if item))


@dataclass(frozen=True)
class KeywordGroup:
    """A named set of keywords sharing one style. Keywords are kept sorted."""
    name: str
    style: str
    keywords: tuple = ()
    ignore_case: bool = False

    def __post_init__(self):
        # Lookup is a binary search over folded text, so the order has to match it.
        ordered = sorted(set(self.keywords), key=lambda word: fold(word, self.ignore_case))
        object.__setattr__(self, "keywords", tuple(word for word in ordered if word))


@dataclass(frozen=True)
class BlockRule:
    name: str
    style: str
    start: str
    end: str = ""
    kind: BlockKind = BlockKind.SINGLE_LINE
    wrapper_style: str | None = None
    escape: EscapeRule | None = None

    def __post_init__(self):
        if not self.start:
            raise ProfileError(f"Block '{self.name}' has an empty start string.")
        if self.kind is BlockKind.MULTI_LINE and not self.end:
            raise ProfileError(f"Multi-line block '{self.name}' needs an end string.")

    @property
    def is_multi_line(self) -> bool:
        return self.kind is BlockKind.MULTI_LINE


@dataclass(frozen=True)
class TokenGroup:
    """A named capture inside a token pattern, styled on its own."""
    name: str
    style: str


@dataclass(frozen=True)
class TokenRule:
    """
    A regex based token. The pattern is only tried anchored at the current
    scan position; named groups listed in `groups` get their own style and the
    rest of the match keeps the token's style.
    """
    name: str
    style: str
    pattern: re.Pattern
    groups: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))
        for group in self.groups:
            if group.name not in self.pattern.groupindex:
                raise ProfileError(
                    f"Token '{self.name}' styles group '{group.name}' "
                    f"but its pattern has no such named group."
                )

    @classmethod
    def compile(cls, name: str, style: str, pattern: str, groups=(), ignore_case: bool = False):
        flags = re.DOTALL
        if ignore_case:
            flags |= re.IGNORECASE
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise ProfileError(f"Token '{name}' has an invalid pattern {pattern!r}: {e}") from e
        return cls(name=name, style=style, pattern=compiled, groups=tuple(groups))


def _sorted_chars(chars, label: str) -> tuple:
    for ch in chars:
        if len(ch) != 1:
            raise ProfileError(f"{label} entries must be single characters, got {ch!r}.")
    return tuple(sorted(set(chars)))


@dataclass(frozen=True)
class Profile:
    """
    A complete highlight profile for one language.

    delimiters end a word and are themselves left unstyled; back_delimiters end a
    word too but scanning resumes on them, so they can start the next token.
    """
    delimiters: tuple = ()
    back_delimiters: tuple = ()
    ignore_case: bool = False
    keyword_groups: tuple = ()
    single_line_blocks: tuple = ()
    multi_line_blocks: tuple = ()
    token_rules: tuple = ()
    name: str = ""
    _delimiter_set: frozenset = field(init=False, repr=False, compare=False)
    _back_delimiter_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "delimiters", _sorted_chars(self.delimiters, "Delimiter"))
        set_(self, "back_delimiters", _sorted_chars(self.back_delimiters, "Back delimiter"))
        for attr in ("keyword_groups", "single_line_blocks", "multi_line_blocks", "token_rules"):
            set_(self, attr, tuple(getattr(self, attr)))
        # Keyword order must follow this profile's case rule, whatever the group was built with.
        set_(self, "keyword_groups", tuple(
            group if group.ignore_case == self.ignore_case else replace(group, ignore_case=self.ignore_case)
            for group in self.keyword_groups
        ))
        if self.ignore_case:
            set_(self, "token_rules", tuple(
                rule if rule.pattern.flags & re.IGNORECASE
                else replace(rule, pattern=re.compile(rule.pattern.pattern, rule.pattern.flags | re.IGNORECASE))
                for rule in self.token_rules
            ))

        for block in self.single_line_blocks:
            if block.kind is not BlockKind.SINGLE_LINE:
                raise ProfileError(f"Block '{block.name}' is listed as single-line but is {block.kind.value}.")
        for block in self.multi_line_blocks:
            if block.kind is not BlockKind.MULTI_LINE:
                raise ProfileError(f"Block '{block.name}' is listed as multi-line but is {block.kind.value}.")

        set_(self, "_delimiter_set", frozenset(fold(ch, self.ignore_case) for ch in self.delimiters))
        set_(self, "_back_delimiter_set", frozenset(fold(ch, self.ignore_case) for ch in self.back_delimiters))

    def is_delimiter(self, ch: str) -> bool:
        return fold(ch, self.ignore_case) in self._delimiter_set

    def is_back_delimiter(self, ch: str) -> bool:
        return fold(ch, self.ignore_case) in self._back_delimiter_set

    def multi_line_block_index(self, block) -> int:
        """Position of `block` in multi_line_blocks, or -1 (used as a Qt block state)."""
        for i, candidate in enumerate(self.multi_line_blocks):
            if candidate is block:
                return i
        return -1
