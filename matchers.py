# matchers.py
# Low level matching helpers used by the highlight parser: prefix matching,
# keyword lookup by binary search, anchored token matching and the block end
# scanner. None of these raise on ordinary input; a miss is just a miss.

from typing import NamedTuple

from highlight_profile import BlockKind, fold


class BlockEnd(NamedTuple):
    end: int      # index just past the block (or the line length if it stays open)
    closed: bool  # False when the block continues on the next line


def starts_with(text: str, index: int, needle: str, ignore_case: bool = False) -> bool:
    """True if `text` holds `needle` at `index`. Reading past the end is a plain False."""
    if index < 0 or index + len(needle) > len(text):
        return False
    if ignore_case:
        return fold(text[index:index + len(needle)], True) == fold(needle, True)
    return text.startswith(needle, index)


def compare_keyword(keyword: str, text: str, index: int, length: int, ignore_case: bool = False) -> int:
    """
    Orders `keyword` against the word text[index:index + length].

    Characters are compared (case folded when asked) up to the shorter length;
    when they all agree the length difference decides. So 0 means an exact match
    only: "if" never matches inside "ifdef".
    """
    for i in range(min(len(keyword), length)):
        a = fold(keyword[i], ignore_case)
        b = fold(text[index + i], ignore_case)
        if a != b:
            return -1 if a < b else 1
    return len(keyword) - length


def binary_search(items, comparer) -> int:
    """
    Binary search driven by `comparer(item)` (negative: item sorts before the
    target). Returns the index found, or ~insertion_point when missing.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + ((high - low) >> 1)
        result = comparer(items[mid])
        if result == 0:
            return mid
        if result < 0:
            low = mid + 1
        else:
            high = mid - 1
    return ~low


def find_keyword(group, text: str, index: int, length: int, ignore_case: bool = False):
    """Return `group` if the word at text[index:index + length] is one of its keywords, else None."""
    if length <= 0:
        return None
    found = binary_search(
        group.keywords,
        lambda keyword: compare_keyword(keyword, text, index, length, ignore_case),
    )
    return group if found >= 0 else None


def match_token(rule, text: str, index: int):
    """Anchored match of a token rule at `index`; empty matches count as no match."""
    match = rule.pattern.match(text, index)
    if match is None or match.end() == match.start():
        return None
    return match


def find_block_end(text: str, index: int, rule, continuing: bool, ignore_case: bool = False) -> BlockEnd:
    """
    Find where the block starting (or continuing) at `index` ends on this line.

    At each position an escape prefix wins over an escape item, and either wins
    over the end string. A single-line block without an end string runs to the
    end of the line.
    """
    pos = index if continuing else index + len(rule.start)
    length = len(text)

    if rule.kind is BlockKind.SINGLE_LINE and not rule.end:
        return BlockEnd(length, True)

    escape = rule.escape
    while pos < length:
        if escape is not None:
            if escape.prefix and starts_with(text, pos, escape.prefix, ignore_case):
                # prefix plus the one character it escapes
                pos += len(escape.prefix) + 1
                continue
            item = next((item for item in escape.items if starts_with(text, pos, item, ignore_case)), None)
            if item is not None:
                pos += len(item)
                continue
        if starts_with(text, pos, rule.end, ignore_case):
            return BlockEnd(pos + len(rule.end), True)
        pos += 1

    return BlockEnd(length, False)
