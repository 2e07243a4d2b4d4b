# highlight_parser.py
# Line by line highlighting driven by a Profile. Each line is scanned left to
# right; at every position multi-line blocks are tried first, then single-line
# blocks, regex tokens and finally keywords. The multi-line block still open at
# the end of a line is returned to the caller and fed into the next line.

from typing import NamedTuple

from matchers import find_block_end, find_keyword, match_token, starts_with


class Span(NamedTuple):
    start: int
    length: int
    style: str


class LineResult(NamedTuple):
    line_number: int
    text: str
    spans: list


class HighlightParser:
    """
    Turns text lines into styled spans using one highlight profile.

    The parser keeps no per-call state, so one instance (and its profile) can be
    shared between threads.
    """

    def __init__(self, profile=None):
        self.profile = profile

    def parse(self, lines, first_line_number: int = 0) -> list:
        """
        Highlight a batch of lines. The open multi-line block (if any) is carried
        from each line into the next; nothing is carried between calls.

        Raises:
            TypeError: `lines` is None.
            ValueError: `first_line_number` is negative.
        """
        if lines is None:
            raise TypeError("lines must not be None")
        if first_line_number < 0:
            raise ValueError(f"first_line_number must be non-negative, got {first_line_number}")

        results = []
        carry = None
        for offset, text in enumerate(lines):
            if self.profile is None:
                spans = []
            else:
                spans, carry = self.parse_line(text, carry)
            results.append(LineResult(first_line_number + offset, text, spans))
        return results

    def parse_line(self, text: str, carry=None):
        """
        Highlight one line.

        Args:
            text (str): The line, without its line terminator.
            carry (BlockRule | None): The multi-line block left open by the previous line.

        Returns:
            tuple: (list of Span, BlockRule or None) - the spans in left to right order and
                   the multi-line block still open at the end of this line.
        """
        spans = []
        index = 0
        length = len(text)

        if carry is not None:
            index, carry = self._scan_block(text, 0, carry, True, spans)
            if carry is not None:
                return spans, carry

        while index < length:
            block = self._block_at(self.profile.multi_line_blocks, text, index)
            if block is not None:
                index, carry = self._scan_block(text, index, block, False, spans)
                if carry is not None:
                    return spans, carry
                continue

            block = self._block_at(self.profile.single_line_blocks, text, index)
            if block is not None:
                index, _ = self._scan_block(text, index, block, False, spans)
                continue

            end = self._scan_token(text, index, spans)
            if end is not None:
                index = end
                continue

            index = self._scan_word(text, index, spans)

        return spans, None

    # --- Scanning steps ---

    def _block_at(self, blocks, text, index):
        for block in blocks:
            if starts_with(text, index, block.start, self.profile.ignore_case):
                return block
        return None

    def _scan_block(self, text, index, block, continuing, spans):
        """Emit the spans of a block; returns (next index, block if still open else None)."""
        end, closed = find_block_end(text, index, block, continuing, self.profile.ignore_case)
        still_open = block if (block.is_multi_line and not closed) else None

        if block.wrapper_style is None:
            _add_span(spans, index, end - index, block.style)
            return end, still_open

        body_start = index
        if not continuing:
            body_start = min(index + len(block.start), end)
            _add_span(spans, index, body_start - index, block.wrapper_style)

        body_end = end
        if closed and block.end and end - len(block.end) >= body_start:
            body_end = end - len(block.end)
        _add_span(spans, body_start, body_end - body_start, block.style)
        _add_span(spans, body_end, end - body_end, block.wrapper_style)
        return end, still_open

    def _scan_token(self, text, index, spans):
        """Try the token rules in order at `index`; returns the end of the match or None."""
        for rule in self.profile.token_rules:
            match = match_token(rule, text, index)
            if match is None:
                continue

            captures = []
            for group in rule.groups:
                start, end = match.span(group.name)
                if start >= 0 and end > start:
                    captures.append((start, end, group.style))
            captures.sort(key=lambda capture: capture[0])

            cursor = match.start()
            for start, end, style in captures:
                start = max(start, cursor)
                if end <= start:
                    continue  # nested inside an earlier capture
                _add_span(spans, cursor, start - cursor, rule.style)
                _add_span(spans, start, end - start, style)
                cursor = end
            _add_span(spans, cursor, match.end() - cursor, rule.style)
            return match.end()
        return None

    def _scan_word(self, text, index, spans):
        """Find the word at `index`, style it if it is a keyword and return where to resume."""
        profile = self.profile
        boundary = index
        length = len(text)
        resume = None
        while boundary < length:
            ch = text[boundary]
            if profile.is_delimiter(ch):
                resume = boundary + 1
                break
            if profile.is_back_delimiter(ch):
                resume = boundary
                break
            boundary += 1
        else:
            resume = length

        word_length = boundary - index
        if word_length == 0:
            # Sitting on a delimiter: nothing to look up, just step over it.
            return index + 1

        for group in profile.keyword_groups:
            if find_keyword(group, text, index, word_length, profile.ignore_case) is not None:
                _add_span(spans, index, word_length, group.style)
                break
        return resume


def _add_span(spans, start, length, style):
    if length > 0:
        spans.append(Span(start, length, style))


def scan(lines, start_line_number: int = 0, profile=None) -> list:
    """Highlight `lines` with `profile`; one LineResult per line, numbered from `start_line_number`."""
    return HighlightParser(profile).parse(lines, start_line_number)


def split_lines(text: str) -> list:
    """
    Splits source text into lines on newlines only; form feeds and other
    separators that str.splitlines() honours stay inside their line.
    A trailing newline does not start an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines
