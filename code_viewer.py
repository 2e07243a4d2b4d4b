# code_viewer.py
# Qt side of the highlighter: a QSyntaxHighlighter that delegates to
# HighlightParser, and a read-only QPlainTextEdit with a line number gutter.

import sys
from PySide6.QtCore import Qt, QRect, QSize
from PySide6.QtGui import QSyntaxHighlighter, QTextCharFormat, QColor, QFont, QPainter
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from config import STYLE_THEME, LINE_NUMBER_BACKGROUND, LINE_NUMBER_FOREGROUND
from highlight_parser import HighlightParser, scan, split_lines
from profile_factory import default_factory


def format_for_style(style: str, theme=None):
    """Builds the QTextCharFormat for a style name, or None if the theme doesn't know it."""
    theme = STYLE_THEME if theme is None else theme
    style_info = theme.get(style)
    if not style_info:
        return None
    fmt = QTextCharFormat()
    if style_info.get("color"):
        fmt.setForeground(QColor(style_info["color"]))
    if style_info.get("bold"):
        fmt.setFontWeight(QFont.Bold)
    if style_info.get("italic"):
        fmt.setFontItalic(True)
    return fmt


def utf16_positions(text: str):
    """
    Qt positions count UTF-16 code units; Python indexes code points.
    Returns a function mapping a Python index in `text` to a Qt position.
    """
    if all(ord(ch) <= 0xFFFF for ch in text):
        return lambda index: index
    positions = [0]
    for ch in text:
        positions.append(positions[-1] + (2 if ord(ch) > 0xFFFF else 1))
    return lambda index: positions[index]


class ProfileHighlighter(QSyntaxHighlighter):
    """
    Highlights a QTextDocument with a highlight profile.

    Block states: -1 means no open block, any other value is the index of the
    multi-line block (in profile.multi_line_blocks) still open at the end of the
    block. Qt re-highlights following blocks whenever that state changes, so an
    edit that opens or closes a comment is propagated down the document.
    """
    def __init__(self, parent=None, profile=None, theme=None):  # parent is usually a QTextDocument
        super().__init__(parent)
        self.theme = STYLE_THEME if theme is None else theme
        self.profile = profile
        self.parser = HighlightParser(profile)
        self._formats = {}

    def set_profile(self, profile):
        self.profile = profile
        self.parser = HighlightParser(profile)
        self.rehighlight()

    def _format(self, style):
        if style not in self._formats:
            self._formats[style] = format_for_style(style, self.theme)
        return self._formats[style]

    def highlightBlock(self, text: str):
        if self.profile is None:
            self.setCurrentBlockState(-1)
            return

        carry = None
        previous_state = self.previousBlockState()
        if 0 <= previous_state < len(self.profile.multi_line_blocks):
            carry = self.profile.multi_line_blocks[previous_state]

        spans, carry = self.parser.parse_line(text, carry)

        to_qt = utf16_positions(text)
        for span in spans:
            fmt = self._format(span.style)
            if fmt is None:
                continue
            start = to_qt(span.start)
            self.setFormat(start, to_qt(span.start + span.length) - start, fmt)

        self.setCurrentBlockState(self.profile.multi_line_block_index(carry))


class LineNumberArea(QWidget):
    def __init__(self, viewer):
        super().__init__(viewer)
        self.viewer = viewer

    def sizeHint(self):
        return QSize(self.viewer.line_number_area_width(), 0)

    def paintEvent(self, event):
        self.viewer.line_number_area_paint_event(event)


class CodeViewer(QPlainTextEdit):
    """
    A read-only QPlainTextEdit that highlights its content with the profile
    matching the loaded file's extension, and draws line numbers in a gutter.
    """
    def __init__(self, parent=None, factory=None):
        super().__init__(parent)
        self.factory = default_factory if factory is None else factory

        self.setReadOnly(True)
        self.setLineWrapMode(QPlainTextEdit.NoWrap)
        font = QFont("Consolas")
        font.setStyleHint(QFont.Monospace)
        font.setPointSize(10)
        self.setFont(font)

        self.highlighter = ProfileHighlighter(self.document())

        self.line_number_area = LineNumberArea(self)
        self.blockCountChanged.connect(self._update_line_number_area_width)
        self.updateRequest.connect(self._update_line_number_area)
        self._update_line_number_area_width(0)

    @property
    def profile(self):
        return self.highlighter.profile

    def set_source(self, text: str, profile=None):
        self.highlighter.set_profile(profile)
        self.setPlainText(text)

    def load_file(self, file_path: str):
        """Reads `file_path` and shows it highlighted. Returns the profile used (None if unmapped)."""
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        profile = self.factory.get_profile_for_file(file_path)
        self.set_source(content, profile)
        self.setProperty("file_path", file_path)
        return profile

    def line_results(self):
        """The current content as LineResults numbered from 1, e.g. for export."""
        texts = []
        block = self.document().firstBlock()
        while block.isValid():
            texts.append(block.text())
            block = block.next()
        return scan(split_lines("\n".join(texts)), 1, self.profile)

    # --- Line number gutter ---

    def line_number_area_width(self) -> int:
        digits = len(str(max(1, self.blockCount())))
        return 6 + self.fontMetrics().horizontalAdvance('9') * (digits + 1)

    def _update_line_number_area_width(self, _new_block_count):
        self.setViewportMargins(self.line_number_area_width(), 0, 0, 0)

    def _update_line_number_area(self, rect, dy):
        if dy:
            self.line_number_area.scroll(0, dy)
        else:
            self.line_number_area.update(0, rect.y(), self.line_number_area.width(), rect.height())
        if rect.contains(self.viewport().rect()):
            self._update_line_number_area_width(0)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        cr = self.contentsRect()
        self.line_number_area.setGeometry(QRect(cr.left(), cr.top(), self.line_number_area_width(), cr.height()))

    def line_number_area_paint_event(self, event):
        painter = QPainter(self.line_number_area)
        painter.fillRect(event.rect(), QColor(LINE_NUMBER_BACKGROUND))
        painter.setPen(QColor(LINE_NUMBER_FOREGROUND))

        block = self.firstVisibleBlock()
        block_number = block.blockNumber()
        top = round(self.blockBoundingGeometry(block).translated(self.contentOffset()).top())
        bottom = top + round(self.blockBoundingRect(block).height())
        line_height = self.fontMetrics().height()

        while block.isValid() and top <= event.rect().bottom():
            if block.isVisible() and bottom >= event.rect().top():
                painter.drawText(0, top, self.line_number_area.width() - 3, line_height,
                                 Qt.AlignRight, str(block_number + 1))
            block = block.next()
            top = bottom
            bottom = top + round(self.blockBoundingRect(block).height())
            block_number += 1
        painter.end()


if __name__ == '__main__':
    # Example usage: python code_viewer.py some_file.py
    from PySide6.QtWidgets import QApplication

    app = QApplication(sys.argv)
    viewer = CodeViewer()
    if len(sys.argv) > 1:
        viewer.load_file(sys.argv[1])
    else:
        viewer.set_source('# demo\nclass Demo:\n    """Doc\n    string."""\n    def run(self):\n        return 0x1F\n',
                          default_factory.get_profile_by_name("python"))
    viewer.setWindowTitle("Code Viewer")
    viewer.resize(700, 500)
    viewer.show()
    sys.exit(app.exec())
