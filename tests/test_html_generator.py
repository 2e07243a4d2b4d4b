"""Tests for the HTML exporter."""

from highlight_parser import LineResult, Span
from html_generator import format_line, format_segment, generate, generate_html

THEME = {"keyword": {"color": "blue", "bold": True}, "comment": {"color": "darkgreen", "italic": True}}


class TestFormatLine:
    def test_styled_and_plain_segments(self):
        row = format_line(LineResult(3, "let x", [Span(0, 3, "keyword")]), THEME)
        assert row == ('<tr><td class="lineNumber">3</td><td>'
                       '<span style="color:blue;font-weight:bold">let</span>&nbsp;x</td></tr>')

    def test_leading_gap_and_italic(self):
        row = format_line(LineResult(1, "x # c", [Span(2, 3, "comment")]), THEME)
        assert 'x&nbsp;<span style="color:darkgreen;font-style:italic">#&nbsp;c</span>' in row

    def test_unknown_style_is_plain(self):
        row = format_line(LineResult(1, "abc", [Span(0, 3, "mystery")]), THEME)
        assert "<span" not in row
        assert ">abc<" in row

    def test_text_is_escaped(self):
        assert format_segment("a<b> & c") == "a&lt;b&gt;&nbsp;&amp;&nbsp;c"


def test_generate_html_document():
    page = generate_html([LineResult(1, "let", [Span(0, 3, "keyword")]), LineResult(2, "", [])], THEME)
    assert page.startswith("<html")
    assert page.count("<tr>") == 2
    assert page.rstrip().endswith("</html>")


class TestGenerate:
    def test_python_file(self, tmp_path):
        source = tmp_path / "sample.py"
        source.write_text("def run():\n    return 1  # done\n", encoding="utf-8")
        output = tmp_path / "sample.html"
        assert generate(str(source), str(output)) == 2
        page = output.read_text(encoding="utf-8")
        assert '<td class="lineNumber">1</td>' in page
        assert '<td class="lineNumber">2</td>' in page
        assert ">run</span>" in page
        assert "#&nbsp;done</span>" in page

    def test_unmapped_extension_is_unstyled(self, tmp_path, capsys):
        source = tmp_path / "notes.txt"
        source.write_text("def run(): pass\n", encoding="utf-8")
        output = tmp_path / "notes.html"
        generate(str(source), str(output))
        assert "<span" not in output.read_text(encoding="utf-8")
        assert "No highlight profile" in capsys.readouterr().err

    def test_form_feed_stays_on_its_line(self, tmp_path):
        source = tmp_path / "paged.py"
        source.write_bytes(b"x = 1\n\x0c\nimport os\n")
        output = tmp_path / "paged.html"
        assert generate(str(source), str(output)) == 3
        page = output.read_text(encoding="utf-8")
        assert '<td class="lineNumber">3</td><td><span' in page
        assert '<td class="lineNumber">4</td>' not in page

    def test_windows_line_endings(self, tmp_path):
        source = tmp_path / "crlf.py"
        source.write_bytes(b"a = 1\r\nb = 2\r\n")
        output = tmp_path / "crlf.html"
        assert generate(str(source), str(output)) == 2
        assert b"\r" not in output.read_bytes()
