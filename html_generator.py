# html_generator.py
# Exports highlighted source as a standalone HTML page: one table row per line,
# a line number cell and the code cell with a <span> per styled segment.

import html
import sys

from config import DEFAULT_FOREGROUND, LINE_NUMBER_BACKGROUND, LINE_NUMBER_FOREGROUND, STYLE_THEME
from highlight_parser import scan, split_lines
from profile_factory import default_factory

HTML_HEADER = """<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">
    <head>
        <meta charset="utf-8" />
        <style>
.lineNumber {{
    font-size: 10.0pt;
    font-family: "Consolas", monospace;
    background-color: {line_background};
    color: {line_foreground};
    width: 20pt;
    text-align: right;
}}
.code {{
    font-size: 10.0pt;
    font-family: "Consolas", monospace;
    background-color: #ffffff;
    color: {foreground};
}}
        </style>
    </head>
    <body bgcolor="white" lang="EN-US">
        <table class="code" style="width:100%" cellpadding="0" cellspacing="0">"""

HTML_FOOTER = """        </table>
    </body>
</html>
"""


def format_segment(text: str, style_info=None) -> str:
    text = html.escape(text, quote=False).replace(" ", "&nbsp;")
    if not style_info or not style_info.get("color"):
        return text
    css = f"color:{style_info['color']}"
    if style_info.get("bold"):
        css += ";font-weight:bold"
    if style_info.get("italic"):
        css += ";font-style:italic"
    return f'<span style="{css}">{text}</span>'


def format_line(line_result, theme=None) -> str:
    """Renders one LineResult as a table row. Unstyled gaps are written as plain text."""
    theme = STYLE_THEME if theme is None else theme
    text = line_result.text
    parts = [f'<tr><td class="lineNumber">{line_result.line_number}</td><td>']
    index = 0
    for span in line_result.spans:
        if span.start != index:
            parts.append(format_segment(text[index:span.start]))
        parts.append(format_segment(text[span.start:span.start + span.length], theme.get(span.style)))
        index = span.start + span.length
    if index != len(text):
        parts.append(format_segment(text[index:]))
    parts.append("</td></tr>")
    return "".join(parts)


def generate_html(line_results, theme=None) -> str:
    header = HTML_HEADER.format(
        line_background=LINE_NUMBER_BACKGROUND,
        line_foreground=LINE_NUMBER_FOREGROUND,
        foreground=DEFAULT_FOREGROUND,
    )
    rows = [format_line(line_result, theme) for line_result in line_results]
    return "\n".join([header, *rows, HTML_FOOTER])


def generate(input_file: str, output_file: str, factory=None) -> int:
    """
    Highlights `input_file` with the profile mapped to its extension and writes the page
    to `output_file`. Files without a mapped profile are exported unstyled.
    Returns the number of lines written.
    """
    factory = default_factory if factory is None else factory
    profile = factory.get_profile_for_file(input_file)
    if profile is None:
        print(f"No highlight profile for '{input_file}', exporting without highlighting.", file=sys.stderr)

    with open(input_file, 'r', encoding='utf-8') as f:
        lines = split_lines(f.read())

    line_results = scan(lines, 1, profile)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(generate_html(line_results))
    return len(line_results)
