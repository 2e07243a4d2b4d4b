# config.py

# PROFILE_CONFIG defines the built-in highlight profiles.
# Each key is a profile name; the value is a dictionary with the following keys:
#   "delimiters":      A string of characters that end a word and are not styled themselves.
#   "back_delimiters": A string of characters that end a word but are scanned again as the
#                      start of the next token (brackets, operators, quotes...).
#   "ignore_case":     (Optional) Boolean. Case-insensitive keywords, blocks and tokens.
#   "keywords":        A list of {"name", "style", "words"} groups.
#   "single_line_blocks" / "multi_line_blocks":
#                      Lists of {"name", "style", "start", "end", "wrapper_style", "escape"}.
#                      "end" may be omitted for single-line blocks ("to end of line").
#                      "wrapper_style" (optional) styles the start/end markers on their own.
#                      "escape" (optional) is {"prefix": "\\", "items": ["''"]}: the prefix skips
#                      the character after it, items are skipped verbatim.
#   "tokens":          A list of {"name", "style", "pattern", "groups"}. Patterns are Python
#                      regular expressions tried only at the current position; "groups" lists
#                      named captures ({"name", "style"}) styled on their own.
#
# Style names are looked up in STYLE_THEME by the renderers; the parser never interprets them.

PYTHON_BACK_DELIMITERS = "()[]{}:;,.=+-*/%<>!&|^~@\"'#\\"

PROFILE_CONFIG = {
    "python": {
        "delimiters": " \t",
        "back_delimiters": PYTHON_BACK_DELIMITERS,
        "ignore_case": False,
        "keywords": [
            {
                "name": "keywords",
                "style": "keyword",
                "words": [
                    "False", "None", "True", "and", "as", "assert", "async", "await",
                    "break", "class", "continue", "def", "del", "elif", "else", "except",
                    "finally", "for", "from", "global", "if", "import", "in", "is",
                    "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
                    "while", "with", "yield",
                ],
            },
            {
                "name": "builtins",
                "style": "builtin",
                "words": [
                    "abs", "bool", "dict", "enumerate", "float", "int", "isinstance", "len",
                    "list", "object", "print", "range", "self", "set", "str", "super", "tuple",
                    "type", "zip",
                ],
            },
        ],
        "multi_line_blocks": [
            {"name": "triple_double", "style": "string", "start": '"""', "end": '"""',
             "escape": {"prefix": "\\"}},
            {"name": "triple_single", "style": "string", "start": "'''", "end": "'''",
             "escape": {"prefix": "\\"}},
        ],
        "single_line_blocks": [
            {"name": "comment", "style": "comment", "start": "#"},
            {"name": "double_quoted", "style": "string", "start": '"', "end": '"',
             "escape": {"prefix": "\\"}},
            {"name": "single_quoted", "style": "string", "start": "'", "end": "'",
             "escape": {"prefix": "\\"}},
        ],
        "tokens": [
            {"name": "class_definition", "style": "keyword",
             "pattern": r"class\s+(?P<name>[A-Za-z_][A-Za-z0-9_]*)",
             "groups": [{"name": "name", "style": "class_name"}]},
            {"name": "function_definition", "style": "keyword",
             "pattern": r"def\s+(?P<name>[A-Za-z_][A-Za-z0-9_]*)",
             "groups": [{"name": "name", "style": "function_name"}]},
            {"name": "decorator", "style": "decorator", "pattern": r"@[A-Za-z_][A-Za-z0-9_\.]*"},
            {"name": "number", "style": "number",
             "pattern": r"(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+"
                        r"|\d[\d_]*(?:\.[\d_]*)?(?:[eE][-+]?\d+)?)\b"},
        ],
    },
    "csharp": {
        "delimiters": " \t",
        "back_delimiters": "()[]{}:;,.=+-*/%<>!&|^~?\"'@#",
        "ignore_case": False,
        "keywords": [
            {
                "name": "keywords",
                "style": "keyword",
                "words": [
                    "abstract", "as", "base", "break", "case", "catch", "class", "const",
                    "continue", "default", "delegate", "do", "else", "enum", "event",
                    "explicit", "extern", "false", "finally", "fixed", "for", "foreach",
                    "get", "goto", "if", "implicit", "in", "interface", "internal", "is",
                    "lock", "namespace", "new", "null", "operator", "out", "override",
                    "params", "private", "protected", "public", "readonly", "ref", "return",
                    "sealed", "set", "sizeof", "static", "struct", "switch", "this", "throw",
                    "true", "try", "typeof", "unchecked", "unsafe", "using", "value", "var",
                    "virtual", "void", "volatile", "while",
                ],
            },
            {
                "name": "types",
                "style": "type",
                "words": [
                    "bool", "byte", "char", "decimal", "double", "float", "int", "long",
                    "object", "sbyte", "short", "string", "uint", "ulong", "ushort",
                ],
            },
        ],
        "multi_line_blocks": [
            {"name": "comment", "style": "comment", "wrapper_style": "comment_marker",
             "start": "/*", "end": "*/"},
            {"name": "verbatim_string", "style": "string", "start": '@"', "end": '"',
             "escape": {"items": ['""']}},
        ],
        "single_line_blocks": [
            {"name": "doc_comment", "style": "doc_comment", "start": "///"},
            {"name": "line_comment", "style": "comment", "start": "//"},
            {"name": "string", "style": "string", "start": '"', "end": '"',
             "escape": {"prefix": "\\"}},
            {"name": "char", "style": "string", "start": "'", "end": "'",
             "escape": {"prefix": "\\"}},
        ],
        "tokens": [
            {"name": "preprocessor", "style": "preprocessor",
             "pattern": r"#\s*(?P<directive>[A-Za-z]+)",
             "groups": [{"name": "directive", "style": "preprocessor_directive"}]},
            {"name": "number", "style": "number",
             "pattern": r"(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][-+]?\d+)?)[fFdDmMlLuU]*\b"},
        ],
    },
    "sql": {
        "delimiters": " \t",
        "back_delimiters": "(),;.=+-*/%<>!|'\"",
        "ignore_case": True,
        "keywords": [
            {
                "name": "keywords",
                "style": "keyword",
                "words": [
                    "ADD", "ALL", "ALTER", "AND", "AS", "ASC", "BEGIN", "BETWEEN", "BY",
                    "CASE", "CREATE", "DELETE", "DESC", "DISTINCT", "DROP", "ELSE", "END",
                    "EXISTS", "FROM", "GROUP", "HAVING", "IN", "INDEX", "INNER", "INSERT",
                    "INTO", "IS", "JOIN", "KEY", "LEFT", "LIKE", "LIMIT", "NOT", "NULL", "ON",
                    "OR", "ORDER", "OUTER", "PRIMARY", "RIGHT", "SELECT", "SET", "TABLE",
                    "THEN", "UNION", "UPDATE", "VALUES", "VIEW", "WHEN", "WHERE",
                ],
            },
            {
                "name": "functions",
                "style": "builtin",
                "words": ["AVG", "COALESCE", "COUNT", "MAX", "MIN", "SUM"],
            },
        ],
        "multi_line_blocks": [
            {"name": "comment", "style": "comment", "start": "/*", "end": "*/"},
        ],
        "single_line_blocks": [
            {"name": "line_comment", "style": "comment", "start": "--"},
            {"name": "string", "style": "string", "start": "'", "end": "'",
             "escape": {"items": ["''"]}},
            {"name": "quoted_identifier", "style": "identifier", "start": '"', "end": '"'},
        ],
        "tokens": [
            {"name": "number", "style": "number", "pattern": r"\d+(?:\.\d+)?\b"},
            {"name": "parameter", "style": "parameter", "pattern": r"[@:][A-Za-z_][A-Za-z0-9_]*"},
        ],
    },
}

# EXTENSION_MAPPING maps file extensions (case-insensitive, leading dot optional) to profile names.
EXTENSION_MAPPING = {
    ".py": "python",
    ".pyw": "python",
    ".pyi": "python",
    ".cs": "csharp",
    ".sql": "sql",
}

# STYLE_THEME resolves style names to how renderers draw them.
#   "color":  Any CSS / SVG color name or #rrggbb value (understood by both QColor and HTML).
#   "bold", "italic": (Optional) Booleans.
# Styles missing from the theme are drawn with DEFAULT_FOREGROUND.
STYLE_THEME = {
    "keyword": {"color": "blue", "bold": True},
    "builtin": {"color": "darkblue"},
    "type": {"color": "teal"},
    "class_name": {"color": "darkmagenta", "bold": True},
    "function_name": {"color": "darkcyan", "bold": True},
    "decorator": {"color": "gray"},
    "comment": {"color": "darkgreen"},
    "comment_marker": {"color": "green", "bold": True},
    "doc_comment": {"color": "gray", "italic": True},
    "number": {"color": "darkred"},
    "string": {"color": "magenta"},
    "preprocessor": {"color": "gray"},
    "preprocessor_directive": {"color": "gray", "bold": True},
    "identifier": {"color": "saddlebrown"},
    "parameter": {"color": "darkorange"},
}

DEFAULT_FOREGROUND = "black"
LINE_NUMBER_FOREGROUND = "darkgray"
LINE_NUMBER_BACKGROUND = "beige"
