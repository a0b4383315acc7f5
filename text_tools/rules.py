"""
Deterministic formatting rules.

Every constant the engine and its adapters agree on lives here.
"""

import re

from .models import CaseMode, DelimiterKind, Wrapper

# any run of these collapses into a single split point
INPUT_DELIMITER_RE = re.compile(r"[,;\n|]+")

# leading/trailing whitespace, BOM included
EDGE_SPACE_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

# (opening, closing) pairs stripped from a fragment, one layer only
STRIP_PAIRS = (('"', '"'), ("'", "'"), ("(", ")"))

WRAP_PAIRS = {
    Wrapper.SINGLE_QUOTE: ("'", "'"),
    Wrapper.DOUBLE_QUOTE: ('"', '"'),
    Wrapper.PARENTHESIS: ("(", ")"),
}

SEPARATORS = {
    DelimiterKind.COMMA: ",",
    DelimiterKind.SEMICOLON: ";",
    DelimiterKind.NEWLINE: "\n",
    DelimiterKind.COMMA_NEWLINE: ",\n",
    DelimiterKind.PIPE: "|",
}

DEFAULT_WRAPPER = Wrapper.SINGLE_QUOTE
DEFAULT_DELIMITER = DelimiterKind.COMMA
DEFAULT_CASE = CaseMode.NONE
DEFAULT_DEDUP = True
DEFAULT_TRIM = True

# user-facing names, matched case-insensitively
WRAPPER_ALIASES = {
    "single-quote": Wrapper.SINGLE_QUOTE,
    "single": Wrapper.SINGLE_QUOTE,
    "'": Wrapper.SINGLE_QUOTE,
    "double-quote": Wrapper.DOUBLE_QUOTE,
    "double": Wrapper.DOUBLE_QUOTE,
    '"': Wrapper.DOUBLE_QUOTE,
    "parens": Wrapper.PARENTHESIS,
    "parenthesis": Wrapper.PARENTHESIS,
    "(": Wrapper.PARENTHESIS,
    "none": Wrapper.NONE,
}

DELIMITER_ALIASES = {
    "comma": DelimiterKind.COMMA,
    ",": DelimiterKind.COMMA,
    "semicolon": DelimiterKind.SEMICOLON,
    ";": DelimiterKind.SEMICOLON,
    "newline": DelimiterKind.NEWLINE,
    "new-line": DelimiterKind.NEWLINE,
    "comma+newline": DelimiterKind.COMMA_NEWLINE,
    "comma+new-line": DelimiterKind.COMMA_NEWLINE,
    "pipe": DelimiterKind.PIPE,
    "|": DelimiterKind.PIPE,
}

CASE_ALIASES = {
    "upper": CaseMode.UPPER,
    "uppercase": CaseMode.UPPER,
    "lower": CaseMode.LOWER,
    "lowercase": CaseMode.LOWER,
    "none": CaseMode.NONE,
}

ACCEPTED_EXTENSIONS = (".txt", ".csv", ".tsv", ".json", ".xml")
DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
