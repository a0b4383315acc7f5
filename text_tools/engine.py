"""
Core formatting pipeline: parse -> transform -> join.

Interfaces call `format_values` (or `format_text` for the joined string);
nothing here touches I/O or keeps state between calls.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .models import CaseMode, DelimiterKind, FormattingOptions, Wrapper
from .rules import EDGE_SPACE_RE, INPUT_DELIMITER_RE, SEPARATORS, STRIP_PAIRS, WRAP_PAIRS

logger = logging.getLogger(__name__)


def _trim(value: str) -> str:
    return EDGE_SPACE_RE.sub("", value)


def _unwrap_once(fragment: str) -> str:
    for opening, closing in STRIP_PAIRS:
        if fragment.startswith(opening) and fragment.endswith(closing):
            return fragment[1:-1]
    return fragment


def parse_input(text: str) -> List[str]:
    """
    Split raw text into candidate values.

    Rules:
    - Any run of `,` `;` newline or `|` is a single split point.
    - Each fragment is trimmed (whitespace and BOM), loses one layer of
      matching quotes or parentheses, then is trimmed again.
    - Fragments left empty are dropped.
    """
    values: List[str] = []
    for part in INPUT_DELIMITER_RE.split(text):
        value = _trim(_unwrap_once(_trim(part)))
        if value:
            values.append(value)
    return values


def transform_values(values: Sequence[str], options: FormattingOptions) -> List[str]:
    """
    Apply trim, case, dedup and wrapping, in that order.

    Dedup compares case-converted, not-yet-wrapped values.
    """
    result = list(values)

    if options.trim:
        result = [_trim(v) for v in result]

    if options.case is CaseMode.UPPER:
        result = [v.upper() for v in result]
    elif options.case is CaseMode.LOWER:
        result = [v.lower() for v in result]

    if options.dedup:
        # dict keeps first-occurrence order
        result = list(dict.fromkeys(result))

    if options.wrapper is not Wrapper.NONE:
        prefix, suffix = WRAP_PAIRS[options.wrapper]
        result = [f"{prefix}{v}{suffix}" for v in result]

    return result


def join_values(values: Sequence[str], delimiter: DelimiterKind, custom_delimiter: str = "") -> str:
    if delimiter is DelimiterKind.CUSTOM:
        separator = custom_delimiter
    else:
        separator = SEPARATORS[delimiter]
    return separator.join(values)


def format_values(text: str, options: FormattingOptions) -> List[str]:
    """Parse and transform `text`; the formatted values, not yet joined."""
    parsed = parse_input(text)
    formatted = transform_values(parsed, options)
    logger.debug("parsed %d values, %d after transform", len(parsed), len(formatted))
    return formatted


def format_text(text: str, options: Optional[FormattingOptions] = None) -> str:
    """Run the full pipeline over `text` and return the joined output."""
    if options is None:
        options = FormattingOptions()
    return join_values(format_values(text, options), options.delimiter, options.custom_delimiter)
