"""
Resolution of user-facing option names into FormattingOptions.

The engine only accepts resolved enums; the CLI flags and the HTTP
request fields both go through here.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .errors import OptionsError
from .models import CaseMode, DelimiterKind, FormattingOptions, Wrapper
from .rules import (
    CASE_ALIASES,
    DEFAULT_CASE,
    DEFAULT_DEDUP,
    DEFAULT_DELIMITER,
    DEFAULT_TRIM,
    DEFAULT_WRAPPER,
    DELIMITER_ALIASES,
    WRAPPER_ALIASES,
)


def resolve_wrapper(name: str) -> Wrapper:
    resolved = WRAPPER_ALIASES.get(name.lower())
    if resolved is None:
        raise OptionsError(
            f'Invalid wrapper "{name}". Use: single-quote, double-quote, parens, none'
        )
    return resolved


def resolve_delimiter(name: str) -> Tuple[DelimiterKind, str]:
    """
    Map a delimiter name to its kind.

    Unknown names are not an error: they become a custom delimiter used
    verbatim, with the caller's original casing.
    """
    resolved = DELIMITER_ALIASES.get(name.lower())
    if resolved is not None:
        return resolved, ""
    return DelimiterKind.CUSTOM, name


def resolve_case(name: str) -> CaseMode:
    resolved = CASE_ALIASES.get(name.lower())
    if resolved is None:
        raise OptionsError(f'Invalid case mode "{name}". Use: upper, lower, none')
    return resolved


def build_options(
    wrapper: Optional[str] = None,
    delimiter: Optional[str] = None,
    case: Optional[str] = None,
    dedup: bool = DEFAULT_DEDUP,
    trim: bool = DEFAULT_TRIM,
) -> FormattingOptions:
    """Resolve whichever names are given; anything left as None gets the default."""
    delimiter_kind, custom = DEFAULT_DELIMITER, ""
    if delimiter is not None:
        delimiter_kind, custom = resolve_delimiter(delimiter)

    return FormattingOptions(
        wrapper=resolve_wrapper(wrapper) if wrapper is not None else DEFAULT_WRAPPER,
        delimiter=delimiter_kind,
        custom_delimiter=custom,
        case=resolve_case(case) if case is not None else DEFAULT_CASE,
        dedup=dedup,
        trim=trim,
    )
