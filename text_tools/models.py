from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Wrapper(str, Enum):
    SINGLE_QUOTE = "'"
    DOUBLE_QUOTE = '"'
    PARENTHESIS = "("
    NONE = "none"


class DelimiterKind(str, Enum):
    COMMA = "comma"
    SEMICOLON = "semicolon"
    NEWLINE = "newline"
    COMMA_NEWLINE = "comma_newline"
    PIPE = "pipe"
    CUSTOM = "custom"


class CaseMode(str, Enum):
    NONE = "none"
    UPPER = "upper"
    LOWER = "lower"


class FormattingOptions(BaseModel):
    """Resolved formatting options consumed by the engine."""

    model_config = ConfigDict(frozen=True)

    wrapper: Wrapper = Wrapper.SINGLE_QUOTE
    delimiter: DelimiterKind = DelimiterKind.COMMA
    custom_delimiter: str = ""
    case: CaseMode = CaseMode.NONE
    dedup: bool = True
    trim: bool = True


class FormatRequest(BaseModel):
    text: str = ""
    wrapper: Optional[str] = Field(default=None, examples=["single-quote"])
    delimiter: Optional[str] = Field(default=None, examples=["comma+newline"])
    case: Optional[str] = Field(default=None, examples=["upper"])
    dedup: bool = True
    trim: bool = True

    @field_validator("wrapper", "case")
    @classmethod
    def _strip_blank(cls, value: Optional[str]) -> Optional[str]:
        # an empty select box means "use the default"
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("delimiter")
    @classmethod
    def _empty_delimiter(cls, value: Optional[str]) -> Optional[str]:
        # whitespace is a valid custom separator, only "" falls back to the default
        if value == "":
            return None
        return value


class FormatResponse(BaseModel):
    output: str
    count: int = 0
    options: FormattingOptions
    encoding: Optional[str] = Field(default=None, examples=[None])


class HealthResponse(BaseModel):
    ok: bool = True
