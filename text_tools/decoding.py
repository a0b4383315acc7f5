"""
Byte input decoding shared by the CLI and the upload endpoint.

Rules:
- Valid UTF-8 (with or without BOM) is always taken as UTF-8.
- Otherwise detect encoding best-effort via charset-normalizer.
- A UTF-8 BOM is consumed, never passed on as part of the first value.
- If the detected encoding fails too, decode UTF-8 with replacement characters.
- CRLF/CR newlines become LF so `\\r` never ends up inside a value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)

_UTF8_BOM = b"\xef\xbb\xbf"


@dataclass(frozen=True)
class DecodedInput:
    text: str
    encoding: str
    fallback: bool = False


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def decode_input(raw: bytes) -> DecodedInput:
    if not raw:
        return DecodedInput(text="", encoding="utf-8")

    # short inputs are easily misdetected, so strict UTF-8 wins when it decodes
    try:
        text = raw.decode("utf-8-sig")
        decode_used = "utf-8-sig" if raw.startswith(_UTF8_BOM) else "utf-8"
        return DecodedInput(text=normalize_newlines(text), encoding=decode_used)
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    detected = match.encoding if match is not None else None

    if detected is not None:
        try:
            return DecodedInput(text=normalize_newlines(raw.decode(detected)), encoding=detected)
        except (UnicodeDecodeError, LookupError):
            pass

    # last resort so the pipeline still sees every byte it can
    logger.warning("decode with %s failed, used utf-8 fallback", detected)
    return DecodedInput(
        text=normalize_newlines(raw.decode("utf-8", errors="replace")),
        encoding="utf-8",
        fallback=True,
    )
