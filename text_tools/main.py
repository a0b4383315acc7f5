import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile

from .config import Settings, load_settings
from .decoding import decode_input
from .engine import format_values, join_values
from .errors import OptionsError
from .models import FormatRequest, FormatResponse, FormattingOptions, HealthResponse
from .options import build_options
from .rules import ACCEPTED_EXTENSIONS

logger = logging.getLogger(__name__)

app = FastAPI(
    title="text-tools",
    description="Normalize, clean & format delimited data lists",
    version="0.1.0",
)


def get_settings() -> Settings:
    return load_settings()


def _resolve(wrapper, delimiter, case, dedup, trim) -> FormattingOptions:
    try:
        return build_options(wrapper=wrapper, delimiter=delimiter, case=case, dedup=dedup, trim=trim)
    except OptionsError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _format(text: str, options: FormattingOptions, encoding: Optional[str] = None) -> FormatResponse:
    values = format_values(text, options)
    return FormatResponse(
        output=join_values(values, options.delimiter, options.custom_delimiter),
        count=len(values),
        options=options,
        encoding=encoding,
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/format", response_model=FormatResponse)
def format_list(request: FormatRequest):
    options = _resolve(request.wrapper, request.delimiter, request.case, request.dedup, request.trim)
    return _format(request.text, options)


@app.post("/format/file", response_model=FormatResponse)
async def format_file(
    file: UploadFile = File(...),
    wrapper: Optional[str] = None,
    delimiter: Optional[str] = None,
    case: Optional[str] = None,
    dedup: bool = True,
    trim: bool = True,
    settings: Settings = Depends(get_settings),
):
    filename = (file.filename or "").lower()
    if not filename.endswith(ACCEPTED_EXTENSIONS):
        raise HTTPException(
            status_code=422,
            detail=f"Unsupported file type. Use: {', '.join(ACCEPTED_EXTENSIONS)}",
        )

    options = _resolve(wrapper, delimiter, case, dedup, trim)

    # read at most one byte past the limit
    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        logger.warning("rejected upload %s: over %d bytes", file.filename, settings.max_upload_bytes)
        raise HTTPException(status_code=413, detail="File too large")

    decoded = decode_input(raw)
    logger.info("formatting upload %s (%s)", file.filename, decoded.encoding)
    return _format(decoded.text, options, encoding=decoded.encoding)
