"""
Code routes — format, pack, unpack and measure bytebeat code.

``POST /code/format`` — comma-format code; unbalanced brackets give ok=false.
``POST /code/pack``   — pack code into a self-decoding wrapper.
``POST /code/unpack`` — unpack a wrapper (no-op when not packed).
``POST /code/size``   — UTF-8 size with a human-readable label.

Thin HTTP boundary: formatting and packing outcomes are encoded in the
response body, never as HTTP errors. Oversized input is rejected with 413.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import Settings, check_code_length, get_formatter
from api.schemas.code import (
    CodeRequest,
    FormatRequest,
    FormatResponse,
    PackResponse,
    SizeRequest,
    SizeResponse,
    UnpackResponse,
)
from core.config import FormatConfig
from core.formatter import CommaFormatter
from tools.code.code_size import CodeSize
from tools.code.pack_code import PackCode
from tools.code.unpack_code import UnpackCode

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/code", tags=["code"])

Formatter = Annotated[CommaFormatter, Depends(get_formatter)]

_pack_tool = PackCode()
_unpack_tool = UnpackCode()
_size_tool = CodeSize()


def _request_config(body: FormatRequest, default: FormatConfig) -> FormatConfig | None:
    """Merge request options over ``default``; None when the request sets none."""
    if body.consider_parens is None and body.max_paren_depth is None:
        return None
    return FormatConfig(
        consider_parens=(
            default.consider_parens if body.consider_parens is None else body.consider_parens
        ),
        max_paren_depth=(
            default.max_paren_depth if body.max_paren_depth is None else body.max_paren_depth
        ),
    )


@router.post("/format", response_model=FormatResponse)
def format_code(body: FormatRequest, settings: Settings, formatter: Formatter) -> FormatResponse:
    """Insert line breaks after eligible commas.

    Without options the formatter's bound service config applies; request
    options override it field by field.
    """
    check_code_length(body.code, settings)
    result = formatter.format(body.code, _request_config(body, formatter.config))
    if not result.ok:
        logger.info("format rejected: %s", result.reason)
    return FormatResponse(ok=result.ok, code=result.text, error=result.reason)


@router.post("/pack", response_model=PackResponse)
def pack_code(body: CodeRequest, settings: Settings) -> PackResponse:
    """Pack code; refusals (already packed, reverted) come back as ok=false."""
    check_code_length(body.code, settings)
    result = _pack_tool(code=body.code)
    if not result.success:
        return PackResponse(ok=False, error=result.error)
    return PackResponse(
        ok=True,
        code=result.data["code"],
        original_size=result.data["original_size"],
        packed_size=result.data["packed_size"],
    )


@router.post("/unpack", response_model=UnpackResponse)
def unpack_code(body: CodeRequest, settings: Settings) -> UnpackResponse:
    """Unpack a wrapper expression."""
    check_code_length(body.code, settings)
    result = _unpack_tool(code=body.code)
    return UnpackResponse(code=result.data["code"], changed=result.data["changed"])


@router.post("/size", response_model=SizeResponse)
def code_size(body: SizeRequest, settings: Settings) -> SizeResponse:
    """Measure code size."""
    check_code_length(body.code, settings)
    result = _size_tool(code=body.code, compact=body.compact)
    return SizeResponse(bytes=result.data["bytes"], label=result.data["label"])
