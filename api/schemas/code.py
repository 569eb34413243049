"""
Pydantic schemas for the ``/code`` endpoints.

Defines request validation and response serialization models.
"""

from pydantic import BaseModel, Field


class CodeRequest(BaseModel):
    """Request body carrying a piece of code."""

    code: str = Field(..., description="Source or packed code.")


class FormatRequest(CodeRequest):
    """Request body for ``POST /code/format``.

    Unset options fall back to the service defaults
    (``FORMAT_CONSIDER_PARENS`` / ``FORMAT_MAX_PAREN_DEPTH``).
    """

    consider_parens: bool | None = Field(
        default=None,
        description="Only split commas shallower than max_paren_depth + 1.",
    )
    max_paren_depth: int | None = Field(
        default=None,
        ge=0,
        description="Deepest parenthesis level whose commas are split.",
    )


class FormatResponse(BaseModel):
    """Response body for ``POST /code/format``.

    Exactly one of ``code`` / ``error`` is set.
    """

    ok: bool = Field(..., description="True when brackets balanced.")
    code: str | None = Field(default=None, description="Formatted code on success.")
    error: str | None = Field(
        default=None,
        description="'unbalanced array' or 'unbalanced parenthesis' on failure.",
    )


class PackResponse(BaseModel):
    """Response body for ``POST /code/pack``."""

    ok: bool
    code: str | None = Field(default=None, description="Packed wrapper on success.")
    error: str | None = None
    original_size: str | None = Field(default=None, description="Size label of the input.")
    packed_size: str | None = Field(default=None, description="Size label of the wrapper.")


class UnpackResponse(BaseModel):
    """Response body for ``POST /code/unpack``."""

    code: str = Field(..., description="Unpacked code, or the trimmed input if not packed.")
    changed: bool = Field(..., description="False when the input was not a packed wrapper.")


class SizeRequest(CodeRequest):
    """Request body for ``POST /code/size``."""

    compact: bool = Field(default=False, description="Use the 'KiB/KB' label form.")


class SizeResponse(BaseModel):
    """Response body for ``POST /code/size``."""

    bytes: int = Field(..., description="UTF-8 size in bytes.")
    label: str = Field(..., description="Human-readable size label.")
