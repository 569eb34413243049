"""
Pydantic schemas for the ``/tools`` endpoints.

Every code tool returns flat data: code strings, size labels, byte counts
and flags. ``ToolValue`` is that value type.
"""

from pydantic import BaseModel, Field

ToolValue = str | int | bool


class ToolCallRequest(BaseModel):
    """Request body for ``POST /tools/call``."""

    name: str = Field(
        ...,
        description="format_code, pack_code, unpack_code or code_size.",
    )
    params: dict[str, ToolValue | None] = Field(
        default_factory=dict,
        description="Keyword parameters for the tool, e.g. {'code': 't*(t>>8)'}.",
    )


class ToolCallResponse(BaseModel):
    """Response body for ``POST /tools/call``.

    Mirrors the ``/code`` routes: a refused action is a 200 with
    ``ok=false`` and the editor's message in ``error``.
    """

    ok: bool
    data: dict[str, ToolValue] | None = Field(
        default=None,
        description="Tool output, e.g. {'code': ..., 'changed': true}.",
    )
    error: str | None = Field(default=None, description="Editor message on failure.")
    metadata: dict[str, ToolValue] | None = Field(
        default=None,
        description="Sizes, counts and flags (e.g. 'lossy' for pack_code).",
    )


class ToolParameterInfo(BaseModel):
    """One parameter in ``GET /tools/list``."""

    name: str
    type: str = Field(..., description="Python type name: str, int or bool.")
    description: str
    required: bool
    default: ToolValue | None = None


class ToolInfo(BaseModel):
    """One tool in ``GET /tools/list``."""

    name: str
    description: str
    parameters: list[ToolParameterInfo]
