"""
Tool routes — call the code tools by name.

``POST /tools/call`` — run format_code, pack_code, unpack_code or code_size.
``GET  /tools/list`` — the registered tools and their parameters.

Calls go through the global ToolRegistry. An unknown tool name is a 404 and
an oversized ``code`` parameter a 413; anything the tool itself refuses is a
200 with ``ok=false``, as on the ``/code`` routes.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.deps import Settings, check_code_length
from api.schemas.tools import ToolCallRequest, ToolCallResponse, ToolInfo
from tools.registry import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.post("/call", response_model=ToolCallResponse)
def call_tool(body: ToolCallRequest, settings: Settings) -> ToolCallResponse:
    """Run one code tool with the given parameters.

    Raises:
        HTTPException(404): No tool with that name.
        HTTPException(413): ``params['code']`` exceeds CODE_MAX_LENGTH.
    """
    registry = get_registry()
    tool = registry.get(body.name)
    if tool is None:
        logger.warning("Unknown tool requested: %s", body.name)
        raise HTTPException(
            status_code=404,
            detail=f"Tool '{body.name}' not found. Available tools: {registry.names()}",
        )

    code = body.params.get("code")
    if isinstance(code, str):
        check_code_length(code, settings)

    result = tool(**body.params)
    if not result.success:
        logger.info("Tool '%s' refused: %s", body.name, result.error)
        return ToolCallResponse(ok=False, error=result.error, metadata=result.metadata)
    return ToolCallResponse(ok=True, data=result.data, metadata=result.metadata)


@router.get("/list", response_model=list[ToolInfo])
def list_tools() -> list[dict]:
    """Describe every registered tool."""
    return get_registry().list_tools()
