"""
unpack_code tool — turn a packed wrapper back into readable code.

Unpacking code that is not packed is a no-op that returns the trimmed code
with ``changed=False``; it is not an error.
"""

import logging
from typing import Any

from core.packer import decode, is_packed
from tools.base import CodeTool, ToolParameter, ToolResult

logger = logging.getLogger(__name__)


class UnpackCode(CodeTool):
    """Decode an eval(unescape(escape`...`)) wrapper."""

    @property
    def name(self) -> str:
        return "unpack_code"

    @property
    def description(self) -> str:
        return (
            "Unpack an eval(unescape(escape`...`)) wrapper produced by pack_code "
            "back into source code. Accepts backtick, ('...'), (\"...\") and "
            "(`...`) payloads; code that is not packed is returned trimmed."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="code",
                type=str,
                description="Packed wrapper expression.",
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        code: str = kwargs["code"]
        packed = is_packed(code)
        unpacked = decode(code)
        logger.debug("unpack_code: packed=%s", packed)
        return ToolResult(
            success=True,
            data={"code": unpacked, "changed": packed},
            metadata={"packed_length": len(code), "unpacked_length": len(unpacked)},
        )
