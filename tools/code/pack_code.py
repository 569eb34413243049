"""
pack_code tool — pack bytebeat code into a self-decoding wrapper.

Wraps core.packer.encode with the editor's safety checks:
  - code that is already a wrapper is not packed twice
  - a packed result that would not decode back to the source is reverted
    (the caller keeps the original code)
"""

import logging
from typing import Any

from core.packer import decode, encode, is_packed, normalize
from core.size import code_size, format_bytes
from tools.base import CodeTool, ToolParameter, ToolResult

logger = logging.getLogger(__name__)

ALREADY_PACKED_ERROR = "Code is already packed."
REVERTED_ERROR = "Packing reverted: the packed code does not round-trip."


class PackCode(CodeTool):
    """
    Pack code two characters per code unit.

    Note that packing is lossy for ``", "`` (collapsed to ``","``) and for
    characters above U+00FF, which do not survive the round trip and make
    the tool revert.
    """

    @property
    def name(self) -> str:
        return "pack_code"

    @property
    def description(self) -> str:
        return (
            "Pack bytebeat code into an eval(unescape(escape`...`)) wrapper that "
            "stores two characters per code unit. Refuses code that is already "
            "packed and reverts when the packed code would not decode back."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="code",
                type=str,
                description="Source code to pack.",
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Pack the code.

        Returns:
            ToolResult with ``code`` (the wrapper) and size labels, or an
            error explaining why the code was left alone.
        """
        code: str = kwargs["code"]

        if is_packed(code):
            logger.warning("pack_code: refusing to pack code twice")
            return ToolResult(success=False, error=ALREADY_PACKED_ERROR)

        packed = encode(code)
        if decode(packed) != normalize(code):
            logger.warning("pack_code: packed code does not round-trip, reverting")
            return ToolResult(success=False, error=REVERTED_ERROR)

        original_bytes = code_size(code)
        packed_bytes = code_size(packed)
        logger.info("pack_code: %d -> %d chars", len(code), len(packed))
        return ToolResult(
            success=True,
            data={
                "code": packed,
                "original_size": format_bytes(original_bytes),
                "packed_size": format_bytes(packed_bytes),
            },
            metadata={
                "original_length": len(code),
                "packed_length": len(packed),
                "original_bytes": original_bytes,
                "packed_bytes": packed_bytes,
                "lossy": ", " in code,
            },
        )
