"""code_size tool — report how large a piece of code is."""

from typing import Any

from core.size import code_size, format_bytes
from tools.base import CodeTool, ToolParameter, ToolResult


class CodeSize(CodeTool):
    """UTF-8 byte size of the code, with a binary/decimal label."""

    @property
    def name(self) -> str:
        return "code_size"

    @property
    def description(self) -> str:
        return (
            "Measure code size in UTF-8 bytes and return a label such as "
            "'2.93KiB (3.00KB)'. Sizes under 2000 bytes are shown as plain bytes."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="code",
                type=str,
                description="Code to measure.",
            ),
            ToolParameter(
                name="compact",
                type=bool,
                description="Use the 'KiB/KB' form instead of 'KiB (KB)'. Default: false.",
                required=False,
                default=False,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        code: str = kwargs["code"]
        size = code_size(code)
        return ToolResult(
            success=True,
            data={"bytes": size, "label": format_bytes(size, compact=kwargs["compact"])},
            metadata={"length": len(code)},
        )
