"""
format_code tool — break comma-dense bytebeat code into lines.

Pure computation: wraps core.formatter.format_commas with parameter
validation. Unbalanced brackets come back as a failed ToolResult so the
editor can show the message and keep the unmodified code.
"""

import logging
from typing import Any

from core.config import FormatConfig
from core.formatter import format_commas
from tools.base import CodeTool, ToolParameter, ToolResult

logger = logging.getLogger(__name__)


class FormatCode(CodeTool):
    """
    Insert a newline after every top-level comma of the code.

    Commas inside strings and array literals are never split; commas inside
    parentheses are split only down to ``max_paren_depth`` unless
    ``consider_parens`` is False.
    """

    @property
    def name(self) -> str:
        return "format_code"

    @property
    def description(self) -> str:
        return (
            "Format terse bytebeat code by inserting a line break after each comma "
            "outside strings and arrays, at or above the allowed parenthesis depth. "
            "Fails with 'unbalanced array' or 'unbalanced parenthesis' when "
            "brackets do not match."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="code",
                type=str,
                description="Source code to format.",
            ),
            ToolParameter(
                name="consider_parens",
                type=bool,
                description="Only split commas shallower than max_paren_depth + 1. Default: true.",
                required=False,
                default=True,
            ),
            ToolParameter(
                name="max_paren_depth",
                type=int,
                description="Deepest parenthesis level whose commas are split. Default: 0.",
                required=False,
                default=0,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        """
        Format the code.

        Returns:
            ToolResult with ``code`` (formatted) and ``changed`` on success,
            or error ``"Format failed: <reason>!"``.
        """
        code: str = kwargs["code"]
        try:
            config = FormatConfig(
                consider_parens=kwargs["consider_parens"],
                max_paren_depth=kwargs["max_paren_depth"],
            )
        except (TypeError, ValueError) as exc:
            return ToolResult(success=False, error=str(exc))

        result = format_commas(code, config)
        if not result.ok:
            logger.info("format_code: %s", result.reason)
            return ToolResult(
                success=False,
                error=f"Format failed: {result.reason}!",
                metadata={"reason": result.reason},
            )

        inserted = result.text.count("\n") - code.count("\n")
        logger.debug("format_code: inserted %d line break(s)", inserted)
        return ToolResult(
            success=True,
            data={"code": result.text, "changed": inserted > 0},
            metadata={"line_breaks_inserted": inserted},
        )
