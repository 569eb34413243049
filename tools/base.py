"""
Shared types for the editor's code tools.

Every tool takes keyword parameters, validates them against its declared
ToolParameter list and reports the outcome as a ToolResult. A tool never
raises: refusals (already packed, unbalanced brackets) and unexpected
exceptions alike come back with ``success=False``.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolParameter:
    """
    One keyword parameter of a code tool.

    Optional parameters take ``default`` when omitted or passed as None.
    """

    name: str
    type: type
    description: str
    required: bool = True
    default: Any = None

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """Return ``(is_valid, error_message)`` for a supplied value."""
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        # bool is an int subclass; max_paren_depth=True is a caller mistake
        if self.type is int and isinstance(value, bool):
            return False, f"Parameter '{self.name}' must be int, got bool"

        if not isinstance(value, self.type):
            return (
                False,
                f"Parameter '{self.name}' must be {self.type.__name__}, got {type(value).__name__}",
            )
        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of a tool call.

    ``data`` holds the produced code and labels on success; ``error`` is the
    message the editor shows on failure; ``metadata`` carries sizes, counts
    and flags for logging and the API.
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class CodeTool(ABC):
    """
    Base class for format_code, pack_code, unpack_code and code_size.

    Subclasses declare ``name``, ``description`` and ``parameters`` and
    implement ``execute()``, which receives validated keyword arguments
    with defaults already filled in. Callers use ``tool(**params)``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. ``"pack_code"``."""

    @property
    @abstractmethod
    def description(self) -> str:
        """One-paragraph summary shown by ``/tools/list``."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """Accepted keyword parameters, ``code`` first."""

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """Run the tool on validated, defaulted parameters."""

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """Reject unknown names, then check each declared parameter in order."""
        known = {param.name for param in self.parameters}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            return False, f"Unknown parameter(s) for '{self.name}': {', '.join(unknown)}"

        for param in self.parameters:
            is_valid, error = param.validate(kwargs.get(param.name))
            if not is_valid:
                return False, error
        return True, None

    def with_defaults(self, **kwargs) -> dict[str, Any]:
        """Fill in defaults for optional parameters that were not given."""
        resolved = dict(kwargs)
        for param in self.parameters:
            if resolved.get(param.name) is None and not param.required:
                resolved[param.name] = param.default
        return resolved

    def __call__(self, **kwargs) -> ToolResult:
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            logger.warning("Tool '%s' rejected input: %s", self.name, error)
            return ToolResult(success=False, error=error)

        try:
            return self.execute(**self.with_defaults(**kwargs))
        except Exception as e:
            logger.exception("Tool '%s' failed", self.name)
            return ToolResult(success=False, error=f"Tool execution failed: {e}")

    def to_dict(self) -> dict[str, Any]:
        """Describe the tool and its parameters for ``/tools/list``."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.__name__,
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                }
                for p in self.parameters
            ],
        }
