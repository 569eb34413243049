"""
Name-keyed registry of the code tools.

``discover()`` walks a package, instantiates every concrete CodeTool
subclass defined in it and registers it under ``tool.name``. The HTTP
``/tools`` routes use the process-wide registry from ``get_registry()``.
"""

import importlib
import inspect
import logging
import pkgutil
from collections.abc import Iterator
from types import ModuleType

from tools.base import CodeTool

logger = logging.getLogger(__name__)


def _tool_classes(module: ModuleType) -> Iterator[type[CodeTool]]:
    """Yield concrete CodeTool subclasses whose home module is ``module``."""
    for _name, obj in inspect.getmembers(module, inspect.isclass):
        # imported names belong to another module and are registered there
        if obj.__module__ != module.__name__:
            continue
        if issubclass(obj, CodeTool) and not inspect.isabstract(obj):
            yield obj


class ToolRegistry:
    """
    Code tools by name.

    Usage:
        registry = ToolRegistry()
        registry.discover()
        result = registry.get("pack_code")(code="t*(t>>8)")
    """

    def __init__(self):
        self._tools: dict[str, CodeTool] = {}

    def register(self, tool: CodeTool) -> None:
        """Add a tool; a second tool with the same name raises ValueError."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> CodeTool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Registered tool names in registration order."""
        return list(self._tools)

    def list_tools(self) -> list[dict]:
        """``to_dict()`` of every registered tool."""
        return [tool.to_dict() for tool in self._tools.values()]

    def discover(self, package_name: str = "tools") -> int:
        """
        Register every tool defined under ``package_name``.

        Modules that fail to import are logged and skipped.

        Returns:
            Number of tools registered by this call.
        """
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.warning("Tool package '%s' could not be imported", package_name)
            return 0

        if not hasattr(package, "__path__"):
            return 0

        count = 0
        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            list(package.__path__), prefix=f"{package_name}."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("Skipping tool module %s: %s", module_name, exc)
                continue
            for tool_cls in _tool_classes(module):
                self.register(tool_cls())
                count += 1

        logger.debug("Discovered %d tool(s) in '%s'", count, package_name)
        return count

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """Return the process-wide registry, discovering tools on first use."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
