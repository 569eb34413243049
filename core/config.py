"""
Configuration dataclasses for the comma formatter.

These immutable config objects are passed per call, so one formatter can serve
several editors with different settings without sharing mutable state.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatConfig:
    """
    Configuration for comma formatting.

    Attributes:
        consider_parens: When True, only commas shallower than
            ``max_paren_depth + 1`` parentheses get a line break. When False,
            parenthesis depth is ignored and only array depth gates commas.
        max_paren_depth: Deepest parenthesis nesting whose commas are still
            split. Defaults to 0, i.e. top-level commas only.

    Example:
        >>> config = FormatConfig(max_paren_depth=1)
        >>> result = format_commas("a,f(b,g(c,d))", config)
    """

    consider_parens: bool = True
    max_paren_depth: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.consider_parens, bool):
            raise TypeError(
                f"consider_parens must be bool, got {type(self.consider_parens).__name__}"
            )
        if isinstance(self.max_paren_depth, bool) or not isinstance(self.max_paren_depth, int):
            raise TypeError(
                f"max_paren_depth must be int, got {type(self.max_paren_depth).__name__}"
            )
        if self.max_paren_depth < 0:
            raise ValueError(f"max_paren_depth must be non-negative, got {self.max_paren_depth}")

    def allows_paren_depth(self, depth: int) -> bool:
        """True when a comma at this parenthesis depth may get a line break."""
        return not self.consider_parens or depth < self.max_paren_depth + 1


# Pre-defined configurations for common use cases

DEFAULT_FORMAT_CONFIG = FormatConfig()
"""Default configuration: split top-level commas only."""

SHALLOW_CONFIG = FormatConfig(max_paren_depth=1)
"""Also split commas directly inside one level of parentheses."""

NO_PARENS_CONFIG = FormatConfig(consider_parens=False)
"""Ignore parentheses; split every comma outside arrays and strings."""
