"""
Shared result types for the code tools.

FormatResult is the value returned by the comma formatter. It is a tagged
outcome: either ``ok`` with the formatted text, or not ``ok`` with a reason.
Mixed or empty results cannot be constructed.
"""

from dataclasses import dataclass
from typing import Literal

UNBALANCED_ARRAY = "unbalanced array"
UNBALANCED_PARENTHESIS = "unbalanced parenthesis"

FormatErrorReason = Literal["unbalanced array", "unbalanced parenthesis"]

VALID_REASONS: frozenset[str] = frozenset({UNBALANCED_ARRAY, UNBALANCED_PARENTHESIS})


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a comma-format pass.

    Attributes:
        ok: True when the brackets balanced and text holds the result.
        text: Formatted text on success, None on failure.
        reason: One of VALID_REASONS on failure, None on success.

    Example:
        >>> FormatResult.success("a,\\nb").text
        'a,\\nb'
        >>> FormatResult.failure(UNBALANCED_ARRAY).ok
        False
    """

    ok: bool
    text: str | None = None
    reason: FormatErrorReason | None = None

    def __post_init__(self) -> None:
        """Reject partial or mixed results."""
        if self.ok:
            if self.text is None:
                raise ValueError("successful FormatResult requires text")
            if self.reason is not None:
                raise ValueError("successful FormatResult cannot carry a reason")
        else:
            if self.text is not None:
                raise ValueError("failed FormatResult cannot carry text")
            if self.reason not in VALID_REASONS:
                raise ValueError(
                    f"reason must be one of {sorted(VALID_REASONS)}, got {self.reason!r}"
                )

    @classmethod
    def success(cls, text: str) -> "FormatResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, reason: FormatErrorReason) -> "FormatResult":
        return cls(ok=False, reason=reason)

    @property
    def error(self) -> str | None:
        """Alias of reason, matching the editor's ``{error, code}`` shape."""
        return self.reason

    @property
    def code(self) -> str | None:
        """Alias of text, matching the editor's ``{error, code}`` shape."""
        return self.text

    def to_dict(self) -> dict[str, str | None]:
        return {"error": self.reason, "code": self.text}
