"""
Comma formatter for terse bytebeat code.

Bytebeat bodies are often one long comma expression. ``format_commas`` breaks
it into lines by inserting a newline after every comma that sits outside
strings and array literals and shallow enough in parentheses, while checking
that brackets balance. It never removes or reorders characters.

Pure module: all scan state lives in local variables of a single call.
"""

from core.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from core.types import UNBALANCED_ARRAY, UNBALANCED_PARENTHESIS, FormatResult

QUOTES: frozenset[str] = frozenset("`'\"")


def format_commas(text: str, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> FormatResult:
    """
    Insert a newline after each eligible comma.

    A comma is eligible when it is outside any string literal, outside any
    array literal, the parenthesis depth passes ``config`` and the next
    character is not already a newline.

    Strings open on any of ``` ` ' " ``; they close only on the same quote
    when it is not preceded by a backslash. Brackets and other quotes inside
    a string are ordinary content.

    Args:
        text: Source code to format.
        config: Paren-depth gating. Defaults to top-level commas only.

    Returns:
        FormatResult with the formatted text, or with reason
        ``"unbalanced array"`` / ``"unbalanced parenthesis"`` when a closing
        bracket has no opener or an opener is never closed.

    Example:
        >>> format_commas("a,(b,c)").text
        'a,\\n(b,c)'
        >>> format_commas("a,(b,c").reason
        'unbalanced parenthesis'
    """
    out: list[str] = []
    paren_depth = 0
    array_depth = 0
    quote: str | None = None  # opening quote of the current string literal

    for i, char in enumerate(text):
        out.append(char)

        if quote is not None:
            if char == quote and (i == 0 or text[i - 1] != "\\"):
                quote = None
            continue

        if char in QUOTES:
            quote = char
        elif char == "(":
            paren_depth += 1
        elif char == ")":
            paren_depth -= 1
            if paren_depth < 0:
                return FormatResult.failure(UNBALANCED_PARENTHESIS)
        elif char == "[":
            array_depth += 1
        elif char == "]":
            array_depth -= 1
            if array_depth < 0:
                return FormatResult.failure(UNBALANCED_ARRAY)
        elif char == ",":
            next_char = text[i + 1] if i + 1 < len(text) else ""
            if array_depth == 0 and config.allows_paren_depth(paren_depth) and next_char != "\n":
                out.append("\n")

    if array_depth > 0:
        return FormatResult.failure(UNBALANCED_ARRAY)
    if paren_depth > 0:
        return FormatResult.failure(UNBALANCED_PARENTHESIS)
    return FormatResult.success("".join(out))


class CommaFormatter:
    """
    Comma formatter bound to a default configuration.

    The instance only holds read-only config; every ``format()`` call keeps
    its own scan state, so one formatter can be shared across threads.

    Usage:
        formatter = CommaFormatter(FormatConfig(max_paren_depth=1))
        result = formatter.format(code)
        if result.ok:
            editor.set_value(result.text)
    """

    def __init__(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> FormatConfig:
        return self._config

    def format(self, text: str, config: FormatConfig | None = None) -> FormatResult:
        """Format text with ``config``, falling back to the bound config."""
        return format_commas(text, config or self._config)
