"""
Pure pack/unpack codec for bytebeat source code.

Packing merges every two characters of the source into a single UTF-16 code
unit and wraps the result in a self-decoding JavaScript expression:

    eval(unescape(escape`<PAYLOAD>`.replace(/u(..)/g,"$1%")))

When the player evaluates the wrapper, ``escape`` renders each packed unit as
``%uXXYY``, the ``replace`` call rewrites that to ``%XX%YY`` and ``unescape``
turns it back into the two original characters. ``decode()`` runs the same
three steps in Python so the round trip can be checked without a JS host.

All functions are pure and never raise for any string input.
"""

import re
import struct

# Characters JavaScript's escape() leaves untouched.
_ESCAPE_SAFE: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789@*_+-./"
)
_HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

WRAPPER_PREFIX = "eval(unescape(escape`"
WRAPPER_SUFFIX = '`.replace(/u(..)/g,"$1%")))'

# Opening and closing delimiters the wrapper may use around the payload:
# bare template literal, or a call with a '...', "..." or `...` argument.
_WRAPPER_RE = re.compile(
    r"^eval\(unescape\(escape(?:`|\('|\(\"|\(`)(.*?)(?:`|'\)|\"\)|`\))"
    r"\.replace\(/u\(\.\.\)/g,[\"'`]\$1%[\"'`]\)\)\)$",
    re.DOTALL,
)
_SUBSTITUTE_RE = re.compile(r"u(..)", re.DOTALL)


def _to_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units, the way a JS string indexes."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def _from_code_units(units: list[int]) -> str:
    """Inverse of _to_code_units; lone surrogates survive as-is."""
    raw = struct.pack(f"<{len(units)}H", *units)
    return raw.decode("utf-16-le", "surrogatepass")


def js_escape(text: str) -> str:
    """
    Reproduce JavaScript's global ``escape()``.

    Safe ASCII characters pass through, other units below 256 become ``%XX``
    and everything else becomes ``%uXXXX`` (uppercase hex).

    Example:
        >>> js_escape("a b\\u6162")
        'a%20b%u6162'
    """
    parts: list[str] = []
    for unit in _to_code_units(text):
        char = chr(unit)
        if char in _ESCAPE_SAFE:
            parts.append(char)
        elif unit < 256:
            parts.append(f"%{unit:02X}")
        else:
            parts.append(f"%u{unit:04X}")
    return "".join(parts)


def js_unescape(text: str) -> str:
    """
    Reproduce JavaScript's global ``unescape()``.

    ``%uXXXX`` and ``%XX`` sequences become the code unit they name; a ``%``
    that does not start a valid sequence is kept literally.

    Example:
        >>> js_unescape("%61%62%u0063%zz")
        'abc%zz'
    """
    units = _to_code_units(text)
    chars = [chr(u) for u in units]
    out: list[int] = []
    i = 0
    n = len(units)
    while i < n:
        if chars[i] == "%":
            if (
                i + 5 < n
                and chars[i + 1] == "u"
                and all(c in _HEX_DIGITS for c in chars[i + 2 : i + 6])
            ):
                out.append(int("".join(chars[i + 2 : i + 6]), 16))
                i += 6
                continue
            if i + 2 < n and all(c in _HEX_DIGITS for c in chars[i + 1 : i + 3]):
                out.append(int("".join(chars[i + 1 : i + 3]), 16))
                i += 3
                continue
        out.append(units[i])
        i += 1
    return _from_code_units(out)


def normalize(text: str) -> str:
    """
    Apply the lossy preprocessing done before packing.

    Pads odd-length text with one trailing space, then collapses every
    ``", "`` into ``","``. The collapse also hits string literals. Each
    collapse shortens the text by one unit, so the result is padded again
    when needed to keep the unit count even.

    Example:
        >>> normalize("a, b, c")
        'a,b,c '
    """
    if len(_to_code_units(text)) & 1:
        text += " "
    text = text.replace(", ", ",")
    if len(_to_code_units(text)) & 1:
        text += " "
    return text


def encode(text: str) -> str:
    """
    Pack source text into a self-decoding wrapper expression.

    Each pair of code units ``(c1, c2)`` of the normalized text becomes the
    single unit ``(c1 << 8) | c2``, truncated to 16 bits like
    ``String.fromCharCode`` does. Units above 0xFF in the source therefore
    do not survive the round trip.

    Args:
        text: Source code to pack.

    Returns:
        The wrapper expression with the packed payload inside backticks.
    """
    units = _to_code_units(normalize(text))
    packed = [((units[i] << 8) | units[i + 1]) & 0xFFFF for i in range(0, len(units), 2)]
    return WRAPPER_PREFIX + _from_code_units(packed) + WRAPPER_SUFFIX


def extract_payload(text: str) -> str | None:
    """Return the packed payload of a wrapper expression, or None."""
    match = _WRAPPER_RE.match(text.strip())
    if match is None:
        return None
    return match.group(1)


def is_packed(text: str) -> bool:
    """True when text (after trimming) is a wrapper expression."""
    return extract_payload(text) is not None


def decode(text: str) -> str:
    """
    Unpack a wrapper expression back into source text.

    Accepts the backtick, ``('...')``, ``("...")`` and ``(`...`)`` payload
    forms. Input that is not a wrapper is returned trimmed and otherwise
    unchanged, which callers read as "this text was not packed".

    Example:
        >>> decode(encode("t*(t>>8)"))
        't*(t>>8)'
        >>> decode("  t*2  ")
        't*2'
    """
    payload = extract_payload(text)
    if payload is None:
        return text.strip()
    return js_unescape(_SUBSTITUTE_RE.sub(r"\1%", js_escape(payload)))


class Packer:
    """
    Stateless facade over encode()/decode().

    Holds no per-call state, so one instance can be shared freely.
    """

    @staticmethod
    def encode(text: str) -> str:
        return encode(text)

    @staticmethod
    def decode(text: str) -> str:
        return decode(text)

    @staticmethod
    def is_packed(text: str) -> bool:
        return is_packed(text)
