"""Human-readable code size labels — pure functions."""

_BINARY_UNITS: tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB")
_DECIMAL_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

# Below this many bytes the plain byte count is shown.
PLAIN_BYTES_LIMIT = 2000


def _scaled(size: int, base: int, units: tuple[str, ...]) -> str:
    power = 0
    while power < len(units) - 1 and size >= base ** (power + 1):
        power += 1
    if power == 0:
        return f"{size}{units[0]}"
    return f"{size / base**power:.2f}{units[power]}"


def format_bytes(size: int, compact: bool = False) -> str:
    """
    Format a byte count in both binary and decimal units.

    Args:
        size: Number of bytes (non-negative).
        compact: Join the two renditions with ``/`` instead of a
            parenthesised suffix.

    Returns:
        ``"<n>B"`` below 2000 bytes, otherwise e.g. ``"2.93KiB (3.00KB)"``.

    Raises:
        ValueError: If size is negative.

    Example:
        >>> format_bytes(512)
        '512B'
        >>> format_bytes(3000)
        '2.93KiB (3.00KB)'
        >>> format_bytes(3000, compact=True)
        '2.93KiB/3.00KB'
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size < PLAIN_BYTES_LIMIT:
        return f"{size}B"

    binary = _scaled(size, 1024, _BINARY_UNITS)
    decimal = _scaled(size, 1000, _DECIMAL_UNITS)
    return f"{binary}/{decimal}" if compact else f"{binary} ({decimal})"


def code_size(code: str) -> int:
    """Size of code in bytes once UTF-8 encoded."""
    return len(code.encode("utf-8", "surrogatepass"))
