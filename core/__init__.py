"""
core/ — Pure text transformations for bytebeat code.

Exports:
    Packer:    encode, decode, is_packed, normalize, Packer
    Formatter: format_commas, CommaFormatter
    Config:    FormatConfig, DEFAULT_FORMAT_CONFIG, SHALLOW_CONFIG, NO_PARENS_CONFIG
    Types:     FormatResult, UNBALANCED_ARRAY, UNBALANCED_PARENTHESIS
    Size:      format_bytes, code_size
"""

from core.config import DEFAULT_FORMAT_CONFIG, NO_PARENS_CONFIG, SHALLOW_CONFIG, FormatConfig
from core.formatter import CommaFormatter, format_commas
from core.packer import Packer, decode, encode, is_packed, normalize
from core.size import code_size, format_bytes
from core.types import UNBALANCED_ARRAY, UNBALANCED_PARENTHESIS, FormatResult

__all__ = [
    # Packer
    "Packer",
    "encode",
    "decode",
    "is_packed",
    "normalize",
    # Formatter
    "CommaFormatter",
    "format_commas",
    # Config
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "SHALLOW_CONFIG",
    "NO_PARENS_CONFIG",
    # Types
    "FormatResult",
    "UNBALANCED_ARRAY",
    "UNBALANCED_PARENTHESIS",
    # Size
    "format_bytes",
    "code_size",
]
