"""
Command-line access to the bytebeat code tools.

Reads code from a file (or stdin when no file is given), runs one tool and
writes the resulting code to stdout.

Usage:
    python scripts/codetool.py format song.js
    python scripts/codetool.py format --max-paren-depth 1 song.js
    python scripts/codetool.py pack song.js > song.packed.js
    python scripts/codetool.py unpack < song.packed.js
    python scripts/codetool.py size song.js

Exit codes:
    0  success
    1  the tool refused (unbalanced brackets, already packed, ...)
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tools.base import ToolResult  # noqa: E402
from tools.code.code_size import CodeSize  # noqa: E402
from tools.code.format_code import FormatCode  # noqa: E402
from tools.code.pack_code import PackCode  # noqa: E402
from tools.code.unpack_code import UnpackCode  # noqa: E402

logger = logging.getLogger("codetool")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Format, pack and unpack bytebeat code")
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = p.add_subparsers(dest="command", required=True)

    fmt = sub.add_parser("format", help="Break lines after top-level commas")
    fmt.add_argument(
        "--no-parens",
        action="store_true",
        help="Ignore parenthesis depth; split every comma outside arrays and strings",
    )
    fmt.add_argument(
        "--max-paren-depth",
        type=int,
        default=0,
        metavar="N",
        help="Deepest parenthesis level whose commas are split (default: 0)",
    )

    sub.add_parser("pack", help="Pack code into an eval(unescape(escape`...`)) wrapper")
    sub.add_parser("unpack", help="Unpack a wrapper back into code")

    size = sub.add_parser("size", help="Print the code size")
    size.add_argument(
        "--compact",
        action="store_true",
        help="Print 'KiB/KB' instead of 'KiB (KB)'",
    )

    for parser in sub.choices.values():
        parser.add_argument(
            "file",
            nargs="?",
            type=Path,
            help="Input file (default: stdin)",
        )
    return p.parse_args(argv)


def _read_code(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def run(args: argparse.Namespace, code: str) -> ToolResult:
    """Dispatch the parsed command to its tool."""
    if args.command == "format":
        return FormatCode()(
            code=code,
            consider_parens=not args.no_parens,
            max_paren_depth=args.max_paren_depth,
        )
    if args.command == "pack":
        return PackCode()(code=code)
    if args.command == "unpack":
        return UnpackCode()(code=code)
    return CodeSize()(code=code, compact=args.compact)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        code = _read_code(args.file)
    except OSError as exc:
        print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    result = run(args, code)
    if not result.success:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    if args.command == "size":
        print(result.data["label"])
    else:
        sys.stdout.write(result.data["code"])
        if not result.data["code"].endswith("\n"):
            sys.stdout.write("\n")

    logger.debug("%s done, metadata=%s", args.command, result.metadata)
    return 0


if __name__ == "__main__":
    sys.exit(main())
