"""Text patterns: the hollow butterfly and a two-string report."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def _wing(width: int) -> str:
    if width == 1:
        return "*"
    return "*" + " " * (width - 2) + "*"


def hollow_butterfly(n: int) -> str:
    """Return a hollow butterfly of ``2 * n`` lines, each ``2 * n`` wide.

    Each line ends with a newline; ``n <= 0`` gives an empty string.
    """
    if n <= 0:
        return ""
    widths = [*range(1, n + 1), *range(n, 0, -1)]
    return "".join(
        f"{_wing(width)}{' ' * (2 * n - 2 * width)}{_wing(width)}\n"
        for width in widths
    )


def string_report(first: str, second: str) -> str:
    """Report the lengths, the concatenation and the first-letter swap.

    The three lines are the two lengths, the two strings joined, and the two
    strings with their first characters exchanged.
    """
    if not first or not second:
        raise ValueError("both strings must be non-empty")
    swapped_first = second[0] + first[1:]
    swapped_second = first[0] + second[1:]
    return (
        f"{len(first)} {len(second)}\n"
        f"{first + second}\n"
        f"{swapped_first} {swapped_second}\n"
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algobox-patterns")
    commands = parser.add_subparsers(dest="command", required=True)

    butterfly = commands.add_parser("butterfly", help="print a hollow butterfly")
    butterfly.add_argument("size", type=int)

    strings = commands.add_parser("strings", help="report on two strings")
    strings.add_argument("first")
    strings.add_argument("second")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pattern command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "butterfly":
        print(hollow_butterfly(args.size), end="")
    else:
        try:
            print(string_report(args.first, args.second), end="")
        except ValueError as error:
            parser.error(str(error))
    return 0