"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from pushswap.parsing import ParseError, collect_tokens, parse_numbers
from pushswap.sorting import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the numbers given as arguments and print one operation per line.

    The numbers come either as one space-separated argument or as several
    arguments. Invalid input prints "Error" to standard error and yields 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(collect_tokens(args))
    except ParseError:
        sys.stderr.write("Error\n")
        sys.stderr.flush()
        return 1
    operations = solve(numbers)
    if operations:
        sys.stdout.write("".join(f"{op}\n" for op in operations))
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())