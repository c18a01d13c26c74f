"""Turning command-line arguments into the list of numbers to sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.libft.chars import atoi, is_digit
from pushswap.libft.strings import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""

    def __init__(self, detail: str = "Error") -> None:
        super().__init__(detail)
        self.detail = detail


def _is_sign(char: str) -> bool:
    return char in ("+", "-")


def split_arguments(text: str) -> list[str]:
    """Split a single argument on spaces; raise ParseError if no token is left."""
    tokens = split(text, " ")
    if not tokens:
        raise ParseError("no numbers in argument")
    return tokens


def has_syntax_error(token: str) -> bool:
    """True unless token is an optional sign followed by one or more digits."""
    if not token:
        return True
    first, rest = token[0], token[1:]
    if not (_is_sign(first) or is_digit(first)):
        return True
    if _is_sign(first) and not (rest and is_digit(rest[0])):
        return True
    return not all(is_digit(char) for char in rest)


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to integers, rejecting bad syntax, overflow and duplicates."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if has_syntax_error(token):
            raise ParseError(f"not an integer: {token!r}")
        number = atoi(token)
        if not INT_MIN <= number <= INT_MAX:
            raise ParseError(f"out of range: {token!r}")
        if number in seen:
            raise ParseError(f"duplicate number: {number}")
        seen.add(number)
        numbers.append(number)
    return numbers


def collect_tokens(args: Sequence[str]) -> list[str]:
    """Return the tokens to parse from the program arguments (without its name).

    A single argument is split on spaces; several arguments are taken as
    they are. No arguments gives no tokens.
    """
    if not args:
        return []
    if len(args) == 1:
        if not args[0]:
            raise ParseError("empty argument")
        return split_arguments(args[0])
    return list(args)