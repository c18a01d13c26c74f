"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(value: CharLike) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def is_alpha(code: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    c = _code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_digit(code: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    c = _code(code)
    return ord("0") <= c <= ord("9")


def is_alnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: CharLike) -> bool:
    """True for printable ASCII codes 32 through 126."""
    return 32 <= _code(code) <= 126


def _convert_case(code: CharLike, low: str, high: str, shift: int) -> CharLike:
    c = _code(code)
    if ord(low) <= c <= ord(high):
        c += shift
    return chr(c) if isinstance(code, str) else c


def to_lower(code: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert_case(code, "A", "Z", 32)


def to_upper(code: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert_case(code, "a", "z", -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    return f"{int(number):d}"