"""String helpers: splitting, searching, copying, joining and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any, Optional

_END = "\0"


def _check_char(char: str, name: str = "char") -> None:
    if len(char) != 1:
        raise ValueError(f"{name} must be a single character, got {char!r}")


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, delimiter: str) -> list[str]:
    """Split text on delimiter, dropping the empty pieces between repeats."""
    _check_char(delimiter, "delimiter")
    if delimiter == _END:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first occurrence of char, or None.

    Searching for the terminator character '\\0' yields the length of text.
    """
    _check_char(char)
    if char == _END:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last occurrence of char, or None.

    Searching for the terminator character '\\0' yields the length of text.
    """
    _check_char(char)
    if char == _END:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return an equal copy of text."""
    return "".join(text)


def striteri(text: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Replace each element of a mutable sequence with func(index, element)."""
    for index, value in enumerate(list(text)):
        text[index] = func(index, value)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters (terminator included).

    Returns the resulting text and the length the full concatenation would
    have had, which exceeds the buffer when the result was truncated.
    """
    _check_count(size, "size")
    dest_len = min(len(dest), size)
    total = dest_len + len(src)
    if dest_len >= size:
        return dest, total
    room = size - dest_len - 1
    return dest[:dest_len] + src[:room], total


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters (terminator included).

    Returns the copied text and the full length of src.
    """
    _check_count(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlen(text: str) -> int:
    """Number of characters in text."""
    return len(text)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the code difference at the first mismatch."""
    _check_count(n, "n")
    pairs = zip_longest(first, second, fillvalue=_END)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _END:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle lying wholly within the first length characters, or None."""
    _check_count(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text starting at start; empty past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]