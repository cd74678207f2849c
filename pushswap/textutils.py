"""String helpers: parsing, splitting, searching, copying and trimming."""

from __future__ import annotations

from typing import Callable, Optional

from pushswap.output import INT_MAX, INT_MIN

_WHITESPACE = frozenset("\t\n\v\f\r ")
_TERMINATOR = "\0"


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the 32-bit signed range, wrapping around."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _single_char(name: str, value: str) -> None:
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Anything unparsable gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    position = 0
    while position < len(text) and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    value = 0
    while position < len(text) and "0" <= text[position] <= "9":
        value = value * 10 + ord(text[position]) - ord("0")
        position += 1
    return _wrap_int32(sign * value)


def itoa(number: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def split(text: str, delimiter: str) -> list[str]:
    """Words of ``text`` separated by runs of ``delimiter``; empty words are dropped."""
    _single_char("delimiter", delimiter)
    return [word for word in text.split(delimiter) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    _single_char("char", char)
    index = (text + _TERMINATOR).find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the terminator at ``len(text)``.
    """
    _single_char("char", char)
    index = (text + _TERMINATOR).rfind(char)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """An equal copy of ``text``."""
    return "".join(text)


def striteri(text: str, function: Callable[[int, str], Optional[str]]) -> str:
    """Call ``function(index, char)`` on every character.

    A returned character replaces the original one; None keeps it.
    """
    result = []
    for index, char in enumerate(text):
        replacement = function(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strmapi(text: str, function: Callable[[int, str], str]) -> str:
    """New string built from ``function(index, char)`` for every character."""
    return "".join(function(index, char) for index, char in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """Concatenation of the two strings."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would have
    had; when ``size`` does not exceed the length of ``dest``, ``dest`` is
    returned unchanged together with ``size + len(src)``.
    """
    _non_negative("size", size)
    dest_length = min(len(dest), size)
    if size <= dest_length:
        return dest, size + len(src)
    room = size - 1 - dest_length
    return dest + src[:room], dest_length + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as 0, or 0 when the compared parts are equal.
    """
    _non_negative("count", count)
    for index in range(count):
        left = ord(first[index]) if index < len(first) else 0
        right = ord(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; a missing one gives None.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """``text`` with characters of ``charset`` removed from both ends."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]