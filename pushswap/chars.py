"""Character classification and case conversion on character codes."""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(value: int | str) -> int:
    """Return the integer code of an int or a one-character string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def is_alpha(code: int | str) -> bool:
    """True for an ASCII letter."""
    value = _code(code)
    return value in _UPPER or value in _LOWER


def is_digit(code: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _code(code) in _DIGITS


def is_alnum(code: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(code) <= 126


def to_lower(code: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    value = _code(code)
    if value in _UPPER:
        value += _CASE_OFFSET
    return chr(value) if isinstance(code, str) else value


def to_upper(code: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    value = _code(code)
    if value in _LOWER:
        value -= _CASE_OFFSET
    return chr(value) if isinstance(code, str) else value