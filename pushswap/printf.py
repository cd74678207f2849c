"""A small printf supporting the %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT32_MAX = 0x7FFFFFFF


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from None


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (_UINT32_MASK + 1) if value > _INT32_MAX else value


def _uint32(value: int) -> int:
    return value & _UINT32_MASK


def _uint64(value: int) -> int:
    return value & _UINT64_MASK


def hex_length(value: int) -> int:
    """Number of hexadecimal digits of ``value`` as a 32-bit unsigned integer."""
    return len(format(_uint32(value), "x"))


def num_length(value: int) -> int:
    """Number of characters, sign included, of ``value`` as a 32-bit signed integer."""
    return len(str(_int32(value)))


def ptr_length(value: int) -> int:
    """Number of hexadecimal digits of ``value`` as a 64-bit address."""
    return len(format(_uint64(value), "x"))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _convert(conversion: str, arguments: Iterator[Any]) -> str:
    if conversion not in "csdiuxXp":
        return conversion
    try:
        value = next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    number = _as_int(value, conversion)
    if conversion in "di":
        return str(_int32(number))
    if conversion == "u":
        return str(_uint32(number))
    if conversion == "x":
        return format(_uint32(number), "x")
    if conversion == "X":
        return format(_uint32(number), "X")
    address = _uint64(number)
    return "(nil)" if address == 0 else "0x" + format(address, "x")


def format_printf(template: str, *args: Any) -> str:
    """Render ``template`` with ``args`` and return the resulting text.

    An unknown conversion character is written as is, so ``%%`` gives ``%``;
    a lone ``%`` at the end of the template writes nothing. Missing
    arguments raise TypeError.
    """
    arguments = iter(args)
    parts: list[str] = []
    characters = iter(template)
    for char in characters:
        if char != "%":
            parts.append(char)
            continue
        conversion = next(characters, None)
        if conversion is None:
            break
        parts.append(_convert(conversion, arguments))
    return "".join(parts)


def printf(
    template: Optional[str], *args: Any, stream: Optional[TextIO] = None
) -> int:
    """Write the rendered template and return the number of characters written.

    A template of None writes nothing and returns -1.
    """
    if template is None:
        return -1
    text = format_printf(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)