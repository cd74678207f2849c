"""Validation of command-line numbers and construction of the initial stack."""

from __future__ import annotations

from typing import Sequence

from pushswap.textutils import atoi, split

NOT_INTEGER_MESSAGE = "Parameter aren't integer or a number.\n"
DUPLICATE_MESSAGE = "There is a parameter twice."

_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class PushSwapError(Exception):
    """Raised when the arguments cannot form a stack to sort."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def is_integer(text: str) -> bool:
    """True when ``text`` is an optionally signed decimal fitting in 32 bits.

    A sign must be followed by at least one digit; an empty string is
    accepted and reads as zero.
    """
    sign = 1
    digits = text
    if digits[:1] in ("-", "+"):
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
        if not digits:
            return False
    limit = _INT_MAX if sign == 1 else _INT_MIN_MAGNITUDE
    value = 0
    for char in digits:
        if not "0" <= char <= "9":
            return False
        value = value * 10 + ord(char) - ord("0")
        if value > limit:
            return False
    return True


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Numbers for stack ``a``, top first, from the program's arguments.

    A single argument is split on spaces; several arguments are taken one
    number each. Raises PushSwapError for a non-integer or a repeated value.
    """
    if not args:
        return []
    words = split(args[0], " ") if len(args) == 1 else list(args)
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not is_integer(word):
            raise PushSwapError(NOT_INTEGER_MESSAGE)
        number = atoi(word)
        if number in seen:
            raise PushSwapError(DUPLICATE_MESSAGE)
        seen.add(number)
        values.append(number)
    return values