"""The two push_swap stacks and the eleven operations on them."""

from __future__ import annotations

import sys
from collections import deque
from enum import Enum
from typing import Iterable, Optional, TextIO


class Operation(str, Enum):
    """A stack operation, valued by the name it is printed as."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


# Combined operations are printed even when neither stack changes.
_ALWAYS_PRINTED = frozenset({Operation.SS, Operation.RR, Operation.RRR})


def _swap(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque, steps: int) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(steps)
    return True


def _push(source: deque, target: deque) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, writing each operation performed."""

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        output: Optional[TextIO] = None,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.output = output

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={list(self.a)!r}, b={list(self.b)!r})"

    def _perform(self, operation: Operation) -> bool:
        if operation is Operation.SA:
            return _swap(self.a)
        if operation is Operation.SB:
            return _swap(self.b)
        if operation is Operation.SS:
            return _swap(self.a) | _swap(self.b)
        if operation is Operation.PA:
            return _push(self.b, self.a)
        if operation is Operation.PB:
            return _push(self.a, self.b)
        if operation is Operation.RA:
            return _rotate(self.a, -1)
        if operation is Operation.RB:
            return _rotate(self.b, -1)
        if operation is Operation.RR:
            return _rotate(self.a, -1) | _rotate(self.b, -1)
        if operation is Operation.RRA:
            return _rotate(self.a, 1)
        if operation is Operation.RRB:
            return _rotate(self.b, 1)
        return _rotate(self.a, 1) | _rotate(self.b, 1)

    def apply(self, operation: Operation | str, quiet: bool = False) -> bool:
        """Perform ``operation`` and return whether any stack changed.

        The operation's name is written unless ``quiet`` is set or a single
        operation had nothing to act on.
        """
        operation = Operation(operation)
        changed = self._perform(operation)
        if not quiet and (changed or operation in _ALWAYS_PRINTED):
            stream = sys.stdout if self.output is None else self.output
            stream.write(operation.value + "\n")
        return changed

    def sa(self, quiet: bool = False) -> bool:
        """Swap the top two elements of ``a``."""
        return self.apply(Operation.SA, quiet)

    def sb(self, quiet: bool = False) -> bool:
        """Swap the top two elements of ``b``."""
        return self.apply(Operation.SB, quiet)

    def ss(self) -> bool:
        """Swap the top two elements of both stacks."""
        return self.apply(Operation.SS)

    def pa(self) -> bool:
        """Move the top of ``b`` onto ``a``."""
        return self.apply(Operation.PA)

    def pb(self) -> bool:
        """Move the top of ``a`` onto ``b``."""
        return self.apply(Operation.PB)

    def ra(self, quiet: bool = False) -> bool:
        """Move the top of ``a`` to its bottom."""
        return self.apply(Operation.RA, quiet)

    def rb(self, quiet: bool = False) -> bool:
        """Move the top of ``b`` to its bottom."""
        return self.apply(Operation.RB, quiet)

    def rr(self) -> bool:
        """Rotate both stacks."""
        return self.apply(Operation.RR)

    def rra(self, quiet: bool = False) -> bool:
        """Move the bottom of ``a`` to its top."""
        return self.apply(Operation.RRA, quiet)

    def rrb(self, quiet: bool = False) -> bool:
        """Move the bottom of ``b`` to its top."""
        return self.apply(Operation.RRB, quiet)

    def rrr(self) -> bool:
        """Reverse-rotate both stacks."""
        return self.apply(Operation.RRR)