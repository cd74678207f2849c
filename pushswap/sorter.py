"""The sorting strategy: dedicated moves for up to five numbers, chunks above."""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Optional

from pushswap.stacks import Stacks

DEFAULT_CHUNK_START = 0
DEFAULT_CHUNK_END = 15


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are strictly increasing from the top."""
    items = list(values)
    return all(left < right for left, right in zip(items, items[1:]))


def find_min(values: Iterable[int]) -> Optional[int]:
    """The smallest value, or None when there is none."""
    return min(values, default=None)


def find_max(values: Iterable[int]) -> Optional[int]:
    """The largest value, or None when there is none."""
    return max(values, default=None)


def find_half(values: Iterable[int], target: int, length: int) -> bool:
    """True when ``target`` is among the first ``length`` values."""
    return target in islice(values, max(length, 0))


def rank_indices(values: Iterable[int]) -> list[int]:
    """The 1-based rank of each value in ascending order, in the given order."""
    items = list(values)
    ranks = {value: rank for rank, value in enumerate(sorted(items), start=1)}
    return [ranks[value] for value in items]


def sort_two(stacks: Stacks) -> None:
    """Order two numbers on ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order exactly three numbers on ``a`` in at most two operations."""
    first, mid, last = stacks.a[0], stacks.a[1], stacks.a[2]
    if mid > first and mid > last and last > first:
        stacks.sa()
        stacks.ra()
    elif first > mid and mid < last and last > first:
        stacks.sa()
    elif first > mid and mid < last and last < first:
        stacks.ra()
    elif mid > last and mid > first and last < first:
        stacks.rra()
    elif first > mid and mid > last:
        stacks.ra()
        stacks.sa()


def _push_min_to_b(stacks: Stacks) -> None:
    minimum = find_min(stacks.a)
    if stacks.a[0] == minimum:
        stacks.pb()
        return
    if stacks.a[1] == minimum:
        stacks.ra()
    else:
        while stacks.a[0] != minimum:
            stacks.rra()
    stacks.pb()


def sort_four(stacks: Stacks) -> None:
    """Order four numbers on ``a`` by parking the minimum on ``b``."""
    _push_min_to_b(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Order five numbers on ``a`` by parking the minimum on ``b``."""
    _push_min_to_b(stacks)
    if not is_sorted(stacks.a):
        sort_four(stacks)
    stacks.pa()


def push_back_max(stacks: Stacks) -> None:
    """Move all of ``b`` onto ``a``, always bringing the largest value up first."""
    while stacks.b:
        maximum = find_max(stacks.b)
        upper_half = find_half(stacks.b, maximum, len(stacks.b) // 2)
        while stacks.b[0] != maximum:
            if upper_half:
                stacks.rb()
            else:
                stacks.rrb()
        stacks.pa()


def sort_chunks(
    stacks: Stacks,
    start: int = DEFAULT_CHUNK_START,
    end: int = DEFAULT_CHUNK_END,
) -> None:
    """Sort ``a`` by pushing rank windows to ``b`` and bringing them back.

    A value ranked at most ``start`` goes to the bottom of ``b``, one ranked
    inside the window stays on top; both move the window up by one. Values
    ranked above it are rotated past.
    """
    ranks = dict(zip(stacks.a, rank_indices(stacks.a)))
    while stacks.a:
        rank = ranks[stacks.a[0]]
        if rank <= start:
            stacks.pb()
            stacks.rb()
            start += 1
            end += 1
        elif rank < end:
            stacks.pb()
            start += 1
            end += 1
        else:
            stacks.ra()
    push_back_max(stacks)


def push_swap(stacks: Stacks) -> None:
    """Sort stack ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size <= 1:
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        sort_chunks(stacks, DEFAULT_CHUNK_START, DEFAULT_CHUNK_END)