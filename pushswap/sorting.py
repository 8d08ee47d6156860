"""Strategies that sort stack a using the puzzle's operations."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Mapping, Sequence

from pushswap.stacks import Operation, Stacks

SMALL_LIMIT = 20
MEDIUM_LIMIT = 100
MEDIUM_CHUNK = 20
LARGE_CHUNK = 70


def rank(values: Sequence[int]) -> list[int]:
    """Return the rank of each value: 0 for the smallest, counting upwards.

    Equal values are ranked in the order they appear.
    """
    order = sorted(range(len(values)), key=values.__getitem__)
    ranks = [0] * len(values)
    for position, original in enumerate(order):
        ranks[original] = position
    return ranks


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are strictly ascending."""
    return all(x < y for x, y in pairwise(values))


def sort_two(stacks: Stacks) -> None:
    """Order the two elements of a."""
    a = stacks.a
    if len(a) >= 2 and a[0] > a[1]:
        stacks.sa()


def _sort_middle_first(stacks: Stacks) -> None:
    first, second, third = stacks.a
    if second > first and second > third:
        if first > third:
            stacks.rra()
    elif first > second and second < third:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Order a when it holds exactly three elements; otherwise do nothing."""
    if len(stacks.a) != 3:
        return
    first, second, third = stacks.a
    if first > second and first > third:
        stacks.ra()
        if stacks.a[0] > stacks.a[1]:
            stacks.sa()
    elif first < second and first < third:
        if second > third:
            stacks.rra()
            stacks.sa()
    else:
        _sort_middle_first(stacks)


def sort_small(stacks: Stacks) -> None:
    """Push minima to b until three are left, sort those, then push back."""
    while len(stacks.a) > 3:
        a = stacks.a
        smallest = min(a)
        if a[0] != smallest:
            if a.index(smallest) <= len(a) // 2:
                stacks.ra()
            else:
                stacks.rra()
        else:
            stacks.pb()
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def _push_and_split(stacks: Stacks, rank_of: Mapping[int, int], mid: int) -> None:
    stacks.pb()
    if rank_of[stacks.b[0]] < mid:
        stacks.rb()


def _spread_to_b(stacks: Stacks, rank_of: Mapping[int, int], chunk: int) -> None:
    mid = len(stacks.a) // 2
    remaining = chunk
    offset = chunk // 2
    while stacks.a:
        if remaining:
            if mid - offset <= rank_of[stacks.a[0]] < mid + offset:
                _push_and_split(stacks, rank_of, mid)
                remaining -= 1
            else:
                stacks.ra()
        if remaining == 0:
            if offset <= mid:
                remaining = chunk
                offset += chunk // 2
            else:
                while stacks.a:
                    _push_and_split(stacks, rank_of, mid)


def _bring_to_top(stacks: Stacks, rank_of: Mapping[int, int], target: int) -> None:
    b = stacks.b
    position = next(
        (place for place, value in enumerate(b, start=1) if rank_of[value] == target),
        0,
    )
    rotate = stacks.rrb if position >= len(b) // 2 else stacks.rb
    while rank_of[stacks.b[0]] != target:
        rotate()


def _gather_to_a(stacks: Stacks, rank_of: Mapping[int, int]) -> None:
    down = 0
    target = len(stacks.b) - 1
    while stacks.b:
        bottom = rank_of[stacks.a[-1]] if stacks.a else 0
        top = rank_of[stacks.b[0]]
        if top == target:
            stacks.pa()
            target -= 1
        elif bottom == target:
            stacks.rra()
            down -= 1
            target -= 1
        elif down == 0 or top > bottom:
            stacks.pa()
            stacks.ra()
            down += 1
        else:
            _bring_to_top(stacks, rank_of, target)


def chunk_sort(stacks: Stacks, chunk: int) -> None:
    """Sort a by moving it to b in chunks around the median, then back.

    Elements are taken from a in widening rank windows of ``chunk``
    elements centred on the median; they are then returned to a from
    the largest rank down.
    """
    values = list(stacks.a)
    rank_of = dict(zip(values, rank(values)))
    _spread_to_b(stacks, rank_of, chunk)
    _gather_to_a(stacks, rank_of)
    while not is_sorted(stacks.a):
        stacks.rra()


def solve(values: Sequence[int]) -> list[Operation]:
    """Return the operations that sort ``values`` as stack a."""
    stacks = Stacks(values)
    if is_sorted(values):
        return []
    size = len(values)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= SMALL_LIMIT:
        sort_small(stacks)
    elif size <= MEDIUM_LIMIT:
        chunk_sort(stacks, MEDIUM_CHUNK)
    else:
        chunk_sort(stacks, LARGE_CHUNK)
    return stacks.operations