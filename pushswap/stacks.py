"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Iterable


class Operation(str, Enum):
    """An instruction, spelled as it is written on the wire."""

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

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int], step: int) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(step)
    return True


def _push(source: deque[int], target: deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``, with the top of each at index 0.

    Every operation that takes effect is appended to ``operations``;
    a single-stack operation with nothing to act on is left out,
    while the combined ``ss``, ``rr`` and ``rrr`` are always recorded.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _record(self, operation: Operation, done: bool = True) -> None:
        if done:
            self.operations.append(operation)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._record(Operation.SA, _swap(self.a))

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._record(Operation.SB, _swap(self.b))

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self._record(Operation.SS)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._record(Operation.PA, _push(self.b, self.a))

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._record(Operation.PB, _push(self.a, self.b))

    def ra(self) -> None:
        """Rotate a upwards: its top becomes its bottom."""
        self._record(Operation.RA, _rotate(self.a, -1))

    def rb(self) -> None:
        """Rotate b upwards: its top becomes its bottom."""
        self._record(Operation.RB, _rotate(self.b, -1))

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        _rotate(self.a, -1)
        _rotate(self.b, -1)
        self._record(Operation.RR)

    def rra(self) -> None:
        """Rotate a downwards: its bottom becomes its top."""
        self._record(Operation.RRA, _rotate(self.a, 1))

    def rrb(self) -> None:
        """Rotate b downwards: its bottom becomes its top."""
        self._record(Operation.RRB, _rotate(self.b, 1))

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        _rotate(self.a, 1)
        _rotate(self.b, 1)
        self._record(Operation.RRR)

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an ``Operation`` or its name.

        Raises ``ValueError`` for an unknown name.
        """
        op = Operation(operation)
        getattr(self, op.value)()

    def is_sorted(self) -> bool:
        """True when a is strictly ascending from the top and b is empty."""
        return not self.b and all(x < y for x, y in pairwise(self.a))