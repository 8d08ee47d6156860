"""Command that checks whether a list of instructions sorts its arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Operation, Stacks


def apply_instruction(stacks: Stacks, line: str) -> None:
    """Perform one instruction line, which must be a name followed by a newline.

    Raises ``InputError`` for anything else, including a final line
    that has no newline.
    """
    name, newline, rest = line.partition("\n")
    if not newline or rest:
        raise InputError()
    try:
        operation = Operation(name)
    except ValueError:
        raise InputError() from None
    stacks.apply(operation)


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply every instruction line to a stack built from ``values``.

    Returns True when a ends up strictly ascending and b empty.
    Raises ``InputError`` at the first invalid line.
    """
    stacks = Stacks(values)
    for line in lines:
        apply_instruction(stacks, line)
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args, strict=True)
        sorted_ok = run_checker(values, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())