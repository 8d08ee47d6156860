"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report bad input as ``Error``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in solve(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())