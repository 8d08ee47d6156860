"""Reading the integers of stack a from command-line arguments."""

from __future__ import annotations

import re
from typing import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_LIMIT = 2147483648
_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_SIGNS = "+-"


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a leading integer, ``atoi`` style.

    Leading whitespace and one sign are accepted and anything after the
    digits is ignored. Digits stop being read once the magnitude reaches
    2**31, so the result is out of the 32-bit range whenever the text is.
    """
    match = _PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    magnitude = 0
    for digit in digits:
        if magnitude >= _LIMIT:
            break
        magnitude = magnitude * 10 + int(digit)
    return -magnitude if sign == "-" else magnitude


def validate_signs(text: str) -> None:
    """Check that ``text`` holds only digits, spaces and well-placed signs.

    A sign must be followed by a digit and stand at the start or after a
    space. Raises ``InputError`` otherwise.
    """
    for position, char in enumerate(text):
        if not char.isascii() or not (char.isdigit() or char in _SIGNS or char == " "):
            raise InputError()
        if char in _SIGNS:
            following = text[position + 1 : position + 2]
            if not (following and following.isascii() and following.isdigit()):
                raise InputError()
            if position != 0 and text[position - 1] != " ":
                raise InputError()


def parse_arguments(args: Iterable[str], strict: bool = False) -> list[int]:
    """Turn arguments into the list of values for stack a, top first.

    Each argument may hold several space-separated numbers. Every number
    must fit in 32 bits and appear once. With ``strict`` an argument of
    eleven characters or more is refused as well. Raises ``InputError``.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        validate_signs(arg)
        tokens = [token for token in arg.split(" ") if token]
        if not tokens:
            raise InputError()
        if strict and len(arg) >= 11:
            raise InputError()
        for token in tokens:
            number = parse_int(token)
            if not INT_MIN <= number <= INT_MAX:
                raise InputError()
            if number in seen:
                raise InputError()
            seen.add(number)
            values.append(number)
    return values