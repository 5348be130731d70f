"""Number parsing, argument validation and millisecond timing helpers."""

from __future__ import annotations

import time
from collections.abc import Iterable

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


class InvalidInputError(ValueError):
    """Raised when a command-line argument is not a valid positive number."""

    def __init__(self, message: str = "invalid input") -> None:
        super().__init__(message)


def atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first character that is not a digit. Text with
    no digits gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(microseconds: int) -> None:
    """Sleep in short slices until at least the given time has passed.

    The elapsed time is measured in milliseconds, so the wait ends at
    the first millisecond boundary at or after the requested duration.
    """
    start = now_ms()
    while (now_ms() - start) * 1000 < microseconds:
        time.sleep(0.00005)


def check_args(args: Iterable[str]) -> tuple[str, ...]:
    """Validate that every argument is made only of digits and has no leading zero.

    Returns the arguments as a tuple when all are valid; raises
    InvalidInputError otherwise.
    """
    checked = tuple(args)
    for arg in checked:
        if arg and (arg[0] == "0" or any(char not in _DIGITS for char in arg)):
            raise InvalidInputError()
    return checked