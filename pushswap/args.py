"""Reading the numbers the puzzle starts from off the command line."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

NOT_INTEGER = "Error:\n Some arguments aren't integers."
DUPLICATE = "Error:\n there are duplicates."
OUT_OF_RANGE = "Error\n Some arguments are bigger than an integer."

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """The arguments do not describe a valid starting stack."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def atoi(text: str) -> int:
    """Read a leading signed decimal number, as the C library's atoi does.

    Leading whitespace is skipped, one ``+`` or ``-`` is accepted, and
    reading stops at the first character that is not a digit. A string
    with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _check_numeric(text: str) -> None:
    for position, char in enumerate(text):
        if not (("0" <= char <= "9") or (char == "-" and position == 0)):
            raise ArgumentError(NOT_INTEGER)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Check the arguments and return the numbers they hold, in order.

    Raises :class:`ArgumentError` when there are no arguments, when one
    holds anything but digits and a leading minus, when two are the same
    text, or when a number does not fit in 32 bits.
    """
    if not args:
        raise ArgumentError("")
    numbers = []
    for position, text in enumerate(args):
        _check_numeric(text)
        if text in args[position + 1:]:
            raise ArgumentError(DUPLICATE)
        value = atoi(text)
        if not INT_MIN <= value <= INT_MAX:
            raise ArgumentError(OUT_OF_RANGE)
        numbers.append(value)
    return numbers