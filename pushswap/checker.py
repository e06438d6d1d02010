"""Checking that a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import IO, Union

from .args import ArgumentError, parse_arguments
from .stacks import Operation, Stacks

INVALID = "Error:\n invalid element"
OK = "OK"
KO = "KO"

_BY_LINE = {f"{op.value}\n": op for op in Operation}


class InvalidInstruction(ValueError):
    """A line of input is not one of the eleven operations."""

    def __init__(self, line: str) -> None:
        super().__init__(f"invalid instruction: {line!r}")
        self.line = line


def parse_instruction(line: str) -> Operation:
    """Return the operation a line names.

    The line must be the operation's name followed by exactly one
    newline; anything else raises :class:`InvalidInstruction`.
    """
    try:
        return _BY_LINE[line]
    except KeyError:
        raise InvalidInstruction(line) from None


def read_lines(stream: IO[str] | IO[bytes]) -> Iterator[str]:
    """Yield the lines of a stream, each with its newline.

    The last line keeps no newline when the stream does not end with
    one. Bytes are decoded without touching line endings.
    """
    for line in stream:
        if isinstance(line, bytes):
            yield line.decode("utf-8", errors="surrogateescape")
        else:
            yield line


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the operations named by ``lines`` to stack ``a`` holding ``values``.

    Operations on stacks that are too short are left undone. Returns
    whether ``a`` ends up sorted with ``b`` empty; raises
    :class:`InvalidInstruction` at the first line that is not an operation.
    """
    stacks = Stacks(values, strict=False)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks.is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and report OK or KO.

    The verdict is written to standard error and the status is 1
    whatever the verdict, as errors are.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except ArgumentError as error:
        sys.stderr.write(error.message)
        return 1
    stream: Union[IO[str], IO[bytes]] = getattr(sys.stdin, "buffer", sys.stdin)
    try:
        sorted_ = run_instructions(numbers, read_lines(stream))
    except InvalidInstruction:
        sys.stderr.write(INVALID)
        return 1
    sys.stderr.write(OK if sorted_ else KO)
    return 1


if __name__ == "__main__":
    sys.exit(main())