"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """One instruction of the puzzle, named as it is written out."""

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


# Which stacks an operation touches and how many items each must hold.
_SWAPS = {
    Operation.SA: ("a",),
    Operation.SB: ("b",),
    Operation.SS: ("a", "b"),
}
_ROTATES = {
    Operation.RA: ("a",),
    Operation.RB: ("b",),
    Operation.RR: ("a", "b"),
}
_REVERSE_ROTATES = {
    Operation.RRA: ("a",),
    Operation.RRB: ("b",),
    Operation.RRR: ("a", "b"),
}
_PUSHES = {
    Operation.PA: ("b", "a"),
    Operation.PB: ("a", "b"),
}


class Stacks:
    """Stacks ``a`` and ``b``; the top of each is at index 0.

    In strict mode an operation that needs more items than a stack holds
    raises :class:`IndexError`. Otherwise the stack that is too short is
    left alone. A push from an empty stack does nothing in either mode.
    Every operation that is carried out is recorded in :attr:`history`.
    """

    def __init__(self, values: Iterable[int], strict: bool = True) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.strict = strict
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def _stack(self, name: str) -> deque[int]:
        return self.a if name == "a" else self.b

    def _usable(self, names: tuple[str, ...], minimum: int, operation: Operation) -> list[deque[int]]:
        stacks = [self._stack(name) for name in names]
        if self.strict:
            for name, stack in zip(names, stacks):
                if len(stack) < minimum:
                    raise IndexError(
                        f"{operation.value}: stack {name} holds {len(stack)} item(s), "
                        f"needs at least {minimum}"
                    )
        return [stack for stack in stacks if len(stack) >= minimum]

    def apply(self, operation: Operation | str) -> bool:
        """Carry out one operation; return whether it was carried out."""
        op = Operation(operation)
        if op in _PUSHES:
            source_name, target_name = _PUSHES[op]
            source = self._stack(source_name)
            if not source:
                return False
            self._stack(target_name).appendleft(source.popleft())
        elif op in _SWAPS:
            for stack in self._usable(_SWAPS[op], 2, op):
                stack[0], stack[1] = stack[1], stack[0]
        elif op in _ROTATES:
            for stack in self._usable(_ROTATES[op], 1, op):
                stack.rotate(-1)
        else:
            for stack in self._usable(_REVERSE_ROTATES[op], 2, op):
                stack.rotate(1)
        self.history.append(op)
        return True

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        return all(first <= second for first, second in zip(self.a, list(self.a)[1:]))