"""Sorting stack ``a`` with the fewest moves the strategy can find.

The strategy keeps a longest increasing subsequence in ``a``, pushes
everything else to ``b``, and then brings the items of ``b`` back one
at a time, each time choosing the item that is cheapest to put in its
place. Short stacks of three and of five items are handled apart.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .args import ArgumentError, parse_arguments
from .lis import longest_increasing_positions
from .stacks import Operation, Stacks


class SolveAborted(Exception):
    """The solver stopped early, as the command does with a failing status.

    This happens when the input needs no sorting at all and when it holds
    just two items. :attr:`operations` holds what was produced before
    stopping.
    """

    def __init__(self, operations: Iterable[Operation]) -> None:
        self.operations = list(operations)
        super().__init__(" ".join(op.value for op in self.operations))


def partner_position(value: int, stack: Sequence[int]) -> int:
    """Position in ``stack`` of the item ``value`` should be pushed on top of.

    That is the smallest item greater than ``value``; when ``value`` is
    greater than every item, it is the smallest item. Ties go to the
    first occurrence. Raises :class:`ValueError` for an empty stack.
    """
    biggest = max(stack)
    greater = [item for item in stack if item > value]
    if greater:
        return stack.index(min(greater))
    if value > biggest:
        return stack.index(min(stack))
    return stack.index(biggest)


def _cost(position: int, partner: int, len_a: int, len_b: int) -> int:
    half_a, half_b = len_a // 2, len_b // 2
    if position <= half_b and partner <= half_a:
        return max(position, partner) + 1
    if position > half_b and partner > half_a:
        return max(len_b - position, len_a - partner) + 1
    if position <= half_b and partner >= half_a:
        return position + len_a - partner + 1
    return partner + len_b - position + 1


def move_costs(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Number of moves needed to push each item of ``b`` into its place in ``a``."""
    len_a, len_b = len(a), len(b)
    return [
        _cost(position, partner_position(value, a), len_a, len_b)
        for position, value in enumerate(b)
    ]


class _Solver:
    """Works on stacks of item ids so that equal values stay distinct."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        self.stacks = Stacks(range(len(self.values)))

    def _a_values(self) -> list[int]:
        return [self.values[item] for item in self.stacks.a]

    def _b_values(self) -> list[int]:
        return [self.values[item] for item in self.stacks.b]

    def _abort(self) -> SolveAborted:
        return SolveAborted(self.stacks.history)

    def _until(self, operation: Operation, name: str, target: int) -> None:
        stack = self.stacks.a if name == "a" else self.stacks.b
        while stack[0] != target:
            self.stacks.apply(operation)

    def _sort_three(self, count: int) -> None:
        if count == 2:
            self.stacks.apply(Operation.SA)
            raise self._abort()
        first, second, third = self._a_values()[:3]
        if first > second and first > third and second < third:
            self.stacks.apply(Operation.RA)
        elif first < second and first > third and second > third:
            self.stacks.apply(Operation.RRA)
        else:
            self.stacks.apply(Operation.SA)

    def push_to_b(self) -> None:
        count = len(self.values)
        keep = longest_increasing_positions(self.values)
        if len(keep) == count:
            raise self._abort()
        if count <= 3:
            self._sort_three(count)
            return
        if count == 5 and len(keep) <= 2:
            self.stacks.apply(Operation.PB)
            self.stacks.apply(Operation.PB)
            self._sort_three(count)
            return
        kept = iter(keep)
        target = next(kept, None)
        for _ in range(count):
            if target is not None and self.stacks.a[0] == target:
                self.stacks.apply(Operation.RA)
                target = next(kept, None)
            elif self.stacks.a:
                self.stacks.apply(Operation.PB)
        a_values = self._a_values()
        if len(a_values) > 1 and a_values[0] > a_values[1]:
            self.stacks.apply(Operation.PB)

    def push_to_a(self) -> None:
        while self.stacks.b:
            a_values, b_values = self._a_values(), self._b_values()
            len_a, len_b = len(a_values), len(b_values)
            costs = move_costs(a_values, b_values)
            least = costs.index(min(costs))
            partner = partner_position(b_values[least], a_values)
            least_id = self.stacks.b[least]
            partner_id = self.stacks.a[partner]
            half_a, half_b = len_a // 2, len_b // 2
            if least <= half_b and partner <= half_a:
                if least >= partner:
                    self._until(Operation.RR, "a", partner_id)
                    self._until(Operation.RB, "b", least_id)
                else:
                    self._until(Operation.RR, "b", least_id)
                    self._until(Operation.RA, "a", partner_id)
            elif least > half_b and partner > half_a:
                if len_b - least >= len_a - partner:
                    self._until(Operation.RRR, "a", partner_id)
                    self._until(Operation.RRB, "b", least_id)
                else:
                    self._until(Operation.RRR, "b", least_id)
                    self._until(Operation.RRA, "a", partner_id)
            elif least <= half_b and partner >= half_a:
                self._until(Operation.RB, "b", least_id)
                self._until(Operation.RRA, "a", partner_id)
            elif least >= half_b and partner <= half_a:
                self._until(Operation.RRB, "b", least_id)
                self._until(Operation.RA, "a", partner_id)
            self.stacks.apply(Operation.PA)

    def smallest_to_top(self) -> None:
        a_values = self._a_values()
        smallest = a_values.index(min(a_values))
        target = self.stacks.a[smallest]
        if smallest <= len(a_values) // 2:
            self._until(Operation.RA, "a", target)
        else:
            self._until(Operation.RRA, "a", target)


def solve(values: Iterable[int]) -> list[Operation]:
    """Operations that sort ``values`` into ascending order on stack ``a``.

    Raises :class:`SolveAborted` when there is nothing to sort or when
    there are exactly two items.
    """
    solver = _Solver(list(values))
    solver.push_to_b()
    solver.push_to_a()
    solver.smallest_to_top()
    return list(solver.stacks.history)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = parse_arguments(args)
    except ArgumentError as error:
        sys.stderr.write(error.message)
        return 1
    try:
        operations = solve(numbers)
        status = 0
    except SolveAborted as aborted:
        operations = aborted.operations
        status = 1
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return status


if __name__ == "__main__":
    sys.exit(main())