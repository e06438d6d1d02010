"""Longest increasing subsequence of the starting stack."""

from __future__ import annotations

from collections.abc import Sequence


def lis_table(values: Sequence[int]) -> list[tuple[int, int | None]]:
    """For each position, the length of the longest increasing run ending
    there and the position before it in that run (None when it starts one).

    Among equally long runs the one through the latest predecessor wins.
    """
    table: list[tuple[int, int | None]] = []
    for value in values:
        length, predecessor = 1, None
        for position, (earlier, (earlier_length, _)) in enumerate(zip(values, table)):
            if earlier < value and earlier_length + 1 >= length:
                length, predecessor = earlier_length + 1, position
        table.append((length, predecessor))
    return table


def longest_increasing_positions(values: Sequence[int]) -> list[int]:
    """Positions of a longest increasing subsequence, in ascending order.

    The run chosen ends at the last position that reaches the greatest
    length.
    """
    table = lis_table(values)
    if not table:
        return []
    best = max(length for length, _ in table)
    current: int | None = max(
        position for position, (length, _) in enumerate(table) if length == best
    )
    positions = []
    while current is not None:
        positions.append(current)
        current = table[current][1]
    positions.reverse()
    return positions