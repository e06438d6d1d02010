# pushswap

Sort a list of integers using two stacks, `a` and `b`, and only these
operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two items of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

The solver keeps a longest increasing subsequence of the input on stack `a`,
pushes everything else to `b`, then brings the items of `b` back one at a
time, always choosing the one that is cheapest to put in place, and finally
rotates `a` so that its smallest value is on top. Stacks of three items, and
stacks of five items whose longest increasing run is at most two long, are
handled by a few fixed moves instead.

## Installation

```
pip install .
```

## Commands

Print an instruction list, one operation per line, that sorts the numbers:

```
push-swap 3 2 5 1 4
```

The exit status is 0. When the numbers are already in ascending order
nothing is printed, and when there are exactly two numbers only `sa` is
printed; in both of these cases the exit status is 1.

Check an instruction list read from standard input:

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

Each line must be exactly one operation name followed by a newline. The
checker writes `OK` when stack `a` ends up in ascending order with stack `b`
empty, and `KO` otherwise. A line that is not an operation is reported as
`Error:` followed by ` invalid element`. An operation on a stack holding too
few items is ignored. The verdict and any error go to standard error, and
the exit status is 1 in every case.

### Arguments

Both commands take the numbers as separate arguments. Each must consist of
digits with an optional leading `-`, fit in the 32-bit signed range, and
not appear twice as the same text. Otherwise an error message is written to
standard error and the exit status is 1; with no arguments at all the
message is empty.

## Library use

```python
from pushswap.solver import solve
from pushswap.checker import run_instructions

moves = solve([3, 2, 5, 1, 4])
assert run_instructions([3, 2, 5, 1, 4], [f"{m}\n" for m in moves])
```

- `pushswap.stacks.Stacks` holds the two stacks and applies single
  `Operation` values with `apply`; `is_sorted` tells whether the puzzle is
  solved. In strict mode (the default) an operation on a stack that is too
  short raises `IndexError`. Every operation carried out is kept in
  `history`.
- `pushswap.args.parse_arguments` validates command-line values and raises
  `ArgumentError`; `pushswap.args.atoi` reads a leading signed number.
- `pushswap.lis.lis_table` and `pushswap.lis.longest_increasing_positions`
  find the subsequence the solver keeps in place.
- `pushswap.solver.solve` returns the list of operations, or raises
  `SolveAborted` (carrying the operations produced so far) for already
  sorted input and for exactly two items. `move_costs` and
  `partner_position` expose the cost estimate the solver uses.
- `pushswap.checker.parse_instruction`, `read_lines` and `run_instructions`
  check an instruction list; an unknown line raises `InvalidInstruction`.

## Running the tests

```
pip install .[test]
pytest
```