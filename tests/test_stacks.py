import pytest

from pushswap.stacks import Operation, Stacks


def test_operation_names_match_instructions():
    assert [str(op) for op in Operation] == [
        "sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr",
    ]
    assert Operation("rrr") is Operation.RRR


def test_swap_top_two_of_a():
    stacks = Stacks([3, 1, 2])
    assert stacks.apply(Operation.SA) is True
    assert list(stacks.a) == [1, 3, 2]
    assert stacks.history == [Operation.SA]


def test_swap_twice_is_identity():
    stacks = Stacks([5, 9, 7, 1])
    stacks.apply("sa")
    stacks.apply("sa")
    assert list(stacks.a) == [5, 9, 7, 1]


def test_push_moves_top_between_stacks():
    stacks = Stacks([4, 5, 6])
    stacks.apply("pb")
    stacks.apply("pb")
    assert list(stacks.a) == [6]
    assert list(stacks.b) == [5, 4]
    stacks.apply("pa")
    assert list(stacks.a) == [5, 6]
    assert list(stacks.b) == [4]


def test_push_from_empty_stack_is_not_recorded():
    stacks = Stacks([1, 2])
    assert stacks.apply("pa") is False
    assert stacks.history == []
    assert list(stacks.a) == [1, 2]


def test_rotate_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("ra")
    assert list(stacks.a) == [2, 3, 4, 1]


def test_reverse_rotate_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3, 4])
    stacks.apply("rra")
    assert list(stacks.a) == [4, 1, 2, 3]


@pytest.mark.parametrize("values", [[1, 2], [8, 3, 5], [10, -4, 7, 0, 2]])
def test_rotate_and_reverse_rotate_are_inverse(values):
    stacks = Stacks(values)
    stacks.apply("ra")
    stacks.apply("rra")
    assert list(stacks.a) == values


def test_double_operations_touch_both_stacks():
    stacks = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.apply("pb")
    assert list(stacks.b) == [3, 2, 1]
    stacks.apply("ss")
    assert list(stacks.a) == [5, 4, 6]
    assert list(stacks.b) == [2, 3, 1]
    stacks.apply("rr")
    assert list(stacks.a) == [4, 6, 5]
    assert list(stacks.b) == [3, 1, 2]
    stacks.apply("rrr")
    assert list(stacks.a) == [5, 4, 6]
    assert list(stacks.b) == [2, 3, 1]


def test_rotate_single_item_keeps_it():
    stacks = Stacks([42])
    assert stacks.apply("ra") is True
    assert list(stacks.a) == [42]


@pytest.mark.parametrize("operation", ["sa", "rra", "sb", "rrb", "rb", "ss", "rr", "rrr"])
def test_strict_mode_rejects_short_stacks(operation):
    stacks = Stacks([7], strict=True)
    with pytest.raises(IndexError):
        stacks.apply(operation)
    assert list(stacks.a) == [7]
    assert stacks.history == []


def test_lenient_mode_skips_short_stacks():
    stacks = Stacks([7], strict=False)
    for operation in ["sa", "sb", "ss", "rra", "rrb", "rrr", "rb"]:
        assert stacks.apply(operation) is True
    assert list(stacks.a) == [7]
    assert list(stacks.b) == []


def test_lenient_double_swap_acts_on_long_stack_only():
    stacks = Stacks([1, 2, 3], strict=False)
    stacks.apply("pb")
    stacks.apply("ss")
    assert list(stacks.a) == [3, 2]
    assert list(stacks.b) == [1]


def test_unknown_operation_raises():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_is_sorted_requires_ascending_a_and_empty_b():
    assert Stacks([1, 2, 3]).is_sorted() is True
    assert Stacks([2, 1, 3]).is_sorted() is False
    stacks = Stacks([1, 2, 3])
    stacks.apply("pb")
    assert stacks.is_sorted() is False
    stacks.apply("pa")
    assert stacks.is_sorted() is True


def test_sorting_sequence_sorts():
    stacks = Stacks([2, 1, 3])
    stacks.apply("sa")
    assert stacks.is_sorted() is True
    assert stacks.history == [Operation.SA]


def test_history_records_in_order():
    stacks = Stacks([3, 2, 1])
    for operation in ["pb", "ra", "pa", "rra"]:
        stacks.apply(operation)
    assert [str(op) for op in stacks.history] == ["pb", "ra", "pa", "rra"]
    assert sorted(stacks.a) == [1, 2, 3]
    assert len(stacks.a) == 3