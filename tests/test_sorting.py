import itertools
import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.sorting import (
    above_median,
    push_costs,
    solve,
    sort_five,
    sort_four,
    sort_if_needed,
    sort_large,
    sort_three,
    targets_for_a,
    targets_for_b,
)
from pushswap.stacks import Stacks


def _replay(numbers, operations):
    stacks = Stacks(numbers)
    for name in operations:
        getattr(stacks, name)()
    return stacks


def _assert_sorts(numbers, operations):
    result = _replay(numbers, operations)
    assert list(result.a) == sorted(numbers)
    assert list(result.b) == []


def test_above_median_includes_middle():
    assert above_median(0, 5) is True
    assert above_median(2, 5) is True
    assert above_median(3, 5) is False
    assert above_median(2, 4) is True
    assert above_median(3, 4) is False


def test_targets_for_a_picks_largest_smaller_or_max():
    b = [1, 7, 3]
    targets = targets_for_a([5, 0, 8], b)
    assert b[targets[0]] == 3
    assert b[targets[1]] == max(b)
    assert b[targets[2]] == 7


def test_targets_for_b_picks_smallest_larger_or_min():
    a = [10, 4, 6]
    targets = targets_for_b(a, [5, 11, 3])
    assert a[targets[0]] == 6
    assert a[targets[1]] == min(a)
    assert a[targets[2]] == 4


def test_targets_need_non_empty_other_stack():
    with pytest.raises(ValueError):
        targets_for_a([1, 2], [])
    with pytest.raises(ValueError):
        targets_for_b([], [1, 2])


def test_push_costs_zero_when_both_on_top():
    costs = push_costs([5, 9, 1], [4, 2])
    assert costs[0] == 0
    assert min(costs) == costs[0]


@given(
    st.lists(st.integers(-1000, 1000), unique=True, min_size=2, max_size=20).flatmap(
        lambda values: st.integers(1, len(values) - 1).map(
            lambda cut: (values[:cut], values[cut:])
        )
    )
)
def test_push_costs_bounded(split):
    a, b = split
    costs = push_costs(a, b)
    assert len(costs) == len(a)
    assert all(0 <= cost <= len(a) // 2 + len(b) // 2 + 1 for cost in costs)


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []
    assert solve([]) == []
    assert solve([42]) == []


def test_solve_two_values():
    assert solve([2, 1]) == ["sa"]


def test_solve_three_descending():
    assert solve([3, 2, 1]) == ["ra", "sa"]


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_three_values_at_most_two_moves(perm):
    operations = solve(list(perm))
    assert len(operations) <= 2
    _assert_sorts(list(perm), operations)


@pytest.mark.parametrize("perm", list(itertools.permutations([4, -1, 9, 0])))
def test_four_values(perm):
    operations = solve(list(perm))
    assert len(operations) <= 6
    _assert_sorts(list(perm), operations)


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_five_values(perm):
    operations = solve(list(perm))
    assert len(operations) <= 12
    _assert_sorts(list(perm), operations)


def test_sort_three_needs_two_values():
    with pytest.raises(ValueError):
        sort_three(Stacks([1]))


def test_sort_four_and_five_directly():
    four = Stacks([3, 1, 4, 2])
    sort_four(four)
    assert list(four.a) == [1, 2, 3, 4]
    five = Stacks([5, 3, 1, 4, 2])
    sort_five(five)
    assert list(five.a) == [1, 2, 3, 4, 5]
    assert not five.b


def test_sort_large_six_values():
    stacks = Stacks([6, 2, 5, 1, 4, 3])
    sort_large(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5, 6]
    assert not stacks.b
    _assert_sorts([6, 2, 5, 1, 4, 3], stacks.operations)


def test_sort_if_needed_records_operations():
    stacks = Stacks([2, 1])
    sort_if_needed(stacks)
    assert stacks.operations == solve([2, 1])
    assert list(stacks.a) == [1, 2]


def test_hundred_random_values():
    numbers = random.Random(7).sample(range(-5000, 5000), 100)
    operations = solve(numbers)
    _assert_sorts(numbers, operations)


def test_only_known_operation_names():
    numbers = random.Random(3).sample(range(1000), 30)
    names = {"sa", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
    assert set(solve(numbers)) <= names


@settings(max_examples=150, deadline=None)
@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=40))
def test_solve_always_sorts(numbers):
    _assert_sorts(numbers, solve(numbers))