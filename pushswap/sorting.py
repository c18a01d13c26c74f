"""Choosing the operations that sort stack a."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

from pushswap.stacks import Stacks, is_sorted


def above_median(index: int, length: int) -> bool:
    """True when position index lies in the upper half of a stack of length."""
    return index <= length // 2


def _distance(index: int, length: int) -> int:
    return index if above_median(index, length) else length - index


def _index_of_max(values: Sequence[int]) -> int:
    return max(range(len(values)), key=values.__getitem__)


def _index_of_min(values: Sequence[int]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def targets_for_a(stack_a: Iterable[int], stack_b: Iterable[int]) -> list[int]:
    """For each value of a, the index in b of the largest smaller value.

    When b holds nothing smaller, the index of the largest value of b.
    """
    b = list(stack_b)
    if not b:
        raise ValueError("stack b is empty")
    fallback = _index_of_max(b)
    targets = []
    for value in stack_a:
        smaller = [i for i, other in enumerate(b) if other < value]
        targets.append(max(smaller, key=b.__getitem__) if smaller else fallback)
    return targets


def targets_for_b(stack_a: Iterable[int], stack_b: Iterable[int]) -> list[int]:
    """For each value of b, the index in a of the smallest larger value.

    When a holds nothing larger, the index of the smallest value of a.
    """
    a = list(stack_a)
    if not a:
        raise ValueError("stack a is empty")
    fallback = _index_of_min(a)
    targets = []
    for value in stack_b:
        larger = [i for i, other in enumerate(a) if other > value]
        targets.append(min(larger, key=a.__getitem__) if larger else fallback)
    return targets


def push_costs(stack_a: Iterable[int], stack_b: Iterable[int]) -> list[int]:
    """Rotations needed to bring each value of a and its target in b to the top."""
    a = list(stack_a)
    b = list(stack_b)
    targets = targets_for_a(a, b)
    return [
        _distance(index, len(a)) + _distance(target, len(b))
        for index, target in enumerate(targets)
    ]


def _bring_to_top(
    stack: deque[int],
    value: int,
    upward: bool,
    rotate: Callable[[], None],
    reverse_rotate: Callable[[], None],
) -> None:
    step = rotate if upward else reverse_rotate
    while stack[0] != value:
        step()


def _push_cheapest_a_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    targets = targets_for_a(a, b)
    costs = push_costs(a, b)
    index = costs.index(min(costs))
    node, target = a[index], b[targets[index]]
    node_up = above_median(index, len(a))
    target_up = above_median(targets[index], len(b))
    if node_up == target_up:
        step = stacks.rr if node_up else stacks.rrr
        while b[0] != target and a[0] != node:
            step()
        node_up = above_median(a.index(node), len(a))
        target_up = above_median(b.index(target), len(b))
    _bring_to_top(a, node, node_up, stacks.ra, stacks.rra)
    _bring_to_top(b, target, target_up, stacks.rb, stacks.rrb)
    stacks.pb()


def _push_min_to_b(stacks: Stacks) -> None:
    a = stacks.a
    index = _index_of_min(a)
    _bring_to_top(a, a[index], above_median(index, len(a)), stacks.ra, stacks.rra)
    stacks.pb()


def _rotate_min_to_top(stacks: Stacks) -> None:
    a = stacks.a
    index = _index_of_min(a)
    _bring_to_top(a, a[index], above_median(index, len(a)), stacks.ra, stacks.rra)


def sort_three(stacks: Stacks) -> None:
    """Sort three values on a with at most two operations."""
    a = stacks.a
    if len(a) < 2:
        raise ValueError("sort_three needs at least two values on stack a")
    largest = _index_of_max(a)
    if largest == 0:
        stacks.ra()
    elif largest == 1:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_four(stacks: Stacks) -> None:
    """Sort four values on a by parking the smallest on b."""
    _push_min_to_b(stacks)
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five values on a by parking the two smallest on b."""
    _push_min_to_b(stacks)
    _push_min_to_b(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def sort_large(stacks: Stacks) -> None:
    """Sort any number of values by cheapest-move insertion through b."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while remaining > 3 and not is_sorted(stacks.a):
        remaining -= 1
        _push_cheapest_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        target = targets_for_b(stacks.a, [stacks.b[0]])[0]
        _bring_to_top(
            stacks.a,
            stacks.a[target],
            above_median(target, len(stacks.a)),
            stacks.ra,
            stacks.rra,
        )
        stacks.pa()
    _rotate_min_to_top(stacks)


def sort_if_needed(stacks: Stacks) -> None:
    """Sort stack a with the strategy suited to its size, unless already sorted."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size == 4:
        sort_four(stacks)
    elif size == 5:
        sort_five(stacks)
    else:
        sort_large(stacks)


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the operations that sort numbers on stack a."""
    stacks = Stacks(numbers)
    sort_if_needed(stacks)
    return stacks.operations