"""The two stacks and the operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class Stacks:
    """Stacks a and b, with the top of each at index 0.

    Every operation is recorded by name in ``operations``, whether or not
    it changed anything.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    @staticmethod
    def _push(to_stack: deque[int], from_stack: deque[int]) -> None:
        if from_stack:
            to_stack.appendleft(from_stack.popleft())

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> None:
        if len(stack) >= 2:
            stack.rotate(steps)

    def sa(self) -> None:
        """Swap the top two elements of a."""
        self._swap(self.a)
        self.operations.append("sa")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.a, self.b)
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.b, self.a)
        self.operations.append("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a, -1)
        self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b, -1)
        self.operations.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards at once."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rotate(self.a, 1)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rotate(self.b, 1)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards at once."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self.operations.append("rrr")