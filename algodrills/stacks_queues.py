"""Stack and queue structures, queue reordering and postfix evaluation."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

__all__ = [
    "MinStack",
    "ArrayQueue",
    "StackQueue",
    "QueueStack",
    "reverse_first_k",
    "eval_rpn",
]

EMPTY = -1
"""Value returned by the queue-like structures when popped while empty."""


class MinStack:
    """A stack that can also report its smallest element."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Put val on top of the stack."""
        self._items.append(val)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._items.pop()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element currently on the stack."""
        if not self._items:
            raise IndexError("get_min from empty stack")
        return min(self._items)


class ArrayQueue:
    """A FIFO queue over a fixed-size store whose slots are never reused."""

    CAPACITY = 100_005

    def __init__(self) -> None:
        self._items: list[int] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._items) - self._front

    def push(self, x: int) -> None:
        """Append x at the rear; the store holds CAPACITY pushes in total."""
        if len(self._items) >= self.CAPACITY:
            raise OverflowError(f"queue store of {self.CAPACITY} slots is exhausted")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the front element, or -1 if the queue is empty."""
        if self._front == len(self._items):
            return EMPTY
        value = self._items[self._front]
        self._front += 1
        return value


class StackQueue:
    """Two stacks that pour into each other on every push."""

    def __init__(self) -> None:
        self._first: list[int] = []
        self._second: list[int] = []

    def push(self, value: int) -> None:
        """Push value onto the empty stack, then pour the other stack onto it."""
        if not self._first:
            self._first.append(value)
            while self._second:
                self._first.append(self._second.pop())
        elif not self._second:
            self._second.append(value)
            while self._first:
                self._second.append(self._first.pop())

    def pop(self) -> int:
        """Remove and return the top of whichever stack holds elements, or -1."""
        if self._first:
            return self._first.pop()
        if self._second:
            return self._second.pop()
        return EMPTY

    def reset(self) -> None:
        """Drop every stored element."""
        self._first.clear()
        self._second.clear()


class QueueStack:
    """A LIFO stack kept in two queues, the newest element always at a front."""

    def __init__(self) -> None:
        self._first: deque[int] = deque()
        self._second: deque[int] = deque()

    def push(self, x: int) -> None:
        """Push x onto the stack."""
        if not self._first:
            self._first.append(x)
            while self._second:
                self._first.append(self._second.popleft())
        elif not self._second:
            self._second.append(x)
            while self._first:
                self._second.append(self._first.popleft())

    def pop(self) -> int:
        """Remove and return the most recently pushed element, or -1 if empty."""
        if self._first:
            return self._first.popleft()
        if self._second:
            return self._second.popleft()
        return EMPTY


def reverse_first_k(queue: Iterable[int], k: int) -> deque[int]:
    """Return a queue with the first k elements of queue in reverse order."""
    items = list(queue)
    if not 0 <= k <= len(items):
        raise ValueError(f"k must lie between 0 and {len(items)}, got {k}")
    items[:k] = items[:k][::-1]
    return deque(items)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate integer postfix notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(operator(a, b))
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]