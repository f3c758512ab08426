"""Deque, queue, stack and comparator-driven heap containers."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Container(Generic[T]):
    """Shared storage and emptiness checks for the containers below."""

    _kind = "container"

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: Any = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def _require(self, action: str) -> None:
        if not self._items:
            raise IndexError(f"attempt to {action} empty {self._kind}")


class _Sequence(_Container[T]):
    """A container whose items can be iterated in storage order."""

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class Deque(_Sequence[T]):
    """A double-ended queue that raises IndexError when empty."""

    _kind = "deque"

    def push_right(self, value: T) -> None:
        self._items.append(value)

    def push_left(self, value: T) -> None:
        self._items.appendleft(value)

    def pop_right(self) -> T:
        self._require("pop from")
        return self._items.pop()

    def pop_left(self) -> T:
        self._require("pop from")
        return self._items.popleft()

    def peek_right(self) -> T:
        self._require("peek at")
        return self._items[-1]

    def peek_left(self) -> T:
        self._require("peek at")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


class Queue(_Sequence[T]):
    """A first-in first-out queue that raises IndexError when empty."""

    _kind = "queue"

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        self._require("pop from")
        return self._items.popleft()

    def peek(self) -> T:
        self._require("peek at")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


class Stack(_Sequence[T]):
    """A last-in first-out stack that raises IndexError when empty."""

    _kind = "stack"

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        self._require("pop from")
        return self._items.pop()

    def peek(self) -> T:
        self._require("peek at")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()


class Heap(_Container[T]):
    """A priority heap ordered by cmp: the item that compares greatest is on top."""

    _kind = "heap"

    def __init__(self, cmp: Callable[[T, T], int], contents: Iterable[T] = ()) -> None:
        self._key = cmp_to_key(lambda a, b: cmp(b, a))
        self._items = [self._key(item) for item in contents]
        heapq.heapify(self._items)

    def push(self, value: T) -> None:
        heapq.heappush(self._items, self._key(value))

    def pop(self) -> T:
        self._require("pop from")
        return heapq.heappop(self._items).obj

    def peek(self) -> T:
        self._require("peek at")
        return self._items[0].obj


def max_heap_int(contents: Iterable[int] = ()) -> Heap[int]:
    """A heap of integers with the largest on top."""
    return Heap(lambda a, b: a - b, contents)


def min_heap_int(contents: Iterable[int] = ()) -> Heap[int]:
    """A heap of integers with the smallest on top."""
    return Heap(lambda a, b: b - a, contents)