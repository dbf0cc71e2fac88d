"""Binary-heap min priority queue."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, TypeVar

T = TypeVar("T")


class MinPriorityQueue(Generic[T]):
    """Items with equal priority pop in insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop_min(self) -> tuple[T, float]:
        if not self._heap:
            raise IndexError("pop_min from an empty priority queue")
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
