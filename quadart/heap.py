"""Max-heap ordered by each item's ``avg_error``."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Iterable


class MaxHeap:
    """Priority queue that pops the item with the largest ``avg_error`` first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._counter = itertools.count()
        self._entries = [(-item.avg_error, next(self._counter), item) for item in items]
        heapq.heapify(self._entries)

    def push(self, item: Any) -> None:
        heapq.heappush(self._entries, (-item.avg_error, next(self._counter), item))

    def pop(self) -> Any:
        if not self._entries:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._entries)[2]

    def __len__(self) -> int:
        return len(self._entries)