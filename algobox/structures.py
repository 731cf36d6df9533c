"""Small container types: tries, a running median, a map, a deque, seats."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

WILDCARD = "."


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_end: bool = False


def _insert(root: _Node, word: str) -> None:
    node = root
    for char in word:
        node = node.children.setdefault(char, _Node())
    node.is_end = True


def _walk(root: _Node, text: str) -> Optional[_Node]:
    node = root
    for char in text:
        node = node.children.get(char)
        if node is None:
            return None
    return node


class Trie:
    """A prefix tree of words."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add word to the trie."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Tell whether word was inserted."""
        node = _walk(self._root, word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with prefix."""
        return _walk(self._root, prefix) is not None


class WordDictionary:
    """A word set whose search pattern may use '.' for any one letter."""

    def __init__(self) -> None:
        self._root = _Node()

    def add_word(self, word: str) -> None:
        """Add word to the dictionary."""
        _insert(self._root, word)

    def search(self, word: str) -> bool:
        """Tell whether some added word matches the pattern."""

        def match(node: _Node, index: int) -> bool:
            if index == len(word):
                return node.is_end
            char = word[index]
            if char == WILDCARD:
                return any(match(child, index + 1) for child in node.children.values())
            child = node.children.get(char)
            return child is not None and match(child, index + 1)

        return match(self._root, 0)


class MedianFinder:
    """Keeps the median of a growing stream of numbers."""

    def __init__(self) -> None:
        self._low: list[int] = []  # max-heap of the smaller half, negated
        self._high: list[int] = []  # min-heap of the larger half
        self._median: Optional[float] = None

    def _both_tops(self) -> float:
        return (-self._low[0] + self._high[0]) / 2

    def add_num(self, num: int) -> None:
        """Add a number to the stream."""
        low, high = len(self._low), len(self._high)
        median = self._median
        if low == high:
            if median is None or num > median:
                heapq.heappush(self._high, num)
                self._median = self._high[0]
            else:
                heapq.heappush(self._low, -num)
                self._median = -self._low[0]
        elif low > high:
            if num > median:
                heapq.heappush(self._high, num)
            else:
                heapq.heappush(self._high, -heapq.heappushpop(self._low, -num))
            self._median = self._both_tops()
        else:
            if num > median:
                heapq.heappush(self._low, -heapq.heappushpop(self._high, num))
            else:
                heapq.heappush(self._low, -num)
            self._median = self._both_tops()

    def find_median(self) -> float:
        """Return the median of the numbers added so far."""
        if self._median is None:
            raise ValueError("no numbers have been added")
        return float(self._median)


class HashMap:
    """A mapping from integer keys to integer values."""

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def put(self, key: int, value: int) -> None:
        """Set the value for key, replacing any earlier one."""
        self._data[key] = value

    def get(self, key: int) -> int:
        """Return the value for key; raise KeyError if it is absent."""
        return self._data[key]

    def remove(self, key: int) -> None:
        """Drop key if present."""
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class CircularDeque:
    """A double-ended queue holding at most a fixed number of items."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = k
        self._items: deque[int] = deque()

    def insert_front(self, value: int) -> None:
        """Add value at the front; raise IndexError when full."""
        if self.is_full():
            raise IndexError("deque is full")
        self._items.appendleft(value)

    def insert_last(self, value: int) -> None:
        """Add value at the back; raise IndexError when full."""
        if self.is_full():
            raise IndexError("deque is full")
        self._items.append(value)

    def delete_front(self) -> None:
        """Drop the front item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        self._items.popleft()

    def delete_last(self) -> None:
        """Drop the back item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        self._items.pop()

    def get_front(self) -> int:
        """Return the front item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[0]

    def get_rear(self) -> int:
        """Return the back item; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class SeatManager:
    """Hands out the lowest-numbered free seat among seats 1..n."""

    def __init__(self, n: int) -> None:
        self._size = n
        self._next = 1
        self._freed: list[int] = []
        self._freed_set: set[int] = set()

    def reserve(self) -> int:
        """Reserve and return the smallest free seat number."""
        if self._freed:
            seat = heapq.heappop(self._freed)
            self._freed_set.discard(seat)
            return seat
        if self._next > self._size:
            raise IndexError("no seats left")
        seat = self._next
        self._next += 1
        return seat

    def unreserve(self, seat_number: int) -> None:
        """Free a reserved seat; raise ValueError if it is not reserved."""
        if not 1 <= seat_number < self._next or seat_number in self._freed_set:
            raise ValueError(f"seat {seat_number} is not reserved")
        heapq.heappush(self._freed, seat_number)
        self._freed_set.add(seat_number)