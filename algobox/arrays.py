"""Algorithms over integer sequences: searching, counting, sorting, games."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from fractions import Fraction
from itertools import pairwise
from typing import Iterable, Sequence


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of values that adds up to zero."""
    ordered = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, len(ordered) - 1
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total == 0:
                triplets.append([first, ordered[lo], ordered[hi]])
                lo += 1
                hi -= 1
                while lo < hi and ordered[lo] == ordered[lo - 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi + 1]:
                    hi -= 1
            elif total > 0:
                hi -= 1
            else:
                lo += 1
    return triplets


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of target in sorted nums, or [-1, -1]."""
    start = bisect_left(nums, target)
    if start < len(nums) and nums[start] == target:
        return [start, bisect_left(nums, target + 1) - 1]
    return [-1, -1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of target in sorted nums, or where it would be inserted."""
    return bisect_left(nums, target)


def majority_element(nums: Iterable[int]) -> list[int]:
    """Return, in ascending order, the values occurring more than n // 3 times."""
    counts = Counter(nums)
    threshold = sum(counts.values()) // 3
    return [value for value, count in sorted(counts.items()) if count > threshold]


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value of nums, whose values are all valid indices.

    Uses cycle detection on the index graph i -> nums[i], starting at 0.
    """
    size = len(nums)
    if not size:
        raise ValueError("nums must not be empty")
    if any(not 0 <= value < size for value in nums):
        raise ValueError("every value must be a valid index into nums")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Count the contiguous runs of nums whose values add up to k."""
    seen: Counter[int] = Counter({0: 1})
    running = 0
    matches = 0
    for value in nums:
        running += value
        matches += seen[running - k]
        seen[running] += 1
    return matches


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Return the narrowest [low, high] holding a value from each sorted list.

    Among ranges of equal width the first one met, lowest start first, wins.
    """
    if not nums or any(not values for values in nums):
        raise ValueError("need at least one list, and no empty lists")
    heap = [(values[0], index, 0) for index, values in enumerate(nums)]
    heapq.heapify(heap)
    high = max(entry[0] for entry in heap)
    best: list[int] | None = None
    while True:
        low, index, position = heapq.heappop(heap)
        if best is None or high - low < best[1] - best[0]:
            best = [low, high]
        position += 1
        if position == len(nums[index]):
            return best
        value = nums[index][position]
        heapq.heappush(heap, (value, index, position))
        high = max(high, value)


def is_monotonic(values: Iterable[int]) -> bool:
    """Tell whether values never decrease or never increase."""
    increasing = decreasing = True
    for a, b in pairwise(values):
        if a > b:
            increasing = False
        if a < b:
            decreasing = False
        if not (increasing or decreasing):
            return False
    return True


def sort_array_by_parity(values: Iterable[int]) -> list[int]:
    """Put even values first, in their order, then odd values in reverse order."""
    items = list(values)
    evens = [value for value in items if value % 2 == 0]
    odds = [value for value in items if value % 2]
    return evens + odds[::-1]


def sort_array(nums: Iterable[int]) -> list[int]:
    """Return nums in ascending order, by a stable merge sort."""
    items = list(nums)
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    return list(heapq.merge(sort_array(items[:middle]), sort_array(items[middle:])))


def sort_by_bits(values: Iterable[int]) -> list[int]:
    """Sort non-negative values by their count of set bits, then by value."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must not be negative")
    return sorted(items, key=lambda value: (value.bit_count(), value))


def build_array(target: Sequence[int], n: int) -> list[str]:
    """Return the Push/Pop operations over 1..n that leave target on a stack."""
    operations: list[str] = []
    wanted = iter(target)
    next_wanted = next(wanted, None)
    for number in range(1, n + 1):
        if next_wanted is None:
            break
        operations.append("Push")
        if number == next_wanted:
            next_wanted = next(wanted, None)
        else:
            operations.append("Pop")
    return operations


def max_product(nums: Iterable[int]) -> int:
    """Return (a - 1) * (b - 1) for the two largest values a and b."""
    largest = heapq.nlargest(2, nums)
    if len(largest) < 2:
        raise ValueError("need at least two values")
    first, second = largest
    return (first - 1) * (second - 1)


def get_last_moment(n: int, left: Iterable[int], right: Iterable[int]) -> int:
    """Return when the last ant falls off a plank of length n (-1 if no ants)."""
    return max(
        max(left, default=-1),
        max((n - position for position in right), default=-1),
    )


def num_identical_pairs(nums: Iterable[int]) -> int:
    """Count index pairs i < j with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def get_winner(values: Sequence[int], k: int) -> int:
    """Return the value that first wins k rounds in a row of the array game."""
    if not values:
        raise ValueError("values must not be empty")
    if k < 1:
        raise ValueError("k must be at least 1")
    if k >= len(values):
        return max(values)
    current = values[0]
    wins = 0
    for challenger in values[1:]:
        if current > challenger:
            wins += 1
        else:
            current = challenger
            wins = 1
        if wins == k:
            return current
    return current


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Return the sum of the XOR totals of every subset of nums."""
    if not nums:
        return 0
    combined = 0
    for value in nums:
        combined |= value
    return combined << (len(nums) - 1)


def eliminate_maximum(dist: Sequence[int], speed: Sequence[int]) -> int:
    """Count the monsters shot, one a minute, before any reaches the city."""
    if len(dist) != len(speed):
        raise ValueError("dist and speed must have the same length")
    arrivals = sorted(Fraction(d, s) for d, s in zip(dist, speed))
    for minute, arrival in enumerate(arrivals):
        if minute and arrival <= minute:
            return minute
    return len(arrivals)


def find_array(pref: Sequence[int]) -> list[int]:
    """Return the array whose running XOR is pref."""
    if not pref:
        return []
    return [pref[0], *(a ^ b for a, b in pairwise(pref))]