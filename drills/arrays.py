"""Array and matrix puzzles."""

from __future__ import annotations

import math
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale, or 0."""
    lowest = math.inf
    profit = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of nums."""
    return list(accumulate(nums))


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two entries of a sorted list adding up to target.

    Returns an empty list if there are none.
    """
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total < target:
            low += 1
        else:
            high -= 1
    return []


def max_operations(nums: Iterable[int], k: int) -> int:
    """Return how many disjoint pairs adding up to k can be removed from nums."""
    items = deque(sorted(nums))
    count = 0
    while len(items) > 1:
        total = items[0] + items[-1]
        if total == k:
            items.popleft()
            items.pop()
            count += 1
        elif total < k:
            items.popleft()
        else:
            items.pop()
    return count


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run of distinct values."""
    window: set[int] = set()
    start = current = best = 0
    for value in nums:
        while value in window:
            window.discard(nums[start])
            current -= nums[start]
            start += 1
        window.add(value)
        current += value
        best = max(best, current)
    return best


def maximum_score(nums: Sequence[int], multipliers: Sequence[int]) -> int:
    """Return the best score from multiplying, in turn, an entry taken from either end of nums."""
    n, m = len(nums), len(multipliers)
    if m > n:
        raise ValueError("there must be at least as many numbers as multipliers")
    if m == 0:
        return 0
    # best[left] is the best score from step i on, with `left` entries taken from the front.
    best = [0] * (m + 1)
    for i in reversed(range(m)):
        weight = multipliers[i]
        best = [
            max(
                weight * nums[left] + best[left + 1],
                weight * nums[n - 1 - i + left] + best[left],
            )
            for left in range(i + 1)
        ]
    return best[0]


def number_of_weak_characters(properties: Iterable[Sequence[int]]) -> int:
    """Count characters whose attack and defense are both beaten by another character."""
    ordered = sorted(properties, key=lambda p: (-p[0], p[1]))
    strongest_defense = -math.inf
    weak = 0
    for _, defense in ordered:
        if defense < strongest_defense:
            weak += 1
        else:
            strongest_defense = defense
    return weak


def find_original_array(changed: Iterable[int]) -> list[int]:
    """Recover the array whose values together with their doubles make up changed.

    Returns an empty list if changed is not such a doubled array.
    """
    values = sorted(changed)
    counts = Counter(values)
    original = []
    for value in values:
        if counts[value] <= 0:
            continue
        counts[value] -= 1
        if counts[value * 2] <= 0:
            return []
        counts[value * 2] -= 1
        original.append(value)
    return original


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Return True if two equal values sit at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def missing_number(nums: Sequence[int]) -> int:
    """Return the smallest of 0..len(nums) that does not occur in nums."""
    present = set(nums)
    return next(i for i in range(len(nums) + 1) if i not in present)


def can_partition(nums: Sequence[int]) -> bool:
    """Return True if nums splits into two groups of equal sum."""
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def trap(height: Sequence[int]) -> int:
    """Return how much rain water is held between the bars of an elevation map."""
    left = list(accumulate(height, max, initial=0))[1:]
    right = list(accumulate(reversed(height), max, initial=0))[1:][::-1]
    return sum(min(lo, hi) - h for lo, hi, h in zip(left, right, height))


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(column) for column in zip(*reversed(matrix))]


def find_length(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the length of the longest run common to both sequences.

    Returns -1 when either sequence is empty.
    """
    if not nums1 or not nums2:
        return -1
    best = 0
    previous = [0] * (len(nums2) + 1)
    for a in nums1:
        current = [0]
        for j, b in enumerate(nums2):
            current.append(previous[j] + 1 if a == b else 0)
        best = max(best, max(current))
        previous = current
    return best


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*matrix)]


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n values of nums2 into the first m of nums1, in place and sorted."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n slots and nums2 at least n values")
    nums1[: m + n] = sorted([*nums1[:m], *nums2[:n]])


def sort_array_by_parity(nums: Iterable[int]) -> list[int]:
    """Return the even values followed by the odd ones, each in their original order."""
    values = list(nums)
    return [v for v in values if v % 2 == 0] + [v for v in values if v % 2 != 0]


def bag_of_tokens_score(tokens: Iterable[int], power: int) -> int:
    """Return the best score reachable by playing tokens face up or face down."""
    bag = deque(sorted(tokens))
    score = best = 0
    while bag:
        if bag[0] <= power:
            power -= bag.popleft()
            score += 1
        elif score > 0:
            power += bag.pop()
            score -= 1
        else:
            break
        best = max(best, score)
    return best


def sum_even_after_queries(
    nums: Sequence[int], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Apply each (value, index) addition in turn and report the sum of even values after each."""
    values = list(nums)
    even_sum = sum(v for v in values if v % 2 == 0)
    sums = []
    for delta, index in queries:
        if values[index] % 2 == 0:
            even_sum -= values[index]
        values[index] += delta
        if values[index] % 2 == 0:
            even_sum += values[index]
        sums.append(even_sum)
    return sums