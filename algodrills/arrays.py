"""Array problems: prices, pairs, towers, histograms and rearrangements."""

from __future__ import annotations

from collections import deque
from itertools import combinations
from typing import MutableSequence, Sequence

__all__ = [
    "max_profit",
    "has_duplicate",
    "two_sum",
    "two_sum_sorted",
    "max_area",
    "daily_temperatures",
    "largest_rectangle_area_brute",
    "largest_rectangle_area",
    "max_smaller_difference",
    "min_passes",
    "place_at_index",
    "min_operations",
    "greater_tower_sum",
]

_MOD = 1_000_000_007


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0."""
    best = 0
    low: int | None = None
    for price in prices:
        if low is not None and low < price:
            best = max(best, price - low)
        else:
            low = price
    return best


def has_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to target, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def _half_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two distinct values of sorted numbers adding up to target."""
    limit = _half_toward_zero(target)
    for i, first in enumerate(numbers):
        if first > limit:
            continue
        for j in range(i + 1, len(numbers)):
            second = numbers[j]
            if first + second == target and first != second:
                return [i + 1, j + 1]
    raise ValueError(f"no pair of distinct values adds up to {target}")


def max_area(heights: Sequence[int]) -> int:
    """Return the largest water area held between two of the lines."""
    if len(heights) < 2:
        raise ValueError("max_area() needs at least two heights")
    return max(
        (j - i) * min(heights[i], heights[j])
        for i, j in combinations(range(len(heights)), 2)
    )


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, return how many days until a warmer one, or 0 if none comes."""
    result = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            result[earlier] = day - earlier
        pending.append(day)
    return result


def _span(heights: Sequence[int], index: int) -> int:
    bar = heights[index]
    count = 1
    for k in range(index - 1, -1, -1):
        if heights[k] < bar:
            break
        count += 1
    for k in range(index + 1, len(heights)):
        if heights[k] < bar:
            break
        count += 1
    return count


def largest_rectangle_area_brute(heights: Sequence[int]) -> int:
    """Return the largest rectangle in the histogram by widening around every bar."""
    if not heights:
        raise ValueError("largest_rectangle_area_brute() needs at least one bar")
    return max(bar * _span(heights, i) for i, bar in enumerate(heights))


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the largest rectangle in the histogram using monotonic stacks."""
    n = len(heights)
    left_limit = [-1] * n
    right_limit = [n] * n
    stack: list[int] = []
    for i, bar in enumerate(heights):
        while stack and heights[stack[-1]] >= bar:
            stack.pop()
        if stack:
            left_limit[i] = stack[-1]
        stack.append(i)
    stack.clear()
    for i in reversed(range(n)):
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        if stack:
            right_limit[i] = stack[-1]
        stack.append(i)
    return max(
        (bar * (right - left - 1) for bar, left, right in zip(heights, left_limit, right_limit)),
        default=0,
    )


def _nearest_smaller(values: Sequence[int], index: int, step: int) -> int:
    bar = values[index]
    k = index + step
    while 0 <= k < len(values):
        if values[k] < bar:
            return values[k]
        k += step
    return 0


def max_smaller_difference(arr: Sequence[int]) -> int:
    """Return the largest gap between the nearest smaller values to the left and right.

    A side without a smaller value counts as 0.
    """
    if not arr:
        raise ValueError("max_smaller_difference() needs a non-empty sequence")
    return max(
        abs(_nearest_smaller(arr, i, -1) - _nearest_smaller(arr, i, 1))
        for i in range(len(arr))
    )


def _is_sorted(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def min_passes(heights: Sequence[int]) -> int:
    """Count passes, each dropping every value not above its predecessor, until sorted."""
    current = list(heights)
    count = 0
    while not _is_sorted(current):
        if len(current) <= 1:
            break
        count += 1
        kept = current[:1] + [b for a, b in zip(current, current[1:]) if b > a]
        if len(kept) == len(current) and not _is_sorted(kept):
            break
        current = kept
    return count


def place_at_index(arr: MutableSequence[int]) -> None:
    """Rearrange arr in place so that arr[i] == i where i is present and -1 elsewhere."""
    n = len(arr)
    for value in arr:
        if value != -1 and not 0 <= value < n:
            raise ValueError(f"value {value} is neither -1 nor a valid index")
    i = 0
    while i < n:
        j = arr[i]
        if j != -1 and j != arr[j]:
            arr[i], arr[j] = arr[j], arr[i]
        else:
            i += 1


def min_operations(arr: Sequence[int], brr: Sequence[int]) -> int:
    """Count moves to remove brr's values in order from the front of a rotating queue of arr.

    Moving the front value to the back costs one move, as does removing it.
    """
    queue = deque(arr)
    operations = 0
    for target in brr:
        try:
            steps = queue.index(target)
        except ValueError:
            raise ValueError(f"value {target} is not left in the queue") from None
        queue.rotate(-steps)
        queue.popleft()
        operations += steps + 1
    return operations


def greater_tower_sum(arr: Sequence[int]) -> int:
    """Sum, modulo 1000000007, each tower's next greater tower to its right."""
    total = 0
    stack: list[int] = []
    for tower in arr:
        while stack and stack[-1] < tower:
            total = (total + tower) % _MOD
            stack.pop()
        stack.append(tower)
    return total