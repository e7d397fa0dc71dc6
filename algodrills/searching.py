"""Binary-search based lookups."""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "binary_search",
    "search_matrix_rows",
    "search_matrix",
    "find_min_rotated",
    "can_finish",
    "min_eating_speed",
]


def _find(row: Sequence[int], target: int) -> int:
    low, high = 0, len(row) - 1
    while low <= high:
        mid = (low + high) // 2
        if row[mid] == target:
            return mid
        if row[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of target in sorted nums, or -1 if absent."""
    return _find(nums, target)


def search_matrix_rows(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search every sorted row of the matrix separately."""
    return any(_find(row, target) != -1 for row in matrix)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a row-major sorted matrix as one flat sorted sequence."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    left, right = 0, len(matrix) * cols - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence."""
    if not nums:
        raise ValueError("find_min_rotated() needs a non-empty sequence")
    res = nums[0]
    l, r = 0, len(nums) - 1
    while l <= r:
        if nums[l] < nums[r]:
            res = min(res, nums[l])
            break
        m = l + (r - l) // 2
        res = min(res, nums[m])
        if nums[m] >= nums[l]:
            l = m + 1
        else:
            r = m - 1
    return res


def can_finish(piles: Sequence[int], speed: int, h: int) -> bool:
    """Tell whether all piles can be eaten within h hours at the given speed."""
    hours = 0
    for pile in piles:
        hours += -(-pile // speed)
        if hours > h:
            return False
    return True


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the smallest speed at which all piles are eaten within h hours."""
    if not piles:
        raise ValueError("min_eating_speed() needs at least one pile")
    left, right = 1, max(piles)
    result = right
    while left <= right:
        mid = left + (right - left) // 2
        if can_finish(piles, mid, h):
            result = mid
            right = mid - 1
        else:
            left = mid + 1
    return result