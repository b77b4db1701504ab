"""Classic array problems: duplicates, intersections and best subarrays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "find_duplicate",
    "intersection",
    "max_subarray_sum",
    "max_subarray_product",
]


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list holding 1..n-1 plus one duplicate.

    ``n`` is the length of ``nums``. The answer is the amount by which the sum
    of ``nums`` exceeds the sum of the first ``n - 1`` natural numbers.
    """
    n = len(nums)
    expected_total = n * (n - 1) // 2
    return sum(nums) - expected_total


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the distinct values present in both inputs, in ascending order."""
    return sorted(set(nums1).intersection(nums2))


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    first, *rest = nums
    best = current = first
    for value in rest:
        current = value + current if value + current > value else value
        best = max(best, current)
    return best


def max_subarray_product(nums: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray.

    Products are scanned from both ends at once; a running product that hits
    zero restarts from the next element.
    """
    if not nums:
        raise ValueError("max_subarray_product() needs at least one number")
    prefix = suffix = 1
    best: int | None = None
    for front, back in zip(nums, reversed(nums)):
        if prefix == 0:
            prefix = 1
        if suffix == 0:
            suffix = 1
        prefix *= front
        suffix *= back
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    assert best is not None
    return best