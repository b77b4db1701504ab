"""Sliding-window problems."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["longest_subarray_with_sum_at_most"]


def longest_subarray_with_sum_at_most(nums: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous run of ``nums`` whose sum is at most ``k``.

    The window technique is exact for non-negative numbers.
    """
    left = 0
    total = 0
    best = 0
    for right, value in enumerate(nums):
        total += value
        while total > k and left <= right:
            total -= nums[left]
            left += 1
        if total <= k:
            best = max(best, right - left + 1)
    return best