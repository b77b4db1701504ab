"""Dynamic-programming problems: coins, knapsack, subsequences, rods and grids."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "count_coin_change",
    "knapsack",
    "longest_common_subsequence",
    "longest_increasing_subsequence",
    "rod_cutting",
    "unique_paths",
    "unique_paths_with_obstacles",
]


def count_coin_change(coins: Sequence[int], amount: int) -> int:
    """Count the combinations of ``coins`` (each usable any number of times) summing to ``amount``."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def knapsack(capacity: int, values: Sequence[int], weights: Sequence[int]) -> int:
    """Return the best total value of items fitting into ``capacity`` (0/1 knapsack)."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        previous = best
        best = [0] + [
            max(previous[room], value + previous[room - weight])
            if weight <= room
            else previous[room]
            for room in range(1, capacity + 1)
        ]
    return best[capacity]


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    previous = [0] * (len(text2) + 1)
    for ch1 in text1:
        current = [0]
        for j, ch2 in enumerate(text2):
            if ch1 == ch2:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(nums: Sequence[int]) -> int:
    """Return the length of the longest non-decreasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        lengths.append(
            max((lengths[j] + 1 for j in range(i) if nums[j] <= value), default=1)
        )
    return max(lengths, default=0)


def rod_cutting(length: int, prices: Sequence[int], lengths: Sequence[int]) -> int:
    """Return the best price for a rod of ``length`` cut into the given pieces.

    Each piece type may be used any number of times. Any length left over that
    no piece fits is wasted.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(prices) != len(lengths):
        raise ValueError("prices and lengths must have the same length")
    if not prices:
        raise ValueError("at least one piece is required")
    if any(piece <= 0 for piece in lengths):
        raise ValueError("piece lengths must be positive")
    first_length, first_price = lengths[0], prices[0]
    best = [(room // first_length) * first_price for room in range(length + 1)]
    for piece, price in zip(lengths[1:], prices[1:]):
        for room in range(piece, length + 1):
            best[room] = max(best[room], price + best[room - piece])
    return best[length]


def unique_paths(rows: int, cols: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of a grid."""
    if rows <= 0 or cols <= 0:
        return 0
    row = [1] * cols
    for _ in range(rows - 1):
        for j in range(1, cols):
            row[j] += row[j - 1]
    return row[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths through a grid where cells equal to 1 are blocked."""
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    cols = len(grid[0])
    if any(len(line) != cols for line in grid):
        raise ValueError("grid rows must all have the same length")
    if grid[0][0] == 1 or grid[-1][-1] == 1:
        return 0
    row = [0] * cols
    row[0] = 1
    for line in grid:
        for j, cell in enumerate(line):
            if cell == 1:
                row[j] = 0
            elif j > 0:
                row[j] += row[j - 1]
    return row[-1]