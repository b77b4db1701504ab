"""Letter frequency, permutations and subsets."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterator, Sequence
from typing import TypeVar

__all__ = ["most_frequent_letter", "permutations", "subsets"]

T = TypeVar("T")


def most_frequent_letter(text: str) -> str:
    """Return the most frequent ASCII letter in ``text``, case-insensitively.

    Ties go to the letter earliest in the alphabet; with no letters at all the
    answer is ``"a"``.
    """
    counts = Counter(ch for ch in text.lower() if ch in string.ascii_lowercase)
    return max(string.ascii_lowercase, key=lambda letter: (counts[letter], -ord(letter)))


def permutations(nums: Sequence[T]) -> list[list[T]]:
    """Return every ordering of ``nums``, produced by swapping each element into place."""
    items = list(nums)

    def build(index: int) -> Iterator[list[T]]:
        if index >= len(items):
            yield list(items)
            return
        for j in range(index, len(items)):
            items[index], items[j] = items[j], items[index]
            yield from build(index + 1)
            items[index], items[j] = items[j], items[index]

    return list(build(0))


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``nums``, leaving each element out before taking it."""
    items = list(nums)

    def build(index: int, chosen: list[T]) -> Iterator[list[T]]:
        if index >= len(items):
            yield chosen
            return
        yield from build(index + 1, chosen)
        yield from build(index + 1, chosen + [items[index]])

    return list(build(0, []))