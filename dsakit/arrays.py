"""Queries over sequences of integers."""

from __future__ import annotations

import heapq
from functools import reduce
from operator import xor
from typing import Iterable


def largest(values: Iterable[int]) -> int:
    """Return the largest value."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def second_largest(values: Iterable[int]) -> int:
    """Return the second value in descending order; duplicates count."""
    top_two = heapq.nlargest(2, values)
    if len(top_two) < 2:
        raise ValueError("second_largest() needs at least two values")
    return top_two[1]


def odd_occurring(values: Iterable[int]) -> int:
    """Return the one value that occurs an odd number of times."""
    return reduce(xor, values, 0)


def two_odd_occurring(values: Iterable[int]) -> tuple[int, int]:
    """Return the two values that each occur an odd number of times."""
    items = list(values)
    combined = reduce(xor, items, 0)
    lowest_bit = combined & -combined
    with_bit = reduce(xor, (v for v in items if v & lowest_bit), 0)
    return with_bit, combined ^ with_bit