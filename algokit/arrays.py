"""Array and number puzzles: sorting, searching, windows, spirals."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Optional, Sequence


def exchange_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Sort by exchanging out-of-order pairs; return the list and pass count."""
    result = list(values)
    passes = 0
    for i in range(len(result)):
        for j in range(i + 1, len(result)):
            if result[j] < result[i]:
                result[i], result[j] = result[j], result[i]
        passes += 1
    return result, passes


def smallest_missing(values: Iterable[int], limit: int = 100) -> Optional[int]:
    """Return the smallest non-negative integer below ``limit`` not in ``values``.

    Returns None when every number below ``limit`` is present.
    """
    seen = {value for value in values if 0 <= value < limit}
    return next((i for i in range(limit) if i not in seen), None)


def subarray_with_sum(
    values: Sequence[int], target: int
) -> Optional[tuple[int, int]]:
    """Return inclusive (start, end) indices of the first run summing to ``target``.

    Values must be non-negative. Returns None if no run exists.
    """
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    start = 0
    total = 0
    for end, value in enumerate(values):
        total += value
        while total > target and start <= end:
            total -= values[start]
            start += 1
        if total == target and start <= end:
            return start, end
    return None


def max_activities(activities: Iterable[tuple[int, int]]) -> int:
    """Return how many (start, finish) activities can be done one after another."""
    ordered = sorted(activities, key=lambda pair: (pair[1], pair[0]))
    if not ordered:
        return 0
    count = 1
    last_finish = ordered[0][1]
    for start, finish in ordered[1:]:
        if start >= last_finish:
            count += 1
            last_finish = finish
    return count


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return the index of ``target`` in ascending ``values``, or None."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def boring_apartments(number: int) -> int:
    """Count keypresses made calling boring apartments up to ``number``.

    Every number made of one repeated digit is called in order; each call
    costs as many presses as the number has digits.
    """
    if number <= 0:
        raise ValueError("number must be positive")
    digits = str(number)
    length = len(digits)
    return (int(digits[0]) - 1) * 10 + length * (length + 1) // 2


def spiral_center(n: int) -> list[list[int]]:
    """Return an n x n matrix of 1..n*n laid out as a spiral from the centre."""
    if n < 0:
        raise ValueError("n must not be negative")
    matrix = []
    for i in range(n):
        row = []
        for j in range(n):
            layer = min(i, j, n - 1 - i, n - 1 - j)
            if i <= j:
                side = n - 2 * layer
                row.append(side * side - (i - layer) - (j - layer))
            else:
                side = n - 2 * layer - 2
                row.append(side * side + (i - layer) + (j - layer))
        matrix.append(row)
    return matrix