"""Dynamic-programming solutions: egg drop, Fibonacci, knapsack, job scheduling."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Sequence


def egg_drop(eggs: int, floors: int) -> int:
    """Return the minimum number of trials needed in the worst case."""
    if eggs < 1:
        raise ValueError("at least one egg is required")
    if floors < 0:
        raise ValueError("floors must not be negative")

    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for j in range(2, floors + 1):
            current[j] = 1 + min(
                max(previous[x - 1], current[j - x]) for x in range(1, j + 1)
            )
        previous = current
    return previous[floors]


def fib_bottom_up(n: int) -> int:
    """Return the n-th Fibonacci number, building up from the base cases."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fib_top_down(n: int) -> int:
    """Return the n-th Fibonacci number by memoised recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    memo: dict[int, int] = {}

    def solve(k: int) -> int:
        if k not in memo:
            memo[k] = k if k <= 1 else solve(k - 1) + solve(k - 2)
        return memo[k]

    # Filling the memo in order keeps the recursion shallow.
    for k in range(n + 1):
        solve(k)
    return memo[n]


@dataclass
class KnapsackResult:
    """Best profit, the full DP table and the 1-based items chosen."""

    best_profit: int
    table: list[list[int]] = field(repr=False)
    items: list[int]


def knapsack(
    capacity: int, weights: Sequence[int], profits: Sequence[int]
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem.

    Chosen items are listed from the highest item number down.
    """
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        above = table[-1]
        row = [0] + [
            max(profit + above[w - weight], above[w]) if weight <= w else above[w]
            for w in range(1, capacity + 1)
        ]
        table.append(row)

    best = table[-1][capacity]
    remaining, room = best, capacity
    items: list[int] = []
    for item in range(len(weights), 0, -1):
        if remaining <= 0:
            break
        if remaining == table[item - 1][room]:
            continue
        items.append(item)
        remaining -= profits[item - 1]
        room -= weights[item - 1]
    return KnapsackResult(best_profit=best, table=table, items=items)


def job_scheduling(
    start_times: Sequence[int], end_times: Sequence[int], profits: Sequence[int]
) -> int:
    """Return the largest total profit of jobs that do not overlap.

    A job may start at the moment another ends.
    """
    if not len(start_times) == len(end_times) == len(profits):
        raise ValueError("start times, end times and profits must match in length")
    jobs = sorted(zip(start_times, end_times, profits), key=lambda job: job[1])
    if not jobs:
        return 0

    ends = [end for _, end, _ in jobs]
    best: list[int] = []
    for index, (start, _, profit) in enumerate(jobs):
        last = bisect_right(ends, start, 0, index) - 1
        include = profit + (best[last] if last >= 0 else 0)
        best.append(max(include, best[-1]) if best else include)
    return best[-1]