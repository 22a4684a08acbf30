import pytest

from algokit.dynamic import (
    egg_drop,
    fib_bottom_up,
    fib_top_down,
    job_scheduling,
    knapsack,
)


@pytest.mark.parametrize("floors", [0, 1, 5, 17])
def test_egg_drop_one_egg_is_linear(floors):
    assert egg_drop(1, floors) == floors


@pytest.mark.parametrize("eggs", [1, 2, 4])
def test_egg_drop_base_floors(eggs):
    assert egg_drop(eggs, 0) == 0
    assert egg_drop(eggs, 1) == 1


def test_egg_drop_monotonic():
    results = [egg_drop(2, k) for k in range(30)]
    assert results == sorted(results)
    for floors in (10, 25):
        per_eggs = [egg_drop(n, floors) for n in range(1, 5)]
        assert per_eggs == sorted(per_eggs, reverse=True)


def test_egg_drop_classic():
    assert egg_drop(2, 36) == 8


def test_egg_drop_invalid():
    with pytest.raises(ValueError):
        egg_drop(0, 10)


def test_fib_base_cases():
    assert fib_bottom_up(0) == 0
    assert fib_bottom_up(1) == 1
    assert fib_top_down(0) == 0
    assert fib_top_down(1) == 1


def test_fib_recurrence_and_agreement():
    for n in range(2, 40):
        assert fib_bottom_up(n) == fib_bottom_up(n - 1) + fib_bottom_up(n - 2)
        assert fib_top_down(n) == fib_bottom_up(n)


def test_fib_top_down_large_n_does_not_overflow_stack():
    assert fib_top_down(3000) == fib_bottom_up(3000)


def test_fib_negative():
    with pytest.raises(ValueError):
        fib_bottom_up(-1)
    with pytest.raises(ValueError):
        fib_top_down(-1)


def test_knapsack_classic():
    result = knapsack(50, [10, 20, 30], [60, 100, 120])
    assert result.best_profit == 220
    assert sorted(result.items) == [2, 3]


def test_knapsack_items_consistent():
    weights = [3, 4, 5, 9, 2]
    profits = [4, 5, 7, 12, 1]
    result = knapsack(11, weights, profits)
    assert sum(profits[i - 1] for i in result.items) == result.best_profit
    assert sum(weights[i - 1] for i in result.items) <= 11
    assert result.items == sorted(result.items, reverse=True)
    for weight, profit in zip(weights, profits):
        if weight <= 11:
            assert result.best_profit >= profit


def test_knapsack_table_shape():
    result = knapsack(6, [1, 2], [3, 4])
    assert len(result.table) == 3
    assert all(len(row) == 7 for row in result.table)
    assert result.table[0] == [0] * 7
    assert result.table[-1][-1] == result.best_profit


def test_knapsack_nothing_fits():
    result = knapsack(1, [5, 6], [10, 20])
    assert result.best_profit == 0
    assert result.items == []


def test_knapsack_mismatch():
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [3])


def test_job_scheduling_classic():
    assert job_scheduling([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70]) == 120


def test_job_scheduling_disjoint_jobs_all_taken():
    profits = [5, 8, 2]
    assert job_scheduling([0, 2, 4], [2, 4, 6], profits) == sum(profits)


def test_job_scheduling_overlapping_takes_best():
    profits = [5, 8, 2]
    assert job_scheduling([0, 0, 0], [10, 10, 10], profits) == max(profits)


def test_job_scheduling_empty_and_mismatch():
    assert job_scheduling([], [], []) == 0
    with pytest.raises(ValueError):
        job_scheduling([1], [2, 3], [4])