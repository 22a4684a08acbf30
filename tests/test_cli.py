import io
import sys

import pytest

from algokit.bank import Account
from algokit.cli import main
from algokit.dynamic import job_scheduling, knapsack
from algokit.graphs import (
    NEGATIVE_CYCLE_MESSAGE,
    bellman_ford,
    floyd_warshall,
    format_distances,
    format_matrix,
)


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_bellman_ford_prints_distance_table(monkeypatch, capsys):
    edges = [(0, 1, 4), (1, 2, -2), (0, 2, 5)]
    text = "3 3\n0 1 4\n1 2 -2\n0 2 5\n0\n"
    code, out, _ = run(monkeypatch, capsys, ["bellman-ford"], text)
    assert code == 0
    assert out == format_distances(bellman_ford(3, edges, 0))


def test_bellman_ford_reports_negative_cycle(monkeypatch, capsys):
    text = "2 2\n0 1 1\n1 0 -3\n0\n"
    code, out, _ = run(monkeypatch, capsys, ["bellman-ford"], text)
    assert code == 0
    assert out.strip() == NEGATIVE_CYCLE_MESSAGE


def test_bellman_ford_unreachable_shows_inf(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["bellman-ford"], "2 0\n0\n")
    assert code == 0
    assert "1\tINF" in out


def test_floyd_warshall_prints_matrix(monkeypatch, capsys):
    edges = [(0, 1, 3), (1, 2, 1), (2, 0, 2)]
    text = "3 3 0 1 3 1 2 1 2 0 2"
    code, out, _ = run(monkeypatch, capsys, ["floyd-warshall"], text)
    assert code == 0
    assert out == format_matrix(floyd_warshall(3, edges))


def test_kruskal_prints_tree_edges(monkeypatch, capsys):
    text = "3 3\n0 1 1\n2 1 2\n0 2 3\n"
    code, out, _ = run(monkeypatch, capsys, ["kruskal"], text)
    assert code == 0
    assert out == "0 1 1\n1 2 2\n"


def test_kruskal_disconnected_is_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["kruskal"], "3 1\n0 1 1\n")
    assert code == 1
    assert "not connected" in err


def test_knapsack_reports_best_profit_and_table(monkeypatch, capsys):
    weights, profits, capacity = [1, 3, 4], [15, 20, 30], 4
    text = "3\n1 15\n3 20\n4 30\n4\n"
    code, out, _ = run(monkeypatch, capsys, ["knapsack"], text)
    expected = knapsack(capacity, weights, profits)
    assert code == 0
    assert f"Solution : {expected.best_profit}" in out
    lines = out.splitlines()
    start = lines.index("DP Table:") + 1
    table = [
        [int(v) for v in line.split()]
        for line in lines[start : start + len(weights) + 1]
    ]
    assert table == expected.table
    chosen = "\t".join(str(i) for i in expected.items)
    assert f"Item number in solution : {chosen}" in out


def test_jobs_uses_start_plus_duration(monkeypatch, capsys):
    starts, durations, profits = [1, 2, 3, 3], [2, 3, 2, 3], [50, 10, 40, 70]
    text = "4\n" + "\n".join(
        f"{s} {d} {p}" for s, d, p in zip(starts, durations, profits)
    )
    code, out, _ = run(monkeypatch, capsys, ["jobs"], text)
    ends = [s + d for s, d in zip(starts, durations)]
    assert code == 0
    assert out.strip() == str(job_scheduling(starts, ends, profits))


def test_bank_deposit_and_withdraw(monkeypatch, capsys):
    text = "7 alice savings 100 50 30"
    code, out, _ = run(monkeypatch, capsys, ["bank"], text)
    account = Account(7, "alice", "savings", 100.0)
    account.deposit(50)
    account.withdraw(30)
    assert code == 0
    assert out.strip() == account.describe()


def test_bank_overdraw_keeps_balance(monkeypatch, capsys):
    text = "7 alice savings 10 0 500"
    code, out, _ = run(monkeypatch, capsys, ["bank"], text)
    assert code == 0
    assert "Cannot Withdraw Amount" in out
    assert out.strip().endswith(Account(7, "alice", "savings", 10.0).describe())


def test_truncated_input_is_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["floyd-warshall"], "3 2\n0 1 4\n")
    assert code == 1
    assert "unexpected end of input" in err
    assert out == ""


def test_non_integer_input_is_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, ["jobs"], "two\n")
    assert code == 1
    assert "'two'" in err


def test_unknown_command_exits(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["no-such-command"])
    assert info.value.code == 2