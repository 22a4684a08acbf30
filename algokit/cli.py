"""Command-line front end that reads whitespace-separated input from stdin."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, Optional, Sequence, TextIO

from algokit.bank import Account, InsufficientFundsError
from algokit.dynamic import job_scheduling, knapsack
from algokit.graphs import (
    Edge,
    NegativeCycleError,
    bellman_ford,
    floyd_warshall,
    format_distances,
    format_matrix,
    kruskal,
)


class _Tokens:
    """Sequential reader over the whitespace-separated words of the input."""

    def __init__(self, words: Sequence[str]) -> None:
        self._words: Iterator[str] = iter(words)

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        text = self.word()
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected an integer, got {text!r}") from None

    def number(self) -> float:
        text = self.word()
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError("counts must not be negative")
        return value

    def edges(self, count: int) -> list[Edge]:
        return [
            Edge(self.integer(), self.integer(), self.integer())
            for _ in range(count)
        ]


def _bank(tokens: _Tokens, out: TextIO) -> None:
    account = Account(
        number=tokens.integer(),
        name=tokens.word(),
        account_type=tokens.word(),
        balance=tokens.number(),
    )
    account.deposit(tokens.number())
    try:
        account.withdraw(tokens.number())
    except InsufficientFundsError as exc:
        out.write(f"{exc}\n")
    out.write(account.describe() + "\n")


def _bellman_ford(tokens: _Tokens, out: TextIO) -> None:
    vertices = tokens.count()
    edges = tokens.edges(tokens.count())
    source = tokens.integer()
    try:
        distances = bellman_ford(vertices, edges, source)
    except NegativeCycleError as exc:
        out.write(f"{exc}\n")
        return
    out.write(format_distances(distances))


def _floyd_warshall(tokens: _Tokens, out: TextIO) -> None:
    vertices = tokens.count()
    edges = tokens.edges(tokens.count())
    out.write(format_matrix(floyd_warshall(vertices, edges)))


def _kruskal(tokens: _Tokens, out: TextIO) -> None:
    vertices = tokens.count()
    edges = tokens.edges(tokens.count())
    for edge in kruskal(vertices, edges):
        out.write(f"{edge.source} {edge.destination} {edge.weight}\n")


def _knapsack(tokens: _Tokens, out: TextIO) -> None:
    count = tokens.count()
    weights: list[int] = []
    profits: list[int] = []
    for _ in range(count):
        weights.append(tokens.integer())
        profits.append(tokens.integer())
    capacity = tokens.integer()
    result = knapsack(capacity, weights, profits)
    out.write("DP Table:\n")
    for row in result.table:
        out.write(" ".join(str(value) for value in row) + "\n")
    out.write("\nItem number in solution : ")
    out.write("\t".join(str(item) for item in result.items) + "\n")
    out.write(f"Solution : {result.best_profit}\n")


def _jobs(tokens: _Tokens, out: TextIO) -> None:
    count = tokens.count()
    starts: list[int] = []
    ends: list[int] = []
    profits: list[int] = []
    for _ in range(count):
        start, duration, profit = tokens.integer(), tokens.integer(), tokens.integer()
        starts.append(start)
        ends.append(start + duration)
        profits.append(profit)
    out.write(f"{job_scheduling(starts, ends, profits)}\n")


_COMMANDS: dict[str, tuple[Callable[[_Tokens, TextIO], None], str]] = {
    "bank": (
        _bank,
        "account number, name, type, balance, deposit, withdrawal",
    ),
    "bellman-ford": (
        _bellman_ford,
        "vertices, edge count, edges as 'src dst weight', source",
    ),
    "floyd-warshall": (
        _floyd_warshall,
        "vertices, edge count, edges as 'src dst weight'",
    ),
    "kruskal": (
        _kruskal,
        "vertices, edge count, edges as 'src dst weight'",
    ),
    "knapsack": (
        _knapsack,
        "item count, items as 'weight profit', capacity",
    ),
    "jobs": (
        _jobs,
        "job count, jobs as 'start duration profit'",
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit",
        description="Run an algorithm on whitespace-separated input read from stdin.",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (handler, help_text) in _COMMANDS.items():
        command = sub.add_parser(name, help=f"input: {help_text}")
        command.set_defaults(handler=handler)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen command on stdin; return the process exit status."""
    args = _build_parser().parse_args(argv)
    tokens = _Tokens(sys.stdin.read().split())
    try:
        args.handler(tokens, sys.stdout)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())