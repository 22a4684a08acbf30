"""Shortest paths and minimum spanning trees on weighted directed graphs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

INF = math.inf

NEGATIVE_CYCLE_MESSAGE = (
    "Graph contains negative weight cycle. Hence, shortest distance not guaranteed."
)


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``source`` to ``destination``."""

    source: int
    destination: int
    weight: int


EdgeLike = Union[Edge, Tuple[int, int, int]]


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""

    def __init__(self, message: str = NEGATIVE_CYCLE_MESSAGE) -> None:
        super().__init__(message)


def _as_edges(edges: Iterable[EdgeLike], vertex_count: int) -> list[Edge]:
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    result = []
    for item in edges:
        edge = item if isinstance(item, Edge) else Edge(*item)
        for vertex in (edge.source, edge.destination):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        result.append(edge)
    return result


def bellman_ford(
    vertex_count: int, edges: Iterable[EdgeLike], source: int
) -> list[float]:
    """Return distances from ``source``; unreachable vertices are ``math.inf``.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    edge_list = _as_edges(edges, vertex_count)
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} is out of range")

    dist: list[float] = [INF] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count):
        changed = False
        for edge in edge_list:
            start = dist[edge.source]
            if start != INF and start + edge.weight < dist[edge.destination]:
                dist[edge.destination] = start + edge.weight
                changed = True
        if not changed:
            break

    for edge in edge_list:
        start = dist[edge.source]
        if start != INF and start + edge.weight < dist[edge.destination]:
            raise NegativeCycleError()
    return dist


def floyd_warshall(
    vertex_count: int, edges: Iterable[EdgeLike]
) -> list[list[float]]:
    """Return the all-pairs distance matrix; missing paths are ``math.inf``.

    A later edge between the same pair of vertices replaces an earlier one.
    """
    edge_list = _as_edges(edges, vertex_count)
    dist: list[list[float]] = [
        [0 if i == j else INF for j in range(vertex_count)]
        for i in range(vertex_count)
    ]
    for edge in edge_list:
        dist[edge.source][edge.destination] = edge.weight

    for k, through in enumerate(dist):
        for row in dist:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, onward in enumerate(through):
                if onward != INF and to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist


def kruskal(vertex_count: int, edges: Iterable[EdgeLike]) -> list[Edge]:
    """Return the edges of a minimum spanning tree, in the order chosen.

    Each returned edge has its smaller endpoint as ``source``. Raises
    ValueError if the graph is not connected.
    """
    edge_list = sorted(_as_edges(edges, vertex_count), key=lambda e: e.weight)
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    needed = max(vertex_count - 1, 0)
    tree: list[Edge] = []
    for edge in edge_list:
        if len(tree) == needed:
            break
        root_a = find(edge.source)
        root_b = find(edge.destination)
        if root_a != root_b:
            parent[root_a] = root_b
            low, high = sorted((edge.source, edge.destination))
            tree.append(Edge(low, high, edge.weight))
    if len(tree) != needed:
        raise ValueError("graph is not connected")
    return tree


def _format_value(value: float) -> str:
    return "INF" if value == INF else str(value)


def format_distances(distances: Sequence[float]) -> str:
    """Render single-source distances as a vertex/distance table."""
    lines = ["Vertex  Distance"]
    lines.extend(
        f"{vertex}\t{_format_value(value)}" for vertex, value in enumerate(distances)
    )
    return "\n".join(lines) + "\n"


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render an all-pairs distance matrix, one tab-separated row per line."""
    lines = ["The Distance matrix for Floyd - Warshall"]
    lines.extend("".join(f"{_format_value(v)}\t" for v in row) for row in matrix)
    return "\n".join(lines) + "\n"