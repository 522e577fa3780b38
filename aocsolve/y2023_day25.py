"""2023 day 25: cutting three wires to split the component graph in two."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

from aocsolve.textio import read_lines

Graph = dict[str, list[str]]
Edge = tuple[str, str]

_CUT_SIZE = 3


def parse_graph(text: str) -> Graph:
    """Read ``name: other other ...`` lines into an undirected adjacency list."""
    graph: Graph = {}
    for raw in read_lines(text):
        line = raw.strip()
        if not line:
            continue
        source, sep, rest = line.partition(":")
        source = source.strip()
        if not sep or not source:
            raise ValueError(f"malformed connection line {line!r}")
        neighbours = graph.setdefault(source, [])
        for destination in rest.split():
            targets = graph.setdefault(destination, [])
            if destination not in neighbours:
                neighbours.append(destination)
            if source not in targets:
                targets.append(source)
    return graph


def _require(graph: Mapping[str, Sequence[str]], *names: str) -> None:
    for name in names:
        if name not in graph:
            raise ValueError(f"unknown component {name!r}")


def shortest_path_without(
    graph: Mapping[str, Sequence[str]], start: str, destination: str
) -> int | None:
    """Length of the shortest path from ``start`` to ``destination`` that avoids their direct wire.

    Returns ``None`` when no such path exists.
    """
    _require(graph, start, destination)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == destination:
            return distances[node]
        for neighbour in graph[node]:
            if node == start and neighbour == destination:
                continue
            if neighbour not in distances:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return None


def _component(graph: Mapping[str, Sequence[str]], start: str) -> set[str]:
    visited = {start}
    stack = [start]
    while stack:
        for neighbour in graph[stack.pop()]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)
    return visited


def group_size(graph: Mapping[str, Sequence[str]], start: str) -> int:
    """Number of components reachable from ``start``, itself included."""
    _require(graph, start)
    return len(_component(graph, start))


def count_groups(graph: Mapping[str, Sequence[str]]) -> int:
    """Number of connected groups in the graph."""
    visited: set[str] = set()
    groups = 0
    for node in graph:
        if node not in visited:
            groups += 1
            visited |= _component(graph, node)
    return groups


def _edges(graph: Mapping[str, Sequence[str]]) -> list[Edge]:
    seen: set[frozenset[str]] = set()
    edges: list[Edge] = []
    for node, neighbours in graph.items():
        for neighbour in neighbours:
            key = frozenset((node, neighbour))
            if key not in seen:
                seen.add(key)
                edges.append((node, neighbour))
    return edges


def _without_edges(graph: Mapping[str, Sequence[str]], edges: Iterable[Edge]) -> Graph:
    removed = {frozenset(edge) for edge in edges}
    return {
        node: [n for n in neighbours if frozenset((node, n)) not in removed]
        for node, neighbours in graph.items()
    }


def part1(text: str) -> int:
    """Product of the two group sizes after cutting the three hardest-to-bypass wires."""
    graph = parse_graph(text)
    edges = _edges(graph)
    if len(edges) < _CUT_SIZE:
        raise ValueError("not enough wires to cut")

    def strength(edge: Edge) -> float:
        length = shortest_path_without(graph, *edge)
        return math.inf if length is None else length

    cut = sorted(edges, key=strength, reverse=True)[:_CUT_SIZE]
    split = _without_edges(graph, cut)
    if count_groups(split) != 2:
        raise ValueError("cutting the chosen wires does not leave two groups")
    first, second = cut[0]
    return group_size(split, first) * group_size(split, second)