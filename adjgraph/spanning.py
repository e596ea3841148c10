"""Minimum spanning trees by Prim's algorithm."""

from __future__ import annotations

from dataclasses import dataclass

from adjgraph.graph import AdjacencyList


@dataclass(frozen=True)
class SpanningTreeNode:
    """One vertex of a spanning tree: its label, parent index and edge weight."""

    label: str
    parent_idx: int | None
    distance: int


def prim(graph: AdjacencyList, start_label: str) -> list[SpanningTreeNode]:
    """Grow a minimum spanning tree from ``start_label``.

    The graph must be undirected with non-negative weights and every vertex
    must be reachable from the start.
    """
    if not graph.nonnegative:
        raise ValueError("Prim's algorithm needs non-negative weights")
    if graph.directed:
        raise ValueError("Prim's algorithm needs an undirected graph")
    start = graph.index_of(start_label)

    # None means undiscovered; in_tree marks vertices already taken.
    distances: list[int | None] = [None] * len(graph)
    in_tree = [False] * len(graph)
    parents: list[int | None] = [None] * len(graph)

    distances[start] = 0
    current = start
    while True:
        in_tree[current] = True
        for edge in graph.vertices[current].edges:
            target = edge.target_idx
            if parents[current] == target:
                continue
            if distances[target] is None:
                distances[target] = edge.weight
                parents[target] = current
            elif distances[target] > edge.weight:
                distances[target] = edge.weight
                parents[target] = current

        best: int | None = None
        for idx, distance in enumerate(distances):
            if distance is not None and not in_tree[idx]:
                if best is None or distance < best:
                    best = distance
                    current = idx
        if in_tree[current]:
            break

    result = []
    for vertex, parent, distance in zip(graph.vertices, parents, distances):
        if distance is None:
            raise ValueError(f"vertex {vertex.label!r} is not reachable from {start_label!r}")
        result.append(SpanningTreeNode(vertex.label, parent, distance))
    return result