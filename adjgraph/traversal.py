"""Breadth-first and depth-first traversal with visitor callbacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from adjgraph.graph import AdjacencyList, Edge, Vertex


class VertexState(Enum):
    """How far a traversal has got with a vertex."""

    UNDISCOVERED = "undiscovered"
    DISCOVERED = "discovered"
    PROCESSED = "processed"


@dataclass
class TraversalVertex:
    """A vertex seen during a traversal, with access to the search tree."""

    data: Vertex
    graph: AdjacencyList
    _parents: list[int | None]
    _states: list[VertexState]

    def parent(self) -> TraversalVertex | None:
        """The vertex this one was discovered from, or None for the start."""
        parent_idx = self._parents[self.data.idx]
        if parent_idx is None:
            return None
        return TraversalVertex(
            self.graph.vertices[parent_idx], self.graph, self._parents, self._states
        )

    def state(self) -> VertexState:
        """The current traversal state of this vertex."""
        return self._states[self.data.idx]


VertexCallback = Callable[[TraversalVertex], object]
EdgeCallback = Callable[[Edge], object]


def _ignore(_item: object) -> None:
    return None


def bfs(
    graph: AdjacencyList,
    label: str,
    early_vertex: VertexCallback | None = None,
    late_vertex: VertexCallback | None = None,
    process_edge: EdgeCallback | None = None,
) -> None:
    """Breadth-first search from the vertex labelled ``label``."""
    early = early_vertex or _ignore
    late = late_vertex or _ignore
    on_edge = process_edge or _ignore

    start = graph.index_of(label)
    states = [VertexState.UNDISCOVERED] * len(graph)
    parents: list[int | None] = [None] * len(graph)

    states[start] = VertexState.DISCOVERED
    queue = deque([graph.vertices[start]])
    while queue:
        vertex = queue.popleft()
        early(TraversalVertex(vertex, graph, parents, states))
        for edge in vertex.edges:
            on_edge(edge)
            child = edge.target_idx
            if states[child] is VertexState.UNDISCOVERED:
                states[child] = VertexState.DISCOVERED
                parents[child] = vertex.idx
                queue.append(graph.vertices[child])
        late(TraversalVertex(vertex, graph, parents, states))
        states[vertex.idx] = VertexState.PROCESSED


def dfs(
    graph: AdjacencyList,
    label: str,
    early_vertex: VertexCallback | None = None,
    late_vertex: VertexCallback | None = None,
    process_edge: EdgeCallback | None = None,
) -> None:
    """Depth-first search from the vertex labelled ``label``."""
    early = early_vertex or _ignore
    late = late_vertex or _ignore
    on_edge = process_edge or _ignore

    start = graph.index_of(label)
    states = [VertexState.UNDISCOVERED] * len(graph)
    parents: list[int | None] = [None] * len(graph)

    def enter(vertex: Vertex) -> None:
        states[vertex.idx] = VertexState.DISCOVERED
        early(TraversalVertex(vertex, graph, parents, states))
        stack.append((vertex, iter(vertex.edges)))

    stack: list[tuple[Vertex, object]] = []
    enter(graph.vertices[start])
    while stack:
        vertex, edges = stack[-1]
        for edge in edges:  # type: ignore[attr-defined]
            on_edge(edge)
            nxt = edge.target_idx
            if states[nxt] is VertexState.UNDISCOVERED:
                parents[nxt] = vertex.idx
                enter(graph.vertices[nxt])
                break
        else:
            late(TraversalVertex(vertex, graph, parents, states))
            states[vertex.idx] = VertexState.PROCESSED
            stack.pop()