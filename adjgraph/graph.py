"""Adjacency-list graphs loaded from a small line-oriented text format.

The first line holds options in brackets separated by semicolons, for
example ``[DIRECTED; WEIGHTED]``. Every following line is one edge:
``A - B`` (or ``A -> B``) links ``A`` to ``B``, ``A <-> B`` links both ways
even in a directed graph, and in a weighted graph the weight follows a
semicolon: ``A - B; 7``.
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from typing import TextIO

_ENDPOINT_TRIM = "<> "
_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be parsed."""


@dataclass(frozen=True)
class Edge:
    """A directed edge to the vertex at ``target_idx``."""

    target_idx: int
    weight: int = 0


@dataclass(eq=False)
class Vertex:
    """A vertex with its position, label and outgoing edges."""

    idx: int
    label: str
    edges: list[Edge] = field(default_factory=list)

    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.idx == other.idx

    def __hash__(self) -> int:
        return hash(self.idx)


def _endpoints(edge_text: str) -> list[str]:
    return [part.strip(_ENDPOINT_TRIM) for part in edge_text.split("-")]


def _parse_weight(text: str, line_no: int) -> int:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        raise GraphFormatError(f"line {line_no}: invalid weight {text!r}")
    weight = int(text)
    if not _I32_MIN <= weight <= _I32_MAX:
        raise GraphFormatError(f"line {line_no}: weight {weight} out of range")
    return weight


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class AdjacencyList:
    """A graph stored as a list of vertices, each with its outgoing edges."""

    def __init__(
        self,
        vertices: list[Vertex],
        *,
        directed: bool,
        weighted: bool,
        nonnegative: bool,
    ) -> None:
        self.vertices = vertices
        self.directed = directed
        self.weighted = weighted
        self.nonnegative = nonnegative
        self._index = {vertex.label: vertex.idx for vertex in vertices}

    @classmethod
    def load(cls, stream: TextIO) -> AdjacencyList:
        """Read a graph from a text stream."""
        header = stream.readline()
        options = [opt.strip() for opt in header.strip("[]\n\r").split(";")]
        directed = "DIRECTED" in options
        weighted = "WEIGHTED" in options
        lines = _split_lines(stream.read())
        first_line = 2

        vertices: list[Vertex] = []
        index: dict[str, int] = {}
        for line_no, line in enumerate(lines, start=first_line):
            labels = _endpoints(line.split(";")[0])
            if len(labels) != 2:
                raise GraphFormatError(f"line {line_no}: expected one edge, got {line!r}")
            for label in labels:
                if label not in index:
                    index[label] = len(vertices)
                    vertices.append(Vertex(len(vertices), label))

        nonnegative = True
        for line_no, line in enumerate(lines, start=first_line):
            parts = line.split(";")
            weight = 0
            if weighted:
                if len(parts) < 2:
                    raise GraphFormatError(f"line {line_no}: missing weight")
                weight = _parse_weight(parts[1], line_no)
                if weight < 0:
                    nonnegative = False

            edge_text = parts[0]
            both_ways = "<->" in edge_text
            source, target = _endpoints(edge_text)
            x, y = index[source], index[target]
            if any(edge.target_idx == y for edge in vertices[x].edges):
                continue
            vertices[x].edges.append(Edge(y, weight))
            if not directed or both_ways:
                vertices[y].edges.append(Edge(x, weight))

        return cls(vertices, directed=directed, weighted=weighted, nonnegative=nonnegative)

    @classmethod
    def loads(cls, text: str) -> AdjacencyList:
        """Read a graph from a string."""
        return cls.load(io.StringIO(text))

    def __len__(self) -> int:
        return len(self.vertices)

    def index_of(self, label: str) -> int:
        """Position of the vertex with ``label``; KeyError if there is none."""
        try:
            return self._index[label]
        except KeyError:
            raise KeyError(f"no vertex labelled {label!r}") from None

    def vertex(self, label: str) -> Vertex:
        """The vertex with ``label``; KeyError if there is none."""
        return self.vertices[self.index_of(label)]