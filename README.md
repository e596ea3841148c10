# adjgraph

`adjgraph` loads graphs from a small line-based text format and stores them as
adjacency lists. It provides breadth-first search, depth-first search and
Prim's minimum spanning tree.

## Graph file format

The first line holds the options as a bracketed list separated by semicolons.
`DIRECTED` and `WEIGHTED` are recognised. Any other entry is ignored.

```
[WEIGHTED]
```

Each later line describes one edge, written as `A - B` or `A -> B`. In a
directed graph, `A <-> B` adds the edge in both directions. When the graph is
`WEIGHTED`, an integer weight follows a semicolon. The weight must fit in a
signed 32-bit integer.

```
[WEIGHTED]
Mulligan - Dublin; 4
Dublin - Cork; 7
Mulligan - Cork; 2
```

In an undirected graph every edge is added in both directions. If an edge from
the same source to the same target already exists, a later line for that edge
is skipped. Labels are split on `-`, so a label cannot contain that character.

## Library use

```python
from adjgraph.graph import AdjacencyList
from adjgraph.traversal import bfs, dfs
from adjgraph.spanning import prim

graph = AdjacencyList.loads(
    "[WEIGHTED]\n"
    "Mulligan - Dublin; 4\n"
    "Dublin - Cork; 7\n"
    "Mulligan - Cork; 2\n"
)

print(len(graph))                        # 3
print(graph.vertex("Mulligan").degree())  # 2
print(graph.index_of("Cork"))             # 2

for node in prim(graph, "Mulligan"):
    print(node.label, node.parent_idx, node.distance)

bfs(
    graph,
    "Mulligan",
    early_vertex=lambda v: print("enter", v.data.label),
    late_vertex=lambda v: print("leave", v.data.label),
)
```

### Loading

- `AdjacencyList.load(stream)` reads from an open text stream.
- `AdjacencyList.loads(text)` reads from a string.
- A malformed edge line, a missing weight, or a weight that is not a valid
  integer raises `GraphFormatError`, which is a subclass of `ValueError`.

A loaded graph exposes `vertices`, which is a list of `Vertex` with `idx`,
`label` and `edges`. It also has the flags `directed`, `weighted` and
`nonnegative`. Each `Edge` has a `target_idx` and a `weight`. `index_of(label)`
and `vertex(label)` raise `KeyError` for an unknown label.

### Traversal

`bfs` and `dfs` in `adjgraph.traversal` take the graph, a start label and
three optional callbacks:

- `early_vertex` is called when a vertex is entered.
- `late_vertex` is called when a vertex is left.
- `process_edge` is called with every `Edge` examined.

The vertex callbacks receive a `TraversalVertex`. Its `data` attribute is the
`Vertex`. `parent()` walks back along the search tree and returns `None` at the
start vertex. `state()` returns the vertex's current `VertexState`, which is
`UNDISCOVERED`, `DISCOVERED` or `PROCESSED`.

### Minimum spanning tree

`prim(graph, start_label)` in `adjgraph.spanning` returns one
`SpanningTreeNode` per vertex, in vertex order. Each node has a `label`, a
`parent_idx` (which is `None` for the start vertex) and a `distance`, the weight
of the edge to its parent. It raises `ValueError` in three cases:

- the graph is directed;
- the graph has a negative weight;
- a vertex cannot be reached from the start.

## Command line

```
adjgraph [PATH] [--start LABEL]
```

The command reads the graph file at `PATH`, which defaults to `test.graph`. It
prints the minimum spanning tree grown from the vertex `LABEL`, which defaults
to `Mulligan`. Each vertex gets one line:

```
(Cork) - parent :Mulligan, distance :2
```

On a read, format or algorithm error the command writes a message to standard
error and exits with status 1.

The command only runs Prim's algorithm. Breadth-first and depth-first search
are available through the library only.