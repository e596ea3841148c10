"""Command line entry point: print the minimum spanning tree of a graph file."""

from __future__ import annotations

import argparse
import sys

from adjgraph.graph import AdjacencyList
from adjgraph.spanning import prim


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adjgraph", description="Print the minimum spanning tree of a graph file."
    )
    parser.add_argument("path", nargs="?", default="test.graph", help="graph file to read")
    parser.add_argument("--start", default="Mulligan", help="label of the start vertex")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load a graph, run Prim's algorithm and print each tree node."""
    args = _parser().parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as stream:
            graph = AdjacencyList.load(stream)
        tree = prim(graph, args.start)
    except (OSError, ValueError, KeyError) as exc:
        print(f"adjgraph: {exc}", file=sys.stderr)
        return 1

    for node in tree:
        parent = "None" if node.parent_idx is None else tree[node.parent_idx].label
        print(f"({node.label}) - parent :{parent}, distance :{node.distance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())