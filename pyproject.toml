[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adjgraph"
version = "0.1.0"
description = "Adjacency-list graphs loaded from a small text format, with BFS, DFS and Prim's minimum spanning tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency list", "bfs", "dfs", "prim", "minimum spanning tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adjgraph = "adjgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adjgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
