import io

import pytest

from adjgraph.graph import AdjacencyList, Edge, GraphFormatError, Vertex


def labels_of(graph, vertex_label):
    vertex = graph.vertex(vertex_label)
    return [graph.vertices[e.target_idx].label for e in vertex.edges]


def test_vertices_numbered_in_order_of_first_appearance():
    graph = AdjacencyList.loads("[]\nA - B\nC - A\nB - D\n")
    assert [v.label for v in graph.vertices] == ["A", "B", "C", "D"]
    assert [v.idx for v in graph.vertices] == list(range(len(graph)))
    assert len(graph) == 4


def test_undirected_edges_go_both_ways():
    graph = AdjacencyList.loads("[]\nA - B\nA - C\n")
    assert labels_of(graph, "A") == ["B", "C"]
    assert labels_of(graph, "B") == ["A"]
    assert graph.directed is False
    assert graph.weighted is False


def test_directed_edges_only_forward():
    graph = AdjacencyList.loads("[DIRECTED]\nA -> B\n")
    assert graph.directed is True
    assert labels_of(graph, "A") == ["B"]
    assert labels_of(graph, "B") == []


def test_bidirected_edge_in_directed_graph():
    graph = AdjacencyList.loads("[DIRECTED]\nA <-> B\n")
    assert labels_of(graph, "A") == ["B"]
    assert labels_of(graph, "B") == ["A"]


def test_weights_are_read():
    graph = AdjacencyList.loads("[WEIGHTED]\nA - B; 7\n")
    assert graph.weighted is True
    assert graph.vertex("A").edges == [Edge(graph.index_of("B"), 7)]
    assert graph.vertex("B").edges == [Edge(graph.index_of("A"), 7)]
    assert graph.nonnegative is True


def test_negative_weight_clears_nonnegative():
    graph = AdjacencyList.loads("[WEIGHTED]\nA - B; -3\n")
    assert graph.nonnegative is False
    assert graph.vertex("A").edges[0].weight == -3


def test_duplicate_edges_keep_first():
    graph = AdjacencyList.loads("[WEIGHTED]\nA - B; 1\nB - A; 9\nA - B; 4\n")
    assert graph.vertex("A").degree() == 1
    assert graph.vertex("B").degree() == 1
    assert graph.vertex("A").edges[0].weight == 1


def test_header_options_with_spaces_and_crlf():
    graph = AdjacencyList.load(io.StringIO("[DIRECTED; WEIGHTED]\r\nA -> B; 2\r\n"))
    assert graph.directed is True
    assert graph.weighted is True
    assert labels_of(graph, "A") == ["B"]


def test_weight_ignored_when_unweighted():
    graph = AdjacencyList.loads("[]\nA - B; 5\n")
    assert graph.vertex("A").edges[0].weight == 0


@pytest.mark.parametrize(
    "text",
    [
        "[]\nA B\n",
        "[]\nA - B - C\n",
        "[]\nA - B\n\n",
        "[WEIGHTED]\nA - B\n",
        "[WEIGHTED]\nA - B; x\n",
        "[WEIGHTED]\nA - B; 99999999999\n",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(GraphFormatError):
        AdjacencyList.loads(text)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        AdjacencyList.loads("[]\nonly\n")


def test_unknown_label_raises_key_error():
    graph = AdjacencyList.loads("[]\nA - B\n")
    with pytest.raises(KeyError):
        graph.index_of("Z")
    with pytest.raises(KeyError):
        graph.vertex("Z")


def test_vertex_equality_by_index():
    assert Vertex(1, "x") == Vertex(1, "y")
    assert not (Vertex(1, "x") == Vertex(2, "x"))
    assert len({Vertex(3, "a"), Vertex(3, "b")}) == 1


def test_empty_body_gives_empty_graph():
    graph = AdjacencyList.loads("[WEIGHTED]\n")
    assert len(graph) == 0
    assert graph.nonnegative is True