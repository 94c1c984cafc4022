import math

import pytest

from shortpath.exceptions import (
    DuplicateVertexError,
    GraphFormatError,
    InputError,
    NegativeWeightError,
    UnknownVertexError,
)
from shortpath.graph import Graph
from shortpath.pair import Pair


def test_add_vertex_rejects_duplicates():
    g = Graph()
    g.add_vertex("A")
    with pytest.raises(DuplicateVertexError):
        g.add_vertex("A")
    assert len(g) == 1


def test_add_vertex_requires_string_label():
    with pytest.raises(InputError):
        Graph().add_vertex(1)


def test_add_edge_is_symmetric(example_graph):
    assert Pair("B", 1) in example_graph.neighbors("A")
    assert Pair("A", 1) in example_graph.neighbors("B")
    assert example_graph.edge_weight("C", "A") == 5
    assert example_graph.edge_weight("A", "D") is None


def test_add_edge_unknown_vertex(example_graph):
    with pytest.raises(UnknownVertexError):
        example_graph.add_edge("A", "Z", 1)
    with pytest.raises(UnknownVertexError):
        example_graph.neighbors("Z")


def test_add_edge_negative_weight(example_graph):
    with pytest.raises(NegativeWeightError) as info:
        example_graph.add_edge("A", "D", -1)
    assert isinstance(info.value, GraphFormatError)
    assert isinstance(info.value, ValueError)
    assert example_graph.edge_weight("A", "D") is None


@pytest.mark.parametrize("weight", ["3", True, math.nan, math.inf, -math.inf, None])
def test_add_edge_non_numeric_weight(example_graph, weight):
    with pytest.raises(GraphFormatError):
        example_graph.add_edge("A", "D", weight)


def test_add_edge_replaces_existing_edge(example_graph):
    example_graph.add_edge("A", "B", 10)
    example_graph.add_edge("B", "A", 3)
    assert [p for p in example_graph.neighbors("A") if p.first == "B"] == [Pair("B", 3)]
    assert [p for p in example_graph.neighbors("B") if p.first == "A"] == [Pair("A", 3)]


def test_self_loop_stored_once():
    g = Graph.from_edges([("A", "A", 2), ("A", "A", 4)])
    assert g.neighbors("A") == [Pair("A", 4)]
    assert list(g.edges()) == [("A", "A", 4)]


def test_edges_yields_each_edge_once(example_graph):
    edges = sorted(example_graph.edges())
    assert edges == [("A", "B", 1), ("A", "C", 5), ("B", "C", 2), ("C", "D", 1)]
    assert example_graph.edge_count() == 4


def test_from_edges_with_isolated_vertices():
    g = Graph.from_edges([("x", "y", 1.5)], vertices=["z", "x"])
    assert g.vertices() == ["z", "x", "y"]
    assert g.edge_weight("y", "x") == 1.5
    assert "z" in g
    assert g.has_vertex("y")


def test_neighbors_returns_copy(example_graph):
    example_graph.neighbors("A").clear()
    assert len(example_graph.neighbors("A")) == 2


def test_str_dumps_adjacency(example_graph):
    text = str(example_graph)
    assert "A=[<B,1>, <C,5>]" in text
    assert "E=[]" in text
