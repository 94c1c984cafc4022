import pytest

from shortpath.exceptions import ConfigError
from shortpath.generator import generate_graph


def test_same_seed_same_graph():
    a = generate_graph(20, 40, seed=9)
    b = generate_graph(20, 40, seed=9)
    assert list(a.edges()) == list(b.edges())


def test_vertex_labels_and_edge_count():
    g = generate_graph(10, seed=1)
    assert g.vertices() == [f"v{i}" for i in range(10)]
    assert g.edge_count() == 20


def test_edge_count_capped_at_complete_graph():
    g = generate_graph(5, 100, seed=0)
    assert g.edge_count() == 10


def test_connected_backbone():
    g = generate_graph(15, 0, seed=4)
    for label in g.vertices():
        assert g.shortest_path("v0", label) is not None


def test_weights_within_bounds():
    g = generate_graph(30, 80, w_min=2, w_max=5, seed=2)
    assert all(2 <= w <= 5 for _, _, w in g.edges())


def test_grid():
    g = generate_graph(9, graph_type="grid", prefix="c")
    assert g.edge_count() == 12
    assert g.edge_weight("c0", "c1") is not None
    assert g.edge_weight("c0", "c3") is not None
    assert g.edge_weight("c2", "c3") is None


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(n=0),
        dict(n=5, m=-1),
        dict(n=5, w_min=-1),
        dict(n=5, w_min=5, w_max=1),
        dict(n=5, graph_type="ring"),
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ConfigError):
        generate_graph(**kwargs)
