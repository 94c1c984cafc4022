import matplotlib

matplotlib.use("Agg")

import pytest

from shortpath.graph import Graph


@pytest.fixture
def example_graph():
    """A--B=1, B--C=2, A--C=5, C--D=1 and an isolated E."""
    g = Graph()
    for label in "ABCDE":
        g.add_vertex(label)
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("A", "C", 5)
    g.add_edge("C", "D", 1)
    return g
