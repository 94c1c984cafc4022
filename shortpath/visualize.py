"""
Drawing helpers for :class:`~shortpath.graph.Graph` using NetworkX + Matplotlib.

Example usage:

```
from shortpath.visualize import draw_graph
path = g.shortest_path("A", "D")
draw_graph(g, path, layout="kamada_kawai")
```
"""

from __future__ import annotations

from typing import Any, Optional, Set, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from .exceptions import ConfigError
from .graph import Graph
from .path import Path


def to_networkx(graph: Graph) -> nx.Graph:
    """Return an undirected NetworkX copy with weights in the ``weight`` attribute."""
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    for u, v, w in graph.edges():
        G.add_edge(u, v, weight=w)
    return G


def _layout(G: nx.Graph, layout: str) -> Any:
    if layout == "spring":
        return nx.spring_layout(G, seed=42)
    if layout == "kamada_kawai":
        return nx.kamada_kawai_layout(G)
    if layout == "shell":
        return nx.shell_layout(G)
    raise ConfigError(f"Unknown layout: {layout}")


def draw_graph(
    graph: Graph,
    path: Optional[Path] = None,
    *,
    layout: str = "spring",
    show_weights: bool = True,
    node_size: int = 300,
    ax: Any = None,
) -> Any:
    """
    Render the graph, highlighting the vertices and edges of ``path``.

    Returns:
        The Matplotlib axes drawn on.
    """
    G = to_networkx(graph)
    pos = _layout(G, layout)
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    on_path: Set[str] = set(path.vertices) if path is not None else set()
    path_edges: Set[Tuple[str, str]] = set()
    if path is not None:
        for u, v in zip(path.vertices, path.vertices[1:]):
            path_edges.add((u, v))
            path_edges.add((v, u))

    nx.draw_networkx_nodes(
        G,
        pos,
        ax=ax,
        node_color=["tab:red" if node in on_path else "tab:blue" for node in G.nodes],
        node_size=node_size,
        alpha=0.9,
    )
    nx.draw_networkx_edges(
        G,
        pos,
        ax=ax,
        edge_color=["tab:red" if e in path_edges else "tab:gray" for e in G.edges],
        width=[2.5 if e in path_edges else 1.0 for e in G.edges],
        alpha=0.7,
    )
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)

    if show_weights:
        nx.draw_networkx_edge_labels(
            G,
            pos,
            ax=ax,
            edge_labels={(u, v): w for u, v, w in G.edges(data="weight")},
            font_size=7,
        )

    title = "Weighted Graph"
    if path is not None:
        title += f" (distance {path.total_distance})"
    ax.set_title(title, fontsize=14)
    ax.axis("off")
    return ax


__all__ = ["draw_graph", "to_networkx"]
