"""
Seeded random generator for weighted undirected graphs.

SUPPORTED GRAPH TYPES
---------------------
1. erdos_renyi
   Random edges between uniformly sampled vertex pairs.
2. grid
   2D grid with edges between horizontal and vertical neighbours, plus
   optional random extra edges up to ``m``.

All weights are integers drawn uniformly from ``[w_min, w_max]`` with
``w_min >= 0``, so every generated graph is safe for Dijkstra.
"""

from __future__ import annotations

import math
import random
from typing import Literal, Optional, Set, Tuple

from .exceptions import ConfigError
from .graph import Graph

GraphType = Literal["erdos_renyi", "grid"]


def generate_graph(
    n: int,
    m: Optional[int] = None,
    *,
    graph_type: GraphType = "erdos_renyi",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    ensure_connected: bool = True,
    prefix: str = "v",
) -> Graph:
    """
    Generate a weighted undirected graph with vertices ``prefix0 .. prefix{n-1}``.

    Notes:
    - If ensure_connected=True, a backbone chain (i -- i+1) is added first so
      every vertex is reachable from every other. Grids are always connected.
    - ``m`` is the target number of undirected edges; it is capped at
      ``n * (n - 1) / 2`` and never removes backbone or grid edges.

    Raises:
        ConfigError: For invalid sizes, weight bounds or graph types.
    """
    if n <= 0:
        raise ConfigError("n must be > 0.")
    if m is not None and m < 0:
        raise ConfigError("m must be >= 0.")
    if w_min < 0:
        raise ConfigError("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise ConfigError("w_max must be >= w_min.")
    if graph_type not in ("erdos_renyi", "grid"):
        raise ConfigError(f"Unknown graph_type: {graph_type}")

    rng = random.Random(seed)
    labels = [f"{prefix}{i}" for i in range(n)]
    g = Graph()
    for label in labels:
        g.add_vertex(label)

    seen: Set[Tuple[int, int]] = set()

    def add_edge(u: int, v: int) -> None:
        if u == v:
            return
        key = (min(u, v), max(u, v))
        if key in seen:
            return
        seen.add(key)
        g.add_edge(labels[u], labels[v], rng.randint(w_min, w_max))

    if graph_type == "grid":
        cols = max(1, math.isqrt(n))
        for u in range(n):
            if (u + 1) % cols != 0 and u + 1 < n:
                add_edge(u, u + 1)
            if u + cols < n:
                add_edge(u, u + cols)
    elif ensure_connected:
        for i in range(n - 1):
            add_edge(i, i + 1)

    if m is None:
        m = len(seen) if graph_type == "grid" else min(2 * n, n * (n - 1) // 2)
    target_m = min(m, n * (n - 1) // 2)
    while len(seen) < target_m:
        add_edge(rng.randrange(n), rng.randrange(n))
    return g


__all__ = ["GraphType", "generate_graph"]
