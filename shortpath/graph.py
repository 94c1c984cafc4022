"""Weighted undirected graph keyed by string labels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .exceptions import DuplicateVertexError, GraphFormatError, InputError, NegativeWeightError, UnknownVertexError
from .logger import Logger
from .pair import Pair

if TYPE_CHECKING:
    from .dijkstra import SearchConfig
    from .path import Path

Label = str
Weight = Union[int, float]
Edge = Tuple[Label, Label, Weight]


@dataclass
class Graph:
    """Undirected graph with non-negative edge weights.

    Every edge is stored twice, once in the adjacency list of each endpoint.
    There is at most one edge per pair of vertices: adding an edge between
    vertices that are already connected replaces the old edge.

    Attributes:
        adj: Adjacency lists of ``Pair(neighbor, weight)`` keyed by label.
    """

    adj: Dict[Label, List[Pair[Label, Weight]]] = field(default_factory=dict)

    def add_vertex(self, label: Label) -> None:
        """Add an isolated vertex.

        Raises:
            InputError: If ``label`` is not a string.
            DuplicateVertexError: If ``label`` is already in the graph.
        """
        if not isinstance(label, str):
            raise InputError(f"vertex label must be a string, got {label!r}")
        if label in self.adj:
            raise DuplicateVertexError(f"vertex {label!r} already exists")
        self.adj[label] = []

    def add_edge(self, n1: Label, n2: Label, weight: Weight) -> None:
        """Connect ``n1`` and ``n2``, replacing any edge already between them.

        Args:
            n1: One endpoint.
            n2: The other endpoint.
            weight: Non-negative edge weight.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
            GraphFormatError: If ``weight`` is not a finite real number.
                Booleans, NaN and infinities are rejected.
            NegativeWeightError: If ``weight`` is negative.

        Examples:
            ```python
            >>> g = Graph()
            >>> g.add_vertex("A"); g.add_vertex("B")
            >>> g.add_edge("A", "B", 2)
            >>> g.edge_weight("B", "A")
            2
            ```
        """
        for label in (n1, n2):
            if label not in self.adj:
                raise UnknownVertexError(f"unknown vertex {label!r}")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or not math.isfinite(weight):
            raise GraphFormatError(f"non-numeric weight {weight!r} on edge ({n1}, {n2})")
        if weight < 0:
            raise NegativeWeightError(f"negative weight {weight} on edge ({n1}, {n2})")
        if self._remove_neighbor(n1, n2):
            self._remove_neighbor(n2, n1)
        self.adj[n1].append(Pair(n2, weight))
        if n1 != n2:
            self.adj[n2].append(Pair(n1, weight))

    def _remove_neighbor(self, label: Label, neighbor: Label) -> bool:
        adjacency = self.adj[label]
        for i, entry in enumerate(adjacency):
            if entry.first == neighbor:
                del adjacency[i]
                return True
        return False

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], vertices: Iterable[Label] = ()) -> "Graph":
        """Create a graph from ``(n1, n2, weight)`` triples.

        Args:
            edges: Edges to add, in order.
            vertices: Extra labels to add up front, e.g. isolated vertices.

        Returns:
            A graph containing every listed vertex and edge.
        """
        g = cls()
        for label in vertices:
            if label not in g.adj:
                g.add_vertex(label)
        for n1, n2, weight in edges:
            for label in (n1, n2):
                if label not in g.adj:
                    g.add_vertex(label)
            g.add_edge(n1, n2, weight)
        return g

    def has_vertex(self, label: Label) -> bool:
        return label in self.adj

    def vertices(self) -> List[Label]:
        """Return vertex labels in insertion order."""
        return list(self.adj)

    def neighbors(self, label: Label) -> List[Pair[Label, Weight]]:
        """Return a copy of the adjacency list of ``label``.

        Raises:
            UnknownVertexError: If ``label`` is not in the graph.
        """
        if label not in self.adj:
            raise UnknownVertexError(f"unknown vertex {label!r}")
        return list(self.adj[label])

    def edge_weight(self, n1: Label, n2: Label) -> Optional[Weight]:
        """Return the weight of the edge between ``n1`` and ``n2``, if any."""
        for neighbor, weight in self.adj.get(n1, ()):
            if neighbor == n2:
                return weight
        return None

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once, as ``(n1, n2, weight)``."""
        order = {label: i for i, label in enumerate(self.adj)}
        for label, adjacency in self.adj.items():
            for neighbor, weight in adjacency:
                if order[label] <= order[neighbor]:
                    yield label, neighbor, weight

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def shortest_path(
        self,
        start: Label,
        dest: Label,
        config: Optional["SearchConfig"] = None,
        logger: Logger | None = None,
    ) -> Optional["Path"]:
        """Return a shortest path from ``start`` to ``dest`` or ``None``.

        Runs Dijkstra's algorithm with a fresh priority map as the frontier.

        Args:
            start: Source label.
            dest: Destination label.
            config: Optional search configuration.
            logger: Optional event logger.

        Returns:
            The path with its total distance, or ``None`` when ``dest`` cannot
            be reached from ``start``.

        Raises:
            UnknownVertexError: If ``start`` or ``dest`` is not in the graph.
        """
        from .dijkstra import DijkstraSearch

        return DijkstraSearch(self, start, dest, config=config, logger=logger).run()

    def __contains__(self, label: object) -> bool:
        return label in self.adj

    def __len__(self) -> int:
        return len(self.adj)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{label}=[{', '.join(map(str, adjacency))}]" for label, adjacency in self.adj.items()) + "}"


__all__ = ["Edge", "Graph", "Label", "Weight"]
