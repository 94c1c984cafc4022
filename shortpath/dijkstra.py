"""Dijkstra search driven by a :class:`~shortpath.prioritymap.PriorityMap`."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .exceptions import AlgorithmError, UnknownVertexError
from .graph import Graph, Label, Weight
from .logger import Logger, NoopLogger
from .pair import Pair
from .path import Path, reconstruct_path
from .prioritymap import PriorityMap


@dataclass(frozen=True, order=True)
class Tentative:
    """Frontier priority of a vertex.

    Orders as ``(unreached, distance)``, so every reached vertex comes before
    :data:`UNREACHED` and no distance is ever added to a placeholder.
    """

    unreached: bool
    distance: Weight = 0

    @classmethod
    def reached(cls, distance: Weight) -> "Tentative":
        return cls(False, distance)


UNREACHED = Tentative(True)


@dataclass
class VertexRecord:
    """Per-query working state of one vertex.

    Attributes:
        label: Vertex label.
        adjacency: The graph's adjacency list for ``label`` (shared, read only).
        distance: Best known distance from the source, ``None`` if unreached.
        predecessor: Arena index of the previous vertex on the best path.
    """

    label: Label
    adjacency: List[Pair[Label, Weight]]
    distance: Optional[Weight] = None
    predecessor: Optional[int] = None


@dataclass(frozen=True)
class SearchConfig:
    """Configuration knobs for :class:`DijkstraSearch`.

    Attributes:
        stop_at_destination: Stop as soon as the destination is polled instead
            of draining the whole frontier. Results are the same either way.
        check_invariants: Validate the frontier after every poll. O(n) per
            poll; meant for debugging.
    """

    stop_at_destination: bool = False
    check_invariants: bool = False


@dataclass(frozen=True)
class SearchMetrics:
    """Counters and timing collected from one search."""

    vertices: int
    edges: int
    counters: Dict[str, int]
    wall_ms: float


class DijkstraSearch:
    """Single-source, single-destination Dijkstra on a :class:`Graph`.

    Each call to :meth:`run` builds its own record arena and frontier, so a
    search object holds no state shared with other searches on the same graph.

    Args:
        graph: Graph to search. Must not be mutated while :meth:`run` executes.
        start: Source label.
        dest: Destination label.
        config: Optional search configuration.
        logger: Optional event logger.

    Raises:
        UnknownVertexError: If ``start`` or ``dest`` is not in ``graph``.
    """

    def __init__(
        self,
        graph: Graph,
        start: Label,
        dest: Label,
        config: Optional[SearchConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        for label in (start, dest):
            if label not in graph:
                raise UnknownVertexError(f"unknown vertex {label!r}")
        self.graph = graph
        self.start = start
        self.dest = dest
        self.cfg = config or SearchConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {
            "polls": 0,
            "edges_relaxed": 0,
            "decrease_keys": 0,
        }

    def run(self) -> Optional[Path]:
        """Return a shortest path from ``start`` to ``dest`` or ``None``."""
        for key in self.counters:
            self.counters[key] = 0
        records: List[VertexRecord] = []
        index: Dict[Label, int] = {}
        frontier: PriorityMap[Label, Tentative] = PriorityMap()
        for label, adjacency in self.graph.adj.items():
            index[label] = len(records)
            records.append(VertexRecord(label, adjacency))
            frontier.put(label, UNREACHED)

        records[index[self.start]].distance = 0
        frontier.put(self.start, Tentative.reached(0))

        dest_index: Optional[int] = None
        while frontier:
            pair = frontier.poll_min()
            if pair is None:
                break
            self.counters["polls"] += 1
            i = index[pair.first]
            v = records[i]
            if v.label == self.dest:
                dest_index = i
                if self.cfg.stop_at_destination:
                    break
            self._relax_neighbors(i, records, index, frontier)
            if self.cfg.check_invariants:
                frontier.check_invariants()

        if dest_index is None:
            raise AlgorithmError(f"destination {self.dest!r} was never polled")
        dest = records[dest_index]
        result: Optional[Path] = None
        if dest.distance is not None:
            vertices = reconstruct_path(records, dest_index)
            if vertices[0] == self.start:
                result = Path(total_distance=dest.distance, vertices=vertices)
        if result is None:
            self.logger.debug("unreachable", start=self.start, dest=self.dest)
        self.logger.info(
            "search",
            start=self.start,
            dest=self.dest,
            distance=None if result is None else result.total_distance,
            **self.counters,
        )
        return result

    def _relax_neighbors(
        self,
        i: int,
        records: List[VertexRecord],
        index: Dict[Label, int],
        frontier: PriorityMap[Label, Tentative],
    ) -> None:
        v = records[i]
        if v.distance is None:
            return
        du = v.distance
        for neighbor, weight in v.adjacency:
            if neighbor not in frontier:
                continue
            self.counters["edges_relaxed"] += 1
            w = records[index[neighbor]]
            candidate = du + weight
            if w.distance is None or candidate < w.distance:
                w.distance = candidate
                w.predecessor = i
                frontier.put(neighbor, Tentative.reached(candidate))
                self.counters["decrease_keys"] += 1
                self.logger.debug("decrease_key", vertex=neighbor, distance=candidate, via=v.label)

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters from the most recent run."""
        return dict(self.counters)

    def metrics(self, wall_ms: float) -> SearchMetrics:
        """Return metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`run` in milliseconds.
        """
        return SearchMetrics(
            vertices=len(self.graph),
            edges=self.graph.edge_count(),
            counters=self.summary(),
            wall_ms=wall_ms,
        )

    def timed_run(self) -> Tuple[Optional[Path], SearchMetrics]:
        """Run the search and return its result together with its metrics."""
        t0 = time.perf_counter()
        result = self.run()
        return result, self.metrics(wall_ms=(time.perf_counter() - t0) * 1000.0)


__all__ = [
    "UNREACHED",
    "DijkstraSearch",
    "SearchConfig",
    "SearchMetrics",
    "Tentative",
    "VertexRecord",
]
