"""Public package exports for :mod:`shortpath`."""

from __future__ import annotations

from .dijkstra import UNREACHED, DijkstraSearch, SearchConfig, SearchMetrics, Tentative, VertexRecord
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DuplicateVertexError,
    GraphFormatError,
    InputError,
    NegativeWeightError,
    ShortPathError,
    UnknownVertexError,
)
from .generator import generate_graph
from .graph import Graph
from .heap import IndexedHeap, PriorityQueueProtocol
from .io import read_graph
from .logger import Logger, NoopLogger, StdLogger
from .pair import Pair, compare_second, natural_order
from .path import Path
from .prioritymap import PriorityMap

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "Path",
    "DijkstraSearch",
    "SearchConfig",
    "SearchMetrics",
    "Tentative",
    "UNREACHED",
    "VertexRecord",
    "IndexedHeap",
    "PriorityQueueProtocol",
    "PriorityMap",
    "Pair",
    "natural_order",
    "compare_second",
    "generate_graph",
    "read_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "ShortPathError",
    "InputError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "GraphFormatError",
    "NegativeWeightError",
    "ConfigError",
    "AlgorithmError",
]
