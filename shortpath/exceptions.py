"""Custom exception types used across :mod:`shortpath`."""

from __future__ import annotations


class ShortPathError(Exception):
    """Base class for all package-specific errors."""


class InputError(ShortPathError, ValueError):
    """Raised for invalid caller input such as unknown labels."""


class DuplicateVertexError(InputError):
    """Raised when adding a vertex whose label is already in the graph."""


class UnknownVertexError(InputError):
    """Raised when an edge or query references a label not in the graph."""


class GraphFormatError(InputError):
    """Raised for malformed edges or when parsing a graph file fails."""


class NegativeWeightError(GraphFormatError):
    """Raised when an edge weight is negative."""


class ConfigError(ShortPathError, ValueError):
    """Raised for invalid configuration options."""


class AlgorithmError(ShortPathError, RuntimeError):
    """Raised when heap or map invariants are violated at runtime."""


__all__ = [
    "ShortPathError",
    "InputError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "GraphFormatError",
    "NegativeWeightError",
    "ConfigError",
    "AlgorithmError",
]
