"""Generic ordered pair and the comparators used to order heap entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Pair(Generic[A, B]):
    """Immutable two-element record with structural equality and hashing."""

    first: A
    second: B

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"<{self.first},{self.second}>"


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison of ``a`` and ``b`` using ``<`` and ``>``."""
    return (a > b) - (a < b)


def compare_second(p: Pair[Any, Any], q: Pair[Any, Any]) -> int:
    """Order pairs by their second field only."""
    return natural_order(p.second, q.second)


__all__ = ["Pair", "natural_order", "compare_second"]
