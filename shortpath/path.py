"""Path results and reconstruction from predecessor back-references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence

from .exceptions import AlgorithmError
from .graph import Label, Weight

if TYPE_CHECKING:
    from .dijkstra import VertexRecord


@dataclass(frozen=True)
class Path:
    """A shortest path between two vertices.

    Attributes:
        total_distance: Sum of the edge weights along ``vertices``.
        vertices: Labels from source to destination, both inclusive.
    """

    total_distance: Weight
    vertices: List[Label]

    def __len__(self) -> int:
        return len(self.vertices)

    def __str__(self) -> str:
        return f"totalDist: {self.total_distance}, vertices: [{', '.join(self.vertices)}]"


def reconstruct_path(records: Sequence["VertexRecord"], target: int) -> List[Label]:
    """Return the labels from the root of ``target``'s tree down to ``target``.

    Args:
        records: Per-query record arena; ``predecessor`` fields index into it.
        target: Arena index of the destination record.

    Returns:
        Labels in source-to-target order. The first label is the source only
        if ``target`` was reached from it.

    Raises:
        AlgorithmError: If the predecessor chain loops.
    """
    chain: List[Label] = []
    cur: Optional[int] = target
    seen = set()
    while cur is not None:
        if cur in seen:
            raise AlgorithmError(f"predecessor cycle through {records[cur].label!r}")
        seen.add(cur)
        chain.append(records[cur].label)
        cur = records[cur].predecessor
    chain.reverse()
    return chain


__all__ = ["Path", "reconstruct_path"]
