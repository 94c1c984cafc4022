"""Key/value map whose entries can be polled in value order."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from .exceptions import AlgorithmError, ConfigError
from .heap import IndexedHeap, PriorityQueueProtocol
from .pair import Pair, compare_second

K = TypeVar("K", bound=Hashable)
V = TypeVar("V", bound=Hashable)


class PriorityMap(Generic[K, V]):
    """Priority map backed by an :class:`~shortpath.heap.IndexedHeap`.

    Pairs ``(key, value)`` live in a heap ordered by value (lower value means
    higher priority) and the current value of every key is kept in a plain
    dictionary. ``get`` is O(1); ``put``, ``poll_min`` are O(log n).

    Re-putting an existing key removes its old pair from the heap and inserts
    the new one, which is how decrease-key is done.

    Args:
        queue: Empty queue of pairs to use instead of the default
            ``IndexedHeap(compare_second)``. Its ordering decides what
            ``poll_min`` returns.

    Raises:
        ConfigError: If ``queue`` already holds elements.
    """

    def __init__(self, queue: Optional[PriorityQueueProtocol[Pair[K, V]]] = None) -> None:
        if queue is not None and len(queue):
            raise ConfigError("queue must be empty")
        self._heap: PriorityQueueProtocol[Pair[K, V]] = (
            queue if queue is not None else IndexedHeap(compare_second)
        )
        self._values: Dict[K, V] = {}

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the current value of ``key`` or ``default``."""
        return self._values.get(key, default)

    def put(self, key: K, value: V) -> None:
        """Set the value of ``key``, replacing any previous value.

        Args:
            key: Key to insert or update.
            value: New value; must be orderable against the other values.

        Raises:
            AlgorithmError: If the previous pair of ``key`` is missing from
                the heap.
        """
        if key in self._values:
            old = Pair(key, self._values[key])
            if not self._heap.remove(old):
                raise AlgorithmError(f"pair {old} missing from heap")
        self._heap.insert(Pair(key, value))
        self._values[key] = value

    def peek_min(self) -> Optional[Pair[K, V]]:
        """Return the pair with the smallest value without removing it."""
        return self._heap.peek_min()

    def poll_min(self) -> Optional[Pair[K, V]]:
        """Remove and return the pair with the smallest value."""
        pair = self._heap.poll_min()
        if pair is not None:
            del self._values[pair.first]
        return pair

    def items(self) -> List[Tuple[K, V]]:
        return list(self._values.items())

    def check_invariants(self) -> None:
        """Verify the heap holds exactly one pair per key in the table.

        Raises:
            AlgorithmError: On the first inconsistency found.
        """
        check = getattr(self._heap, "check_invariants", None)
        if check is not None:
            check()
        if len(self._heap) != len(self._values):
            raise AlgorithmError(f"heap holds {len(self._heap)} pairs for {len(self._values)} keys")
        for key, value in self._values.items():
            if Pair(key, value) not in self._heap:
                raise AlgorithmError(f"pair {Pair(key, value)} missing from heap")

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[K]:
        return iter(self._values)

    def __str__(self) -> str:
        return f"PriorityQueue: [{self._heap}]\n Map: {self._values}"

    def __repr__(self) -> str:
        return f"PriorityMap(size={len(self)})"


__all__ = ["PriorityMap"]
