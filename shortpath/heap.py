"""Binary min-heap with a position index for arbitrary removal."""

from __future__ import annotations

from itertools import count
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from .exceptions import AlgorithmError
from .pair import natural_order

E = TypeVar("E", bound=Hashable)
Handle = int
Comparator = Callable[[E, E], int]
_Entry = Tuple[Handle, E]


class PriorityQueueProtocol(Protocol[E]):
    """Protocol for queues that can drive a :class:`~shortpath.prioritymap.PriorityMap`."""

    def insert(self, element: E) -> Handle:
        """Add ``element`` and return its handle."""
        ...

    def peek_min(self) -> Optional[E]:
        """Return the minimum element without removing it."""
        ...

    def poll_min(self) -> Optional[E]:
        """Remove and return the minimum element."""
        ...

    def remove(self, element: E) -> bool:
        """Remove one element equal to ``element``."""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, element: object) -> bool:
        ...


class IndexedHeap(Generic[E]):
    """Array-backed binary min-heap that knows where every element lives.

    The array is 1-indexed: slot ``0`` is scratch space used as a sentinel
    while percolating up and is ``None`` between operations. Each insertion is
    assigned an integer handle. ``_slot_of`` maps handles to their current
    slot and ``_handles`` maps each distinct element (by equality) to the
    handles of all stored copies, oldest first. Every move inside the array
    goes through :meth:`_place`, which keeps ``_slot_of`` in step.

    Args:
        compare: Three-way comparator; lower values have higher priority.
            Defaults to :func:`~shortpath.pair.natural_order`.

    Examples:
        ```python
        >>> h = IndexedHeap()
        >>> for x in (5, 1, 3):
        ...     _ = h.insert(x)
        >>> h.remove(1)
        True
        >>> h.poll_min()
        3
        ```
    """

    def __init__(self, compare: Comparator[E] = natural_order) -> None:
        self._compare = compare
        self._array: List[Optional[_Entry[E]]] = [None]
        self._slot_of: Dict[Handle, int] = {}
        self._handles: Dict[E, List[Handle]] = {}
        self._ids = count()

    # ---- internals ----------------------------------------------------

    def _entry(self, slot: int) -> _Entry[E]:
        entry = self._array[slot]
        if entry is None:
            raise AlgorithmError(f"empty heap slot {slot}")
        return entry

    def _less(self, a: _Entry[E], b: _Entry[E]) -> bool:
        return self._compare(a[1], b[1]) < 0

    def _place(self, slot: int, entry: _Entry[E]) -> None:
        self._array[slot] = entry
        self._slot_of[entry[0]] = slot

    def _percolate_up(self, hole: int) -> int:
        """Move the entry at ``hole`` towards the root; return its final slot."""
        entry = self._entry(hole)
        self._array[0] = entry
        while self._less(entry, self._entry(hole // 2)):
            self._place(hole, self._entry(hole // 2))
            hole //= 2
        self._place(hole, entry)
        self._array[0] = None
        return hole

    def _percolate_down(self, hole: int) -> int:
        """Move the entry at ``hole`` towards the leaves; return its final slot."""
        entry = self._entry(hole)
        size = len(self._array) - 1
        while hole * 2 <= size:
            child = hole * 2
            if child != size and self._less(self._entry(child + 1), self._entry(child)):
                child += 1
            if not self._less(self._entry(child), entry):
                break
            self._place(hole, self._entry(child))
            hole = child
        self._place(hole, entry)
        return hole

    def _forget(self, entry: _Entry[E]) -> None:
        handle, element = entry
        del self._slot_of[handle]
        handles = self._handles[element]
        handles.remove(handle)
        if not handles:
            del self._handles[element]

    def _remove_slot(self, slot: int) -> E:
        entry = self._entry(slot)
        last = self._array.pop()
        self._forget(entry)
        if slot < len(self._array) and last is not None:
            # the replacement may belong above or below the vacated slot
            self._place(slot, last)
            self._percolate_down(self._percolate_up(slot))
        return entry[1]

    # ---- public API ---------------------------------------------------

    def insert(self, element: E) -> Handle:
        """Add ``element`` and restore heap order.

        Args:
            element: Hashable element to store. Equal elements may be stored
                more than once.

        Returns:
            The handle identifying this insertion.
        """
        handle = next(self._ids)
        self._array.append((handle, element))
        self._slot_of[handle] = len(self._array) - 1
        self._handles.setdefault(element, []).append(handle)
        self._percolate_up(len(self._array) - 1)
        return handle

    def peek_min(self) -> Optional[E]:
        """Return the minimum element or ``None`` if the heap is empty."""
        if len(self._array) == 1:
            return None
        return self._entry(1)[1]

    def poll_min(self) -> Optional[E]:
        """Remove and return the minimum element, ``None`` if empty."""
        if len(self._array) == 1:
            return None
        return self._remove_slot(1)

    def remove(self, element: E) -> bool:
        """Remove the oldest stored element equal to ``element``.

        Returns:
            ``True`` if an element was removed, ``False`` if none was present.
        """
        handles = self._handles.get(element)
        if not handles:
            return False
        self._remove_slot(self._slot_of[handles[0]])
        return True

    def remove_handle(self, handle: Handle) -> Optional[E]:
        """Remove the entry inserted under ``handle``.

        Returns:
            The removed element, or ``None`` if the handle is not in the heap.
        """
        slot = self._slot_of.get(handle)
        if slot is None:
            return None
        return self._remove_slot(slot)

    def positions(self, element: E) -> List[int]:
        """Return the sorted slots holding elements equal to ``element``."""
        return sorted(self._slot_of[h] for h in self._handles.get(element, ()))

    def check_invariants(self) -> None:
        """Verify heap order and that the position index mirrors the array.

        Raises:
            AlgorithmError: On the first inconsistency found.
        """
        if self._array[0] is not None:
            raise AlgorithmError("scratch slot 0 is not empty")
        size = len(self._array) - 1
        if len(self._slot_of) != size:
            raise AlgorithmError(f"index tracks {len(self._slot_of)} handles for {size} slots")
        tracked = 0
        for element, handles in self._handles.items():
            tracked += len(handles)
            for h in handles:
                slot = self._slot_of.get(h, 0)
                if not 0 < slot <= size or self._array[slot] != (h, element):
                    raise AlgorithmError(f"handle {h} does not point at {element!r}")
        if tracked != size:
            raise AlgorithmError(f"element index tracks {tracked} handles for {size} slots")
        for slot in range(2, size + 1):
            if self._less(self._entry(slot), self._entry(slot // 2)):
                raise AlgorithmError(f"heap order violated at slot {slot}")

    def __len__(self) -> int:
        return len(self._array) - 1

    def __bool__(self) -> bool:
        return len(self._array) > 1

    def __contains__(self, element: object) -> bool:
        return element in self._handles

    def __iter__(self) -> Iterator[E]:
        """Iterate over stored elements in array order (not sorted)."""
        for slot in range(1, len(self._array)):
            yield self._entry(slot)[1]

    def __str__(self) -> str:
        items = " ".join(str(e) for e in self)
        index = {str(e): self.positions(e) for e in self._handles}
        return f"Array: [{items}]\n Index: {index}"

    def __repr__(self) -> str:
        return f"IndexedHeap(size={len(self)})"


__all__ = ["Comparator", "Handle", "IndexedHeap", "PriorityQueueProtocol"]
