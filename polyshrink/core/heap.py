"""Binary min-heap with a position map.

The simplifier needs to re-key a vertex whenever one of its neighbours is
removed or restored. A plain ``heapq`` list cannot locate an item, so this
heap keeps an ``item -> slot`` map alongside the array and supports
``update`` and ``discard`` in O(log n).
"""

from typing import Any, Callable, Dict, Generic, Hashable, List, Tuple, TypeVar

T = TypeVar('T', bound=Hashable)


class IndexedHeap(Generic[T]):
    """Min-heap ordered by ``key(item)`` that can re-key and drop items.

    Keys are computed when an item is pushed or updated and stored alongside
    it, so the key function is not called during comparisons.

    Args:
        key: Function returning a comparable key for an item

    Examples:
        >>> heap = IndexedHeap(key=lambda item: item[1])
        >>> heap.push(('a', 3))
        >>> heap.push(('b', 1))
        >>> heap.peek()
        ('b', 1)
    """

    def __init__(self, key: Callable[[T], Any]):
        self._key = key
        self._entries: List[Tuple[Any, T]] = []
        self._positions: Dict[T, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, item: T) -> bool:
        return item in self._positions

    def push(self, item: T) -> None:
        """Insert ``item``; an item already present is re-keyed instead."""
        if item in self._positions:
            self.update(item)
            return
        self._entries.append((self._key(item), item))
        self._positions[item] = len(self._entries) - 1
        self._sift_up(len(self._entries) - 1)

    def peek(self) -> T:
        """Return the smallest item without removing it.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._entries:
            raise IndexError('peek from empty heap')
        return self._entries[0][1]

    def pop(self) -> T:
        """Remove and return the smallest item.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._entries:
            raise IndexError('pop from empty heap')
        item = self._entries[0][1]
        self._remove_at(0)
        return item

    def update(self, item: T) -> None:
        """Recompute the key of ``item`` and restore heap order.

        Items that are not in the heap are ignored.
        """
        position = self._positions.get(item)
        if position is None:
            return
        old_key = self._entries[position][0]
        new_key = self._key(item)
        self._entries[position] = (new_key, item)
        if new_key < old_key:
            self._sift_up(position)
        else:
            self._sift_down(position)

    def discard(self, item: T) -> None:
        """Remove ``item`` if present."""
        position = self._positions.get(item)
        if position is not None:
            self._remove_at(position)

    def _remove_at(self, position: int) -> None:
        removed = self._entries[position][1]
        last = self._entries.pop()
        del self._positions[removed]
        if position == len(self._entries):
            return
        self._entries[position] = last
        self._positions[last[1]] = position
        self._sift_up(position)
        self._sift_down(self._positions[last[1]])

    def _swap(self, i: int, j: int) -> None:
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self._positions[entries[i][1]] = i
        self._positions[entries[j][1]] = j

    def _sift_up(self, position: int) -> None:
        entries = self._entries
        while position > 0:
            parent = (position - 1) // 2
            if entries[position][0] < entries[parent][0]:
                self._swap(position, parent)
                position = parent
            else:
                break

    def _sift_down(self, position: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            smallest = position
            left = 2 * position + 1
            right = left + 1
            if left < size and entries[left][0] < entries[smallest][0]:
                smallest = left
            if right < size and entries[right][0] < entries[smallest][0]:
                smallest = right
            if smallest == position:
                return
            self._swap(position, smallest)
            position = smallest


__all__ = [
    'IndexedHeap',
]
