"""Min-priority queue of vertices with an explicit decrease-key.

An indexed binary heap: alongside the heap array the queue keeps a
vertex -> position map, so a vertex already on the frontier is moved
up in place instead of being pushed a second time. Every operation is
O(log n).

Entries compare by (distance, insertion sequence); equal distances pop
in the order the vertices were first pushed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, List

from ..domain.errors import QueueProtocolError


@dataclass
class _Entry:
    distance: float
    seq: int
    vertex: Hashable

    def __lt__(self, other: _Entry) -> bool:
        return (self.distance, self.seq) < (other.distance, other.seq)


class DecreaseKeyQueue:
    """Indexed binary min-heap keyed by tentative distance."""

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._index: Dict[Hashable, int] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._index

    def empty(self) -> bool:
        return not self._heap

    def vertices(self) -> List[Hashable]:
        """Return the live vertices, in heap order."""
        return [entry.vertex for entry in self._heap]

    def peek_distance(self, vertex: Hashable) -> float:
        """Return the key currently recorded for a live ``vertex``."""
        try:
            return self._heap[self._index[vertex]].distance
        except KeyError:
            raise QueueProtocolError(
                f"vertex {vertex!r} has no live entry", vertex=vertex
            ) from None

    def push(self, vertex: Hashable, distance: float) -> None:
        """Insert a live entry for ``vertex``.

        Raises:
            QueueProtocolError: If ``vertex`` already has a live entry.
        """
        if vertex in self._index:
            raise QueueProtocolError(
                f"vertex {vertex!r} is already queued", vertex=vertex
            )
        entry = _Entry(distance, self._counter, vertex)
        self._counter += 1
        self._heap.append(entry)
        self._index[vertex] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop_min(self) -> Hashable:
        """Remove and return the vertex with the smallest distance.

        Raises:
            QueueProtocolError: If the queue is empty.
        """
        if not self._heap:
            raise QueueProtocolError("pop from an empty queue")

        top = self._heap[0]
        last = self._heap.pop()
        del self._index[top.vertex]
        if self._heap:
            self._heap[0] = last
            self._index[last.vertex] = 0
            self._sift_down(0)
        return top.vertex

    def decrease_key(
        self, vertex: Hashable, old_distance: float, new_distance: float
    ) -> None:
        """Lower the key of the live entry for ``vertex``.

        Args:
            vertex: A vertex with a live entry.
            old_distance: The key recorded when the entry was last set.
            new_distance: The new key; must be strictly smaller.

        Raises:
            QueueProtocolError: If the vertex is not live, ``old_distance``
                does not match the recorded key, or the key would not
                decrease.
        """
        position = self._index.get(vertex)
        if position is None:
            raise QueueProtocolError(
                f"decrease-key on vertex {vertex!r} with no live entry",
                vertex=vertex,
            )
        entry = self._heap[position]
        if entry.distance != old_distance:
            raise QueueProtocolError(
                f"stale key for vertex {vertex!r}: "
                f"expected {entry.distance}, got {old_distance}",
                vertex=vertex,
            )
        if not new_distance < old_distance:
            raise QueueProtocolError(
                f"decrease-key on vertex {vertex!r} would not decrease "
                f"({old_distance} -> {new_distance})",
                vertex=vertex,
            )
        entry.distance = new_distance
        self._sift_up(position)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].vertex] = i
        self._index[heap[j].vertex] = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // 2
            if not self._heap[position] < self._heap[parent]:
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        size = len(self._heap)
        while True:
            smallest = position
            for child in (2 * position + 1, 2 * position + 2):
                if child < size and self._heap[child] < self._heap[smallest]:
                    smallest = child
            if smallest == position:
                return
            self._swap(position, smallest)
            position = smallest
