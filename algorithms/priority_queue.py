"""
priority_queue.py — Min-Priority Queue with decrease-key
=========================================================
heapq plus an entry map, using the "mark removed, push fresh" pattern
from the heapq docs so `decrease_priority` is O(log n).

Tie-break: entries with equal priority come out in insertion order.
A re-prioritised vertex keeps the sequence number of its original
insert, so changing a priority never moves it behind later arrivals
with the same priority.  Nothing else orders ties; callers that need
a different tie-break must not rely on this one.
"""

import heapq
import itertools
from typing import Dict, List


class PriorityQueue:
    """
    Holds (vertex_id, priority) pairs; at most one live entry per vertex.

    Heap entries are [priority, seq, vertex_id, alive].
    """

    def __init__(self):
        self._heap:    List[list]      = []
        self._entries: Dict[str, list] = {}   # vertex_id → live heap entry
        self._counter = itertools.count()

    def insert(self, vertex_id: str, priority: float) -> None:
        """Add a vertex.  Inserting a queued vertex replaces its priority."""
        if vertex_id in self._entries:
            self.decrease_priority(vertex_id, priority)
            return
        entry = [priority, next(self._counter), vertex_id, True]
        self._entries[vertex_id] = entry
        heapq.heappush(self._heap, entry)

    def extract_min(self) -> str:
        """Remove and return the vertex with the smallest priority."""
        while self._heap:
            _, _, vertex_id, alive = heapq.heappop(self._heap)
            if alive:
                del self._entries[vertex_id]
                return vertex_id
        raise KeyError("extract_min from an empty priority queue")

    def decrease_priority(self, vertex_id: str, priority: float) -> None:
        """Set a queued vertex's priority.  No-op if the vertex is absent."""
        entry = self._entries.get(vertex_id)
        if entry is None:
            return
        entry[3] = False
        fresh = [priority, entry[1], vertex_id, True]
        self._entries[vertex_id] = fresh
        heapq.heappush(self._heap, fresh)

    def contains(self, vertex_id: str) -> bool:
        return vertex_id in self._entries

    def priority_of(self, vertex_id: str) -> float:
        return self._entries[vertex_id][0]

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __contains__(self, vertex_id: str) -> bool:
        return self.contains(vertex_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self)})"
