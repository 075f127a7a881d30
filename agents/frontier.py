# -*- coding: utf-8 -*-
"""
Frontiers keyed by state.

Both frontiers keep a state -> entry map next to their ordering structure,
so "is this state already waiting, and with what priority" is a dict lookup.
At most one entry per state is live at any time.
"""

from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Dict, List, Tuple

State = Tuple[int, int]


class FIFOFrontier:
    """Queue order; priorities are recorded but never reorder entries."""

    def __init__(self):
        self.q = deque()
        self.index: Dict[State, Tuple[int, float]] = {}

    def push(self, state: State, node: int, priority: float = 0.0):
        assert state not in self.index, f"{state} already queued"
        self.q.append(state)
        self.index[state] = (node, priority)

    def pop(self) -> int:
        state = self.q.popleft()
        node, _ = self.index.pop(state)
        return node

    def __contains__(self, state: State) -> bool:
        return state in self.index

    def __len__(self) -> int:
        return len(self.index)

    def priority_of(self, state: State) -> float:
        return self.index[state][1]

    def node_of(self, state: State) -> int:
        return self.index[state][0]

    def replace(self, state: State, node: int, priority: float):
        self.index[state] = (node, priority)


class PriorityFrontier:
    """
    Min-heap with lazy deletion.

    Equal priorities pop in insertion order (monotonic counter), which makes
    searches reproducible for a fixed action enumeration.
    """

    _REMOVED = object()

    def __init__(self):
        self.h: List[list] = []
        self.index: Dict[State, list] = {}
        self.counter = itertools.count()

    def push(self, state: State, node: int, priority: float):
        assert state not in self.index, f"{state} already queued"
        entry = [priority, next(self.counter), node, state]
        self.index[state] = entry
        heapq.heappush(self.h, entry)

    def pop(self) -> int:
        while self.h:
            priority, _, node, state = heapq.heappop(self.h)
            if state is not self._REMOVED:
                del self.index[state]
                return node
        raise IndexError("pop from an empty frontier")

    def __contains__(self, state: State) -> bool:
        return state in self.index

    def __len__(self) -> int:
        return len(self.index)

    def priority_of(self, state: State) -> float:
        return self.index[state][0]

    def node_of(self, state: State) -> int:
        return self.index[state][2]

    def replace(self, state: State, node: int, priority: float):
        """Retire the live entry for `state` and queue `node` under the new priority."""
        old = self.index.pop(state)
        old[-1] = self._REMOVED
        self.push(state, node, priority)
