#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Search tree stored as an arena of nodes addressed by integer index.

- Index 0 is always the root (parent=None, action=None).
- parent / children hold indices, never object references; the parent link
  is a lookup only and the children list is the ownership edge.
- Nodes are only ever attached under an expanded node whose state is closed,
  which keeps the tree acyclic without any cycle detection.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .actions import Action

State = Tuple[int, int]


@dataclass
class SearchNode:
    """One explored state plus the provenance that produced it."""
    index: int
    state: State
    parent: Optional[int] = None
    action: Optional[Action] = None
    cost: float = 0.0           # accumulated g (moves from the root)
    priority: float = 0.0       # strategy-specific frontier key
    children: List[int] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children


class SearchTree:
    def __init__(self):
        self.nodes: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self.nodes)

    @property
    def root(self) -> Optional[SearchNode]:
        return self.nodes[0] if self.nodes else None

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def add_root(self, state: State, priority: float = 0.0) -> SearchNode:
        assert not self.nodes, "tree already has a root"
        node = SearchNode(index=0, state=state, priority=priority)
        self.nodes.append(node)
        return node

    def add_child(self, parent: int, state: State, action: Action,
                  cost: float, priority: float) -> SearchNode:
        node = SearchNode(index=len(self.nodes), state=state, parent=parent,
                          action=action, cost=cost, priority=priority)
        self.nodes.append(node)
        self.nodes[parent].children.append(node.index)
        return node

    def reparent(self, index: int, parent: int, action: Action,
                 cost: float, priority: float) -> SearchNode:
        """
        Move an unexpanded node under a new parent with fresh provenance.

        Used when a better duplicate replaces a frontier entry: the node keeps
        its index (and thus its frontier identity) but the old parent no
        longer lists it as a child.
        """
        node = self.nodes[index]
        assert node.parent is not None and not node.children
        self.nodes[node.parent].children.remove(index)
        node.parent = parent
        node.action = action
        node.cost = cost
        node.priority = priority
        self.nodes[parent].children.append(index)
        return node

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def path_to(self, index: int) -> List[State]:
        """States from the root to `index`, inclusive."""
        path: List[State] = []
        cur: Optional[int] = index
        while cur is not None:
            node = self.nodes[cur]
            path.append(node.state)
            cur = node.parent
        path.reverse()
        return path

    def depth(self, index: int = 0) -> int:
        """Max edges from `index` down to any leaf (0 for a leaf)."""
        # Post-order on an explicit stack; greedy trees can be far deeper
        # than the interpreter's recursion limit.
        best = {}
        stack = [(index, False)]
        while stack:
            i, done = stack.pop()
            children = self.nodes[i].children
            if not children:
                best[i] = 0
            elif done:
                best[i] = 1 + max(best[c] for c in children)
            else:
                stack.append((i, True))
                stack.extend((c, False) for c in children)
        return best[index]

    def height(self, index: int = 0) -> int:
        """Same measure as depth(): root-to-deepest-leaf edge count."""
        height = -1
        frontier = deque([(index, 0)])
        while frontier:
            i, level = frontier.popleft()
            height = max(height, level)
            frontier.extend((c, level + 1) for c in self.nodes[i].children)
        return height

    def bfs_states(self) -> List[State]:
        """One state per tree node, breadth-first from the root; not deduplicated."""
        states: List[State] = []
        if not self.nodes:
            return states
        queue = deque([0])
        while queue:
            node = self.nodes[queue.popleft()]
            states.append(node.state)
            queue.extend(node.children)
        return states
