#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared search-agent contract.

Usage:
    agent = AStarAgent(level)
    agent.configure(start=(0, 0), goal=(30, 0), connectivity=4)
    path = agent.plan()          # list of (x, y) or NO_PATH
    agent.tree_depth(), agent.reachable_states()
    agent.clear()

After plan() the agent retains the search tree and the path until clear().
`path` is None before planning and NO_PATH when planning found nothing.

Concrete strategies differ only in:
- frontier kind (FIFO or priority),
- priority(state, cost),
- whether states are closed when discovered or when expanded.
"""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Tuple, Union

from .actions import Action, ActionModel
from .config import AgentConfig
from .frontier import PriorityFrontier
from .tree import SearchNode, SearchTree

logger = logging.getLogger(__name__)

State = Tuple[int, int]


class _NoPath:
    """Planning finished without reaching the goal."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_PATH"


NO_PATH = _NoPath()


class SearchAgent:
    label = "Search Agent"

    # Strategy hooks
    frontier_cls = PriorityFrontier
    close_on_discovery = False

    def __init__(self, level=None, connectivity: int = 4, step: int = 10):
        assert connectivity in (4, 8)
        if step <= 0:
            raise ValueError(f"Step unit must be positive, got {step}")
        self.level = level
        self.conn = connectivity
        self.step = int(step)
        self.start: Optional[State] = None
        self.goal: Optional[State] = None
        self.path: Union[List[State], _NoPath, None] = None
        self.tree: Optional[SearchTree] = None
        self.nodes_expanded = 0

    def __str__(self) -> str:
        return self.label

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #

    def configure(self, start: Optional[State] = None, goal: Optional[State] = None,
                  connectivity: Optional[int] = None, step: Optional[int] = None) -> "SearchAgent":
        if start is not None:
            self.set_start(start)
        if goal is not None:
            self.set_goal(goal)
        if connectivity is not None:
            assert connectivity in (4, 8)
            self.conn = connectivity
        if step is not None:
            if step <= 0:
                raise ValueError(f"Step unit must be positive, got {step}")
            self.step = int(step)
        return self

    def apply_config(self, cfg: AgentConfig) -> "SearchAgent":
        return self.configure(start=cfg.start, goal=cfg.goal,
                              connectivity=cfg.connectivity, step=cfg.step)

    def set_start(self, start: State):
        self.start = (int(start[0]), int(start[1]))

    def set_goal(self, goal: State):
        self.goal = (int(goal[0]), int(goal[1]))

    def get_start(self) -> Optional[State]:
        return self.start

    def get_goal(self) -> Optional[State]:
        return self.goal

    def set_level(self, level):
        self.level = level

    def get_level(self):
        return self.level

    def set_all_direction(self, all_direction: bool):
        """Toggle 8-connected movement (True) vs. 4-connected (False)."""
        self.conn = 8 if all_direction else 4

    @property
    def all_direction(self) -> bool:
        return self.conn == 8

    @property
    def connectivity(self) -> int:
        return self.conn

    # ------------------------------------------------------------------ #
    # Action model (delegates to ActionModel with the current settings)
    # ------------------------------------------------------------------ #

    def action_model(self) -> ActionModel:
        assert self.level is not None, "agent has no level to query"
        return ActionModel(self.level.is_valid, connectivity=self.conn, step=self.step)

    def possible_actions(self, state: State) -> List[Action]:
        return self.action_model().possible_actions(state)

    def next_state(self, state: State, action: Action) -> State:
        return self.action_model().next_state(state, action)

    # ------------------------------------------------------------------ #
    # Strategy hook
    # ------------------------------------------------------------------ #

    def priority(self, state: State, cost: float) -> float:
        raise NotImplementedError

    # ------------------------------------------------------------------ #
    # Planning
    # ------------------------------------------------------------------ #

    def plan(self) -> Union[List[State], _NoPath]:
        """
        Build a fresh search tree from start and return the path to goal.

        Returns the list of states start..goal, or NO_PATH once the frontier
        is exhausted. The result is also kept in `self.path`.
        """
        assert self.start is not None, "start must be set before planning"
        assert self.goal is not None, "goal must be set before planning"

        model = self.action_model()
        tree = SearchTree()
        frontier = self.frontier_cls()
        closed: Set[State] = set()

        # A new tree never sits next to the previous plan's path.
        self.tree = tree
        self.path = None
        self.nodes_expanded = 0

        root = tree.add_root(self.start, self.priority(self.start, 0.0))
        frontier.push(root.state, root.index, root.priority)
        if self.close_on_discovery:
            closed.add(root.state)

        logger.debug("%s: planning %s -> %s (connectivity=%d, step=%d)",
                     self.label, self.start, self.goal, self.conn, self.step)

        while frontier:
            node = tree[frontier.pop()]
            if node.state == self.goal:
                self.path = tree.path_to(node.index)
                logger.debug("%s: reached goal, path of %d states, %d nodes in tree",
                             self.label, len(self.path), len(tree))
                return self.path

            if not self.close_on_discovery:
                closed.add(node.state)
            self.nodes_expanded += 1
            self._expand(node, model, tree, frontier, closed)

        self.path = NO_PATH
        logger.info("%s: no path from %s to %s (%d nodes expanded)",
                    self.label, self.start, self.goal, self.nodes_expanded)
        return self.path

    def _expand(self, node: SearchNode, model: ActionModel, tree: SearchTree,
                frontier, closed: Set[State]):
        cost = node.cost + 1
        for action in model.possible_actions(node.state):
            nxt = model.next_state(node.state, action)
            if nxt in closed:
                continue
            priority = self.priority(nxt, cost)
            if nxt in frontier:
                # Only a strictly better priority displaces the waiting entry.
                if priority < frontier.priority_of(nxt):
                    child = tree.reparent(frontier.node_of(nxt), node.index, action, cost, priority)
                    frontier.replace(nxt, child.index, priority)
                continue
            child = tree.add_child(node.index, nxt, action, cost, priority)
            frontier.push(nxt, child.index, priority)
            if self.close_on_discovery:
                closed.add(nxt)

    # ------------------------------------------------------------------ #
    # Results / tree introspection
    # ------------------------------------------------------------------ #

    def get_path(self) -> Union[List[State], _NoPath, None]:
        return self.path

    @property
    def root(self) -> Optional[SearchNode]:
        return self.tree.root if self.tree is not None else None

    @property
    def nodes_generated(self) -> int:
        return len(self.tree) if self.tree is not None else 0

    def path_from_node(self, node: Union[SearchNode, int]) -> List[State]:
        assert self.tree is not None, "no search tree"
        index = node.index if isinstance(node, SearchNode) else int(node)
        return self.tree.path_to(index)

    def tree_depth(self) -> int:
        if self.tree is None or not len(self.tree):
            return -1
        return self.tree.depth()

    def tree_height(self) -> int:
        if self.tree is None or not len(self.tree):
            return -1
        return self.tree.height()

    def reachable_states(self) -> Optional[List[State]]:
        if self.tree is None:
            return None
        return self.tree.bfs_states()

    def clear(self):
        """Back to the pre-plan state: no tree, no path."""
        self.tree = None
        self.path = None
        self.nodes_expanded = 0

    def summary(self) -> Dict:
        path = self.path if isinstance(self.path, list) else None
        return {
            "agent": self.label,
            "success": path is not None,
            "path": path,
            "path_length": len(path) - 1 if path else None,
            "depth": self.tree_depth(),
            "height": self.tree_height(),
            "explored": self.nodes_generated,
            "expanded": self.nodes_expanded,
        }
