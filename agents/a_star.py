#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* agent.
- Frontier ordered by f(n) = g(n) + h(n).
- g: number of moves from the start (1 per move, independent of step unit).
- h: d(n, start) + d(n, goal), straight-line distances in coordinate units.
  This is not an admissible heuristic, so returned paths can be suboptimal.
- Frontier duplicates are replaced only on strictly smaller f; closed states
  are never reopened, even if a cheaper path to them turns up later.
"""

from __future__ import annotations
from typing import Tuple

from .base import SearchAgent
from .frontier import PriorityFrontier
from .heuristics import start_goal_distance

State = Tuple[int, int]


class AStarAgent(SearchAgent):
    label = "Astar Agent"
    frontier_cls = PriorityFrontier

    def heuristic(self, state: State) -> float:
        return start_goal_distance(state, self.start, self.goal)

    def priority(self, state: State, cost: float) -> float:
        return float(cost) + self.heuristic(state)
