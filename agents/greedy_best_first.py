#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Greedy Best-First Search agent.
- Frontier ordered by h(n) = straight-line distance from n to the goal only.
- Neither optimal nor edge-count minimal.
- A duplicate already waiting in the frontier replaces it only when its h is
  strictly smaller; a duplicate of a closed state is dropped.
"""

from __future__ import annotations
from typing import Tuple

from .base import SearchAgent
from .frontier import PriorityFrontier
from .heuristics import goal_distance

State = Tuple[int, int]


class GreedyBestFirstAgent(SearchAgent):
    label = "Greedy Best First Search"
    frontier_cls = PriorityFrontier

    def priority(self, state: State, cost: float) -> float:
        return goal_distance(state, self.goal)
