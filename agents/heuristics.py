# -*- coding: utf-8 -*-
"""
Heuristics used to order informed frontiers.

Distances are straight-line (Euclidean) in coordinate units, while path cost
counts moves. Neither heuristic is admissible in general; both are kept
exactly as written because they determine which path an agent returns.
"""

from __future__ import annotations
import math
from typing import Tuple

State = Tuple[int, int]


def distance(a: State, b: State) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def goal_distance(state: State, goal: State) -> float:
    """Greedy best-first: h(n) = d(n, goal)."""
    return distance(state, goal)


def start_goal_distance(state: State, start: State, goal: State) -> float:
    """A*: h(n) = d(n, start) + d(n, goal).

    Includes the distance back to the start, so nodes off the start-goal
    segment are penalised twice over.
    """
    return distance(state, start) + distance(state, goal)
