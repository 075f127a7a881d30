#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search agent (unweighted shortest hops).
- FIFO frontier; goal test on dequeue.
- Every move costs 1 (diagonals too when 8-connected).
- States are closed as soon as they are discovered, the start included,
  whereas the informed agents close a state only when it is expanded.
"""

from __future__ import annotations
from typing import Tuple

from .base import SearchAgent
from .frontier import FIFOFrontier

State = Tuple[int, int]


class BFSAgent(SearchAgent):
    label = "Breadth First Search"
    frontier_cls = FIFOFrontier
    close_on_discovery = True

    def priority(self, state: State, cost: float) -> float:
        return float(cost)
