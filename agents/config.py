# -*- coding: utf-8 -*-
"""Plain configuration record for a search agent."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

State = Tuple[int, int]


@dataclass
class AgentConfig:
    start: Optional[State] = None
    goal: Optional[State] = None
    connectivity: int = 4       # 4 or 8
    step: int = 10              # coordinate displacement of one move

    def __post_init__(self):
        assert self.connectivity in (4, 8)
        if self.step <= 0:
            raise ValueError(f"Step unit must be positive, got {self.step}")
        if self.start is not None:
            self.start = (int(self.start[0]), int(self.start[1]))
        if self.goal is not None:
            self.goal = (int(self.goal[0]), int(self.goal[1]))
