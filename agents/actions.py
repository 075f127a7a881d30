#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Action model shared by every search agent.

- 4-connected: N, S, W, E.
- 8-connected: the cardinals followed by NW, SE, NE, SW.
- Every move displaces each affected axis by exactly one step unit, so a
  diagonal move is NOT scaled by sqrt(2).

Coordinate convention: states are (x, y); N decreases y, E increases x.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, List, Tuple

State = Tuple[int, int]


class Action(Enum):
    N = (0, -1)
    S = (0, 1)
    W = (-1, 0)
    E = (1, 0)
    NW = (-1, -1)
    SE = (1, 1)
    NE = (1, -1)
    SW = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


# Canonical enumeration order; trees built from the same inputs are reproducible.
CARDINAL_ACTIONS: Tuple[Action, ...] = (Action.N, Action.S, Action.W, Action.E)
DIAGONAL_ACTIONS: Tuple[Action, ...] = (Action.NW, Action.SE, Action.NE, Action.SW)


class ActionModel:
    def __init__(self, is_valid: Callable[[State], bool], connectivity: int = 4, step: int = 10):
        assert connectivity in (4, 8)
        if step <= 0:
            raise ValueError(f"Step unit must be positive, got {step}")
        self.is_valid = is_valid
        self.conn = connectivity
        self.step = int(step)
        if connectivity == 8:
            self.actions = CARDINAL_ACTIONS + DIAGONAL_ACTIONS
        else:
            self.actions = CARDINAL_ACTIONS

    def next_state(self, state: State, action: Action) -> State:
        x, y = state
        return (x + action.dx * self.step, y + action.dy * self.step)

    def possible_actions(self, state: State) -> List[Action]:
        """Moves from `state` whose resulting cell the oracle accepts, in canonical order."""
        return [a for a in self.actions if self.is_valid(self.next_state(state, a))]
