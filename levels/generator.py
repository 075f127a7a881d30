#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
generator.py
------------
Random occupancy-grid levels for exercising the agents.

- Each cell is blocked independently with probability `density`.
- Start and goal cells are always left free.
- Reproducibility: explicit np.random.Generator.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .level import GridLevel

Cell = Tuple[int, int]


def random_level(H: int, W: int, density: float = 0.2,
                 rng: Optional[np.random.Generator] = None,
                 cell: int = 10,
                 start_cell: Optional[Cell] = None,
                 goal_cell: Optional[Cell] = None) -> GridLevel:
    """
    Returns a GridLevel of H x W cells with start/goal set.
    Defaults: start in the top-left corner, goal in the bottom-right corner.
    """
    if H <= 0 or W <= 0:
        raise ValueError(f"Bad size {H}x{W}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    if rng is None:
        rng = np.random.default_rng()

    start_cell = (0, 0) if start_cell is None else start_cell
    goal_cell = (H - 1, W - 1) if goal_cell is None else goal_cell
    for name, (r, c) in (("start", start_cell), ("goal", goal_cell)):
        if not (0 <= r < H and 0 <= c < W):
            raise ValueError(f"{name} cell {(r, c)} outside {H}x{W} grid")

    grid = rng.random((H, W)) < density
    grid[start_cell] = False
    grid[goal_cell] = False

    level = GridLevel(grid, cell=cell)
    level.start = level.cell_to_state(start_cell)
    level.goal = level.cell_to_state(goal_cell)
    return level
