#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
level.py
--------
Reference validity oracles for the search agents.

Grid convention: grid[r, c] == True means obstacle (blocked), False means free.
A state (x, y) lives on a lattice of spacing `cell` and maps to the grid cell
(r, c) = (y // cell, x // cell). States off the lattice are never valid.

ASCII levels (one row per line):
    '#'  blocked
    '.'  free
    'S'  free, start
    'G'  free, goal
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Tuple, Union

import numpy as np

State = Tuple[int, int]
Cell = Tuple[int, int]

_BLOCKED = "#"
_FREE = "."
_START = "S"
_GOAL = "G"


class ValidityOracle(Protocol):
    def is_valid(self, state: State) -> bool: ...


@dataclass
class GridLevel:
    """Occupancy-grid level with a fixed cell size."""
    grid: np.ndarray                # (H, W) bool array: True = occupied
    cell: int = 10
    start: Optional[State] = None
    goal: Optional[State] = None

    def __post_init__(self):
        self.grid = np.asarray(self.grid, dtype=bool)
        if self.grid.ndim != 2:
            raise ValueError(f"grid must be 2-D, got shape {self.grid.shape}")
        if self.cell <= 0:
            raise ValueError(f"cell size must be positive, got {self.cell}")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def H(self) -> int:
        return self.grid.shape[0]

    @property
    def W(self) -> int:
        return self.grid.shape[1]

    # -------------------------- coordinate mapping -------------------------- #

    def state_to_cell(self, state: State) -> Cell:
        x, y = state
        return (y // self.cell, x // self.cell)

    def cell_to_state(self, cell: Cell) -> State:
        r, c = cell
        return (int(c) * self.cell, int(r) * self.cell)

    # ------------------------------- oracle -------------------------------- #

    def is_valid(self, state: State) -> bool:
        x, y = state
        if x % self.cell or y % self.cell:
            return False
        r, c = y // self.cell, x // self.cell
        if not (0 <= r < self.H and 0 <= c < self.W):
            return False
        return not bool(self.grid[r, c])

    def free_cells(self) -> int:
        return int((~self.grid).sum())

    # ---------------------------- constructors ----------------------------- #

    @classmethod
    def open(cls, width: int, height: int, cell: int = 10) -> "GridLevel":
        """Obstacle-free level of `width` x `height` cells."""
        return cls(np.zeros((height, width), dtype=bool), cell=cell)

    @classmethod
    def from_ascii(cls, text: str, cell: int = 10) -> "GridLevel":
        rows = [line.strip() for line in text.strip().splitlines()]
        rows = [r for r in rows if r]
        if not rows:
            raise ValueError("empty level")
        W = len(rows[0])
        if any(len(r) != W for r in rows):
            raise ValueError(f"ragged level: row widths {sorted({len(r) for r in rows})}")

        grid = np.zeros((len(rows), W), dtype=bool)
        start = goal = None
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch == _BLOCKED:
                    grid[r, c] = True
                elif ch == _START:
                    if start is not None:
                        raise ValueError("level has more than one start 'S'")
                    start = (r, c)
                elif ch == _GOAL:
                    if goal is not None:
                        raise ValueError("level has more than one goal 'G'")
                    goal = (r, c)
                elif ch != _FREE:
                    raise ValueError(f"Bad level character {ch!r} at row {r}, col {c}")

        level = cls(grid, cell=cell)
        if start is not None:
            level.start = level.cell_to_state(start)
        if goal is not None:
            level.goal = level.cell_to_state(goal)
        return level

    @classmethod
    def load(cls, path: Union[str, Path], cell: int = 10) -> "GridLevel":
        return cls.from_ascii(Path(path).read_text(), cell=cell)

    def to_ascii(self) -> str:
        lines = []
        for r in range(self.H):
            row = []
            for c in range(self.W):
                state = self.cell_to_state((r, c))
                if state == self.start:
                    row.append(_START)
                elif state == self.goal:
                    row.append(_GOAL)
                else:
                    row.append(_BLOCKED if self.grid[r, c] else _FREE)
            lines.append("".join(row))
        return "\n".join(lines)


@dataclass
class OpenPlane:
    """
    Obstacle-free lattice. With bounds=None every lattice point is valid, so
    a search for an unreachable or off-lattice goal never terminates.
    bounds = (xmin, ymin, xmax, ymax), inclusive.
    """
    cell: int = 10
    bounds: Optional[Tuple[int, int, int, int]] = None

    def is_valid(self, state: State) -> bool:
        x, y = state
        if x % self.cell or y % self.cell:
            return False
        if self.bounds is None:
            return True
        xmin, ymin, xmax, ymax = self.bounds
        return xmin <= x <= xmax and ymin <= y <= ymax
