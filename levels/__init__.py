# -*- coding: utf-8 -*-
"""
Validity oracles consumed by the agents.
Exposes:
- GridLevel (numpy occupancy grid, ASCII load/save)
- OpenPlane (obstacle-free lattice, optionally bounded)
- random_level(...)
"""

from __future__ import annotations

from .level import GridLevel, OpenPlane, ValidityOracle
from .generator import random_level

__all__ = [
    "GridLevel",
    "OpenPlane",
    "ValidityOracle",
    "random_level",
]
