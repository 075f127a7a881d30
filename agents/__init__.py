# -*- coding: utf-8 -*-
"""
Grid search agents with a unified API:
agent = get_agent(name, level, connectivity=4|8, step=10)
agent.configure(start=(x, y), goal=(x, y))
agent.plan() -> List[(x, y)] or NO_PATH
"""

from __future__ import annotations
from typing import Dict, Type

from .actions import Action, ActionModel
from .base import NO_PATH, SearchAgent
from .config import AgentConfig
from .a_star import AStarAgent
from .bfs import BFSAgent
from .greedy_best_first import GreedyBestFirstAgent

# Mapping used by factories/CLIs
AGENTS: Dict[str, Type[SearchAgent]] = {
    "a_star": AStarAgent,
    "bfs": BFSAgent,
    "greedy": GreedyBestFirstAgent,
}

__all__ = [
    "Action",
    "ActionModel",
    "AgentConfig",
    "AStarAgent",
    "BFSAgent",
    "GreedyBestFirstAgent",
    "NO_PATH",
    "SearchAgent",
    "AGENTS",
    "get_agent",
]


def get_agent(name: str, level=None, **kwargs) -> SearchAgent:
    """
    Factory: instantiate an agent by name.

    Parameters
    ----------
    name : str
        One of: 'a_star', 'bfs', 'greedy'
    level : object with is_valid((x, y)) -> bool
    kwargs : dict
        Passed to the agent constructor (e.g., connectivity=8, step=10)
    """
    key = name.strip().lower()
    if key not in AGENTS:
        raise ValueError(f"Unknown agent '{name}'. Available: {sorted(AGENTS)}")
    return AGENTS[key](level, **kwargs)
