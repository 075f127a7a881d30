# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_plan        : run agents on one level (ASCII file or random) and print/CSV the results
- compare_agents  : benchmark agents across random levels into a CSV
"""
__all__ = [
    "run_plan",
    "compare_agents",
]
