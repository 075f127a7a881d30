#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_plan.py
-----------
Run one or more search agents on a single level and report:
path, path length, tree depth/height, nodes explored/expanded.

Example:
    python -m cli.run_plan --level maps/wall.txt --agents a_star,bfs,greedy --connectivity 8
    python -m cli.run_plan --size 30x30 --density 0.2 --seed 3 --csv out/plan.csv

Level files are ASCII ('#' blocked, '.' free, 'S' start, 'G' goal).
--start/--goal override S/G and are given in state coordinates "x,y".
"""

from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from agents import AGENTS, NO_PATH, get_agent
from levels import GridLevel, random_level

FIELDNAMES = [
    "agent", "connectivity", "success", "path_length",
    "depth", "height", "explored", "expanded", "path",
]


def _parse_point(s: str) -> Tuple[int, int]:
    parts = s.replace(" ", "").split(",")
    if len(parts) != 2:
        raise ValueError(f"Bad point '{s}', expected like 10,20")
    return (int(parts[0]), int(parts[1]))


def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    if "x" not in token:
        raise ValueError(f"Bad size '{token}', expected like 30x30")
    h, w = token.split("x")
    return (int(h), int(w))


def _parse_agents(s: str) -> List[str]:
    names = [a.strip().lower() for a in s.split(",") if a.strip()]
    for name in names:
        if name not in AGENTS:
            raise ValueError(f"Unknown agent '{name}'. Available: {sorted(AGENTS)}")
    return names


def build_level(args) -> GridLevel:
    if args.level:
        level = GridLevel.load(args.level, cell=args.step)
    else:
        H, W = _parse_size(args.size)
        level = random_level(H, W, density=args.density,
                             rng=np.random.default_rng(args.seed), cell=args.step)
    if args.start:
        level.start = _parse_point(args.start)
    if args.goal:
        level.goal = _parse_point(args.goal)
    if level.start is None or level.goal is None:
        raise ValueError("Level has no start/goal; mark S/G in the file or pass --start/--goal")
    return level


def run_agents(level: GridLevel, names: Sequence[str], connectivity: int = 4) -> List[Dict]:
    rows = []
    for name in names:
        agent = get_agent(name, level, connectivity=connectivity, step=level.cell)
        agent.configure(start=level.start, goal=level.goal)
        agent.plan()
        row = agent.summary()
        row["connectivity"] = connectivity
        rows.append(row)
    return rows


def _print_rows(rows: List[Dict]):
    for row in rows:
        status = "OK" if row["success"] else repr(NO_PATH)
        print(f"{row['agent']}: {status} "
              f"length={row['path_length']} depth={row['depth']} height={row['height']} "
              f"explored={row['explored']} expanded={row['expanded']}")
        if row["path"]:
            print("  path: " + " -> ".join(f"({x},{y})" for x, y in row["path"]))


def _write_csv(rows: List[Dict], out_csv: str):
    out_dir = os.path.dirname(out_csv)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(out_csv, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({**row, "success": int(row["success"]),
                             "path": " ".join(f"{x},{y}" for x, y in (row["path"] or []))})


def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Plan a path on a grid level with one or more search agents.")
    ap.add_argument("--level", type=str, default=None, help="ASCII level file ('#', '.', 'S', 'G')")
    ap.add_argument("--size", type=str, default="20x20", help="Random level size HxW (when --level is not given)")
    ap.add_argument("--density", type=float, default=0.2, help="Random level obstacle density (0-1)")
    ap.add_argument("--seed", type=int, default=0, help="RNG seed for random levels")
    ap.add_argument("--agents", type=str, default="a_star,bfs,greedy",
                    help="Comma-separated agents: a_star,bfs,greedy")
    ap.add_argument("--connectivity", type=int, default=4, choices=[4, 8], help="Grid connectivity")
    ap.add_argument("--step", type=int, default=10, help="Step unit (= level cell size)")
    ap.add_argument("--start", type=str, default=None, help="Start state x,y (overrides S)")
    ap.add_argument("--goal", type=str, default=None, help="Goal state x,y (overrides G)")
    ap.add_argument("--csv", type=str, default=None, help="Write results to this CSV file")
    ap.add_argument("--verbose", action="store_true", help="Log search progress")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.step <= 0:
            raise ValueError(f"Step unit must be positive, got {args.step}")
        names = _parse_agents(args.agents)
        level = build_level(args)
    except (ValueError, OSError) as e:
        ap.error(str(e))

    rows = run_agents(level, names, connectivity=args.connectivity)
    _print_rows(rows)
    if args.csv:
        _write_csv(rows, args.csv)
        print(f"Saved: {args.csv}")
    return rows


if __name__ == "__main__":
    main()
