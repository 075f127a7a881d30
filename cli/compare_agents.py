#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
compare_agents.py
-----------------
Benchmark the search agents on random levels (sizes x densities x seeds)
and write one CSV row per (level, agent).

Example:
    python -m cli.compare_agents --sizes 20x20,40x40 --densities 0.1,0.25 \
        --num-levels 10 --connectivity 8 --outdir results/csv
"""

from __future__ import annotations
import argparse
import csv
import os
import time
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from agents import get_agent
from levels import random_level
from cli.run_plan import _parse_agents, _parse_size

FIELDNAMES = [
    "level_id", "H", "W", "density", "seed", "agent", "connectivity",
    "success", "path_length", "diag_steps", "depth", "height",
    "explored", "expanded", "time_s",
]


def _parse_sizes(s: str) -> List[Tuple[int, int]]:
    return [_parse_size(token) for token in s.split(",")]


def _parse_densities(s: str) -> List[float]:
    vals = []
    for token in s.split(","):
        token = token.strip()
        if token.endswith("%"):
            vals.append(float(token[:-1]) / 100.0)
        else:
            vals.append(float(token))
    return vals


def diagonal_steps(path) -> int:
    if not path or len(path) < 2:
        return 0
    return sum(1 for (x0, y0), (x1, y1) in zip(path[:-1], path[1:]) if x0 != x1 and y0 != y1)


def run_case(name: str, level, connectivity: int = 4) -> Dict:
    agent = get_agent(name, level, connectivity=connectivity, step=level.cell)
    agent.configure(start=level.start, goal=level.goal)
    t0 = time.perf_counter()
    agent.plan()
    t1 = time.perf_counter()
    out = agent.summary()
    out["diag_steps"] = diagonal_steps(out["path"])
    out["time_s"] = t1 - t0
    out["connectivity"] = connectivity
    return out


def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Compare search agents across random levels.")
    ap.add_argument("--sizes", type=str, default="20x20,30x30", help="Comma-separated sizes like 20x20,30x30")
    ap.add_argument("--densities", type=str, default="0.10,0.20,0.30",
                    help="Comma-separated densities (0-1 or %%, e.g., 10%%)")
    ap.add_argument("--num-levels", type=int, default=10, help="Levels per (size, density)")
    ap.add_argument("--agents", type=str, default="a_star,bfs,greedy", help="Comma-separated agents")
    ap.add_argument("--connectivity", type=int, default=4, choices=[4, 8], help="Grid connectivity")
    ap.add_argument("--step", type=int, default=10, help="Step unit (= level cell size)")
    ap.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    ap.add_argument("--outdir", type=str, default="results/csv", help="Output directory for CSV")
    args = ap.parse_args(argv)

    try:
        sizes = _parse_sizes(args.sizes)
        densities = _parse_densities(args.densities)
        names = _parse_agents(args.agents)
    except ValueError as e:
        ap.error(str(e))

    os.makedirs(args.outdir, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_csv = os.path.join(args.outdir, f"compare_s{args.seed}_{stamp}.csv")

    rows = []
    level_id = 0
    for (H, W) in sizes:
        for dens in densities:
            for _ in range(args.num_levels):
                seed = args.seed * 1_000_003 + level_id * 97 + H * 11 + W * 13
                level = random_level(H, W, density=dens, rng=np.random.default_rng(seed), cell=args.step)
                level_id += 1
                for name in names:
                    row = run_case(name, level, connectivity=args.connectivity)
                    row.update({"level_id": level_id, "H": H, "W": W, "density": dens, "seed": seed})
                    rows.append(row)
                    print(f"[{level_id}] {H}x{W} d={dens:.2f} {row['agent']}: "
                          f"{'OK' if row['success'] else 'FAIL'} length={row['path_length']} "
                          f"explored={row['explored']} time={row['time_s']:.4f}s")

    with open(out_csv, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow({**row, "success": int(row["success"])})
    print(f"Saved: {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
