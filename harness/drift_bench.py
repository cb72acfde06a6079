#!/usr/bin/env python3
"""
Drift benchmark for chained isometries.

Composes a long, seeded sequence of random pushes and spins the way game
logic does once per frame, and measures how far the accumulated matrix
drifts from a valid isometry with and without periodic fixmatrix calls.

Exports:
- run_drift_bench(ctx, steps=500, fix_every=0, seed=0, step_size=0.1) -> dict
- compare_drift(ctx, steps=500, fix_every=10, seed=0, step_size=0.1) -> dict
- plot_drift(raw, fixed, path) -> str
- main(argv=None) -> int

Notes:
- Deterministic for a fixed seed (numpy.random.default_rng).
- Outputs are JSON-native (lists/ints/floats/bools/str).
- matplotlib is only needed for --plot and is imported lazily.
"""

from __future__ import annotations

import argparse
import json
import math
import time
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from hyperpoint import (
    GeometryContext,
    cpush,
    cspin,
    fixmatrix,
    identity,
    isometry_defect,
    on_manifold,
    tC0,
    intval,
    center,
)
from hyperpoint.utils.logging import csv_logger, get_logger, log_metric, log_metrics


def _manifold_error(ctx: GeometryContext, h: np.ndarray) -> float:
    if ctx.euclid:
        return float(abs(h[ctx.dim] - 1.0))
    target = 1.0 if ctx.sphere else -1.0
    return float(abs(intval(ctx, h, center(ctx)) - target))


def _random_move(ctx: GeometryContext, rng: np.random.Generator, step_size: float) -> np.ndarray:
    axis = int(rng.integers(0, ctx.dim))
    if rng.random() < 0.5:
        return cpush(ctx, axis, float(rng.uniform(-step_size, step_size)))
    a, b = sorted(int(i) for i in rng.choice(ctx.dim, size=2, replace=False))
    return cspin(ctx, a, b, float(rng.uniform(-np.pi, np.pi)))


def run_drift_bench(
    ctx: GeometryContext,
    steps: int = 500,
    fix_every: int = 0,
    seed: int = 0,
    step_size: float = 0.1,
) -> Dict[str, Any]:
    """
    Compose `steps` random moves and record the isometry defect after each.

    Parameters
    ----------
    ctx : GeometryContext
        Active geometry.
    steps : int
        Number of moves, >= 1.
    fix_every : int
        Call fixmatrix every `fix_every` steps; 0 disables correction.
    seed : int
        RNG seed.
    step_size : float
        Pushes are drawn uniformly from [-step_size, step_size], > 0.

    Returns
    -------
    dict
        kind, dim, steps, fix_every, seed, defect_final, defect_max,
        manifold_error_final, on_manifold, defects (list), elapsed_us.

    Raises
    ------
    ValueError
        On invalid steps/fix_every/step_size.
    """
    if int(steps) < 1:
        raise ValueError("steps must be >= 1")
    if int(fix_every) < 0:
        raise ValueError("fix_every must be >= 0")
    if not (float(step_size) > 0.0):
        raise ValueError("step_size must be > 0")

    rng = np.random.default_rng(int(seed))
    T = identity(ctx)
    defects: List[float] = []

    t0 = time.perf_counter()
    for k in range(1, int(steps) + 1):
        T = T @ _random_move(ctx, rng, float(step_size))
        if fix_every and k % int(fix_every) == 0:
            T = fixmatrix(ctx, T)
        defects.append(isometry_defect(ctx, T))
    elapsed_us = (time.perf_counter() - t0) * 1e6

    h = tC0(T)
    return {
        "kind": ctx.kind.name.lower(),
        "dim": int(ctx.dim),
        "steps": int(steps),
        "fix_every": int(fix_every),
        "seed": int(seed),
        "defect_final": float(defects[-1]),
        "defect_max": float(max(defects)),
        "manifold_error_final": _manifold_error(ctx, h),
        "on_manifold": bool(on_manifold(ctx, h, atol=1e-6)),
        "defects": [float(d) for d in defects],
        "elapsed_us": float(elapsed_us),
    }


def compare_drift(
    ctx: GeometryContext,
    steps: int = 500,
    fix_every: int = 10,
    seed: int = 0,
    step_size: float = 0.1,
) -> Dict[str, Any]:
    """Run the same move sequence without and with periodic fixmatrix."""
    if int(fix_every) < 1:
        raise ValueError("fix_every must be >= 1 for a comparison")
    raw = run_drift_bench(ctx, steps=steps, fix_every=0, seed=seed, step_size=step_size)
    fixed = run_drift_bench(ctx, steps=steps, fix_every=fix_every, seed=seed, step_size=step_size)
    denom = fixed["defect_final"]
    ratio = raw["defect_final"] / denom if denom > 0.0 else float("inf")
    return {"raw": raw, "fixed": fixed, "improvement_ratio": float(ratio)}


def plot_drift(raw: Dict[str, Any], fixed: Dict[str, Any], path: str) -> str:
    """Save a log-scale plot of both defect series to `path` (PNG)."""
    from matplotlib.figure import Figure
    from matplotlib.backends.backend_agg import FigureCanvasAgg

    fig = Figure(figsize=(6, 4), dpi=100)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    eps = np.finfo(float).tiny
    xs = np.arange(1, len(raw["defects"]) + 1)
    ax.semilogy(xs, np.maximum(raw["defects"], eps), label="raw")
    ax.semilogy(xs, np.maximum(fixed["defects"], eps), label=f"fixmatrix every {fixed['fix_every']}")
    ax.set_xlabel("step")
    ax.set_ylabel("isometry defect")
    ax.set_title(f"{raw['kind']} dim={raw['dim']}")
    ax.legend()
    fig.savefig(path)
    return path


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Isometry drift benchmark (with/without fixmatrix).")
    p.add_argument("--kind", default="hyperbolic", help="euclid | hyperbolic | sphere")
    p.add_argument("--dim", type=int, default=2, choices=(2, 3))
    p.add_argument("--elliptic", action="store_true", help="antipodal identification (sphere only)")
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--fix-every", type=int, default=10)
    p.add_argument("--step-size", type=float, default=0.1)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--csv", default=None, help="append summary metrics to this CSV")
    p.add_argument("--plot", default=None, help="write a PNG of the defect curves")
    p.add_argument("--json", action="store_true", help="print the full result as JSON")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    ctx = GeometryContext.from_mapping({"kind": args.kind, "dim": args.dim, "elliptic": args.elliptic})
    res = compare_drift(ctx, steps=args.steps, fix_every=args.fix_every, seed=args.seed, step_size=args.step_size)

    metrics = {
        "raw_defect_final": res["raw"]["defect_final"],
        "raw_defect_max": res["raw"]["defect_max"],
        "fixed_defect_final": res["fixed"]["defect_final"],
        "fixed_defect_max": res["fixed"]["defect_max"],
        "raw_manifold_error": res["raw"]["manifold_error_final"],
        "fixed_manifold_error": res["fixed"]["manifold_error_final"],
    }
    logger = get_logger()
    log_metrics(metrics, step=args.steps, logger=logger)
    if math.isfinite(res["improvement_ratio"]):
        log_metric("improvement_ratio", res["improvement_ratio"], step=args.steps, logger=logger)

    if args.csv:
        write_csv = csv_logger(args.csv)
        write_csv({**metrics, "steps": float(args.steps), "fix_every": float(args.fix_every)})
    if args.plot:
        plot_drift(res["raw"], res["fixed"], args.plot)
        logger.info("wrote plot %s", args.plot)
    if args.json:
        print(json.dumps(res))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
