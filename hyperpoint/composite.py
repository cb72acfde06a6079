"""Midpoints and interpolation built from point and matrix algebra."""

from __future__ import annotations

import numpy as np

from .matrices import rspintox
from .points import hdist0, normalize, xpush0, zlevel


def mid(ctx, h1: np.ndarray, h2: np.ndarray) -> np.ndarray:
    """Centre of the segment h1-h2: the chord midpoint projected back onto the manifold."""
    return normalize(ctx, np.asarray(h1, dtype=float) + np.asarray(h2, dtype=float))


def midz(ctx, h1: np.ndarray, h2: np.ndarray) -> np.ndarray:
    """Like mid, but keeps the average z-level of the inputs instead of projecting to level 1."""
    h1 = np.asarray(h1, dtype=float)
    h2 = np.asarray(h2, dtype=float)
    h3 = h1 + h2
    Z = 2.0
    if not ctx.euclid:
        Z = zlevel(ctx, h3) * 2 / (zlevel(ctx, h1) + zlevel(ctx, h2))
    return h3 / Z


def mid3(ctx, h1: np.ndarray, h2: np.ndarray, h3: np.ndarray) -> np.ndarray:
    s = np.asarray(h1, dtype=float) + np.asarray(h2, dtype=float) + np.asarray(h3, dtype=float)
    return mid(ctx, s, s)


def mid_at(ctx, h1: np.ndarray, h2: np.ndarray, v: float) -> np.ndarray:
    """Normalized chord interpolation; v=0 gives h1, v=1 gives h2."""
    h = np.asarray(h1, dtype=float) * (1 - v) + np.asarray(h2, dtype=float) * v
    return mid(ctx, h, h)


def mid_at_actual(ctx, h: np.ndarray, v: float) -> np.ndarray:
    """
    Point at fraction v of the way from the origin to h along the geodesic.

    Uses hdist0, so in flat geometry the parameter is applied to the squared
    distance; meaningful for curved geometry.
    """
    return rspintox(ctx, h) @ xpush0(ctx, hdist0(ctx, h) * v)


__all__ = ["mid", "midz", "mid3", "mid_at", "mid_at_actual"]
