"""Point algebra on homogeneous coordinates.

Points are float arrays of length ctx.mdim living on the active manifold:
- flat:        (x, y, [z,] 1)
- hyperbolic:  upper sheet of  x^2 + y^2 [+ z^2] - w^2 == -1, w > 0
- spherical:   unit sphere     x^2 + y^2 [+ z^2] + w^2 == +1

Under elliptic mode h and -h denote the same point.

Notes
- hdist0 returns the SQUARED distance in flat geometry but the true distance
  in curved geometry; hdist inherits this. Callers mixing geometries must
  take the square root themselves in the flat case.
- Operations never mutate their arguments.
"""

from __future__ import annotations

import math

import numpy as np

from .matrices import gpushxto0
from .trig import asin_auto_clamp, cos_auto, sin_auto


# ---- Construction ----

def center(ctx) -> np.ndarray:
    """Centre of the pseudosphere (the zero vector)."""
    return np.zeros(ctx.mdim, dtype=float)


def origin(ctx) -> np.ndarray:
    """Canonical origin C0 = (0, ..., 0, 1)."""
    h = center(ctx)
    h[ctx.dim] = 1.0
    return h


def hpxyz(ctx, x: float, y: float, z: float) -> np.ndarray:
    """Homogeneous triple; in 3D the third value goes to the last coordinate."""
    if ctx.dim == 2:
        return np.array([x, y, z], dtype=float)
    return np.array([x, y, 0.0, z], dtype=float)


def hpxyz3(ctx, x: float, y: float, z: float, w: float) -> np.ndarray:
    if ctx.dim == 2:
        return np.array([x, y, w], dtype=float)
    return np.array([x, y, z, w], dtype=float)


def _sqrt(x: float) -> float:
    # NaN off the manifold
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(x))


def _lift(ctx, r2: float) -> float:
    if ctx.euclid:
        return 1.0
    if ctx.sphere:
        return _sqrt(1 - r2)
    return _sqrt(1 + r2)


def hpxy(ctx, x: float, y: float) -> np.ndarray:
    """Lift (x, y) onto the active manifold."""
    return hpxyz(ctx, x, y, _lift(ctx, x * x + y * y))


def hpxy3(ctx, x: float, y: float, z: float) -> np.ndarray:
    return hpxyz3(ctx, x, y, z, _lift(ctx, x * x + y * y + z * z))


def cpush0(ctx, c: int, x: float) -> np.ndarray:
    """The origin pushed x units along axis c, i.e. cpush(c, x) @ C0."""
    h = center(ctx)
    h[ctx.dim] = cos_auto(ctx, x)
    h[c] = sin_auto(ctx, x)
    return h


def xpush0(ctx, x: float) -> np.ndarray:
    return cpush0(ctx, 0, x)


def ypush0(ctx, x: float) -> np.ndarray:
    return cpush0(ctx, 1, x)


def xspinpush0(ctx, alpha: float, x: float) -> np.ndarray:
    """spin(alpha) @ xpush0(x) without building either matrix."""
    h = center(ctx)
    s = sin_auto(ctx, x)
    h[ctx.dim] = cos_auto(ctx, x)
    h[0] = s * math.cos(alpha)
    h[1] = s * math.sin(alpha)
    return h


def tC0(T: np.ndarray) -> np.ndarray:
    """Image of the origin under T (its last column)."""
    return np.array(np.asarray(T)[:, -1], dtype=float)


# ---- Norms and levels ----

def zero_d(h: np.ndarray, d: int) -> bool:
    """True when the first d coordinates are exactly zero."""
    return not np.any(np.asarray(h)[:d])


def sqhypot_d(h: np.ndarray, d: int) -> float:
    v = np.asarray(h, dtype=float)[:d]
    return float(v @ v)


def hypot_d(h: np.ndarray, d: int) -> float:
    return math.sqrt(sqhypot_d(h, d))


def intval(ctx, h1: np.ndarray, h2: np.ndarray) -> float:
    """
    Signature-weighted squared difference sum_i sig(i) (h1[i] - h2[i])^2.

    With h2 = center(ctx) this evaluates the quadratic form at h1 and serves
    as the on-manifold check. Under elliptic mode the smaller of the values
    against h2 and -h2 is returned.
    """
    h1 = np.asarray(h1, dtype=float)
    h2 = np.asarray(h2, dtype=float)
    sig = np.diag(ctx.signature)
    diff = h1 - h2
    res = float(np.sum(sig * diff * diff))
    if ctx.elliptic:
        summ = h1 + h2
        res2 = float(np.sum(sig * summ * summ))
        return min(res, res2)
    return res


def zlevel(ctx, h: np.ndarray) -> float:
    if ctx.euclid:
        return float(h[ctx.dim])
    q = intval(ctx, h, center(ctx))
    if ctx.sphere:
        return _sqrt(q)
    return (-1.0 if h[ctx.dim] < 0 else 1.0) * _sqrt(-q)


def normalize(ctx, h: np.ndarray) -> np.ndarray:
    """Rescale h back onto the manifold. h must not be the zero vector."""
    h = np.asarray(h, dtype=float)
    return h / zlevel(ctx, h)


def on_manifold(ctx, h: np.ndarray, atol: float = 1e-9) -> bool:
    """Membership test for points produced by the kernel."""
    h = np.asarray(h, dtype=float)
    if ctx.euclid:
        return bool(abs(h[ctx.dim] - 1.0) <= atol)
    q = float(np.sum(np.diag(ctx.signature) * h * h))
    if ctx.sphere:
        return bool(abs(q - 1.0) <= atol)
    return bool(abs(q + 1.0) <= atol and h[ctx.dim] > 0)


def points_equal(h1: np.ndarray, h2: np.ndarray) -> bool:
    return bool(np.array_equal(np.asarray(h1), np.asarray(h2)))


# ---- Distances ----

def hdist0(ctx, mh: np.ndarray) -> float:
    """
    Distance from mh to the origin.

    Returns
    -------
    float
        hyperbolic: acosh(w), 0 for w < 1;
        flat: squared Euclidean norm of the affine part (NOT the distance);
        spherical: acos(w) clamped to [0, pi], folded into [0, pi/2] under
        elliptic mode.
    """
    w = float(mh[ctx.dim])
    if ctx.hyperbolic:
        if w < 1:
            return 0.0
        return math.acosh(w)
    if ctx.euclid:
        return sqhypot_d(mh, ctx.dim)
    res = 0.0 if w >= 1 else math.pi if w <= -1 else math.acos(w)
    if ctx.elliptic and res > math.pi / 2:
        res = math.pi - res
    return res


def hdist(ctx, h1: np.ndarray, h2: np.ndarray) -> float:
    """Distance between h1 and h2: move h1 to the origin, then measure h2."""
    return hdist0(ctx, gpushxto0(ctx, h1) @ np.asarray(h2, dtype=float))


def hdist_intval(ctx, h1: np.ndarray, h2: np.ndarray) -> float:
    """Chord-based distance via intval; kept for cross-checking hdist."""
    iv = max(intval(ctx, h1, h2), 0.0)
    if ctx.euclid:
        return math.sqrt(iv)
    if ctx.hyperbolic:
        return 2 * math.asinh(math.sqrt(iv) / 2)
    return 2 * asin_auto_clamp(ctx, math.sqrt(iv) / 2)


__all__ = [
    "center",
    "origin",
    "hpxyz",
    "hpxyz3",
    "hpxy",
    "hpxy3",
    "cpush0",
    "xpush0",
    "ypush0",
    "xspinpush0",
    "tC0",
    "zero_d",
    "sqhypot_d",
    "hypot_d",
    "intval",
    "zlevel",
    "normalize",
    "on_manifold",
    "points_equal",
    "hdist0",
    "hdist",
    "hdist_intval",
]
