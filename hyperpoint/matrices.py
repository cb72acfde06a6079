"""Elementary isometry builders.

Matrices represent isometries of the active manifold acting on homogeneous
column vectors (T @ h). For curved geometry every builder here yields T with
T.T @ G @ T == G, where G = ctx.signature; in flat geometry the builders
yield affine rigid motions (last row (0, ..., 0, 1)).

Conventions
- cspin(a, b, alpha) rotates counter-clockwise in the (a, b) plane, so
  spin(pi/2) maps (1, 0, 1) to (0, 1, 1).
- cpush(c, alpha) moves the origin alpha units along axis c; one formula
  parametrized by curvature() replaces the three per-geometry pushes.
- spintox(h) rotates around the origin so that h lands on the positive x
  axis; rspintox(h) is its inverse.
- ggpushxto0(h, co) sends h to the origin (co=-1) or the origin to h (co=+1)
  in closed form, equal to rspintox(h) @ xpush(+-d) @ spintox(h).

Degenerate inputs (near-zero norms) return the identity instead of dividing.
"""

from __future__ import annotations

import math

import numpy as np

from .trig import cos_auto, curvature, sin_auto

_DEGENERATE = 1e-12


def identity(ctx) -> np.ndarray:
    return np.eye(ctx.mdim, dtype=float)


# ---- Rotations ----

def cspin(ctx, a: int, b: int, alpha: float) -> np.ndarray:
    """Rotate by alpha radians in the coordinate plane (a, b)."""
    T = identity(ctx)
    c, s = math.cos(alpha), math.sin(alpha)
    T[a, a] = c
    T[a, b] = -s
    T[b, a] = s
    T[b, b] = c
    return T


def spin(ctx, alpha: float) -> np.ndarray:
    return cspin(ctx, 0, 1, alpha)


def rotmatrix(ctx, rotation: float, c0: int, c1: int) -> np.ndarray:
    return cspin(ctx, c0, c1, rotation)


# ---- Flat-only transforms ----

def eupush(ctx, x: float, y: float) -> np.ndarray:
    T = identity(ctx)
    T[0, ctx.dim] = x
    T[1, ctx.dim] = y
    return T


def eupush3(ctx, x: float, y: float, z: float) -> np.ndarray:
    T = eupush(ctx, x, y)
    if ctx.dim == 3:
        T[2, ctx.dim] = z
    return T


def eupush_point(ctx, h: np.ndarray) -> np.ndarray:
    """Translation by the affine part of h."""
    T = identity(ctx)
    T[: ctx.dim, ctx.dim] = np.asarray(h, dtype=float)[: ctx.dim]
    return T


def euscalezoom(ctx, h: np.ndarray) -> np.ndarray:
    """Similarity acting like multiplication by the complex number h[0] + i h[1]."""
    T = identity(ctx)
    T[0, 0] = h[0]
    T[0, 1] = -h[1]
    T[1, 0] = h[1]
    T[1, 1] = h[0]
    return T


def euaffine(ctx, h: np.ndarray) -> np.ndarray:
    T = identity(ctx)
    T[0, 1] = h[0]
    T[1, 1] = math.exp(h[1])
    return T


# ---- Push family ----

def cpush(ctx, cid: int, alpha: float) -> np.ndarray:
    """Move alpha units along axis cid."""
    T = identity(ctx)
    d = ctx.dim
    T[d, d] = T[cid, cid] = cos_auto(ctx, alpha)
    T[cid, d] = sin_auto(ctx, alpha)
    T[d, cid] = -curvature(ctx) * sin_auto(ctx, alpha)
    return T


def xpush(ctx, alpha: float) -> np.ndarray:
    return cpush(ctx, 0, alpha)


def ypush(ctx, alpha: float) -> np.ndarray:
    return cpush(ctx, 1, alpha)


def pushone(ctx) -> np.ndarray:
    return xpush(ctx, 0.5 if ctx.sphere else 1.0)


# ---- Dimension-aware literals ----

def matrix3(ctx, a, b, c, d, e, f, g, h, i) -> np.ndarray:
    """3x3 literal; in 3D it is embedded with the z axis left fixed."""
    if ctx.dim == 2:
        return np.array([[a, b, c], [d, e, f], [g, h, i]], dtype=float)
    return np.array(
        [[a, b, 0, c], [d, e, 0, f], [0, 0, 1, 0], [g, h, 0, i]], dtype=float
    )


def matrix4(ctx, a, b, c, d, e, f, g, h, i, j, k, l, m, n, o, p) -> np.ndarray:
    """4x4 literal; in 2D the z row and column are dropped."""
    if ctx.dim == 2:
        return np.array([[a, b, d], [e, f, h], [m, n, p]], dtype=float)
    return np.array(
        [[a, b, c, d], [e, f, g, h], [i, j, k, l], [m, n, o, p]], dtype=float
    )


def parabolic1(ctx, u: float) -> np.ndarray:
    """Parabolic isometry fixing an ideal point; a plain ypush in flat geometry."""
    if ctx.euclid:
        return ypush(ctx, u)
    diag = u * u / 2
    return matrix3(
        ctx,
        -diag + 1, u, diag,
        -u, 1, u,
        -diag, u, diag + 1,
    )


def parabolic13(ctx, u: float, v: float) -> np.ndarray:
    if ctx.euclid:
        return ypush(ctx, u)
    diag = (u * u + v * v) / 2
    return matrix4(
        ctx,
        -diag + 1, u, v, diag,
        -u, 1, 0, u,
        -v, 0, 1, v,
        -diag, u, v, diag + 1,
    )


# ---- Columns ----

def set_column(T: np.ndarray, i: int, h: np.ndarray) -> np.ndarray:
    out = np.array(T, dtype=float, copy=True)
    out[:, i] = h
    return out


def build_matrix(ctx, h1: np.ndarray, h2: np.ndarray, h3: np.ndarray) -> np.ndarray:
    """Identity with its first three columns replaced by h1, h2, h3."""
    T = identity(ctx)
    T[:, 0] = h1
    T[:, 1] = h2
    T[:, 2] = h3
    return T


# ---- Point-to-origin reduction ----

def spintoc(ctx, h: np.ndarray, t: int, f: int) -> np.ndarray:
    """Givens rotation in the (t, f) plane zeroing h[f] and making h[t] >= 0."""
    T = identity(ctx)
    R = math.hypot(h[f], h[t])
    if R >= _DEGENERATE:
        T[t, t] = +h[t] / R
        T[t, f] = +h[f] / R
        T[f, t] = -h[f] / R
        T[f, f] = +h[t] / R
    return T


def rspintoc(ctx, h: np.ndarray, t: int, f: int) -> np.ndarray:
    """Inverse of spintoc(h, t, f)."""
    T = identity(ctx)
    R = math.hypot(h[f], h[t])
    if R >= _DEGENERATE:
        T[t, t] = +h[t] / R
        T[t, f] = -h[f] / R
        T[f, t] = +h[f] / R
        T[f, f] = +h[t] / R
    return T


def spintox(ctx, h: np.ndarray) -> np.ndarray:
    """Rotate around the origin so that h[1] == 0 (and h[2] == 0 in 3D) with h[0] >= 0."""
    T1 = spintoc(ctx, h, 0, 1)
    if ctx.dim == 2:
        return T1
    return spintoc(ctx, T1 @ h, 0, 2) @ T1


def rspintox(ctx, h: np.ndarray) -> np.ndarray:
    """Inverse of spintox(h)."""
    if ctx.dim == 2:
        return rspintoc(ctx, h, 0, 1)
    T1 = spintoc(ctx, h, 0, 1)
    return rspintoc(ctx, h, 0, 1) @ rspintoc(ctx, T1 @ h, 0, 2)


# ---- Origin pushing ----

def pushxto0(ctx, h: np.ndarray) -> np.ndarray:
    """For h with h[1] == 0 (and h[2] == 0), push h to the origin."""
    T = identity(ctx)
    d = ctx.dim
    T[0, 0] = +h[d]
    T[0, d] = -h[0]
    T[d, 0] = curvature(ctx) * h[0]
    T[d, d] = +h[d]
    return T


def rpushxto0(ctx, h: np.ndarray) -> np.ndarray:
    """Inverse of pushxto0(h)."""
    T = identity(ctx)
    d = ctx.dim
    T[0, 0] = +h[d]
    T[0, d] = h[0]
    T[d, 0] = -curvature(ctx) * h[0]
    T[d, d] = +h[d]
    return T


def ggpushxto0(ctx, h: np.ndarray, co: float) -> np.ndarray:
    """
    Closed-form translation along the geodesic through the origin and h.

    Parameters
    ----------
    h : np.ndarray
        Point on the active manifold.
    co : float
        -1 sends h to the origin; +1 sends the origin to h.

    Returns
    -------
    np.ndarray
        Isometry matrix. Identity if the spatial part of h is below 1e-12
        in squared norm.
    """
    h = np.asarray(h, dtype=float)
    if ctx.euclid:
        return eupush_point(ctx, co * h)
    d = ctx.dim
    res = identity(ctx)
    spatial = h[:d]
    sq = float(spatial @ spatial)
    if sq < _DEGENERATE:
        return res
    fac = (h[d] - 1) / sq
    res[:d, :d] += np.outer(spatial, spatial) * fac
    res[:d, d] = co * spatial
    res[d, :d] = -curvature(ctx) * co * spatial
    res[d, d] = h[d]
    return res


def gpushxto0(ctx, h: np.ndarray) -> np.ndarray:
    """Isometry sending h to the origin; h may lie off the x axis."""
    return ggpushxto0(ctx, h, -1)


def rgpushxto0(ctx, h: np.ndarray) -> np.ndarray:
    """Isometry sending the origin to h."""
    return ggpushxto0(ctx, h, 1)


__all__ = [
    "identity",
    "cspin",
    "spin",
    "rotmatrix",
    "eupush",
    "eupush3",
    "eupush_point",
    "euscalezoom",
    "euaffine",
    "cpush",
    "xpush",
    "ypush",
    "pushone",
    "matrix3",
    "matrix4",
    "parabolic1",
    "parabolic13",
    "set_column",
    "build_matrix",
    "spintoc",
    "rspintoc",
    "spintox",
    "rspintox",
    "pushxto0",
    "rpushxto0",
    "ggpushxto0",
    "gpushxto0",
    "rgpushxto0",
]
