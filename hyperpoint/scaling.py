"""Component-wise and axis-restricted scalings used for rendering effects.

These do not preserve the isometry condition and are not meant for geometric
correctness.
"""

from __future__ import annotations

import numpy as np

from .linalg import inverse
from .matrices import gpushxto0, ypush
from .points import tC0


def mscale(t: np.ndarray, fac: float) -> np.ndarray:
    """Scale every entry of a point or matrix by fac."""
    return np.asarray(t, dtype=float) * fac


def xyscale(ctx, t: np.ndarray, fac: float) -> np.ndarray:
    """Scale the first dim columns of t; the translation column is kept."""
    res = np.array(t, dtype=float, copy=True)
    res[:, : ctx.dim] *= fac
    return res


def xyzscale(ctx, t: np.ndarray, fac: float, facz: float) -> np.ndarray:
    res = xyscale(ctx, t, fac)
    res[:, ctx.dim] *= facz
    return res


def mzscale(ctx, t: np.ndarray, fac: float) -> np.ndarray:
    """
    Scale only the spin component of t around its image of the origin.

    The matrix is re-centred with gpushxto0(tC0(t)), a ypush by -(fac - 1)
    is applied in the centred frame, and the result is scaled uniformly by
    1 + 0.2 (fac - 1).
    """
    t = np.asarray(t, dtype=float)
    tcentered = gpushxto0(ctx, tC0(t)) @ t
    fac -= 1
    res = t @ inverse(tcentered) @ ypush(ctx, -fac) @ tcentered
    fac = fac * 0.2 + 1
    return res * fac


__all__ = ["mscale", "xyscale", "xyzscale", "mzscale"]
