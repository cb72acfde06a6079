"""Determinant, inverse and drift correction for small homogeneous matrices.

- det / inverse: closed-form cofactor expansion for 3x3 (2D ambient space),
  Gaussian elimination with row pivoting for larger sizes (4x4 in 3D).
- Singular input is not an error: inverse_checked reports the matrix to a
  diagnostics reporter and returns the identity flagged as degraded.
- fixmatrix re-orthonormalizes columns with respect to the signature form so
  that repeated composition does not drift away from an isometry.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, NamedTuple, Optional

import numpy as np

from .utils.logging import LOGGER_NAME

_log = logging.getLogger(f"{LOGGER_NAME}.linalg")

SingularReporter = Callable[[np.ndarray], None]


class InverseResult(NamedTuple):
    matrix: np.ndarray
    degraded: bool


def _as_square(T: np.ndarray) -> np.ndarray:
    M = np.array(T, dtype=float, copy=True)
    if M.ndim != 2 or M.shape[0] != M.shape[1]:
        raise ValueError(f"matrix must be square 2D; got shape {M.shape}")
    return M


def det(T: np.ndarray) -> float:
    M = _as_square(T)
    n = M.shape[0]
    if n == 3:
        d = 0.0
        for i in range(3):
            d += M[0, i] * M[1, (i + 1) % 3] * M[2, (i + 2) % 3]
        for i in range(3):
            d -= M[0, i] * M[1, (i + 2) % 3] * M[2, (i + 1) % 3]
        return float(d)

    d = 1.0
    for a in range(n):
        p = a + int(np.argmax(np.abs(M[a:, a])))
        if M[p, a] == 0:
            return 0.0
        if p != a:
            M[[a, p], a:] = M[[p, a], a:]
            d = -d
        for b in range(a + 1, n):
            co = -M[b, a] / M[a, a]
            M[b, a:] += M[a, a:] * co
        d *= M[a, a]
    return float(d)


def report_singular(T: np.ndarray) -> None:
    """Default diagnostics reporter for singular inversions."""
    _log.warning("Warning: inverting a singular matrix: %s", np.array2string(np.asarray(T)))


def _report(T: np.ndarray, reporter: Optional[SingularReporter]) -> None:
    rep = reporter if reporter is not None else report_singular
    try:
        rep(T)
    except Exception:
        # A failing reporter must not abort the numeric path.
        _log.exception("singular-matrix reporter raised")


def inverse_checked(T: np.ndarray, reporter: Optional[SingularReporter] = None) -> InverseResult:
    """
    Invert T, degrading to the identity on singular input.

    Parameters
    ----------
    T : np.ndarray
        Square matrix (3x3 or 4x4 in practice).
    reporter : callable, optional
        Called with the offending matrix when T is singular. Defaults to a
        warning on the "hyperpoint.linalg" logger. Exceptions raised by the
        reporter are logged and suppressed.

    Returns
    -------
    InverseResult
        (matrix, degraded). degraded is True iff T was singular (zero
        determinant for 3x3, zero pivot otherwise) and matrix is the identity.
    """
    M = _as_square(T)
    n = M.shape[0]
    ident = np.eye(n, dtype=float)

    if n == 3:
        d = det(M)
        if d == 0:
            _report(M, reporter)
            return InverseResult(ident, True)
        out = np.empty((3, 3), dtype=float)
        for i in range(3):
            for j in range(3):
                out[j, i] = (
                    M[(i + 1) % 3, (j + 1) % 3] * M[(i + 2) % 3, (j + 2) % 3]
                    - M[(i + 1) % 3, (j + 2) % 3] * M[(i + 2) % 3, (j + 1) % 3]
                ) / d
        return InverseResult(out, False)

    T1 = M.copy()
    T2 = ident.copy()
    for a in range(n):
        p = a + int(np.argmax(np.abs(T1[a:, a])))
        if T1[p, a] == 0:
            _report(M, reporter)
            return InverseResult(ident, True)
        if p != a:
            T1[[a, p]] = T1[[p, a]]
            T2[[a, p]] = T2[[p, a]]
        for b in range(a + 1, n):
            co = -T1[b, a] / T1[a, a]
            T1[b] += T1[a] * co
            T2[b] += T2[a] * co

    for a in range(n - 1, -1, -1):
        for b in range(a):
            co = -T1[b, a] / T1[a, a]
            T1[b] += T1[a] * co
            T2[b] += T2[a] * co
        co = 1 / T1[a, a]
        T1[a] *= co
        T2[a] *= co
    return InverseResult(T2, False)


def inverse(T: np.ndarray, reporter: Optional[SingularReporter] = None) -> np.ndarray:
    """Inverse of T, or the identity (after reporting) when T is singular."""
    return inverse_checked(T, reporter).matrix


def fixmatrix(ctx, T: np.ndarray) -> np.ndarray:
    """
    Restore the isometry condition on a drifted matrix.

    Gram-Schmidt over columns left to right using the signature-weighted
    inner product; each column is renormalized so that <c_x, c_x> == sig(x).
    In flat geometry only the linear dim x dim block is orthonormalized and
    the affine row is reset to (0, ..., 0, 1).

    Returns a new matrix; T is not modified.
    """
    M = _as_square(T)
    d = ctx.dim
    if ctx.euclid:
        for x in range(d):
            for y in range(x + 1):
                dp = float(M[:d, x] @ M[:d, y])
                if y == x:
                    dp = 1 - math.sqrt(1 / dp)
                M[:d, x] -= dp * M[:d, y]
        M[d, :] = 0.0
        M[d, d] = 1.0
        return M

    sig = np.diag(ctx.signature)
    for x in range(ctx.mdim):
        for y in range(x + 1):
            dp = float(np.sum(M[:, x] * M[:, y] * sig))
            if y == x:
                dp = 1 - math.sqrt(ctx.sig(x) / dp)
            M[:, x] -= dp * M[:, y]
    return M


def isometry_defect(ctx, T: np.ndarray) -> float:
    """
    Max-abs deviation of T from a valid transform of the active geometry.

    Curved: max |T^T G T - G|. Flat: max |A^T A - I| over the linear block A,
    combined with the deviation of the affine row from (0, ..., 0, 1).
    """
    M = np.asarray(T, dtype=float)
    d = ctx.dim
    if ctx.euclid:
        A = M[:d, :d]
        lin = float(np.max(np.abs(A.T @ A - np.eye(d))))
        row = np.zeros(ctx.mdim)
        row[d] = 1.0
        aff = float(np.max(np.abs(M[d] - row)))
        return max(lin, aff)
    G = ctx.signature
    return float(np.max(np.abs(M.T @ G @ M - G)))


__all__ = [
    "InverseResult",
    "det",
    "report_singular",
    "inverse_checked",
    "inverse",
    "fixmatrix",
    "isometry_defect",
]
