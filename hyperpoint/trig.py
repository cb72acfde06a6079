"""Curvature-parametrized trigonometry.

Each geometry kind binds one strategy object exposing the same primitives:
- flat:        sin=x, cos=1, tan=x, atan=x, asin=x, atan2=y/x
- hyperbolic:  sinh, cosh, tanh, atanh, asinh, atanh(y/x)
- spherical:   sin, cos, tan, atan, asin, atan2

The `*_auto(ctx, ...)` functions delegate to `ctx.trig` so call sites never
branch on the geometry kind themselves.

Invariants
- Every branch is total: out-of-domain input gives NaN (or +-inf), never an
  exception. Domain-limited inverses go through numpy under np.errstate.
- Flat atan2 is an unguarded y/x (x == 0 yields +-inf, or nan for 0/0).
- asin_clamp survives round-off at the domain edge in the spherical case.
"""

from __future__ import annotations

import math

import numpy as np


def _quiet(fn, *args) -> float:
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        return float(fn(*args))


class FlatTrig:
    """Zero-curvature limit: every function degenerates to its first-order term."""

    curvature = 0

    @staticmethod
    def sin(x: float) -> float:
        return x

    @staticmethod
    def cos(x: float) -> float:
        return 1.0

    @staticmethod
    def tan(x: float) -> float:
        return x

    @staticmethod
    def atan(x: float) -> float:
        return x

    @staticmethod
    def asin(x: float) -> float:
        return x

    @staticmethod
    def asin_clamp(x: float) -> float:
        return x

    @staticmethod
    def atan2(y: float, x: float) -> float:
        return _quiet(np.divide, y, x)

    @staticmethod
    def hypot(x: float, y: float) -> float:
        return math.hypot(x, y)

    @staticmethod
    def circlelength(r: float) -> float:
        return 2 * math.pi * r


class HyperbolicTrig:
    curvature = -1

    @staticmethod
    def sin(x: float) -> float:
        return _quiet(np.sinh, x)

    @staticmethod
    def cos(x: float) -> float:
        return _quiet(np.cosh, x)

    @staticmethod
    def tan(x: float) -> float:
        return math.tanh(x)

    @staticmethod
    def atan(x: float) -> float:
        return _quiet(np.arctanh, x)

    @staticmethod
    def asin(x: float) -> float:
        return math.asinh(x)

    @staticmethod
    def asin_clamp(x: float) -> float:
        return math.asinh(x)

    @staticmethod
    def atan2(y: float, x: float) -> float:
        return _quiet(np.arctanh, _quiet(np.divide, y, x))

    @staticmethod
    def hypot(x: float, y: float) -> float:
        return _quiet(np.arccosh, HyperbolicTrig.cos(x) * HyperbolicTrig.cos(y))

    @staticmethod
    def circlelength(r: float) -> float:
        return 2 * math.pi * HyperbolicTrig.sin(r)


class SphericalTrig:
    curvature = 1

    @staticmethod
    def sin(x: float) -> float:
        return _quiet(np.sin, x)

    @staticmethod
    def cos(x: float) -> float:
        return _quiet(np.cos, x)

    @staticmethod
    def tan(x: float) -> float:
        return _quiet(np.tan, x)

    @staticmethod
    def atan(x: float) -> float:
        return math.atan(x)

    @staticmethod
    def asin(x: float) -> float:
        return _quiet(np.arcsin, x)

    @staticmethod
    def asin_clamp(x: float) -> float:
        """asin with the argument clamped to [-1, 1]; NaN maps to 0."""
        if x > 1:
            return math.pi / 2
        if x < -1:
            return -math.pi / 2
        if math.isnan(x):
            return 0.0
        return math.asin(x)

    @staticmethod
    def atan2(y: float, x: float) -> float:
        return math.atan2(y, x)

    @staticmethod
    def hypot(x: float, y: float) -> float:
        return _quiet(np.arccos, SphericalTrig.cos(x) * SphericalTrig.cos(y))

    @staticmethod
    def circlelength(r: float) -> float:
        return 2 * math.pi * SphericalTrig.sin(r)


# ---- Context-bound entry points ----

def curvature(ctx) -> int:
    """-1 / 0 / +1 for hyperbolic / flat / spherical."""
    return ctx.trig.curvature


def sin_auto(ctx, x: float) -> float:
    return ctx.trig.sin(x)


def cos_auto(ctx, x: float) -> float:
    return ctx.trig.cos(x)


def tan_auto(ctx, x: float) -> float:
    return ctx.trig.tan(x)


def atan_auto(ctx, x: float) -> float:
    return ctx.trig.atan(x)


def asin_auto(ctx, x: float) -> float:
    return ctx.trig.asin(x)


def asin_auto_clamp(ctx, x: float) -> float:
    return ctx.trig.asin_clamp(x)


def atan2_auto(ctx, y: float, x: float) -> float:
    return ctx.trig.atan2(y, x)


def hypot_auto(ctx, x: float, y: float) -> float:
    """Hypotenuse of a right triangle with legs x and y in the active geometry."""
    return ctx.trig.hypot(x, y)


def circlelength(ctx, r: float) -> float:
    """Circumference of a circle of radius r in the active geometry."""
    return ctx.trig.circlelength(r)


__all__ = [
    "FlatTrig",
    "HyperbolicTrig",
    "SphericalTrig",
    "curvature",
    "sin_auto",
    "cos_auto",
    "tan_auto",
    "atan_auto",
    "asin_auto",
    "asin_auto_clamp",
    "atan2_auto",
    "hypot_auto",
    "circlelength",
]
