"""Geometry context: the immutable configuration every kernel call reads.

A context names the curvature class, the elliptic quotient flag and the
ambient dimension. It is built once at configuration time and passed
explicitly as the first argument of every point/matrix operation; there is
no process-wide geometry state.

Invariants
- dim in {2, 3}; homogeneous dimension mdim = dim + 1.
- elliptic (antipodal identification) is only meaningful for SPHERE.
- sig(i) == -1 only for the timelike axis (i == dim) of HYPERBOLIC.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping

import numpy as np

from .trig import FlatTrig, HyperbolicTrig, SphericalTrig


class GeometryKind(IntEnum):
    """Curvature class of the active geometry."""
    EUCLID = 0
    HYPERBOLIC = 1
    SPHERE = 2

    @staticmethod
    def parse(value: Any) -> "GeometryKind":
        if isinstance(value, GeometryKind):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            aliases = {"FLAT": "EUCLID", "EUCLIDEAN": "EUCLID", "SPHERICAL": "SPHERE", "HYPERBOLIC": "HYPERBOLIC"}
            key = aliases.get(key, key)
            if key in GeometryKind.__members__:
                return GeometryKind[key]
            raise ValueError(f"unknown geometry kind {value!r}")
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return GeometryKind(value)
            except ValueError:
                raise ValueError(f"unknown geometry kind {value!r}") from None
        raise ValueError(f"unknown geometry kind {value!r}")


def _parse_dim(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"dim must be an integer, got {value!r}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    raise ValueError(f"dim must be an integer, got {value!r}")


def _parse_flag(value: Any, name: str) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"{name} must be a bool or \"true\"/\"false\", got {value!r}")


_TRIG = {
    GeometryKind.EUCLID: FlatTrig(),
    GeometryKind.HYPERBOLIC: HyperbolicTrig(),
    GeometryKind.SPHERE: SphericalTrig(),
}


@dataclass(frozen=True)
class GeometryContext:
    kind: GeometryKind
    elliptic: bool = False
    dim: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.kind, GeometryKind):
            raise ValueError(f"kind must be a GeometryKind, got {self.kind!r}")
        if isinstance(self.dim, bool) or not isinstance(self.dim, (int, np.integer)) or self.dim not in (2, 3):
            raise ValueError("dim must be 2 or 3")
        if not isinstance(self.elliptic, (bool, np.bool_)):
            raise ValueError(f"elliptic must be a bool, got {self.elliptic!r}")
        if self.elliptic and self.kind is not GeometryKind.SPHERE:
            raise ValueError("elliptic mode requires spherical geometry")

    # ---- Derived flags ----

    @property
    def mdim(self) -> int:
        return self.dim + 1

    @property
    def euclid(self) -> bool:
        return self.kind is GeometryKind.EUCLID

    @property
    def hyperbolic(self) -> bool:
        return self.kind is GeometryKind.HYPERBOLIC

    @property
    def sphere(self) -> bool:
        return self.kind is GeometryKind.SPHERE

    @property
    def trig(self):
        """Trigonometry strategy bound to this curvature class."""
        return _TRIG[self.kind]

    @property
    def curvature(self) -> int:
        return self.trig.curvature

    def sig(self, i: int) -> int:
        """Signature weight of axis i in the bilinear form."""
        return -1 if (self.hyperbolic and i == self.dim) else 1

    @property
    def signature(self) -> np.ndarray:
        """G = diag(sig(0), ..., sig(dim))."""
        return np.diag([float(self.sig(i)) for i in range(self.mdim)])

    # ---- Construction helpers ----

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "GeometryContext":
        """
        Build a context from a plain mapping, e.g. parsed JSON or CLI flags.

        Keys
        ----
        kind : str | int | GeometryKind
            Required. Case-insensitive name ("euclid"/"flat", "hyperbolic",
            "sphere"/"spherical") or enum value.
        dim : int
            Optional ambient dimension, default 2.
        elliptic : bool
            Optional antipodal identification, default False.

        Raises
        ------
        ValueError
            If `kind` is missing or any field is invalid.
        """
        if not isinstance(cfg, Mapping) or "kind" not in cfg:
            raise ValueError("geometry config must be a mapping with a 'kind' key")
        return cls(
            kind=GeometryKind.parse(cfg["kind"]),
            elliptic=_parse_flag(cfg.get("elliptic", False), "elliptic"),
            dim=_parse_dim(cfg.get("dim", 2)),
        )

    def to_dict(self) -> dict:
        return {"kind": self.kind.name.lower(), "elliptic": bool(self.elliptic), "dim": int(self.dim)}


def euclidean(dim: int = 2) -> GeometryContext:
    return GeometryContext(GeometryKind.EUCLID, dim=dim)


def hyperbolic(dim: int = 2) -> GeometryContext:
    return GeometryContext(GeometryKind.HYPERBOLIC, dim=dim)


def spherical(dim: int = 2, elliptic: bool = False) -> GeometryContext:
    return GeometryContext(GeometryKind.SPHERE, elliptic=elliptic, dim=dim)


__all__ = ["GeometryKind", "GeometryContext", "euclidean", "hyperbolic", "spherical"]
