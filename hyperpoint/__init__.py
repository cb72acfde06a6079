"""hyperpoint: point/isometry arithmetic for flat, hyperbolic and spherical geometry.

Submodules
- context:   GeometryContext / GeometryKind (immutable configuration)
- trig:      curvature-parametrized sin/cos/tan/atan/asin/atan2
- points:    construction, normalization, intval, distances
- matrices:  spins, pushes, point-to-origin isometries
- linalg:    det, inverse (degrade-to-identity), fixmatrix
- scaling:   rendering-oriented scalings
- composite: midpoints and interpolation

Every operation takes the GeometryContext as its first argument, except the
geometry-independent det/inverse.
"""

from .context import GeometryContext, GeometryKind, euclidean, hyperbolic, spherical
from .trig import (
    curvature,
    sin_auto,
    cos_auto,
    tan_auto,
    atan_auto,
    asin_auto,
    asin_auto_clamp,
    atan2_auto,
    hypot_auto,
    circlelength,
)
from .points import (
    center,
    origin,
    hpxyz,
    hpxyz3,
    hpxy,
    hpxy3,
    cpush0,
    xpush0,
    ypush0,
    xspinpush0,
    tC0,
    zero_d,
    sqhypot_d,
    hypot_d,
    intval,
    zlevel,
    normalize,
    on_manifold,
    points_equal,
    hdist0,
    hdist,
    hdist_intval,
)
from .matrices import (
    identity,
    cspin,
    spin,
    rotmatrix,
    eupush,
    eupush3,
    eupush_point,
    euscalezoom,
    euaffine,
    cpush,
    xpush,
    ypush,
    pushone,
    matrix3,
    matrix4,
    parabolic1,
    parabolic13,
    set_column,
    build_matrix,
    spintoc,
    rspintoc,
    spintox,
    rspintox,
    pushxto0,
    rpushxto0,
    ggpushxto0,
    gpushxto0,
    rgpushxto0,
)
from .linalg import InverseResult, det, inverse, inverse_checked, fixmatrix, isometry_defect
from .scaling import mscale, xyscale, xyzscale, mzscale
from .composite import mid, midz, mid3, mid_at, mid_at_actual

__all__ = [
    "GeometryContext",
    "GeometryKind",
    "euclidean",
    "hyperbolic",
    "spherical",
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
    "InverseResult",
    "det",
    "inverse",
    "inverse_checked",
    "fixmatrix",
    "isometry_defect",
    "mscale",
    "xyscale",
    "xyzscale",
    "mzscale",
    "mid",
    "midz",
    "mid3",
    "mid_at",
    "mid_at_actual",
]
