# Ensure repository root is on sys.path for imports like `from hyperpoint import ...`
import os
import sys

import pytest

_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from hyperpoint.context import GeometryContext, GeometryKind  # noqa: E402


ALL_CONTEXTS = [
    GeometryContext(GeometryKind.EUCLID, dim=2),
    GeometryContext(GeometryKind.EUCLID, dim=3),
    GeometryContext(GeometryKind.HYPERBOLIC, dim=2),
    GeometryContext(GeometryKind.HYPERBOLIC, dim=3),
    GeometryContext(GeometryKind.SPHERE, dim=2),
    GeometryContext(GeometryKind.SPHERE, dim=3),
    GeometryContext(GeometryKind.SPHERE, elliptic=True, dim=2),
]

CURVED_CONTEXTS = [c for c in ALL_CONTEXTS if not c.euclid]


def _ctx_id(ctx: GeometryContext) -> str:
    return f"{ctx.kind.name.lower()}{'-elliptic' if ctx.elliptic else ''}-{ctx.dim}d"


@pytest.fixture(params=ALL_CONTEXTS, ids=_ctx_id)
def ctx(request) -> GeometryContext:
    return request.param


@pytest.fixture(params=CURVED_CONTEXTS, ids=_ctx_id)
def curved_ctx(request) -> GeometryContext:
    return request.param
