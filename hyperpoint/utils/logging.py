"""Logging for the kernel diagnostics and the drift harness.

The kernel itself only logs one thing: the singular-inverse warning on the
"hyperpoint.linalg" child logger. Everything else here serves experiment
scripts, which report scalar results (isometry defect, manifold error,
improvement ratios) as one line per run and optionally append them to a CSV.

Line formats
- "metric <name>=<value> [step=<n>]"
- "metrics <k1>=<v1> <k2>=<v2> ... [step=<n>]"   (keys sorted)

Values are rendered with %.10g so that tiny defects such as 3.2e-15 stay
readable. Non-finite values are rejected: a NaN defect is a bug to surface,
not a number to record.
"""
from __future__ import annotations

import logging
import math
import os
from typing import Callable, Mapping, Optional

LOGGER_NAME = "hyperpoint"
_HANDLER_MARK = "_hyperpoint_handler"


def get_logger(name: str = LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Return the named logger at `level`.

    Only the package logger ("hyperpoint") gets a StreamHandler, at most one,
    and stops propagating to the root logger. Children such as
    "hyperpoint.linalg" are returned bare and reach that handler through
    propagation.
    """
    logger = logging.getLogger(name)
    logger.setLevel(int(level))
    if name != LOGGER_NAME:
        return logger

    logger.propagate = False
    if not any(getattr(h, _HANDLER_MARK, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_MARK, True)
        handler.setLevel(int(level))
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s %(levelname)s: %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(handler)
    return logger


def _finite(x: object, what: str) -> float:
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{what} must be a real number") from e
    if not math.isfinite(val):
        raise ValueError(f"{what} must be finite, got {val}")
    return val


def _render(metrics: Mapping[str, float]) -> list[tuple[str, str]]:
    """Validate a metrics mapping and return sorted (key, formatted value) pairs."""
    if not isinstance(metrics, Mapping) or not metrics:
        raise ValueError("metrics must be a non-empty mapping of str -> float")
    out = []
    for k in sorted(metrics):
        if not isinstance(k, str) or not k:
            raise ValueError("metric keys must be non-empty strings")
        out.append((k, f"{_finite(metrics[k], repr(k)):.10g}"))
    return out


def _step_suffix(step: Optional[int]) -> str:
    return "" if step is None else f" step={int(_finite(step, 'step'))}"


def log_metric(
    name: str,
    value: float,
    step: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log one scalar as "metric name=value [step=n]"."""
    if not isinstance(name, str) or not name:
        raise ValueError("name must be a non-empty string")
    ((_, v),) = _render({name: value})
    (logger or get_logger()).info(f"metric {name}={v}{_step_suffix(step)}")


def log_metrics(
    metrics: Mapping[str, float],
    step: Optional[int] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Log a run summary as one "metrics ..." line with sorted keys."""
    body = " ".join(f"{k}={v}" for k, v in _render(metrics))
    (logger or get_logger()).info(f"metrics {body}{_step_suffix(step)}")


def csv_logger(path: str) -> Callable[[Mapping[str, float]], None]:
    """
    Return a writer that appends one row per call to the CSV at `path`.

    The header (sorted keys) is written when the file is missing or empty, so
    repeated harness runs with the same metric set accumulate in one table.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("path must be a non-empty string")
    abs_path = os.path.abspath(path)

    def _write(metrics: Mapping[str, float]) -> None:
        pairs = _render(metrics)
        fresh = not os.path.exists(abs_path) or os.path.getsize(abs_path) == 0
        with open(abs_path, "a", encoding="utf-8") as f:
            if fresh:
                f.write(",".join(k for k, _ in pairs) + "\n")
            f.write(",".join(v for _, v in pairs) + "\n")

    return _write


__all__ = ["LOGGER_NAME", "get_logger", "log_metric", "log_metrics", "csv_logger"]
