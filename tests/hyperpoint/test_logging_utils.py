import logging
import math

import pytest

from hyperpoint.utils.logging import csv_logger, get_logger, log_metric, log_metrics


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def _capture_logger(name: str):
    lg = logging.getLogger(name)
    lg.setLevel(logging.INFO)
    lg.propagate = False
    h = _ListHandler()
    lg.addHandler(h)
    return lg, h


def test_get_logger_idempotent_handler():
    lg1 = get_logger()
    lg2 = get_logger()
    assert lg1 is lg2
    marked = [h for h in lg1.handlers if getattr(h, "_hyperpoint_handler", False)]
    assert len(marked) == 1
    assert lg1.propagate is False


def test_child_logger_gets_no_handler():
    child = get_logger("hyperpoint.linalg-test-child")
    assert not any(getattr(h, "_hyperpoint_handler", False) for h in child.handlers)


def test_log_metric_format():
    lg, h = _capture_logger("hyperpoint-test-metric")
    log_metric("defect", 1.25e-13, step=7, logger=lg)
    assert h.messages == ["metric defect=1.25e-13 step=7"]


def test_log_metrics_sorted():
    lg, h = _capture_logger("hyperpoint-test-metrics")
    log_metrics({"b": 2.0, "a": 1.0}, step=3, logger=lg)
    assert h.messages == ["metrics a=1 b=2 step=3"]


def test_log_metric_validation():
    lg, _ = _capture_logger("hyperpoint-test-validation")
    with pytest.raises(ValueError):
        log_metric("", 1.0, logger=lg)
    with pytest.raises(ValueError):
        log_metric("x", math.nan, logger=lg)
    with pytest.raises(TypeError):
        log_metric("x", "abc", logger=lg)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        log_metrics({}, logger=lg)
    with pytest.raises(ValueError):
        log_metrics({"x": math.inf}, logger=lg)


def test_csv_logger_header_once(tmp_path):
    path = tmp_path / "metrics.csv"
    write = csv_logger(str(path))
    write({"b": 2.0, "a": 0.5})
    write({"a": 1.5, "b": 3.0})
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert lines == ["a,b", "0.5,2", "1.5,3"]


def test_csv_logger_rejects_bad_input(tmp_path):
    with pytest.raises(ValueError):
        csv_logger("")
    write = csv_logger(str(tmp_path / "m.csv"))
    with pytest.raises(ValueError):
        write({})
    with pytest.raises(ValueError):
        write({"x": math.nan})
