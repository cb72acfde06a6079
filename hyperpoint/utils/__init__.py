"""Logging helpers shared by the kernel and the harness."""

from .logging import LOGGER_NAME, get_logger, log_metric, log_metrics, csv_logger

__all__ = ["LOGGER_NAME", "get_logger", "log_metric", "log_metrics", "csv_logger"]
