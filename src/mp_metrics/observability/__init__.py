"""Observability – logging, metric registry, runtime sampling."""

from mp_metrics.observability.logging import JsonLoggerFactory, Logger, get_logger
from mp_metrics.observability.metrics import Metric, MetricKind, MetricRegistry
from mp_metrics.observability.runtime import RuntimeMetrics

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "Metric",
    "MetricKind",
    "MetricRegistry",
    "RuntimeMetrics",
    "get_logger",
]
