"""Observability – metric registry and Prometheus text exposition."""
from mp_metrics.observability.metrics.exposition import (
    escape_label_value,
    format_labels,
    format_value,
    render_metrics,
)
from mp_metrics.observability.metrics.metric import Metric, MetricKind
from mp_metrics.observability.metrics.registry import MetricRegistry

__all__ = [
    "Metric",
    "MetricKind",
    "MetricRegistry",
    "escape_label_value",
    "format_labels",
    "format_value",
    "render_metrics",
]
