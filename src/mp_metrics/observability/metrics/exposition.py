"""Observability – Prometheus text exposition renderer.

Output shape::

    # HELP http_requests HTTP requests total
    # TYPE http_requests counter
    http_requests{instance="server1", project="billing"} 100

The ``# HELP``/``# TYPE`` pair is written once per metric name, at the first
metric carrying that name; later metrics of the same family only add their
value line, in registration order.
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from mp_metrics.observability.metrics.metric import Metric

__all__ = ["escape_label_value", "format_labels", "format_value", "render_metrics"]


def escape_label_value(value: str) -> str:
    """Escape ``\\``, ``"`` and newlines as the exposition format requires."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def format_labels(labels: Mapping[str, str]) -> str:
    """Render ``{k1="v1", k2="v2"}`` with keys in ascending order, or ``""``."""
    if not labels:
        return ""
    pairs = ", ".join(f'{key}="{escape_label_value(labels[key])}"' for key in sorted(labels))
    return "{" + pairs + "}"


def format_value(int_value: int, float_value: float) -> str:
    """A non-zero float wins with six fractional digits; otherwise the int."""
    if float_value != 0:
        if math.isnan(float_value):
            return "NaN"
        if math.isinf(float_value):
            return "+Inf" if float_value > 0 else "-Inf"
        return f"{float_value:.6f}"
    return str(int_value)


def render_metrics(metrics: Iterable[Metric]) -> str:
    """Render *metrics* in iteration order into exposition text."""
    lines: list[str] = []
    seen_names: set[str] = set()
    for metric in metrics:
        if metric.name not in seen_names:
            lines.append(f"# HELP {metric.name} {metric.help}\n")
            lines.append(f"# TYPE {metric.name} {metric.kind}\n")
            seen_names.add(metric.name)
        labels, int_value, float_value = metric.snapshot()
        lines.append(f"{metric.name}{format_labels(labels)} {format_value(int_value, float_value)}\n")
    return "".join(lines)
