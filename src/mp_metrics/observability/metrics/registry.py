"""Observability – MetricRegistry."""
from __future__ import annotations

import threading
from collections.abc import Mapping

from mp_metrics.observability.metrics.exposition import render_metrics
from mp_metrics.observability.metrics.metric import Metric, MetricKind


class MetricRegistry:
    """Ordered collection of metrics sharing a set of default labels.

    Build one registry per process (or per logical scope) and pass it to the
    code that needs it; there is no module-level singleton.

    Usage::

        registry = MetricRegistry(label_defaults={"project": "billing"})
        requests = registry.create_metric(
            "http_requests", "HTTP requests total", "counter", {"instance": "server1"}
        )
        requests.increment()
        text = registry.render()
    """

    def __init__(self, label_defaults: Mapping[str, str] | None = None) -> None:
        self._label_defaults: dict[str, str] = dict(label_defaults or {})
        self._metrics: list[Metric] = []
        self._lock = threading.Lock()

    @property
    def label_defaults(self) -> dict[str, str]:
        return dict(self._label_defaults)

    def create_metric(
        self,
        name: str,
        help: str,  # noqa: A002
        kind: str | MetricKind,
        labels: Mapping[str, str] | None = None,
    ) -> Metric:
        """Create, register and return a new metric.

        The registry defaults are merged first, so keys in *labels* win on
        collision.  Names may repeat: each call adds another member of the
        metric family.
        """
        merged = dict(self._label_defaults)
        if labels:
            merged.update(labels)
        metric = Metric(name, help, kind, merged)
        with self._lock:
            self._metrics.append(metric)
        return metric

    def metrics(self) -> tuple[Metric, ...]:
        """Snapshot of the registered metrics in registration order."""
        with self._lock:
            return tuple(self._metrics)

    def render(self) -> str:
        """Render every registered metric as Prometheus exposition text."""
        return render_metrics(self.metrics())

    def __len__(self) -> int:
        with self._lock:
            return len(self._metrics)


__all__ = ["MetricRegistry"]
