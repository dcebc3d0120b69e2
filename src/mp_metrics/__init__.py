"""
mp_metrics – in-process metrics registry with Prometheus text exposition.

Import path convention::

    from mp_metrics.observability.metrics import MetricRegistry
    from mp_metrics.exporter import MetricsExporter
    from mp_metrics.config.settings import ExporterSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
