"""Observability – runtime statistics sampler."""
from mp_metrics.observability.runtime.sampler import RuntimeMetrics

__all__ = ["RuntimeMetrics"]
