"""Observability – structured logging ports and helpers."""
from mp_metrics.observability.logging.protocol import Logger
from mp_metrics.observability.logging.factory import JsonLoggerFactory
from mp_metrics.observability.logging.bound import get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
