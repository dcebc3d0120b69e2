"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, *, component: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to a ``component`` and extra context.

    The result satisfies :class:`~mp_metrics.observability.logging.Logger`.
    """
    context = dict(initial_values)
    if component is not None:
        context["component"] = component
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


__all__ = ["get_logger"]
