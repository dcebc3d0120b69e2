"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


class JsonLoggerFactory:
    """Route structlog through the stdlib root logger.

    ``fmt="json"`` renders one JSON object per line (for log shippers);
    ``fmt="console"`` uses structlog's human-readable dev renderer.
    """

    @staticmethod
    def configure(level: int = logging.INFO, stream: TextIO | None = None, fmt: str = "json") -> None:
        if fmt not in ("json", "console"):
            raise ValueError(f"unknown log format {fmt!r}")

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if fmt == "json"
            else structlog.dev.ConsoleRenderer(colors=False)
        )

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
