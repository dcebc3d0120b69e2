"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Minimal logger capability – satisfied by a structlog ``BoundLogger``.

    ``bind`` derives a logger carrying extra context (e.g. ``component=``).
    """

    def debug(self, event: str, **kw: Any) -> Any: ...
    def info(self, event: str, **kw: Any) -> Any: ...
    def warning(self, event: str, **kw: Any) -> Any: ...
    def error(self, event: str, **kw: Any) -> Any: ...
    def bind(self, **kw: Any) -> Logger: ...


__all__ = ["Logger"]
