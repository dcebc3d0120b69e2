"""Testing fakes – RecordingLogger."""
from __future__ import annotations

from typing import Any


class RecordingLogger:
    """In-memory :class:`~mp_metrics.observability.logging.Logger` double.

    Records every call as ``(level, event, fields)``.  Loggers derived with
    :meth:`bind` share the parent's record list and carry the bound context
    in ``fields``.

    Usage::

        log = RecordingLogger()
        dumper = FileDumper(registry, "", log)
        dumper.dump()
        assert log.events("info") == ["dump_path_empty"]
    """

    def __init__(self, records: list[tuple[str, str, dict[str, Any]]] | None = None, **context: Any) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = records if records is not None else []
        self._context = context

    def bind(self, **kw: Any) -> RecordingLogger:
        return RecordingLogger(self.records, **{**self._context, **kw})

    def _log(self, level: str, event: str, kw: dict[str, Any]) -> None:
        self.records.append((level, event, {**self._context, **kw}))

    def debug(self, event: str, **kw: Any) -> None:
        self._log("debug", event, kw)

    def info(self, event: str, **kw: Any) -> None:
        self._log("info", event, kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._log("warning", event, kw)

    def error(self, event: str, **kw: Any) -> None:
        self._log("error", event, kw)

    def events(self, level: str | None = None) -> list[str]:
        """Event names recorded, optionally filtered by *level*."""
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


__all__ = ["RecordingLogger"]
