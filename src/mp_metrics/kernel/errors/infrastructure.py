"""Infrastructure errors — I/O failures while publishing metrics."""

from __future__ import annotations

from typing import Any

from mp_metrics.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class DumpWriteError(InfrastructureError):
    """The rendered exposition text could not be written to its sink."""

    default_code = "dump_write_error"

    def __init__(
        self,
        path: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not write metrics dump to '{path}'", **kwargs)
        self.path = path
        self.detail.setdefault("path", path)


__all__ = ["DumpWriteError", "InfrastructureError"]
