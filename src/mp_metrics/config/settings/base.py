"""Config settings – Settings base class and ExporterSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_metrics.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ExporterSettings(Settings):
    """Settings for one metrics exporter process.

    ``dump_path`` left empty disables the periodic file dump.  Intervals are
    in seconds; loaders also accept duration strings such as ``"1m"``.
    """

    _prefix: ClassVar[str] = "METRICS"

    project_name: str
    dump_path: str = ""
    dump_interval: float = 60.0
    runtime_interval: float = 15.0
    trace_memory: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    def _validate(self) -> None:
        for name in ("dump_interval", "runtime_interval"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be greater than zero")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")
        if self.log_format not in ("json", "console"):
            raise InvalidSettingValueError("log_format", self.log_format, "expected 'json' or 'console'")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ExporterSettings", "Settings"]
