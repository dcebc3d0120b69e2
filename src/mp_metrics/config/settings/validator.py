"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses
import os
from pathlib import Path

from mp_metrics.config.settings.base import ExporterSettings, Settings


class SettingsValidator:
    """Non-fatal checks run before the exporter starts.

    Returns human-readable problems instead of raising, so the caller can log
    them and decide whether to continue.
    """

    def validate(self, settings: Settings) -> list[str]:
        errors: list[str] = []
        for field in dataclasses.fields(settings):
            if field.default is not dataclasses.MISSING:
                continue
            value = getattr(settings, field.name)
            if value is None or value == "":
                errors.append(f"{field.name} is required but empty")
        if isinstance(settings, ExporterSettings) and settings.dump_path:
            errors.extend(self._check_dump_path(Path(settings.dump_path)))
        return errors

    @staticmethod
    def _check_dump_path(path: Path) -> list[str]:
        directory = path.parent
        if not directory.is_dir():
            return [f"dump_path directory '{directory}' does not exist"]
        if not os.access(directory, os.W_OK):
            return [f"dump_path directory '{directory}' is not writable"]
        if path.is_dir():
            return [f"dump_path '{path}' is a directory"]
        return []


__all__ = ["SettingsValidator"]
