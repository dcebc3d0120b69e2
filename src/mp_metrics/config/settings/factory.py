"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Sequence, TypeVar

from mp_metrics.config.settings.base import Settings
from mp_metrics.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonFileSettingsLoader,
    SettingsLoader,
)
from mp_metrics.kernel.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Build a settings dataclass from several sources at once.

    Loaders run in order and each contributes only the fields its source
    sets, later sources winning per field; *overrides* are applied last.
    Required fields are checked once, on the merged result, so e.g. a JSON
    file may provide the project name while the environment supplies
    the dump path.  Invalid values are never skipped.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A required field is absent from every source.
        InvalidSettingValueError
            A source holds a value the settings class rejects.
        ConfigError
            Any other construction failure (e.g. an unknown override key).
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            merged.update(loader.load_partial(settings_cls))

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            required = (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            )
            if required and field.name not in merged:
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def from_sources(
        settings_cls: type[T],
        *,
        config_file: str | Path | None = None,
        env_file: str | Path | None = ".env",
    ) -> T:
        """Standard precedence: JSON *config_file* < ``.env`` < process environment."""
        loaders: list[SettingsLoader] = []
        if config_file is not None:
            loaders.append(JsonFileSettingsLoader(config_file))
        loaders.append(DotenvSettingsLoader(str(env_file)) if env_file else EnvSettingsLoader())
        return SettingsFactory.create(settings_cls, loaders)


__all__ = ["SettingsFactory"]
