"""Config settings – EnvSettingsLoader, DotenvSettingsLoader, JsonFileSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import json
import os
from pathlib import Path
from typing import Any, TypeVar

from dotenv import load_dotenv

from mp_metrics.config.settings.base import Settings
from mp_metrics.config.settings.duration import parse_duration
from mp_metrics.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


def _coerce(name: str, value: Any, type_hint: Any) -> Any:  # noqa: PLR0911
    """Coerce a raw env/JSON value into the declared field type."""
    try:
        if type_hint is bool or type_hint == "bool":
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            if isinstance(value, (int, float)):
                return float(value)
            return parse_duration(str(value))
    except ValueError as exc:
        raise InvalidSettingValueError(name, value, str(exc)) from exc
    if type_hint is str or type_hint == "str":
        return str(value)
    return value


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source.

    Subclasses implement :meth:`load_partial`, returning only the fields
    their source actually sets.  :meth:`load` builds a complete instance
    from that alone.
    """

    @abc.abstractmethod
    def load_partial(self, settings_class: type[T]) -> dict[str, Any]: ...

    def source_key(self, settings_class: type[T], field_name: str) -> str:
        """Name of *field_name* as the source spells it."""
        return field_name

    def load(self, settings_class: type[T]) -> T:
        kwargs = self.load_partial(settings_class)
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if _is_required(field) and field.name not in kwargs:
                raise MissingRequiredSettingError(self.source_key(settings_class, field.name))
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables (``<PREFIX>_<FIELD>``)."""

    def source_key(self, settings_class: type[T], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "")
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def load_partial(self, settings_class: type[T]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = self.source_key(settings_class, field.name)
            raw = os.environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = _coerce(env_key, raw, field.type)
        return kwargs


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the environment, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load_partial(self, settings_class: type[T]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return super().load_partial(settings_class)


class JsonFileSettingsLoader(SettingsLoader):
    """Load settings from a JSON object whose keys are the field names.

    Example file::

        {"project_name": "billing", "dump_path": "/var/lib/node_exporter/billing.prom",
         "dump_interval": "30s"}
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load_partial(self, settings_class: type[T]) -> dict[str, Any]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Failed to read settings file '{self._path}': {exc}", cause=exc) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file '{self._path}' must contain a JSON object")

        return {
            field.name: _coerce(field.name, data[field.name], field.type)
            for field in dataclasses.fields(settings_class)  # type: ignore[arg-type]
            if field.name in data
        }


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "JsonFileSettingsLoader", "SettingsLoader"]
