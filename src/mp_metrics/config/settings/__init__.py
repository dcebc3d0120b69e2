"""Config settings – 12-factor env-based configuration."""
from mp_metrics.config.settings.base import ExporterSettings, Settings
from mp_metrics.config.settings.duration import parse_duration
from mp_metrics.config.settings.factory import SettingsFactory
from mp_metrics.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    JsonFileSettingsLoader,
    SettingsLoader,
)
from mp_metrics.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ExporterSettings",
    "JsonFileSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
    "parse_duration",
]
