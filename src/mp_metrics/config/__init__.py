"""Config – 12-factor settings and loaders."""

from mp_metrics.config.settings import EnvSettingsLoader, ExporterSettings, Settings, SettingsLoader
from mp_metrics.kernel.errors import ConfigError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExporterSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
