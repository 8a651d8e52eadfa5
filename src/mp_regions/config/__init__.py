"""Config – settings dataclasses, loaders and validation errors."""

from mp_regions.config.settings import EnvSettingsLoader, RegionSettings, Settings, SettingsLoader
from mp_regions.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RegionSettings",
    "Settings",
    "SettingsLoader",
]
