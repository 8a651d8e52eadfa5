"""Config settings – env-based configuration."""
from mp_regions.config.settings.base import Settings
from mp_regions.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from mp_regions.config.settings.regions import RegionSettings

__all__ = ["EnvSettingsLoader", "RegionSettings", "Settings", "SettingsLoader"]
