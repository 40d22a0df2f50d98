"""Config settings – 12-factor env-based configuration."""
from fix_commons.config.settings.base import Settings
from fix_commons.config.settings.generator import LOG_LEVELS, GeneratorSettings
from fix_commons.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from fix_commons.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GeneratorSettings",
    "LOG_LEVELS",
    "Settings",
    "SettingsLoader",
    "SettingsValidator",
]
