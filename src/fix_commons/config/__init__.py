"""Config – 12-factor settings and loaders."""

from fix_commons.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    GeneratorSettings,
    Settings,
    SettingsLoader,
)
from fix_commons.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GeneratorSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
