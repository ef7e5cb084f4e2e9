"""Configuration – settings and their validation errors."""
from keyset_pager.config.settings import (
    EnvSettingsLoader,
    PaginationSettings,
    Settings,
    SettingsLoader,
)
from keyset_pager.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PaginationSettings",
    "Settings",
    "SettingsLoader",
]
