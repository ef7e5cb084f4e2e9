"""Config validation errors – raised while loading or validating settings.

``detail`` always names the offending setting; the rejected value stays on the
exception object only, since settings such as ``cursor_secret`` are sensitive.
"""
from keyset_pager.kernel.errors import ConfigurationError


class ConfigError(ConfigurationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} must be set", detail={"setting": setting_name}
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was given but cannot be used."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name} rejected: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
