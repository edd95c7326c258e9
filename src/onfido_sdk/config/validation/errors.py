"""Config validation – errors raised while building client settings."""
from onfido_sdk.kernel.errors import OnfidoError


class ConfigError(OnfidoError):
    """Client configuration is invalid or could not be loaded."""
    default_type = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required ``ONFIDO_*`` variable is unset or empty."""
    default_type = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is required", fields={setting_name: ["is required"]})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used (bad region, negative retries...)."""
    default_type = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} {reason}", fields={setting_name: [reason]})
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
