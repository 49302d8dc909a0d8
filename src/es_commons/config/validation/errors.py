"""Config validation – errors raised while loading or validating settings."""
from es_commons.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be read from the environment or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable set.

    ``setting_name`` is the environment variable that was looked up,
    e.g. ``ELASTICSEARCH_EXPORT_INDEX``.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} is not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was supplied but cannot be coerced or fails a range check."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
