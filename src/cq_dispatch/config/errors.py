"""Config errors."""
from __future__ import annotations

from cq_dispatch.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Environment variable '{env_key}' is required", detail={"env_key": env_key})
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but not one of the accepted values."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, allowed: list[str]) -> None:
        super().__init__(
            f"Setting '{setting_name}' must be one of {', '.join(allowed)}; got {value!r}",
            detail={"setting": setting_name, "allowed": allowed},
        )
        self.setting_name = setting_name
        self.value = value
        self.allowed = allowed


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
