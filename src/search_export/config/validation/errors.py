"""Config validation errors."""
from __future__ import annotations

from search_export.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded; the CLI exits with status 2."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        hint = f" (set {env_key})" if env_key else ""
        super().__init__(
            f"Required setting '{setting_name}' is missing{hint}",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A value is present but unusable, e.g. ``SEARCH_EXPORT_TIMEOUT_SECONDS=soon``."""

    default_code = "invalid_setting_value"

    def __init__(
        self, setting_name: str, value: object, reason: str, *, env_key: str | None = None
    ) -> None:
        super().__init__(
            f"{env_key or setting_name}={value!r} is invalid: {reason}",
            detail={"setting": setting_name, "env_key": env_key, "reason": reason},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason
