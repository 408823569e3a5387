"""Config validation errors."""
from __future__ import annotations

from logmask.kernel.errors import LogmaskError, RuleError


class ConfigError(LogmaskError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ConfigurationError(ConfigError, RuleError):
    """A masking rule batch could not be turned into a RuleSet.

    ``rule_id`` names the offending rule, or is ``None`` when the problem
    concerns the batch as a whole (e.g. a missing rules file).
    """
    default_code = "masking_configuration_error"


__all__ = [
    "ConfigError",
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
