"""Config – 12-factor settings, masking rule sources and validation errors."""

from logmask.config.rules import (
    DotenvRuleSource,
    MappingRuleSource,
    RuleConfig,
    RuleSource,
    parse_rule_properties,
)
from logmask.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MaskingSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from logmask.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "DotenvRuleSource",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MappingRuleSource",
    "MaskingSettings",
    "MissingRequiredSettingError",
    "RuleConfig",
    "RuleSource",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "parse_rule_properties",
]
