"""Config rules – masking rule configuration and its sources."""
from logmask.config.rules.model import RuleConfig
from logmask.config.rules.properties import parse_rule_properties
from logmask.config.rules.sources import DotenvRuleSource, MappingRuleSource, RuleSource

__all__ = [
    "DotenvRuleSource",
    "MappingRuleSource",
    "RuleConfig",
    "RuleSource",
    "parse_rule_properties",
]
