"""Application – sensitive-data masking of rendered log lines."""
from logmask.application.masking.compiler import RuleCompiler, compile_rules
from logmask.application.masking.engine import MaskingEngine
from logmask.application.masking.errors import ConfigurationError, RuleApplicationError
from logmask.application.masking.pipeline import CopyOnWriteMaskingAdapter, InPlaceMaskingAdapter
from logmask.application.masking.ports import MutableTextEvent, RebuildableTextEvent
from logmask.application.masking.result import MaskingResult
from logmask.application.masking.rule import DEFAULT_MASK_CHAR, Rule
from logmask.application.masking.rule_set import RuleSet

__all__ = [
    "DEFAULT_MASK_CHAR",
    "ConfigurationError",
    "CopyOnWriteMaskingAdapter",
    "InPlaceMaskingAdapter",
    "MaskingEngine",
    "MaskingResult",
    "MutableTextEvent",
    "RebuildableTextEvent",
    "Rule",
    "RuleApplicationError",
    "RuleCompiler",
    "RuleSet",
    "compile_rules",
]
