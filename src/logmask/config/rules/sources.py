"""Config rules – RuleSource port and its implementations."""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from dotenv import dotenv_values

from logmask.config.rules.model import RuleConfig
from logmask.config.rules.properties import parse_rule_properties
from logmask.config.validation import ConfigurationError
from logmask.observability.logging.processors import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RuleSource(Protocol):
    """Port: supply an ordered ``rule_id -> RuleConfig`` mapping."""

    def load(self) -> Mapping[str, RuleConfig]: ...


class MappingRuleSource:
    """In-memory source; useful for tests and programmatic configuration."""

    def __init__(self, rules: Mapping[str, RuleConfig]) -> None:
        self._rules = dict(rules)

    def load(self) -> Mapping[str, RuleConfig]:
        return dict(self._rules)


class DotenvRuleSource:
    """Read rules from a ``KEY=value`` file parsed by python-dotenv.

    Single-quoted values are taken literally, so regular expressions need no
    extra escaping. Variable interpolation is disabled because ``$`` is a
    regex anchor.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Mapping[str, RuleConfig]:
        if not self._path.is_file():
            raise ConfigurationError(f"Masking rules file not found: {self._path}")
        values = dotenv_values(self._path, interpolate=False, encoding=self._encoding)
        rules = parse_rule_properties(values)
        logger.info("masking_rules_file_loaded", path=str(self._path), rule_count=len(rules))
        return rules


__all__ = ["DotenvRuleSource", "MappingRuleSource", "RuleSource"]
