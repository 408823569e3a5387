"""Rule compiler – validated RuleSet construction from raw configuration."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

import regex

from logmask.application.masking.rule import DEFAULT_MASK_CHAR, Rule
from logmask.application.masking.rule_set import RuleSet
from logmask.config.rules.model import RuleConfig
from logmask.config.validation import ConfigurationError
from logmask.observability.logging.processors import get_logger

__all__ = ["RuleCompiler", "RuleEntry", "compile_rules"]

logger = get_logger(__name__)

# Accepted shapes for one rule's configuration.
RuleEntry = Union[RuleConfig, str, tuple, Mapping[str, Any]]

_MAPPING_KEYS = frozenset({"pattern", "reveal_suffix_length", "unmasked", "mask_char"})


def _to_rule_config(rule_id: str, entry: RuleEntry) -> RuleConfig:
    if isinstance(entry, RuleConfig):
        return entry
    if isinstance(entry, str):
        return RuleConfig(pattern=entry)
    if isinstance(entry, Mapping):
        unknown = set(entry) - _MAPPING_KEYS
        if unknown:
            raise ConfigurationError(
                f"Rule '{rule_id}' has unknown keys: {sorted(unknown)}", rule_id=rule_id
            )
        if "pattern" not in entry:
            raise ConfigurationError(f"Rule '{rule_id}' has no pattern", rule_id=rule_id)
        reveal = entry.get("reveal_suffix_length", entry.get("unmasked"))
        return RuleConfig(entry["pattern"], reveal, entry.get("mask_char"))
    if isinstance(entry, tuple) and 1 <= len(entry) <= 3:
        return RuleConfig(*entry)
    raise ConfigurationError(
        f"Rule '{rule_id}' has an unsupported configuration of type {type(entry).__name__}",
        rule_id=rule_id,
    )


class RuleCompiler:
    """Turn raw rule configuration into a validated :class:`RuleSet`.

    The whole batch fails on the first invalid entry, so a partially valid
    configuration never becomes active.

    Parameters
    ----------
    default_mask_char:
        Mask character for rules that do not configure their own.
    """

    def __init__(self, default_mask_char: str = DEFAULT_MASK_CHAR) -> None:
        if not isinstance(default_mask_char, str) or len(default_mask_char) != 1:
            raise ConfigurationError(
                f"Default mask character must be a single character, got {default_mask_char!r}"
            )
        self._default_mask_char = default_mask_char

    @property
    def default_mask_char(self) -> str:
        return self._default_mask_char

    def compile(
        self,
        config: Mapping[str, RuleEntry] | Iterable[tuple[str, RuleEntry]],
    ) -> RuleSet:
        """Compile *config* into a RuleSet.

        *config* is either an ordered mapping ``rule_id -> entry`` or an
        iterable of ``(rule_id, entry)`` pairs; iteration order is the order
        in which rules will be applied.

        Raises
        ------
        ConfigurationError
            On an uncompilable pattern, a negative or non-integer reveal
            length, an invalid mask character or a duplicate rule id.
        """
        items = config.items() if isinstance(config, Mapping) else config
        rules: list[Rule] = []
        seen: set[str] = set()
        for item in items:
            if not isinstance(item, tuple) or len(item) != 2:
                raise ConfigurationError(
                    f"Masking rule entries must be (rule_id, config) pairs, got {item!r}"
                )
            rule_id, entry = item
            if not isinstance(rule_id, str) or not rule_id:
                raise ConfigurationError(f"Invalid masking rule id {rule_id!r}")
            if rule_id in seen:
                raise ConfigurationError(f"Duplicate masking rule id '{rule_id}'", rule_id=rule_id)
            seen.add(rule_id)
            rules.append(self.compile_rule(rule_id, _to_rule_config(rule_id, entry)))

        rule_set = RuleSet(rules)
        logger.info("masking_rule_set_compiled", rule_count=len(rule_set), rule_ids=list(rule_set.ids))
        return rule_set

    def compile_rule(self, rule_id: str, config: RuleConfig) -> Rule:
        pattern_text = config.pattern
        if not isinstance(pattern_text, str) or not pattern_text:
            raise ConfigurationError(f"Rule '{rule_id}' has an empty pattern", rule_id=rule_id)
        try:
            pattern = regex.compile(pattern_text)
        except regex.error as exc:
            raise ConfigurationError(
                f"Rule '{rule_id}' has an invalid pattern {pattern_text!r}: {exc}",
                rule_id=rule_id,
                cause=exc,
            ) from exc

        reveal = 0 if config.reveal_suffix_length is None else config.reveal_suffix_length
        if isinstance(reveal, bool) or not isinstance(reveal, int):
            raise ConfigurationError(
                f"Rule '{rule_id}' reveal length must be an integer, got {reveal!r}",
                rule_id=rule_id,
            )
        if reveal < 0:
            raise ConfigurationError(
                f"Rule '{rule_id}' reveal length must be >= 0, got {reveal}",
                rule_id=rule_id,
            )

        mask_char = self._default_mask_char if config.mask_char is None else config.mask_char
        if not isinstance(mask_char, str) or len(mask_char) != 1:
            raise ConfigurationError(
                f"Rule '{rule_id}' mask character must be a single character, got {mask_char!r}",
                rule_id=rule_id,
            )

        logger.debug("masking_rule_compiled", rule_id=rule_id, reveal_suffix_length=reveal)
        return Rule(id=rule_id, pattern=pattern, reveal_suffix_length=reveal, mask_char=mask_char)


def compile_rules(
    config: Mapping[str, RuleEntry] | Iterable[tuple[str, RuleEntry]],
    *,
    default_mask_char: str = DEFAULT_MASK_CHAR,
) -> RuleSet:
    """Pure ``config -> RuleSet`` build; raises :class:`ConfigurationError`."""
    return RuleCompiler(default_mask_char).compile(config)
