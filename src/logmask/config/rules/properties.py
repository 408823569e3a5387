"""Config rules – flat ``<id>.<attribute>`` key layout.

A rules file lists each rule as a group of keys sharing an id prefix::

    credit_card.pattern='\\b(?:\\d[ -]?){12,18}\\d\\b'
    credit_card.unmasked=4
    ssn.pattern='\\b\\d{3}-\\d{2}-\\d{4}\\b'
    ssn.unmasked=4
    ssn.mask_char=X

Rules are applied in the order their ids first appear.
"""
from __future__ import annotations

from typing import Mapping

from logmask.config.rules.model import RuleConfig
from logmask.config.validation import ConfigurationError
from logmask.observability.logging.processors import get_logger

logger = get_logger(__name__)

PATTERN_SUFFIX = "pattern"
REVEAL_SUFFIX = "unmasked"
MASK_CHAR_SUFFIX = "mask_char"

_ATTRIBUTES = frozenset({PATTERN_SUFFIX, REVEAL_SUFFIX, MASK_CHAR_SUFFIX})


def _split_key(key: str) -> tuple[str, str]:
    rule_id, sep, attribute = key.rpartition(".")
    if not sep or not rule_id:
        raise ConfigurationError(
            f"Rule key '{key}' must have the form '<rule_id>.<attribute>'",
            rule_id=key,
        )
    if attribute not in _ATTRIBUTES:
        raise ConfigurationError(
            f"Unknown attribute '{attribute}' for rule '{rule_id}'",
            rule_id=rule_id,
        )
    return rule_id, attribute


def _parse_reveal(rule_id: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(
            f"Rule '{rule_id}' has a non-integer '{REVEAL_SUFFIX}' value {raw!r}",
            rule_id=rule_id,
            cause=exc,
        ) from exc


def parse_rule_properties(values: Mapping[str, str | None]) -> dict[str, RuleConfig]:
    """Group flat ``<id>.<attribute>`` entries into :class:`RuleConfig` objects.

    Raises :class:`ConfigurationError` for malformed keys, a non-integer
    reveal length or attributes whose rule has no pattern. A rule without an
    ``.unmasked`` entry is fully masked.
    """
    grouped: dict[str, dict[str, str]] = {}
    for key, value in values.items():
        rule_id, attribute = _split_key(key)
        grouped.setdefault(rule_id, {})[attribute] = "" if value is None else value

    configs: dict[str, RuleConfig] = {}
    for rule_id, attributes in grouped.items():
        if PATTERN_SUFFIX not in attributes:
            raise ConfigurationError(
                f"Rule '{rule_id}' has no '{PATTERN_SUFFIX}' entry",
                rule_id=rule_id,
            )
        reveal: int | None = None
        if REVEAL_SUFFIX in attributes:
            reveal = _parse_reveal(rule_id, attributes[REVEAL_SUFFIX])
        else:
            logger.warning("masking_rule_reveal_missing", rule_id=rule_id, default=0)
        configs[rule_id] = RuleConfig(
            pattern=attributes[PATTERN_SUFFIX],
            reveal_suffix_length=reveal,
            mask_char=attributes.get(MASK_CHAR_SUFFIX),
        )
    return configs


__all__ = ["parse_rule_properties"]
