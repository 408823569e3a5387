"""Unit tests for masking rule configuration sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from logmask.config.rules import (
    DotenvRuleSource,
    MappingRuleSource,
    RuleConfig,
    RuleSource,
    parse_rule_properties,
)
from logmask.config.validation import ConfigurationError


# ---------------------------------------------------------------------------
# parse_rule_properties
# ---------------------------------------------------------------------------


class TestParseRuleProperties:
    def test_groups_by_rule_id(self) -> None:
        rules = parse_rule_properties(
            {
                "card.pattern": r"\d{4}-\d{4}",
                "card.unmasked": "4",
                "ssn.pattern": r"\d{3}-\d{2}-\d{4}",
                "ssn.unmasked": "4",
                "ssn.mask_char": "X",
            }
        )
        assert rules == {
            "card": RuleConfig(r"\d{4}-\d{4}", 4),
            "ssn": RuleConfig(r"\d{3}-\d{2}-\d{4}", 4, "X"),
        }

    def test_preserves_first_appearance_order(self) -> None:
        rules = parse_rule_properties(
            {
                "b.pattern": "b",
                "a.pattern": "a",
                "b.unmasked": "1",
                "a.unmasked": "0",
            }
        )
        assert list(rules) == ["b", "a"]

    def test_missing_unmasked_defaults_to_none(self) -> None:
        rules = parse_rule_properties({"email.pattern": r"\S+@\S+"})
        assert rules["email"].reveal_suffix_length is None

    def test_rule_id_may_contain_dots(self) -> None:
        rules = parse_rule_properties({"pii.email.pattern": "x", "pii.email.unmasked": "2"})
        assert rules == {"pii.email": RuleConfig("x", 2)}

    def test_unmasked_whitespace_tolerated(self) -> None:
        rules = parse_rule_properties({"r.pattern": "x", "r.unmasked": " 3 "})
        assert rules["r"].reveal_suffix_length == 3

    def test_none_value_becomes_empty_string(self) -> None:
        rules = parse_rule_properties({"r.pattern": None})
        assert rules["r"].pattern == ""

    def test_non_integer_unmasked(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_rule_properties({"card.pattern": "x", "card.unmasked": "four"})
        assert exc_info.value.rule_id == "card"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_attribute_without_pattern(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_rule_properties({"card.unmasked": "4"})
        assert exc_info.value.rule_id == "card"

    def test_unknown_attribute(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_rule_properties({"card.pattern": "x", "card.replacement": "y"})
        assert exc_info.value.rule_id == "card"

    def test_key_without_attribute(self) -> None:
        with pytest.raises(ConfigurationError):
            parse_rule_properties({"pattern": "x"})

    def test_empty_input(self) -> None:
        assert parse_rule_properties({}) == {}


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class TestMappingRuleSource:
    def test_is_rule_source(self) -> None:
        assert isinstance(MappingRuleSource({}), RuleSource)

    def test_returns_copy(self) -> None:
        rules = {"a": RuleConfig("a")}
        source = MappingRuleSource(rules)
        loaded = source.load()
        assert loaded == rules
        assert loaded is not rules


class TestDotenvRuleSource:
    def test_loads_rules_in_file_order(self, tmp_path: Path) -> None:
        rules_file = tmp_path / "masking.env"
        rules_file.write_text(
            "# masking rules\n"
            "credit_card.pattern='\\b(?:\\d[ -]?){12,18}\\d\\b'\n"
            "credit_card.unmasked=4\n"
            "ssn.pattern='\\b\\d{3}-\\d{2}-\\d{4}\\b'\n"
            "ssn.unmasked=4\n"
            "ssn.mask_char=X\n"
        )
        rules = DotenvRuleSource(rules_file).load()
        assert list(rules) == ["credit_card", "ssn"]
        assert rules["credit_card"] == RuleConfig(r"\b(?:\d[ -]?){12,18}\d\b", 4)
        assert rules["ssn"].mask_char == "X"

    def test_dollar_anchor_not_interpolated(self, tmp_path: Path) -> None:
        rules_file = tmp_path / "masking.env"
        rules_file.write_text("token.pattern='^${HOME}$'\n")
        rules = DotenvRuleSource(rules_file).load()
        assert rules["token"].pattern == "^${HOME}$"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            DotenvRuleSource(tmp_path / "absent.env").load()
        assert exc_info.value.rule_id is None
        assert "absent.env" in exc_info.value.message

    def test_path_property(self, tmp_path: Path) -> None:
        assert DotenvRuleSource(str(tmp_path / "r.env")).path == tmp_path / "r.env"
