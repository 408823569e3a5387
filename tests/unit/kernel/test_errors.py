"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from logmask.application.masking import RuleApplicationError
from logmask.config.validation import ConfigError, ConfigurationError
from logmask.kernel.errors import LogmaskError, RuleError


class TestLogmaskError:
    def test_message_is_stored(self) -> None:
        err = LogmaskError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert LogmaskError("m").code == "logmask_error"

    def test_custom_code(self) -> None:
        assert LogmaskError("m", code="custom").code == "custom"

    def test_detail_is_copied(self) -> None:
        detail = {"key": "val"}
        err = LogmaskError("m", detail=detail)
        err.detail["other"] = 1
        assert detail == {"key": "val"}

    def test_to_dict(self) -> None:
        err = LogmaskError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "error": "LogmaskError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_includes_cause_repr(self) -> None:
        err = LogmaskError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert LogmaskError("wrap", cause=cause).__cause__ is cause

    def test_str_is_single_json_line(self) -> None:
        err = LogmaskError("oops\nsecond line", code="oops", detail={"x": 1})
        text = str(err)
        assert "\n" not in text
        parsed = json.loads(text)
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(LogmaskError("m")) == "LogmaskError(code='logmask_error', message='m')"


class TestRuleError:
    def test_rule_id_recorded_in_detail(self) -> None:
        err = RuleError("bad", rule_id="ssn")
        assert err.rule_id == "ssn"
        assert err.detail == {"rule_id": "ssn"}

    def test_rule_id_optional(self) -> None:
        err = RuleError("bad")
        assert err.rule_id is None
        assert err.detail == {}

    def test_default_code(self) -> None:
        assert RuleError("x").code == "rule_error"


class TestRuleApplicationError:
    def test_is_rule_error(self) -> None:
        assert isinstance(RuleApplicationError("card"), RuleError)

    def test_rule_id_stored(self) -> None:
        err = RuleApplicationError("card", cause=TimeoutError("regex timed out"))
        assert err.rule_id == "card"
        assert err.detail == {"rule_id": "card"}

    def test_message_mentions_rule_and_cause(self) -> None:
        err = RuleApplicationError("card", cause=TimeoutError("regex timed out"))
        assert "card" in err.message
        assert "regex timed out" in err.message

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("boom")
        assert RuleApplicationError("card", cause=cause).__cause__ is cause

    def test_default_code(self) -> None:
        assert RuleApplicationError("card").code == "rule_application_error"


class TestConfigurationErrorHierarchy:
    def test_is_config_error(self) -> None:
        assert isinstance(ConfigurationError("bad"), ConfigError)

    def test_caught_as_rule_error(self) -> None:
        with pytest.raises(RuleError) as exc_info:
            raise ConfigurationError("bad", rule_id="ssn")
        assert exc_info.value.rule_id == "ssn"

    def test_caught_as_root_error(self) -> None:
        with pytest.raises(LogmaskError):
            raise ConfigurationError("bad")
