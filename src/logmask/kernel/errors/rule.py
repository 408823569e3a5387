"""Errors tied to one masking rule."""

from __future__ import annotations

from typing import Any

from logmask.kernel.errors.base import LogmaskError


class RuleError(LogmaskError):
    """An error that may be attributed to a single rule.

    ``rule_id`` is ``None`` when the problem concerns a rule batch as a
    whole; otherwise it is also recorded in ``detail``.
    """

    default_code = "rule_error"

    def __init__(self, message: str, *, rule_id: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.rule_id = rule_id
        if rule_id is not None:
            self.detail.setdefault("rule_id", rule_id)


__all__ = ["RuleError"]
