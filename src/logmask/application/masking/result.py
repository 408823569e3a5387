from __future__ import annotations

from dataclasses import dataclass

from logmask.application.masking.errors import RuleApplicationError

__all__ = ["MaskingResult"]


@dataclass(frozen=True)
class MaskingResult:
    """Outcome of one masking pass over a line of text."""

    text: str | None
    # True iff ``text`` differs from the input.
    changed: bool = False
    failures: tuple[RuleApplicationError, ...] = ()

    @property
    def failed_rule_ids(self) -> tuple[str, ...]:
        return tuple(failure.rule_id for failure in self.failures)
