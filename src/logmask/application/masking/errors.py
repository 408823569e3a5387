"""Masking errors."""
from __future__ import annotations

from logmask.config.validation import ConfigurationError
from logmask.kernel.errors import RuleError

__all__ = ["ConfigurationError", "RuleApplicationError"]


class RuleApplicationError(RuleError):
    """A single rule failed while scanning one line.

    Never propagated out of :meth:`MaskingEngine.mask`; it is reported and the
    remaining rules still run.
    """

    default_code = "rule_application_error"

    def __init__(
        self,
        rule_id: str,
        *,
        cause: BaseException | None = None,
        message: str | None = None,
    ) -> None:
        reason = f": {cause!r}" if cause is not None else ""
        super().__init__(
            message or f"Masking rule '{rule_id}' failed{reason}",
            rule_id=rule_id,
            cause=cause,
        )
