"""Masking engine – sequential rule application over a line of text."""
from __future__ import annotations

import threading
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterable, Mapping, overload

from logmask.application.masking.compiler import RuleCompiler, RuleEntry
from logmask.application.masking.errors import RuleApplicationError
from logmask.application.masking.result import MaskingResult
from logmask.application.masking.rule import Rule
from logmask.application.masking.rule_set import RuleSet
from logmask.config.rules.sources import DotenvRuleSource, RuleSource
from logmask.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from logmask.config.settings.masking import MaskingSettings

__all__ = ["MaskingEngine"]

logger = get_logger(__name__)

# Set while a rule failure is being logged; a failure raised by masking that
# log line itself is not reported again.
_reporting_failure: ContextVar[bool] = ContextVar("logmask_reporting_failure", default=False)


class MaskingEngine:
    """Apply an ordered :class:`RuleSet` to text.

    ``mask`` is a pure function of the current rule set and its input and may
    be called concurrently from any number of threads. :meth:`reload` swaps
    the rule set reference wholesale; a call already in progress finishes
    against the rule set it started with.

    Parameters
    ----------
    rule_set:
        Rules to apply; defaults to an empty set (masking is a no-op).
    scan_timeout:
        Seconds one rule may spend scanning one line. ``None`` or ``0``
        disables the limit.
    compiler:
        Compiler used by :meth:`reload` for raw configuration.
    """

    def __init__(
        self,
        rule_set: RuleSet | None = None,
        *,
        scan_timeout: float | None = None,
        compiler: RuleCompiler | None = None,
    ) -> None:
        self._rule_set = rule_set if rule_set is not None else RuleSet.empty()
        self._scan_timeout = scan_timeout or None
        self._compiler = compiler or RuleCompiler()
        self._reload_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: MaskingSettings) -> MaskingEngine:
        """Build an engine from the rules file and options in *settings*."""
        compiler = RuleCompiler(settings.mask_char)
        rule_set = compiler.compile(DotenvRuleSource(settings.rules_file).load())
        return cls(rule_set, scan_timeout=settings.timeout, compiler=compiler)

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def scan_timeout(self) -> float | None:
        return self._scan_timeout

    # ------------------------------------------------------------------
    # Masking
    # ------------------------------------------------------------------

    @overload
    def mask(self, text: str) -> str: ...

    @overload
    def mask(self, text: None) -> None: ...

    def mask(self, text: str | None) -> str | None:
        """Return *text* with every rule applied; ``None`` passes through."""
        return self.mask_with_result(text).text

    def mask_with_result(self, text: str | None) -> MaskingResult:
        """Like :meth:`mask` but also report whether anything changed."""
        rule_set = self._rule_set
        if text is None or not rule_set:
            return MaskingResult(text)

        masked = text
        failures: list[RuleApplicationError] = []
        for rule in rule_set:
            try:
                masked = self._apply_rule(rule, masked)
            except Exception as exc:  # noqa: BLE001 – one rule must not disable the others
                failure = RuleApplicationError(rule.id, cause=exc)
                failures.append(failure)
                self._report(failure)
        return MaskingResult(masked, masked != text, tuple(failures))

    def _apply_rule(self, rule: Rule, text: str) -> str:
        return rule.pattern.sub(
            lambda match: rule.mask_match(match.group()),
            text,
            timeout=self._scan_timeout,
        )

    def _report(self, failure: RuleApplicationError) -> None:
        if _reporting_failure.get():
            return
        token = _reporting_failure.set(True)
        try:
            logger.warning(
                "masking_rule_failed",
                rule_id=failure.rule_id,
                error=repr(failure.cause),
            )
        finally:
            _reporting_failure.reset(token)

    # ------------------------------------------------------------------
    # Reload
    # ------------------------------------------------------------------

    def reload(
        self,
        config: RuleSet | Mapping[str, RuleEntry] | Iterable[tuple[str, RuleEntry]],
    ) -> RuleSet:
        """Replace the active rule set.

        Raw configuration is compiled first; if that raises
        :class:`~logmask.config.validation.ConfigurationError` the previous
        rule set stays active.
        """
        rule_set = config if isinstance(config, RuleSet) else self._compiler.compile(config)
        with self._reload_lock:
            previous = self._rule_set
            self._rule_set = rule_set
        logger.info(
            "masking_rule_set_reloaded",
            previous_rule_count=len(previous),
            rule_count=len(rule_set),
        )
        return rule_set

    def reload_from(self, source: RuleSource) -> RuleSet:
        """Load configuration from *source* and :meth:`reload` it."""
        return self.reload(source.load())
