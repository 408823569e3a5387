"""Adapters – MaskingRewriteHandler.

A copy-on-write counterpart to :class:`MaskingLogFilter`: records are never
mutated, so they stay safe to share with other handlers.
"""
from __future__ import annotations

import logging
from typing import Iterable

from logmask.application.masking.engine import MaskingEngine

__all__ = ["MaskingRewriteHandler"]


def _copy_with_message(record: logging.LogRecord, message: str | None) -> logging.LogRecord:
    clone = logging.makeLogRecord(record.__dict__)
    clone.msg = message
    clone.args = ()
    if "message" in clone.__dict__:
        clone.message = message
    return clone


class MaskingRewriteHandler(logging.Handler):
    """Rewrite records through the masking engine, then forward them.

    Records whose message is unaffected are forwarded as the very same
    object. Otherwise a copy carrying every original attribute (logger name,
    level, thread, timestamps, ``exc_info``, ``stack_info`` and ``extra``
    fields) is forwarded with only the message replaced.

    Typical usage::

        target = logging.FileHandler("app.log")
        logging.getLogger().addHandler(MaskingRewriteHandler(engine, [target]))

    Parameters
    ----------
    engine:
        Shared masking engine.
    handlers:
        Delegate handlers that receive the rewritten records.
    level:
        Log level filter (same as any :class:`logging.Handler`).
    """

    def __init__(
        self,
        engine: MaskingEngine,
        handlers: Iterable[logging.Handler] = (),
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        self._engine = engine
        self._handlers: list[logging.Handler] = list(handlers)

    @property
    def handlers(self) -> tuple[logging.Handler, ...]:
        return tuple(self._handlers)

    def add_handler(self, handler: logging.Handler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def remove_handler(self, handler: logging.Handler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def rewrite(self, record: logging.LogRecord) -> logging.LogRecord:
        """Return *record* itself or a masked copy of it."""
        result = self._engine.mask_with_result(record.getMessage())
        if not result.changed:
            return record
        return _copy_with_message(record, result.text)

    # ------------------------------------------------------------------
    # logging.Handler interface
    # ------------------------------------------------------------------

    def emit(self, record: logging.LogRecord) -> None:
        try:
            rewritten = self.rewrite(record)
        except Exception:  # noqa: BLE001
            # Unrenderable msg/args: delegates report it when they format.
            rewritten = record
        for handler in self._handlers:
            if rewritten.levelno >= handler.level:
                handler.handle(rewritten)

    def flush(self) -> None:
        for handler in self._handlers:
            handler.flush()
