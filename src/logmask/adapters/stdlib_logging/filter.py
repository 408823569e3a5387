from __future__ import annotations

import logging

from logmask.application.masking.engine import MaskingEngine
from logmask.application.masking.pipeline import InPlaceMaskingAdapter

__all__ = ["LogRecordText", "MaskingLogFilter"]


class LogRecordText:
    """View a :class:`logging.LogRecord`'s rendered message as mutable text."""

    __slots__ = ("record",)

    def __init__(self, record: logging.LogRecord) -> None:
        self.record = record

    def get_text(self) -> str:
        return self.record.getMessage()

    def set_text(self, text: str | None) -> None:
        # The message is stored already rendered; args must not be re-applied.
        self.record.msg = text
        self.record.args = ()


class MaskingLogFilter(logging.Filter):
    """Mask each record's rendered message in place before emission.

    Attach to a handler (or logger) whose records are not shared with other
    consumers that need the unmasked text. Never drops a record.
    """

    def __init__(self, engine: MaskingEngine, name: str = "") -> None:
        super().__init__(name)
        self._adapter = InPlaceMaskingAdapter(engine)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        try:
            self._adapter.apply(LogRecordText(record))
        except Exception:  # noqa: BLE001
            # Unrenderable msg/args; Handler.handleError reports it at format time.
            pass
        return True
