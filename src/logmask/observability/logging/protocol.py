"""Observability – Logger protocol and LogEvent."""
from __future__ import annotations

import dataclasses
import threading
from datetime import UTC, datetime
from typing import Any, Protocol


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """Immutable structured log entry.

    Satisfies :class:`~logmask.application.masking.ports.RebuildableTextEvent`:
    :meth:`with_text` returns a copy in which only ``message`` differs.
    Instances compare by value but are unhashable, since ``context`` is a
    dict.
    """
    level: str
    message: str | None
    logger_name: str
    timestamp: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    thread_name: str = dataclasses.field(default_factory=lambda: threading.current_thread().name)
    error: BaseException | None = None
    context: dict[str, Any] = dataclasses.field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    @property
    def text(self) -> str | None:
        return self.message

    def with_text(self, text: str | None) -> LogEvent:
        return dataclasses.replace(self, message=text)


class Logger(Protocol):
    """Minimal logger protocol – works with structlog or stdlib."""

    def debug(self, event: str, **kw: Any) -> None: ...
    def info(self, event: str, **kw: Any) -> None: ...
    def warning(self, event: str, **kw: Any) -> None: ...
    def error(self, event: str, **kw: Any) -> None: ...
    def critical(self, event: str, **kw: Any) -> None: ...


__all__ = ["LogEvent", "Logger"]
