"""Adapters – structlog masking processors.

Both processors mask the string values stored under *keys* (by default the
rendered ``event``). Usage::

    import structlog
    from logmask.adapters.structlog import MaskingProcessor

    structlog.configure(processors=[MaskingProcessor(engine), ...])
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from logmask.application.masking.engine import MaskingEngine

__all__ = ["CopyOnWriteMaskingProcessor", "MaskingProcessor"]


class MaskingProcessor:
    """Mask values in the event dict in place and return the same dict."""

    def __init__(self, engine: MaskingEngine, keys: Iterable[str] = ("event",)) -> None:
        self._engine = engine
        self._keys = tuple(keys)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key in self._keys:
            value = event_dict.get(key)
            if isinstance(value, str):
                event_dict[key] = self._engine.mask(value)
        return event_dict


class CopyOnWriteMaskingProcessor:
    """Return the incoming event dict unless masking changed a value.

    On a change a shallow copy is returned, so upstream holders of the
    original dict never see it modified.
    """

    def __init__(self, engine: MaskingEngine, keys: Iterable[str] = ("event",)) -> None:
        self._engine = engine
        self._keys = tuple(keys)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        rewritten: dict[str, Any] | None = None
        for key in self._keys:
            value = event_dict.get(key)
            if not isinstance(value, str):
                continue
            result = self._engine.mask_with_result(value)
            if result.changed:
                if rewritten is None:
                    rewritten = dict(event_dict)
                rewritten[key] = result.text
        return event_dict if rewritten is None else rewritten
