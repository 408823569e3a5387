"""Generic masking adapters for the two event capabilities."""
from __future__ import annotations

from typing import TypeVar

from logmask.application.masking.engine import MaskingEngine
from logmask.application.masking.ports import MutableTextEvent, RebuildableTextEvent

__all__ = ["CopyOnWriteMaskingAdapter", "InPlaceMaskingAdapter"]

M = TypeVar("M", bound=MutableTextEvent)
R = TypeVar("R", bound=RebuildableTextEvent)


class InPlaceMaskingAdapter:
    """Mask an event's text and always write the result back."""

    def __init__(self, engine: MaskingEngine) -> None:
        self._engine = engine

    def apply(self, event: M) -> M:
        event.set_text(self._engine.mask(event.get_text()))
        return event


class CopyOnWriteMaskingAdapter:
    """Forward the event untouched unless masking changed its text.

    When the text changed, a new event is built through ``with_text`` so the
    original (possibly shared) event is never mutated.
    """

    def __init__(self, engine: MaskingEngine) -> None:
        self._engine = engine

    def apply(self, event: R) -> R:
        result = self._engine.mask_with_result(event.text)
        if not result.changed:
            return event
        return event.with_text(result.text)
