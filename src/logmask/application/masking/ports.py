"""Event capabilities the masking adapters work against.

A host implements whichever capability its event type supports: mutable
events expose get/set access to their text, immutable ones can produce a copy
with the text replaced.
"""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

__all__ = ["MutableTextEvent", "RebuildableTextEvent"]

E = TypeVar("E", bound="RebuildableTextEvent")


@runtime_checkable
class MutableTextEvent(Protocol):
    def get_text(self) -> str | None: ...

    def set_text(self, text: str | None) -> None: ...


@runtime_checkable
class RebuildableTextEvent(Protocol):
    @property
    def text(self) -> str | None: ...

    def with_text(self: E, text: str | None) -> E:
        """Return a copy identical to ``self`` except for its text."""
        ...
