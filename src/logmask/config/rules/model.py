"""Config rules – RuleConfig."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RuleConfig"]


@dataclass(frozen=True)
class RuleConfig:
    """Raw, not yet validated description of one masking rule."""

    pattern: str
    # Trailing characters of each match left visible; None means 0.
    reveal_suffix_length: int | None = None
    # None means the compiler's default mask character.
    mask_char: str | None = None
