from __future__ import annotations

from dataclasses import dataclass

import regex

__all__ = ["DEFAULT_MASK_CHAR", "Rule"]

DEFAULT_MASK_CHAR = "*"


@dataclass(frozen=True)
class Rule:
    """A compiled detection pattern plus its reveal policy.

    Only :class:`~logmask.application.masking.compiler.RuleCompiler` should
    build rules from configuration; it guarantees ``pattern`` compiled and
    ``reveal_suffix_length`` is non-negative.
    """

    id: str
    pattern: regex.Pattern[str]
    reveal_suffix_length: int = 0
    mask_char: str = DEFAULT_MASK_CHAR

    def mask_match(self, match_text: str) -> str:
        """Obscure all but the last ``reveal_suffix_length`` characters.

        Alphanumerics in the masked head become ``mask_char``; punctuation and
        whitespace are copied so the match keeps its shape. A match no longer
        than the reveal length comes back unchanged.
        """
        keep = min(self.reveal_suffix_length, len(match_text))
        cut = len(match_text) - keep
        head = "".join(self.mask_char if ch.isalnum() else ch for ch in match_text[:cut])
        return head + match_text[cut:]
