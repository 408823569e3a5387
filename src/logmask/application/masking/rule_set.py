from __future__ import annotations

from typing import Iterable, Iterator

from logmask.application.masking.rule import Rule
from logmask.config.validation import ConfigurationError

__all__ = ["RuleSet"]


class RuleSet:
    """Ordered, immutable collection of rules defining one masking pass.

    Rules run in sequence order and each sees the previous rule's output.
    Rule ids must be unique. A RuleSet is never modified after construction;
    to change the active rules build a new one and swap it in.
    """

    __slots__ = ("_rules", "_by_id")

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        ordered = tuple(rules)
        by_id: dict[str, Rule] = {}
        for rule in ordered:
            if rule.id in by_id:
                raise ConfigurationError(
                    f"Duplicate masking rule id '{rule.id}'", rule_id=rule.id
                )
            by_id[rule.id] = rule
        self._rules = ordered
        self._by_id = by_id

    @classmethod
    def empty(cls) -> RuleSet:
        return cls(())

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(rule.id for rule in self._rules)

    def get(self, rule_id: str) -> Rule | None:
        return self._by_id.get(rule_id)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(ids={list(self.ids)!r})"
