from __future__ import annotations
"""
RuleSet

An ordered, immutable collection of rewrite rules plus the enable/disable
selection used by every preprocess call.

Selection never mutates the set it is called on: each call returns a new
RuleSet, so the default table can be shared freely between callers.

Selection semantics:
    * No lists: every rule with ``default_enabled``.
    * Non-empty ``enable``: exactly the named rules, ``default_enabled`` ignored.
    * Non-empty ``disable``: applied after ``enable``, drops the named rules.
    * Unknown names are ignored; aliases (RULE_ALIASES) expand to their members.
"""
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from mdxfix.constants import RULE_ALIASES
from mdxfix.core.models import Rule, RuleDescriptor, RulePhase
from mdxfix.processing.rules import DEFAULT_RULES


def _expand_names(names: Iterable[str]) -> set[str]:
    out: set[str] = set()
    for name in names:
        out.update(RULE_ALIASES.get(name, (name,)))
    return out


class RuleSet:
    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @classmethod
    def default(cls) -> 'RuleSet':
        """Build the default rule set, document rule first."""
        return cls(DEFAULT_RULES)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self._rules)

    def __repr__(self) -> str:
        return f'RuleSet({list(self.names())!r})'

    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def get(self, name: str) -> Optional[Rule]:
        for rule in self._rules:
            if rule.name == name:
                return rule
        return None

    def for_phase(self, phase: RulePhase) -> 'RuleSet':
        return RuleSet(rule for rule in self._rules if rule.phase is phase)

    def extend(self, *rules: Rule) -> 'RuleSet':
        """Return a new set with ``rules`` appended; same-named rules are replaced in place."""
        incoming = {rule.name: rule for rule in rules}
        kept = [incoming.pop(rule.name, rule) for rule in self._rules]
        return RuleSet([*kept, *incoming.values()])

    def without(self, *names: str) -> 'RuleSet':
        drop = _expand_names(names)
        return RuleSet(rule for rule in self._rules if rule.name not in drop)

    def select(
        self,
        enable: Optional[Sequence[str]] = None,
        disable: Optional[Sequence[str]] = None,
    ) -> 'RuleSet':
        if enable:
            wanted = _expand_names(enable)
            active = [rule for rule in self._rules if rule.name in wanted]
        else:
            active = [rule for rule in self._rules if rule.default_enabled]
        if disable:
            dropped = _expand_names(disable)
            active = [rule for rule in active if rule.name not in dropped]
        return RuleSet(active)

    def describe(self) -> Tuple[RuleDescriptor, ...]:
        return tuple(rule.describe() for rule in self._rules)
