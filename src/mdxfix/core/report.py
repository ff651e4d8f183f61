from __future__ import annotations

"""
Per-call fix statistics.

A FixStats record is created fresh for every preprocess call, filled while
rules run, and handed to the caller's ``on_stats`` callback once at the end.
Records are never shared between calls.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class FixStats:
    total_fixes: int = 0
    by_rule: Dict[str, int] = field(default_factory=dict)

    def add(self, rule_name: str, count: int) -> None:
        if count <= 0:
            return
        self.by_rule[rule_name] = self.by_rule.get(rule_name, 0) + count
        self.total_fixes += count

    def merge(self, other: 'FixStats') -> None:
        for name, count in other.by_rule.items():
            self.add(name, count)

    def count_for(self, rule_name: str) -> int:
        return self.by_rule.get(rule_name, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalFixes": self.total_fixes,
            "byRuleName": dict(self.by_rule),
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
