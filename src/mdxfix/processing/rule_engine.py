from typing import Iterable, Optional

from mdxfix.core.interfaces.logging import LoggerLikeProtocol
from mdxfix.core.models import Rule, RulePhase
from mdxfix.core.report import FixStats
from mdxfix.logging.helpers import get_logger
from mdxfix.processing.language_tags import apply_document_rule
from mdxfix.processing.rule_registry import RuleSet


class RuleEngine:
    def __init__(self, rules: Iterable[Rule], *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        """Ordered rule application with per-rule failure isolation.

        A rule whose replacement raises is logged and skipped; the text keeps
        whatever it was before that rule and the remaining rules still run.
        """
        rule_set = rules if isinstance(rules, RuleSet) else RuleSet(rules)
        self._document_rules = tuple(rule_set.for_phase(RulePhase.DOCUMENT))
        self._prose_rules = tuple(rule_set.for_phase(RulePhase.PROSE))
        self._log = logger or get_logger('processing.rule_engine')

    @property
    def document_rules(self) -> tuple:
        return self._document_rules

    @property
    def prose_rules(self) -> tuple:
        return self._prose_rules

    def apply_document(self, text: str, stats: FixStats) -> str:
        """Run document-phase rules over the complete text (openers only)."""
        for rule in self._document_rules:
            try:
                rewritten, count = apply_document_rule(text, rule)
            except Exception as exc:
                self._log.warning('⚠  rule %r failed: %s; document left unchanged for this rule', rule.name, exc)
                continue
            text = rewritten
            stats.add(rule.name, count)
        return text

    def apply_prose(self, text: str, stats: FixStats) -> str:
        """Run prose-phase rules, in order, over one rewritable span."""
        if not text:
            return text
        for rule in self._prose_rules:
            try:
                rewritten, count = rule.pattern.subn(rule.expand, text)
            except Exception as exc:
                self._log.warning('⚠  rule %r failed: %s; span left unchanged for this rule', rule.name, exc)
                continue
            text = rewritten
            stats.add(rule.name, count)
        return text
