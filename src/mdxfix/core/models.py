from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from mdxfix.core.report import FixStats

Replacement = Union[str, Callable[['re.Match[str]'], str]]


class RulePhase(str, Enum):
    """Where a rule runs: over the whole document or over prose spans only."""
    DOCUMENT = 'document'
    PROSE = 'prose'


class SpanKind(str, Enum):
    PROTECTED = 'protected'
    REWRITABLE = 'rewritable'


@dataclass(frozen=True)
class Span:
    kind: SpanKind
    content: str

    @property
    def protected(self) -> bool:
        return self.kind is SpanKind.PROTECTED


@dataclass(frozen=True)
class RuleExample:
    description: str
    input: str
    expected: str


@dataclass(frozen=True)
class Rule:
    """A named pattern/replacement pair.

    ``replacement`` is either inserted literally or, when callable, invoked
    with the ``re.Match`` of every occurrence.
    """
    name: str
    description: str
    pattern: 're.Pattern[str]'
    replacement: Replacement
    default_enabled: bool = True
    phase: RulePhase = RulePhase.PROSE
    examples: Tuple[RuleExample, ...] = ()

    @property
    def replacement_kind(self) -> str:
        return 'callable' if callable(self.replacement) else 'string'

    def expand(self, match: 're.Match[str]') -> str:
        if callable(self.replacement):
            return self.replacement(match)
        return self.replacement

    def describe(self) -> 'RuleDescriptor':
        return RuleDescriptor(
            name=self.name,
            description=self.description,
            pattern=self.pattern.pattern,
            replacement_kind=self.replacement_kind,
            phase=self.phase,
            default_enabled=self.default_enabled,
            examples=self.examples,
        )


@dataclass(frozen=True)
class RuleDescriptor:
    """Read-only view of a rule for introspection and listings."""
    name: str
    description: str
    pattern: str
    replacement_kind: str
    phase: RulePhase
    default_enabled: bool
    examples: Tuple[RuleExample, ...] = ()


@dataclass(frozen=True)
class PreprocessConfig:
    """Per-call options for the preprocessor.

    Attributes:
        rules: Replacement for the default rule list (order is significant).
        enable: When non-empty, the active set is exactly these rule names.
        disable: Rule names removed after ``enable`` has been applied.
        preserve_code_blocks: Skip fenced and inline code when rewriting prose.
        on_stats: Called once with the final stats when at least one fix ran.
        debug: Log the active rules, per-rule fix counts and the total at DEBUG
            level on the 'mdxfix.preprocessor' logger. When no handler is
            configured for it, the base 'mdxfix' stderr handler is attached.
    """
    rules: Optional[Sequence[Rule]] = None
    enable: Optional[Sequence[str]] = None
    disable: Optional[Sequence[str]] = None
    preserve_code_blocks: bool = True
    on_stats: Optional[Callable[['FixStats'], None]] = None
    debug: bool = False

    def __post_init__(self) -> None:
        for names in (self.enable, self.disable):
            if isinstance(names, str):
                raise ValueError('enable/disable expect a sequence of rule names, not a string')
        if self.rules is None:
            return
        # Generators would be exhausted by the duplicate check below.
        object.__setattr__(self, 'rules', tuple(self.rules))
        seen: set[str] = set()
        for rule in self.rules:
            if rule.name in seen:
                raise ValueError(f'duplicate rule name: {rule.name!r}')
            seen.add(rule.name)
