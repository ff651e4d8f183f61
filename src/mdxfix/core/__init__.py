from mdxfix.core.models import (
    PreprocessConfig,
    Rule,
    RuleDescriptor,
    RuleExample,
    RulePhase,
    Span,
    SpanKind,
)
from mdxfix.core.report import FixStats

__all__ = [
    'FixStats',
    'PreprocessConfig',
    'Rule',
    'RuleDescriptor',
    'RuleExample',
    'RulePhase',
    'Span',
    'SpanKind',
]
