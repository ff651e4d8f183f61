"""
rules – Centralized rewrite rules for mdxfix.

This module exposes DEFAULT_RULES as the single source of truth for:
  • Code-fence language normalization (document phase)
  • Escaping of '<' and '>' used as numeric comparisons in prose
  • Escaping of tag-like sequences whose name starts with a digit

Order matters: prose rules run top to bottom, each over the whole span,
before the next one starts. Every pattern is compiled with re.ASCII so that
"digit" and "word character" mean their ASCII forms.
"""

import re
from typing import Tuple

from mdxfix.constants import CODE_BLOCK_LANGUAGE_RULE
from mdxfix.core.models import Rule, RuleExample, RulePhase
from mdxfix.processing.language_tags import FENCE_OPEN_RE, rewrite_fence_language


def _escape_lead_lt(match: 're.Match[str]') -> str:
    return '&lt;' + match.group(1)


def _escape_numeric_tag(match: 're.Match[str]') -> str:
    return f'&lt;{match.group(1)}>'


NORMALIZE_CODE_BLOCK_LANGUAGE = Rule(
    name=CODE_BLOCK_LANGUAGE_RULE,
    description='Normalize unknown or missing code block language identifiers',
    pattern=FENCE_OPEN_RE,
    replacement=rewrite_fence_language,
    phase=RulePhase.DOCUMENT,
    examples=(
        RuleExample('Code block with N/A language', '```N/A\ncode here\n```', '```text\ncode here\n```'),
        RuleExample('Code block with argdown language',
                    '```argdown\n[Claim]: Statement\n```', '```markdown\n[Claim]: Statement\n```'),
        RuleExample('Code block without language', '```\ncode here\n```', '```text\ncode here\n```'),
        RuleExample('Known languages are kept', '```javascript\nconst x = 1;\n```', '```javascript\nconst x = 1;\n```'),
    ),
)

LESS_THAN_DIGIT = Rule(
    name='less-than-digit',
    description='Escape < followed by digit (e.g. "<5 minutes" → "&lt;5 minutes")',
    pattern=re.compile(r'<(?=\d)', re.ASCII),
    replacement='&lt;',
    examples=(
        RuleExample('Basic less-than with digit', '- <5 minutes to complete', '- &lt;5 minutes to complete'),
        RuleExample('Multiple occurrences',
                    'Metrics: <5ms latency, <10MB memory, <2% error rate',
                    'Metrics: &lt;5ms latency, &lt;10MB memory, &lt;2% error rate'),
        RuleExample('Size comparisons', 'Bundle size: <20MB', 'Bundle size: &lt;20MB'),
        RuleExample('Valid JSX is kept', '<Component prop={5} />', '<Component prop={5} />'),
    ),
)

LESS_THAN_SPACE_DIGIT = Rule(
    name='less-than-space-digit',
    description='Escape < followed by whitespace and digit (e.g. "< 5 minutes")',
    pattern=re.compile(r'<(\s+)(?=\d)', re.ASCII),
    replacement=_escape_lead_lt,
    examples=(
        RuleExample('Less-than with space and digit', '- < 5 minutes to complete', '- &lt; 5 minutes to complete'),
    ),
)

# The lookbehind keeps '->' arrows and tag-name-adjacent '>' out of reach.
GREATER_THAN_DIGIT = Rule(
    name='greater-than-digit',
    description='Escape > followed by an optional space and a digit (e.g. ">90%" → "&gt;90%")',
    pattern=re.compile(r'(?<![-\w])>(?=\s?\d)', re.ASCII),
    replacement='&gt;',
    examples=(
        RuleExample('Basic greater-than with digit', '- >90% completion rate', '- &gt;90% completion rate'),
        RuleExample('Greater-than with space and digit', '- > 5 users online', '- &gt; 5 users online'),
        RuleExample('Multiple occurrences',
                    'Requirements: >5GB RAM, >10 cores, >100GB storage',
                    'Requirements: &gt;5GB RAM, &gt;10 cores, &gt;100GB storage'),
        RuleExample('Closing tags are kept', '<Component>content</Component>', '<Component>content</Component>'),
    ),
)

INVALID_TAG_OPENING = Rule(
    name='invalid-tag-opening',
    description='Escape opening or closing tags whose name starts with a digit',
    pattern=re.compile(r'<(/?\d[^>\s]*)', re.ASCII),
    replacement=_escape_lead_lt,
    examples=(
        RuleExample('Tag starting with number', '<5Column>Content</5Column>', '&lt;5Column>Content&lt;/5Column>'),
        RuleExample('Tag with number prefix', '<3DModel src="path" />', '&lt;3DModel src="path" />'),
        RuleExample('Valid tag names are kept', '<Component5>Content</Component5>', '<Component5>Content</Component5>'),
    ),
)

NUMERIC_ONLY_TAG = Rule(
    name='numeric-only-tag',
    description='Escape tags that are only numbers (e.g. "<123>" → "&lt;123>")',
    pattern=re.compile(r'<(\d+)>', re.ASCII),
    replacement=_escape_numeric_tag,
    examples=(
        RuleExample('Numeric-only tag', '<123>', '&lt;123>'),
    ),
)

DEFAULT_RULES: Tuple[Rule, ...] = (
    NORMALIZE_CODE_BLOCK_LANGUAGE,
    LESS_THAN_DIGIT,
    LESS_THAN_SPACE_DIGIT,
    GREATER_THAN_DIGIT,
    INVALID_TAG_OPENING,
    NUMERIC_ONLY_TAG,
)
