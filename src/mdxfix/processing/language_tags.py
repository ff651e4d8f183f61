from __future__ import annotations
"""Code-fence language tag normalization.

Runs over the whole document before segmentation, because the tag sits on
the opening delimiter of a block that segmentation would otherwise protect.

The fence pattern matches opening and closing delimiters alike, so the scan
remembers the backtick run of the open block. Inside a block, only a run at
least that long closes it; shorter runs are block content and are returned
as-is, like the closer itself. Everything else is an opener and gets its tag
rewritten. This matches where the segmenter ends a protected block.
"""

import re
from typing import TYPE_CHECKING, Optional, Tuple

from mdxfix.constants import FALLBACK_LANGUAGE, KNOWN_LANGUAGES, LANGUAGE_MAP

if TYPE_CHECKING:
    from mdxfix.core.models import Rule

FENCE_OPEN_RE = re.compile(r'^(?P<indent>[ \t]*)(?P<fence>`{3,})(?P<lang>[^\n`]*?)\n', re.MULTILINE)


def resolve_language(tag: str) -> Optional[str]:
    """Return the identifier that should replace ``tag``, or None to keep it.

    Resolution order: known identifiers are kept, empty tags get the
    fallback, known-bad identifiers are mapped, anything else is kept.
    """
    key = tag.strip().lower()
    if key in KNOWN_LANGUAGES:
        return None
    if not key:
        return FALLBACK_LANGUAGE
    return LANGUAGE_MAP.get(key)


def rewrite_fence_language(match: 're.Match[str]') -> str:
    """Replacement callable for an opening fence matched by FENCE_OPEN_RE."""
    lang = match.group('lang')
    resolved = resolve_language(lang)
    if resolved is None:
        return match.group(0)
    # Trailing blanks (including a CR from CRLF input) stay after the new tag.
    trailing = lang[len(lang.rstrip()):]
    return f"{match.group('indent')}{match.group('fence')}{resolved}{trailing}\n"


def _fence_length(match: 're.Match[str]') -> int:
    # Patterns without a 'fence' group fall back to a plain open/close toggle.
    try:
        fence = match.group('fence')
    except IndexError:
        return 1
    return len(fence) if fence else 1


def apply_document_rule(text: str, rule: 'Rule') -> Tuple[str, int]:
    """Apply a fence-matching rule to openers only.

    Returns the rewritten text and the number of openers whose text changed.
    Exceptions raised by the rule's replacement propagate to the caller.
    """
    open_len = 0
    changed = 0

    def _on_match(match: 're.Match[str]') -> str:
        nonlocal open_len, changed
        original = match.group(0)
        run = _fence_length(match)
        if open_len:
            if run >= open_len:
                open_len = 0
            return original
        open_len = run
        replacement = rule.expand(match)
        if replacement != original:
            changed += 1
        return replacement

    result = rule.pattern.sub(_on_match, text)
    return result, changed
