from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

from typing import Dict, FrozenSet

# Name of the document-phase rule. Stats consumers key on it.
CODE_BLOCK_LANGUAGE_RULE: str = 'normalize-code-block-language'

# Identifiers the syntax highlighter is known to accept.
KNOWN_LANGUAGES: FrozenSet[str] = frozenset({
    'javascript', 'js', 'typescript', 'ts', 'jsx', 'tsx',
    'python', 'py', 'java', 'c', 'cpp', 'csharp', 'cs',
    'html', 'css', 'scss', 'sass', 'less',
    'json', 'yaml', 'yml', 'xml', 'toml',
    'bash', 'sh', 'shell', 'powershell',
    'sql', 'graphql', 'markdown', 'md',
    'rust', 'go', 'ruby', 'php', 'swift',
    'kotlin', 'dart', 'r', 'matlab',
    'diff', 'text', 'plaintext',
})

# Fallback for fences that carry no language at all.
FALLBACK_LANGUAGE: str = 'text'

# Known-bad identifiers (lowercase) and their replacement.
LANGUAGE_MAP: Dict[str, str] = {
    'n/a': 'text',
    'argdown': 'markdown',
}

# Alias names accepted by enable/disable lists.
RULE_ALIASES: Dict[str, tuple] = {
    'invalid-tag-names': ('invalid-tag-opening', 'numeric-only-tag'),
}
