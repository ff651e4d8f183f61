from __future__ import annotations

import re
import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from mdxfix.core.models import Rule, RulePhase  # noqa: E402
from mdxfix.processing.language_tags import apply_document_rule, resolve_language  # noqa: E402
from mdxfix.processing.rules import NORMALIZE_CODE_BLOCK_LANGUAGE  # noqa: E402


def _normalize(text: str) -> tuple:
    return apply_document_rule(text, NORMALIZE_CODE_BLOCK_LANGUAGE)


class ResolveLanguageTests(unittest.TestCase):
    def test_known_languages_are_kept(self) -> None:
        for tag in ("python", "Python ", " TS", "plaintext", "text", "diff"):
            with self.subTest(tag=tag):
                self.assertIsNone(resolve_language(tag))

    def test_empty_gets_fallback(self) -> None:
        self.assertEqual(resolve_language(""), "text")
        self.assertEqual(resolve_language("   "), "text")

    def test_known_bad_identifiers(self) -> None:
        self.assertEqual(resolve_language("N/A"), "text")
        self.assertEqual(resolve_language("n/a"), "text")
        self.assertEqual(resolve_language("ARGDOWN"), "markdown")

    def test_unknown_is_passed_through(self) -> None:
        self.assertIsNone(resolve_language("mermaid"))


class FenceNormalizationTests(unittest.TestCase):
    def test_closer_with_trailing_blanks_is_untouched(self) -> None:
        text = "```js\ncode\n```  \n"
        self.assertEqual(_normalize(text), (text, 0))

    def test_indent_and_fence_length_preserved(self) -> None:
        self.assertEqual(
            _normalize("   ````\nx\n   ````\n"),
            ("   ````text\nx\n   ````\n", 1),
        )

    def test_crlf_line_endings(self) -> None:
        self.assertEqual(
            _normalize("```\r\nx\r\n```\r\n"),
            ("```text\r\nx\r\n```\r\n", 1),
        )

    def test_only_changed_openers_count(self) -> None:
        text = "```python\na\n```\n```argdown\nb\n```\n```\nc\n```\n"
        out, count = _normalize(text)
        self.assertEqual(out, "```python\na\n```\n```markdown\nb\n```\n```text\nc\n```\n")
        self.assertEqual(count, 2)

    def test_last_closer_without_newline(self) -> None:
        self.assertEqual(_normalize("```\nx\n```"), ("```text\nx\n```", 1))

    def test_shorter_run_does_not_close_block(self) -> None:
        text = "````md\n```\nx\n```js\ny\n```\n````\n"
        self.assertEqual(_normalize(text), ("````md\n```\nx\n```js\ny\n```\n````\n", 0))

    def test_longer_run_closes_block(self) -> None:
        self.assertEqual(
            _normalize("```\na\n`````\n```\nb\n```\n"),
            ("```text\na\n`````\n```text\nb\n```\n", 2),
        )

    def test_pattern_without_fence_group_toggles(self) -> None:
        rule = Rule(
            name="marker",
            description="",
            pattern=re.compile(r"^%%\n", re.MULTILINE),
            replacement="%% open\n",
            phase=RulePhase.DOCUMENT,
        )
        self.assertEqual(
            apply_document_rule("%%\na\n%%\n%%\n", rule),
            ("%% open\na\n%%\n%% open\n", 2),
        )

    def test_inline_triple_backticks_are_not_fences(self) -> None:
        text = "say ```hi``` now\n"
        self.assertEqual(_normalize(text), (text, 0))


if __name__ == "__main__":
    unittest.main()
