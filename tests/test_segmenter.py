from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from mdxfix.core.models import Span, SpanKind  # noqa: E402
from mdxfix.processing.segmenter import CodeSegmenter, join_spans, segment  # noqa: E402

P = SpanKind.PROTECTED
R = SpanKind.REWRITABLE


def _kinds(text: str) -> list:
    return [(s.kind, s.content) for s in segment(text)]


class SegmenterTests(unittest.TestCase):
    def test_inline_code(self) -> None:
        self.assertEqual(_kinds("a `b` c"), [(R, "a "), (P, "`b`"), (R, " c")])

    def test_fenced_block_includes_delimiters(self) -> None:
        self.assertEqual(
            _kinds("x\n```js\ny < 1\n```\nz"),
            [(R, "x\n"), (P, "```js\ny < 1\n```"), (R, "\nz")],
        )

    def test_longer_fence_contains_shorter(self) -> None:
        text = "````md\n```js\nq\n```\n````"
        self.assertEqual(_kinds(text), [(P, text)])

    def test_text_starting_and_ending_with_code(self) -> None:
        self.assertEqual(_kinds("`a` and `b`"), [(P, "`a`"), (R, " and "), (P, "`b`")])

    def test_unterminated_fence_is_rewritable(self) -> None:
        text = "```py\nx <5"
        self.assertEqual(_kinds(text), [(R, text)])

    def test_unterminated_inline_is_rewritable(self) -> None:
        text = "it costs `5 dollars"
        self.assertEqual(_kinds(text), [(R, text)])

    def test_inline_stops_at_line_break(self) -> None:
        text = "a `b\nc` d"
        self.assertEqual(_kinds(text), [(R, text)])

    def test_empty_text(self) -> None:
        self.assertEqual(segment(""), [])

    def test_protection_disabled(self) -> None:
        text = "a `b` ```\nc\n```"
        self.assertEqual(segment(text, preserve_code_blocks=False), [Span(R, text)])

    def test_join_is_lossless(self) -> None:
        samples = [
            "",
            "plain",
            "a `b` c ```\nd\n``` e",
            "```unterminated\n`x` <5",
            "``double`` `single`\n````\n```\n````",
            "\r\n```\r\nwin\r\n```\r\n",
        ]
        seg = CodeSegmenter()
        for text in samples:
            with self.subTest(text=text):
                self.assertEqual(join_spans(segment(text)), text)
                self.assertEqual(seg.join(seg.segment(text)), text)

    def test_spans_alternate_kinds(self) -> None:
        spans = segment("a `b` c `d` e")
        self.assertEqual([s.protected for s in spans], [False, True, False, True, False])


if __name__ == "__main__":
    unittest.main()
