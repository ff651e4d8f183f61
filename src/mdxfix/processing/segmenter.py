import re
from typing import Iterable, List, Optional

from mdxfix.core.interfaces.logging import LoggerLikeProtocol
from mdxfix.core.models import Span, SpanKind
from mdxfix.logging.helpers import get_logger, trace


# Fenced blocks first so that '```' is never read as an inline span. A fence
# closes on the next run of the same backticks; inline code stays on one line.
CODE_REGION_RE = re.compile(r'(?P<fence>`{3,})[\s\S]*?(?P=fence)|`[^`\n]+`')


class CodeSegmenter:
    """Split markdown into protected code regions and rewritable prose.

    Unterminated fences and inline spans never match, so they end up in the
    surrounding prose instead of protecting the rest of the document.
    """

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None, pattern: 're.Pattern[str]' = CODE_REGION_RE) -> None:
        self._log = logger or get_logger('processing.segmenter')
        self._rx = pattern

    def segment(self, text: str) -> List[Span]:
        spans: List[Span] = []
        last = 0
        for match in self._rx.finditer(text):
            start, end = match.span()
            if start > last:
                spans.append(Span(SpanKind.REWRITABLE, text[last:start]))
            spans.append(Span(SpanKind.PROTECTED, match.group(0)))
            last = end
        if last < len(text):
            spans.append(Span(SpanKind.REWRITABLE, text[last:]))

        trace(
            self._log,
            'segmented input',
            spans=len(spans),
            protected=sum(1 for s in spans if s.protected),
        )
        return spans

    @staticmethod
    def join(spans: Iterable[Span]) -> str:
        return ''.join(span.content for span in spans)


def segment(text: str, *, preserve_code_blocks: bool = True) -> List[Span]:
    """Module-level shortcut; without protection the whole text is one span."""
    if not preserve_code_blocks:
        return [Span(SpanKind.REWRITABLE, text)] if text else []
    return CodeSegmenter().segment(text)


def join_spans(spans: Iterable[Span]) -> str:
    return CodeSegmenter.join(spans)
