from __future__ import annotations
"""Text rewriting protocol definitions."""

from typing import Iterable, List, Optional, Protocol, runtime_checkable

from mdxfix.core.models import PreprocessConfig, Span


@runtime_checkable
class SegmenterProtocol(Protocol):
    """Split text into protected and rewritable spans.

    Implementations must be lossless: joining the spans' contents in order
    returns the original text.
    """

    def segment(self, text: str) -> List[Span]:
        ...

    def join(self, spans: Iterable[Span]) -> str:
        ...


@runtime_checkable
class PreprocessorProtocol(Protocol):
    """Rewrite raw markup text so a strict parser accepts it."""

    def preprocess(self, text: str, config: Optional[PreprocessConfig] = None, **options) -> str:
        ...
