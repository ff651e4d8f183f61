from __future__ import annotations

"""MDX preprocessing entry point.

The raw text goes through two ordered phases:

1. Document phase: rules that target code-fence delimiters (language tag
   normalization) run over the complete input.
2. Prose phase: the text is segmented into code and prose spans and the
   remaining rules run over prose spans only.

Both phases write into one FixStats record that is handed to ``on_stats``
once, and only when something was fixed.
"""

import dataclasses
import logging
from typing import Optional, Tuple

from mdxfix.core.interfaces.logging import LoggerLikeProtocol
from mdxfix.core.interfaces.text import SegmenterProtocol
from mdxfix.core.models import PreprocessConfig, RuleDescriptor, SpanKind
from mdxfix.core.report import FixStats
from mdxfix.logging.helpers import get_logger, setup_base_logger
from mdxfix.processing.rule_engine import RuleEngine
from mdxfix.processing.rule_registry import RuleSet
from mdxfix.processing.segmenter import CodeSegmenter


class Preprocessor:
    """Rewrite markdown so that a strict MDX parser accepts it."""

    def __init__(
        self,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
        segmenter: Optional[SegmenterProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('preprocessor')
        self._segmenter = segmenter or CodeSegmenter(logger=self._log)

    @staticmethod
    def _resolve_config(config: Optional[PreprocessConfig], options: dict) -> PreprocessConfig:
        if config is None:
            return PreprocessConfig(**options)
        return dataclasses.replace(config, **options) if options else config

    def _ensure_debug_output(self) -> None:
        # Only our own namespace is configured; injected loggers are the caller's.
        if not isinstance(self._log, logging.Logger) or not self._log.name.startswith('mdxfix'):
            return
        if not self._log.hasHandlers():
            setup_base_logger(level=logging.DEBUG)

    def preprocess(self, text: str, config: Optional[PreprocessConfig] = None, **options) -> str:
        cfg = self._resolve_config(config, options)
        base = RuleSet(cfg.rules) if cfg.rules is not None else RuleSet.default()
        active = base.select(cfg.enable, cfg.disable)

        if cfg.debug:
            self._ensure_debug_output()
            self._log.debug('Active preprocessing rules: %s', list(active.names()))

        stats = FixStats()
        engine = RuleEngine(active, logger=self._log)

        result = engine.apply_document(text, stats)

        if engine.prose_rules:
            if cfg.preserve_code_blocks:
                spans = self._segmenter.segment(result)
                result = ''.join(
                    span.content if span.kind is SpanKind.PROTECTED else engine.apply_prose(span.content, stats)
                    for span in spans
                )
            else:
                result = engine.apply_prose(result, stats)

        if cfg.debug:
            for name in active.names():
                count = stats.count_for(name)
                if count:
                    self._log.debug('%s: %d fixes', name, count)
            if stats.total_fixes:
                self._log.debug('Total preprocessing fixes: %d', stats.total_fixes)

        if cfg.on_stats is not None and stats.total_fixes > 0:
            cfg.on_stats(stats)

        return result


def preprocess(text: str, config: Optional[PreprocessConfig] = None, **options) -> str:
    """Preprocess ``text`` with a fresh Preprocessor.

    Keyword options are the PreprocessConfig fields; when a config is given
    as well, the keywords override its fields.
    """
    return Preprocessor().preprocess(text, config, **options)


def default_rules() -> RuleSet:
    return RuleSet.default()


def list_default_rules() -> Tuple[RuleDescriptor, ...]:
    """Describe the default rules, in application order."""
    return RuleSet.default().describe()
