from __future__ import annotations

from mdxfix.constants import CODE_BLOCK_LANGUAGE_RULE, KNOWN_LANGUAGES, LANGUAGE_MAP
from mdxfix.cli import MdxFix
from mdxfix.core.models import PreprocessConfig, Rule, RuleDescriptor, RuleExample, RulePhase
from mdxfix.core.report import FixStats
from mdxfix.preprocessor import Preprocessor, default_rules, list_default_rules, preprocess
from mdxfix.processing.rule_registry import RuleSet
from mdxfix.processing.segmenter import CodeSegmenter, join_spans, segment

__version__ = '0.1.0'

preprocess_mdx = preprocess

__all__ = [
    'CODE_BLOCK_LANGUAGE_RULE',
    'KNOWN_LANGUAGES',
    'LANGUAGE_MAP',
    'CodeSegmenter',
    'FixStats',
    'MdxFix',
    'PreprocessConfig',
    'Preprocessor',
    'Rule',
    'RuleDescriptor',
    'RuleExample',
    'RulePhase',
    'RuleSet',
    'default_rules',
    'join_spans',
    'list_default_rules',
    'preprocess',
    'preprocess_mdx',
    'segment',
]
