"""Public API surface for mdxfix.processing."""
__all__ = [
    "language_tags",
    "rule_engine",
    "rule_registry",
    "rules",
    "segmenter",
]
