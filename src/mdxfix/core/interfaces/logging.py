from __future__ import annotations
"""Logger protocols accepted by the preprocessor and its collaborators."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What mdxfix calls on an injected logger.

    ``debug`` carries the opt-in per-call report and span traces, ``warning``
    carries skipped rules, ``error`` carries fatal CLI conditions. A
    ``logging.Logger`` or any adapter with these methods will do.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for ``name`` under the 'mdxfix' namespace."""
        ...
