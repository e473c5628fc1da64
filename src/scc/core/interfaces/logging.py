from __future__ import annotations
"""Logging seams used by the scanner and the CLI.

The scanner only needs something that accepts printf-style records with an
optional ``extra=`` mapping, so callers may hand in any object with that
shape (a stdlib `logging.Logger`, a `LoggerAdapter`, or a test recorder).
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Subset of `logging.Logger` that scc writes to."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of loggers named below the 'scc' base logger."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for *name* ('cli' resolves to 'scc.cli')."""
        ...
