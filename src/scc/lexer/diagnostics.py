from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from scc.core.interfaces.logging import LoggerLikeProtocol
from scc.core.models import Diagnostic
from scc.logging.helpers import get_logger


class DiagnosticSink:
    """Ordered, append-only collection of line-tagged warnings."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._items: List[Diagnostic] = []
        self._log = logger or get_logger('lexer.diagnostics')

    def warn(self, line: int, message: str) -> Diagnostic:
        diag = Diagnostic(line=line, message=message)
        self._items.append(diag)
        self._log.debug('%s', diag, extra={'context': {'line': line}})
        return diag

    @property
    def items(self) -> Tuple[Diagnostic, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
