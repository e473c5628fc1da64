from __future__ import annotations

"""Scanner façade: one comment-stripping pass over a source string.

A `Scanner` owns every piece of mutable state for its scan (cursor, output,
diagnostics), so independent scans never share anything. The scan runs to
completion in the constructor; the instance is read-only afterwards.

Only a `ScanError` (an invalid standard) aborts a scan. In that case the
output is discarded and `ok` is False; lexical problems in the input are
reported as diagnostics and never stop the scan.
"""

from typing import Optional, Tuple

from scc.core.interfaces.logging import LoggerLikeProtocol
from scc.core.models import Diagnostic, ScanConfig, ScanResult, Standard
from scc.errors import ScanError
from scc.lexer.context import ScanContext
from scc.lexer.cursor import Cursor
from scc.lexer.diagnostics import DiagnosticSink
from scc.lexer.emitter import Emitter
from scc.lexer.features import FeatureSet
from scc.lexer.machine import CommentStateMachine
from scc.logging.helpers import get_logger


class Scanner:
    def __init__(
        self,
        source: str,
        config: Optional[ScanConfig] = None,
        *,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._config = config or ScanConfig()
        self._log = logger or get_logger('scanner')
        self._sink = DiagnosticSink(logger=logger)
        self._out = Emitter(invert=self._config.invert_output)
        self._ok = False
        try:
            standard = Standard.parse(self._config.standard)
            ctx = ScanContext(
                cursor=Cursor(source),
                out=self._out,
                sink=self._sink,
                config=self._config,
                standard=standard,
                features=FeatureSet.for_standard(standard),
            )
            CommentStateMachine(ctx, logger=logger).run()
            self._ok = True
        except ScanError as exc:
            self._log.debug('scan aborted: %s', exc)
            self._out.clear()
            self._sink.warn(0, str(exc))
        self._result = ScanResult(ok=self._ok, text=self._out.text(), diagnostics=self._sink.items)
        self._log.debug(
            'scanned %d chars -> %d chars, %d diagnostic(s)',
            len(source), len(self._result.text), len(self._result.diagnostics),
        )

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def result(self) -> ScanResult:
        return self._result

    @property
    def ok(self) -> bool:
        return self._result.ok

    @property
    def text(self) -> str:
        return self._result.text

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        return self._result.diagnostics


def scan(source: str, config: Optional[ScanConfig] = None, *, logger: Optional[LoggerLikeProtocol] = None) -> ScanResult:
    """Scan *source* and return the full result."""
    return Scanner(source, config, logger=logger).result


def strip_comments(source: str, standard: Standard | str = Standard.C, **options) -> str:
    """Return *source* with comments removed.

    Args:
        source: Original source code.
        standard: Language standard (member or name).
        **options: Any other `ScanConfig` field.

    Returns:
        The transformed text ('' if the scan failed).
    """
    return Scanner(source, ScanConfig(standard=standard, **options)).text
