from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scc.core.models import ScanConfig, Standard
from scc.lexer.cursor import Cursor
from scc.lexer.diagnostics import DiagnosticSink
from scc.lexer.emitter import Emitter
from scc.lexer.features import Feature, FeatureSet


@dataclass
class ScanContext:
    """State owned by one scan and shared by its sub-scanners."""

    cursor: Cursor
    out: Emitter
    sink: DiagnosticSink
    config: ScanConfig
    standard: Standard
    features: FeatureSet

    def warn(self, message: str, line: Optional[int] = None) -> None:
        self.sink.warn(self.cursor.line if line is None else line, message)

    def warn_feature(self, feature: Feature) -> None:
        self.warn(f'{feature.label} feature used but not supported in {self.standard.display_name}')

    def require(self, feature: Feature) -> None:
        """Warn when *feature* is not part of the selected standard."""
        if not self.features.supports(feature):
            self.warn_feature(feature)
