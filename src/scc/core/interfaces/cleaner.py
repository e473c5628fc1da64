from __future__ import annotations
"""Comment cleaner protocol definitions."""

from typing import Optional, Protocol, runtime_checkable

from scc.core.models import ScanResult, Standard


@runtime_checkable
class CleanerProtocol(Protocol):
    """Protocol for language-aware comment cleaners.

    Implementations are expected to:
      * Return the source with comments removed (`strip`).
      * Expose the full scan outcome, diagnostics included (`scan`).
    """

    standard: Standard

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        ...

    def scan(self, source: str, *, filename: Optional[str] = None) -> ScanResult:
        ...
