from __future__ import annotations
"""
LanguageCleanerRegistry

Map file suffixes to comment cleaners so callers can pick the language
standard from a file name. Registration is lazy: a suffix can be bound to
a builder that runs on first lookup.

Built-ins:
    - C sources and headers ('.c', '.h'): current C standard.
    - C++ sources and headers ('.cc', '.cpp', '.cxx', '.hh', '.hpp', '.hxx'):
      current C++ standard.

Every cleaner shares the registry base `ScanConfig`; only the standard
differs. Unknown suffixes have
no cleaner of their own; `cleaner_for` then falls back to a cleaner for the
registry default standard (C).
"""
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from scc.core.interfaces.cleaner import CleanerProtocol
from scc.core.models import ScanConfig, ScanResult, Standard
from scc.scanner import Scanner


@dataclass(frozen=True)
class _CleanerRegItem:
    cleaner: CleanerProtocol
    priority: int = 0


class CommentCleaner(CleanerProtocol):
    """Cleaner bound to one language standard and a base configuration."""

    def __init__(self, standard: Standard, *, config: Optional[ScanConfig] = None) -> None:
        self.standard = standard
        self._config = replace(config or ScanConfig(), standard=standard)

    def scan(self, source: str, *, filename: Optional[str] = None) -> ScanResult:
        return Scanner(source, self._config).result

    def strip(self, source: str, *, filename: Optional[str] = None) -> str:
        return self.scan(source, filename=filename).text


def _normalize(suffix: str) -> str:
    sufx = suffix if suffix.startswith('.') else f'.{suffix}'
    return sufx.lower()


class LanguageCleanerRegistry:
    def __init__(self, *, default_standard: Standard = Standard.C, config: Optional[ScanConfig] = None) -> None:
        self._by_suffix: Dict[str, _CleanerRegItem] = {}
        self._lazy_builders: Dict[str, tuple[Callable[[], CleanerProtocol], int]] = {}
        self._default_standard = default_standard
        self._config = config or ScanConfig()
        self._fallback: Optional[CleanerProtocol] = None

    @classmethod
    def default(cls, *, config: Optional[ScanConfig] = None) -> 'LanguageCleanerRegistry':
        """Build a registry with lazy C and C++ cleaners sharing *config*."""
        reg = cls(config=config)
        for suf in ('.c', '.h'):
            reg.register_lazy(suf, builder=lambda: reg.build(Standard.C), priority=0)
        for suf in ('.cc', '.cpp', '.cxx', '.hh', '.hpp', '.hxx'):
            reg.register_lazy(suf, builder=lambda: reg.build(Standard.CXX), priority=0)
        return reg

    def register(self, suffix: str, cleaner: CleanerProtocol, *, priority: int = 0) -> None:
        key = _normalize(suffix)
        prev = self._by_suffix.get(key)
        if prev is None or priority >= prev.priority:
            self._by_suffix[key] = _CleanerRegItem(cleaner=cleaner, priority=priority)
        self._lazy_builders.pop(key, None)

    def register_lazy(self, suffix: str, *, builder: Callable[[], CleanerProtocol], priority: int = 0) -> None:
        self._lazy_builders[_normalize(suffix)] = (builder, priority)

    def for_suffix(self, suffix: str) -> Optional[CleanerProtocol]:
        if not suffix:
            return None
        key = _normalize(suffix)
        item = self._by_suffix.get(key)
        if item:
            return item.cleaner
        lazy = self._lazy_builders.get(key)
        if lazy:
            builder, prio = lazy
            cleaner = builder()
            self.register(key, cleaner, priority=prio)
            return cleaner
        return None

    def build(self, standard: Standard) -> CommentCleaner:
        """Return a new cleaner for *standard* using the registry base config."""
        return CommentCleaner(standard, config=self._config)

    def cleaner_for(self, path: Union[str, Path, None]) -> CleanerProtocol:
        """Return the cleaner for *path*, or the default-standard cleaner."""
        cleaner = None if path is None else self.for_suffix(Path(path).suffix)
        if cleaner is not None:
            return cleaner
        if self._fallback is None:
            self._fallback = self.build(self._default_standard)
        return self._fallback

    def standard_for(self, path: Union[str, Path, None]) -> Standard:
        """Return the standard to scan *path* with (the default when unknown)."""
        return self.cleaner_for(path).standard
