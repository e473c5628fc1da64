from __future__ import annotations

from scc.core.models import Diagnostic, ScanConfig, ScanResult, Standard
from scc.errors import ScanError, UnknownStandardError
from scc.lexer.features import Feature, FeatureSet
from scc.scanner import Scanner, scan, strip_comments

__version__ = '1.0.0'

__all__ = [
    'Diagnostic',
    'Feature',
    'FeatureSet',
    'ScanConfig',
    'ScanError',
    'ScanResult',
    'Scanner',
    'Standard',
    'UnknownStandardError',
    'scan',
    'strip_comments',
]
