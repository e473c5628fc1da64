"""Public surface for scc.core: data models and protocol types."""

from scc.core.interfaces import CleanerProtocol, LoggerFactoryProtocol, LoggerLikeProtocol
from scc.core.models import Diagnostic, ScanConfig, ScanResult, Standard

__all__ = [
    'CleanerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'Diagnostic',
    'ScanConfig',
    'ScanResult',
    'Standard',
]
