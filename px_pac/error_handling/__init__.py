"""
Error types and central error reporting for px PAC.

Every failure while resolving proxies is reported here and then mapped
to a direct connection by the selector.
"""

from .errors import PacError, CallerError, EngineBindError, EvaluationError, FormatError
from .error_manager import ErrorManager, ErrorSeverity, ErrorCategory, ErrorInfo, get_error_manager

__all__ = [
    'PacError',
    'CallerError',
    'EngineBindError',
    'EvaluationError',
    'FormatError',
    'ErrorManager',
    'ErrorSeverity',
    'ErrorCategory',
    'ErrorInfo',
    'get_error_manager'
]
