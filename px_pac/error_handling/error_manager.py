"""
Central error management for proxy resolution failures.

This module provides the ErrorManager class that records the failures the
selector recovers from, keeps statistics about them and notifies
registered callbacks.
"""

import logging
import threading
import uuid
from datetime import datetime
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Callable, Any
from dataclasses import dataclass


class ErrorSeverity(IntEnum):
    """Error severity levels."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class ErrorCategory(Enum):
    """Error categories for classification."""
    CALLER = "caller"
    ENGINE_BIND = "engine_bind"
    EVALUATION = "evaluation"
    FORMAT = "format"


@dataclass
class ErrorInfo:
    """Information about an error occurrence."""
    error_id: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: Optional[str] = None
    timestamp: datetime = None
    context: Optional[Dict[str, Any]] = None
    exception: Optional[Exception] = None
    
    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now()
        if self.context is None:
            self.context = {}


_LOG_LEVELS = {
    ErrorSeverity.LOW: logging.INFO,
    ErrorSeverity.MEDIUM: logging.WARNING,
    ErrorSeverity.HIGH: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class ErrorManager:
    """
    Central error management system.
    
    Records errors reported by selectors, logs them, and notifies
    callbacks. Safe to use from several threads.
    """
    
    def __init__(self, max_history_size: int = 1000):
        """
        Initialize the error manager.
        
        Args:
            max_history_size: Number of errors kept in the history
        """
        self.logger = logging.getLogger(__name__)
        self._error_history: List[ErrorInfo] = []
        self._error_callbacks: List[Callable[[ErrorInfo], None]] = []
        self._lock = threading.RLock()
        
        self.max_history_size = max_history_size
        
        self._stats = {
            'total_errors': 0,
            'errors_by_category': {},
            'errors_by_severity': {}
        }
    
    def add_error_callback(self, callback: Callable[[ErrorInfo], None]):
        """Add callback to be notified of errors."""
        with self._lock:
            self._error_callbacks.append(callback)
    
    def remove_error_callback(self, callback: Callable[[ErrorInfo], None]):
        """Remove error callback."""
        with self._lock:
            if callback in self._error_callbacks:
                self._error_callbacks.remove(callback)
    
    def handle_error(self,
                    category: ErrorCategory,
                    severity: ErrorSeverity,
                    message: str,
                    details: Optional[str] = None,
                    context: Optional[Dict[str, Any]] = None,
                    exception: Optional[Exception] = None) -> ErrorInfo:
        """
        Handle an error occurrence.
        
        Args:
            category: Error category
            severity: Error severity
            message: Error message
            details: Additional error details
            context: Additional context information
            exception: Exception that caused the error
            
        Returns:
            ErrorInfo object for the handled error
        """
        if details is None and exception is not None:
            details = f"{type(exception).__name__}: {exception}"
        
        error_info = ErrorInfo(
            error_id=str(uuid.uuid4()),
            category=category,
            severity=severity,
            message=message,
            details=details,
            context=context,
            exception=exception
        )
        
        self.logger.log(
            _LOG_LEVELS[severity],
            f"[{category.value}] {message}" + (f": {details}" if details else ""),
            exc_info=exception if severity >= ErrorSeverity.HIGH else None
        )
        
        with self._lock:
            self._update_stats(error_info)
            self._error_history.append(error_info)
            if len(self._error_history) > self.max_history_size:
                self._error_history = self._error_history[-self.max_history_size:]
            callbacks = list(self._error_callbacks)
        
        for callback in callbacks:
            try:
                callback(error_info)
            except Exception as e:
                self.logger.error(f"Error in error callback: {e}")
        
        return error_info
    
    def _update_stats(self, error_info: ErrorInfo):
        """Update error statistics."""
        self._stats['total_errors'] += 1
        
        by_category = self._stats['errors_by_category']
        by_category[error_info.category.value] = by_category.get(error_info.category.value, 0) + 1
        
        by_severity = self._stats['errors_by_severity']
        by_severity[error_info.severity.name] = by_severity.get(error_info.severity.name, 0) + 1
    
    def get_error_history(self, category: Optional[ErrorCategory] = None,
                         limit: Optional[int] = None) -> List[ErrorInfo]:
        """
        Get recorded errors, oldest first.
        
        Args:
            category: Only return errors of this category
            limit: Only return the most recent errors
        """
        with self._lock:
            history = list(self._error_history)
        
        if category is not None:
            history = [e for e in history if e.category == category]
        
        if limit is not None:
            history = history[-limit:]
        
        return history
    
    def get_statistics(self) -> Dict[str, Any]:
        """Get a copy of the error statistics."""
        with self._lock:
            return {
                'total_errors': self._stats['total_errors'],
                'errors_by_category': dict(self._stats['errors_by_category']),
                'errors_by_severity': dict(self._stats['errors_by_severity'])
            }
    
    def clear_history(self):
        """Clear error history and statistics."""
        with self._lock:
            self._error_history.clear()
            self._stats['total_errors'] = 0
            self._stats['errors_by_category'].clear()
            self._stats['errors_by_severity'].clear()


# Global error manager instance
_error_manager: Optional[ErrorManager] = None
_error_manager_lock = threading.Lock()


def get_error_manager() -> ErrorManager:
    """Get the global error manager instance."""
    global _error_manager
    if _error_manager is None:
        with _error_manager_lock:
            if _error_manager is None:
                _error_manager = ErrorManager()
    return _error_manager
