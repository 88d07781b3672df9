"""
Proxy selector driven by a PAC script.

This module provides the PacProxySelector class which evaluates the
FindProxyForURL function of a PAC script for each requested URI and
falls back to a direct connection whenever that fails.
"""

import logging
from typing import Any, Callable, List, Optional

from .base import ProxySelector
from .result_parser import parse_pac_result
from ..config.selector_settings import SelectorSettings
from ..engine.base import ScriptEvaluator
from ..engine.selection import create_evaluator
from ..error_handling.errors import CallerError, FormatError
from ..error_handling.error_manager import ErrorManager, ErrorCategory, ErrorSeverity, get_error_manager
from ..models.evaluation_request import EvaluationRequest
from ..models.proxy_descriptor import ProxyDescriptor, no_proxy_list
from ..models.script_source import PacScriptSource


EvaluatorFactory = Callable[[PacScriptSource, SelectorSettings], ScriptEvaluator]


class PacProxySelector(ProxySelector):
    """
    ProxySelector that uses a PAC script to find the proxies for a URI.
    
    The script engine is bound once in the constructor. If that fails the
    selector keeps working and answers DIRECT for every URI. Evaluation
    failures are reported to the error manager and also answered with
    DIRECT, so a broken PAC script never blocks network access.
    """
    
    def __init__(self,
                 script_source: PacScriptSource,
                 settings: Optional[SelectorSettings] = None,
                 evaluator_factory: Optional[EvaluatorFactory] = None,
                 error_manager: Optional[ErrorManager] = None):
        """
        Initialize the selector and bind the PAC script.
        
        Args:
            script_source: Source of the PAC script
            settings: Engine settings, defaults if None
            evaluator_factory: Callable binding a source to a ScriptEvaluator,
                               create_evaluator if None
            error_manager: Where failures are reported, the global manager if None
        """
        if script_source is None:
            raise CallerError("PAC script source must not be None")
        
        self.logger = logging.getLogger(__name__)
        self.script_source = script_source
        self.settings = settings or SelectorSettings()
        self.error_manager = error_manager or get_error_manager()
        self._evaluator: Optional[ScriptEvaluator] = self._select_engine(evaluator_factory or create_evaluator)
    
    def _select_engine(self, evaluator_factory: EvaluatorFactory) -> Optional[ScriptEvaluator]:
        """Bind the PAC script, returning None if no engine could load it."""
        try:
            evaluator = evaluator_factory(self.script_source, self.settings)
            self.logger.info(f"PAC script {self.script_source} bound to {evaluator.name} engine")
            return evaluator
        except Exception as e:
            self.error_manager.handle_error(
                category=ErrorCategory.ENGINE_BIND,
                severity=ErrorSeverity.HIGH,
                message="PAC parser error, all requests will go DIRECT",
                context={'source': str(self.script_source)},
                exception=e
            )
            return None
    
    @property
    def evaluator(self) -> Optional[ScriptEvaluator]:
        """The bound evaluator, None if binding failed."""
        return self._evaluator
    
    def is_bound(self) -> bool:
        """Check if a script engine is available."""
        return self._evaluator is not None
    
    def select(self, uri: str) -> List[ProxyDescriptor]:
        """
        Get the proxies to use for a URI.
        
        Args:
            uri: Destination URI
            
        Returns:
            Proxies in the order the PAC script listed them, [DIRECT] on failure
            
        Raises:
            CallerError: If uri is None or empty
        """
        try:
            request = EvaluationRequest.from_uri(uri)
        except CallerError as e:
            self.error_manager.handle_error(
                category=ErrorCategory.CALLER,
                severity=ErrorSeverity.MEDIUM,
                message="Invalid URI passed to proxy selector",
                exception=e
            )
            raise
        
        # Some HTTP clients resolve proxies again while fetching the PAC
        # script itself, which would recurse without this check
        if request.host and request.host in str(self.script_source).lower():
            self.logger.debug(f"{request.host} serves the PAC script, using DIRECT")
            return no_proxy_list()
        
        return self._find_proxy(request)
    
    def _find_proxy(self, request: EvaluationRequest) -> List[ProxyDescriptor]:
        """Evaluate the PAC script and parse its answer."""
        if self._evaluator is None:
            self.logger.debug(f"No PAC engine bound, using DIRECT for {request.url}")
            return no_proxy_list()
        
        outcome = self._evaluator.try_evaluate(request)
        error = outcome.error
        proxies = None
        
        if error is None:
            try:
                proxies = parse_pac_result(outcome.result)
            except FormatError as e:
                error = e
        
        if error is not None:
            self.error_manager.handle_error(
                category=ErrorCategory.FORMAT if isinstance(error, FormatError) else ErrorCategory.EVALUATION,
                severity=ErrorSeverity.MEDIUM,
                message=f"PAC resolving error for {request.url}, using DIRECT",
                context={'url': request.url, 'host': request.host, 'result': outcome.result},
                exception=error
            )
            return no_proxy_list()
        
        self.logger.debug(f"PAC decision: {request.url} -> {outcome.result!r}")
        return proxies
    
    def connection_failed(self, uri: str, address: Any, error: Optional[BaseException]) -> None:
        """Accept a connection failure report; the proxy order is not changed."""
        self.logger.debug(f"Connection to proxy {address} failed for {uri}: {error}")
