"""
Base class for PAC script evaluators.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..error_handling.errors import EvaluationError
from ..models.evaluation_request import EvaluationRequest
from ..models.script_source import PacScriptSource


FIND_PROXY_FUNCTION = "FindProxyForURL"

# Appended to every script so a missing entry point fails at bind time
_ENTRY_POINT_CHECK = (
    f"\nif (typeof {FIND_PROXY_FUNCTION} !== 'function') {{"
    f" throw new Error('PAC script does not define {FIND_PROXY_FUNCTION}(url, host)'); }}\n"
)


@dataclass(frozen=True)
class EvaluationOutcome:
    """
    Result of one FindProxyForURL call.
    
    Exactly one of result and error is meaningful: error is set when
    the evaluation failed, otherwise result holds the returned string
    (None if the script returned null or undefined).
    """
    result: Optional[str] = None
    error: Optional[EvaluationError] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None


class ScriptEvaluator(ABC):
    """
    Runs a PAC script's FindProxyForURL function.
    
    Subclasses bind the script in their constructor and raise
    EngineBindError if that fails. Implementations must be safe to call
    from several threads.
    """
    
    name = "abstract"
    
    def __init__(self, script_source: PacScriptSource, prelude: str = ""):
        self.logger = logging.getLogger(__name__)
        self.script_source = script_source
        self.prelude = prelude or ""
    
    def build_script(self, script_text: str) -> str:
        """Combine prelude and PAC text into the code given to the engine."""
        parts = [self.prelude, script_text or "", _ENTRY_POINT_CHECK]
        return "\n".join(part for part in parts if part)
    
    @abstractmethod
    def _call(self, url: str, host: str) -> Any:
        """Invoke FindProxyForURL; raise EvaluationError on engine faults."""
        raise NotImplementedError
    
    def evaluate(self, request: EvaluationRequest) -> Optional[str]:
        """
        Evaluate the PAC script for a request.
        
        Args:
            request: URL and host to pass to FindProxyForURL
            
        Returns:
            The string returned by the script, None for null or undefined
            
        Raises:
            EvaluationError: If the script fails or returns a non-string
        """
        result = self._call(request.url, request.host)
        
        if result is None:
            return None
        
        if not isinstance(result, str):
            raise EvaluationError(
                f"{FIND_PROXY_FUNCTION} returned {type(result).__name__}, expected a string"
            )
        
        return result
    
    def try_evaluate(self, request: EvaluationRequest) -> EvaluationOutcome:
        """Evaluate the script, returning failures as a value."""
        try:
            return EvaluationOutcome(result=self.evaluate(request))
        except EvaluationError as e:
            return EvaluationOutcome(error=e)
        except Exception as e:
            error = EvaluationError(f"{self.name} engine fault: {type(e).__name__}: {e}")
            error.__cause__ = e
            return EvaluationOutcome(error=error)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={self.script_source!r})"
