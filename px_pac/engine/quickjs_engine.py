"""
PAC evaluation with the embedded QuickJS engine.
"""

from typing import Any

import quickjs

from .base import ScriptEvaluator, FIND_PROXY_FUNCTION
from ..error_handling.errors import EngineBindError, EvaluationError


class QuickJSEvaluator(ScriptEvaluator):
    """
    Evaluates PAC scripts in-process using quickjs.
    
    quickjs.Function runs every call on its own worker thread, so
    concurrent callers are serialised by the library.
    """
    
    name = "quickjs"
    
    def __init__(self, script_source, prelude: str = "", time_limit=None):
        super().__init__(script_source, prelude)
        
        code = self.build_script(script_source.get_script_text())
        try:
            self._function = quickjs.Function(FIND_PROXY_FUNCTION, code)
        except quickjs.JSException as e:
            raise EngineBindError(f"PAC script could not be loaded by quickjs: {e}") from e
        
        if time_limit is not None:
            self._function.set_time_limit(time_limit)
        
        self.logger.debug(f"Loaded PAC script from {script_source} into quickjs")
    
    def _call(self, url: str, host: str) -> Any:
        try:
            return self._function(url, host)
        except quickjs.JSException as e:
            raise EvaluationError(f"{FIND_PROXY_FUNCTION} failed: {e}") from e
