"""
PAC evaluation with PyExecJS.
"""

import threading
from typing import Any, Optional

import execjs

from .base import ScriptEvaluator, FIND_PROXY_FUNCTION
from ..error_handling.errors import EngineBindError, EvaluationError


class ExecJSEvaluator(ScriptEvaluator):
    """
    Evaluates PAC scripts through an execjs JavaScript runtime.
    
    The runtime is located once at bind time. Calls are serialised with a
    lock since runtimes differ in how they handle concurrent use.
    """
    
    name = "execjs"
    
    def __init__(self, script_source, prelude: str = "", runtime_name: Optional[str] = None):
        super().__init__(script_source, prelude)
        self._lock = threading.Lock()
        
        try:
            runtime = execjs.get(runtime_name) if runtime_name else execjs.get()
        except execjs.RuntimeUnavailableError as e:
            raise EngineBindError(f"No execjs runtime available: {e}") from e
        
        code = self.build_script(script_source.get_script_text())
        try:
            self._context = runtime.compile(code)
            # execjs compiles lazily; force the script to run once
            self._context.eval("true")
        except execjs.Error as e:
            raise EngineBindError(f"PAC script could not be loaded by execjs: {e}") from e
        
        self.runtime_name = runtime.name
        self.logger.debug(f"Loaded PAC script from {script_source} into execjs runtime {runtime.name}")
    
    def _call(self, url: str, host: str) -> Any:
        with self._lock:
            try:
                return self._context.call(FIND_PROXY_FUNCTION, url, host)
            except execjs.Error as e:
                raise EvaluationError(f"{FIND_PROXY_FUNCTION} failed: {e}") from e
