"""
Fake script evaluators and sources for testing selectors without a JavaScript runtime.
"""

import threading
from typing import Callable, List, Optional, Tuple

from px_pac.engine.base import ScriptEvaluator
from px_pac.error_handling.errors import EvaluationError
from px_pac.models.script_source import StringPacScriptSource


SAMPLE_PAC = '''
function FindProxyForURL(url, host) {
    if (host == "internal.company.com") {
        return "DIRECT";
    }
    if (host == "socks.company.com") {
        return "SOCKS socks.company.com:1080; DIRECT";
    }
    return "PROXY proxy.company.com:8080; DIRECT";
}
'''

PAC_URL = "http://pac.example.com/proxy.pac"


def make_source(content: str = SAMPLE_PAC, source_path: str = PAC_URL) -> StringPacScriptSource:
    return StringPacScriptSource(content, source_path=source_path)


class MockEvaluator(ScriptEvaluator):
    """Evaluator answering from a Python callable instead of JavaScript."""
    
    name = "mock"
    
    def __init__(self, script_source, answer: Callable[[str, str], object] = None):
        super().__init__(script_source)
        self.answer = answer or (lambda url, host: "DIRECT")
        self.calls: List[Tuple[str, str]] = []
        self._lock = threading.Lock()
    
    def _call(self, url: str, host: str):
        with self._lock:
            self.calls.append((url, host))
        return self.answer(url, host)


class FailingEvaluator(MockEvaluator):
    """Evaluator whose script always throws."""
    
    name = "failing"
    
    def __init__(self, script_source, error: Optional[Exception] = None):
        super().__init__(script_source)
        self.error = error or EvaluationError("ReferenceError: foo is not defined")
    
    def _call(self, url: str, host: str):
        with self._lock:
            self.calls.append((url, host))
        raise self.error


def answering(answer) -> Callable:
    """Build an evaluator factory answering every call with a fixed string or callable."""
    created = []
    
    def factory(source, settings):
        evaluator = MockEvaluator(source, answer if callable(answer) else (lambda url, host: answer))
        created.append(evaluator)
        return evaluator
    
    factory.created = created
    return factory
