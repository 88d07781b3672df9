"""
Script engines for evaluating PAC scripts.

Engines are chosen once when a selector is built: the embedded QuickJS
engine when the quickjs package is installed, PyExecJS otherwise.
"""

from .base import ScriptEvaluator, EvaluationOutcome
from .selection import select_engine_name, create_evaluator, is_quickjs_available

__all__ = [
    'ScriptEvaluator',
    'EvaluationOutcome',
    'select_engine_name',
    'create_evaluator',
    'is_quickjs_available'
]
