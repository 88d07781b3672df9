"""
Data models for px PAC.

This module contains the value types passed between the selector,
the script evaluators and the result parser.
"""

from .proxy_descriptor import ProxyType, ProxyDescriptor, NO_PROXY, no_proxy_list, DEFAULT_PROXY_PORT
from .evaluation_request import EvaluationRequest
from .script_source import PacScriptSource, StringPacScriptSource

__all__ = [
    'ProxyType',
    'ProxyDescriptor',
    'NO_PROXY',
    'no_proxy_list',
    'DEFAULT_PROXY_PORT',
    'EvaluationRequest',
    'PacScriptSource',
    'StringPacScriptSource'
]
