"""
Proxy selectors that answer "which proxies for this URI?".
"""

from .base import ProxySelector
from .pac_selector import PacProxySelector
from .result_parser import parse_pac_result, build_proxy_from_pac_result

__all__ = [
    'ProxySelector',
    'PacProxySelector',
    'parse_pac_result',
    'build_proxy_from_pac_result'
]
