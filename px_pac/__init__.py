"""
px PAC - proxy resolution through Proxy Auto-Configuration scripts.

This package evaluates a PAC script's FindProxyForURL function for a
requested URL and turns the answer into an ordered list of proxies,
falling back to a direct connection whenever resolution fails.
"""

__version__ = "1.0.0"
__author__ = "px-pac"
