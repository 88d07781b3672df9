"""
Parsing of FindProxyForURL results.

A PAC script answers with a string such as "PROXY a:8080; SOCKS b; DIRECT".
Each ";" separated entry becomes a ProxyDescriptor.
"""

import re
from typing import List, Optional

from ..error_handling.errors import FormatError
from ..models.proxy_descriptor import ProxyDescriptor, ProxyType, DEFAULT_PROXY_PORT, no_proxy_list

PAC_DIRECT = "DIRECT"
PAC_SOCKS = "SOCKS"

# Length of "DIRECT", "PROXY " and "SOCKS ", the shortest usable entry
KEYWORD_LENGTH = 6

_HOST_PORT_SEPARATOR = re.compile(r"[:\s]+")
_PORT = re.compile(r"[0-9]+")


def build_proxy_from_pac_result(pac_result: Optional[str]) -> ProxyDescriptor:
    """
    Build a descriptor from one entry of a PAC result.
    
    The keyword is matched as a case-insensitive prefix, so "DIRECTX" is
    still DIRECT and anything not DIRECT or SOCKS is an HTTP proxy.
    
    Args:
        pac_result: A single entry, e.g. "PROXY proxy.corp:8080"
        
    Returns:
        The matching ProxyDescriptor
        
    Raises:
        FormatError: If the port is not a number or the host is missing
    """
    if pac_result is None:
        return ProxyDescriptor.direct()
    
    entry = pac_result.strip()
    if len(entry) < KEYWORD_LENGTH:
        return ProxyDescriptor.direct()
    
    keyword = entry.upper()
    if keyword.startswith(PAC_DIRECT):
        return ProxyDescriptor.direct()
    
    kind = ProxyType.SOCKS if keyword.startswith(PAC_SOCKS) else ProxyType.HTTP
    
    host = entry[KEYWORD_LENGTH:].strip()
    port = DEFAULT_PROXY_PORT
    
    token = _HOST_PORT_SEPARATOR.split(host)
    while len(token) > 1 and not token[-1]:
        token.pop()
    if len(token) == 1:
        host = token[0]
    elif len(token) == 2:
        host, port_text = token
        if not _PORT.fullmatch(port_text):
            raise FormatError(f"Invalid port {port_text!r} in PAC entry {entry!r}")
        port = int(port_text)
    
    try:
        return ProxyDescriptor(kind, host, port)
    except ValueError as e:
        raise FormatError(f"Invalid PAC entry {entry!r}: {e}") from e


def parse_pac_result(result: Optional[str]) -> List[ProxyDescriptor]:
    """
    Turn a FindProxyForURL result into unique descriptors.
    
    Entries keep the order the script listed them in; repeated entries
    are dropped.
    
    Raises:
        FormatError: If an entry cannot be parsed
    """
    if not result:
        return no_proxy_list()
    
    definitions = result.split(";")
    # A trailing separator ("PROXY a:8080;") does not add a DIRECT entry
    while definitions and not definitions[-1]:
        definitions.pop()

    proxies = {}
    for definition in definitions:
        proxy = build_proxy_from_pac_result(definition)
        proxies.setdefault(proxy, None)
    
    return list(proxies) or no_proxy_list()
