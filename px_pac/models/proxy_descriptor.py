"""
Proxy descriptor model for the outcome of a PAC decision.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


DEFAULT_PROXY_PORT = 80


class ProxyType(Enum):
    """Kinds of connection a PAC script can ask for."""
    DIRECT = "direct"
    HTTP = "http"
    SOCKS = "socks"


@dataclass(frozen=True)
class ProxyDescriptor:
    """
    One entry of a PAC decision.
    
    Attributes:
        kind: Connection type
        host: Proxy host name or address (empty for DIRECT)
        port: Proxy port (0 for DIRECT)
    """
    kind: ProxyType
    host: str = ""
    port: int = 0
    
    def __post_init__(self):
        """Validate the descriptor after initialization."""
        self._validate()
    
    def _validate(self):
        """Validate descriptor fields."""
        if not isinstance(self.kind, ProxyType):
            raise ValueError(f"Invalid proxy type: {self.kind!r}")
        
        if self.kind is ProxyType.DIRECT:
            if self.host or self.port:
                raise ValueError("DIRECT descriptor cannot have a host or port")
            return
        
        if not self.host:
            raise ValueError(f"Host is required for {self.kind.name} proxy")
        
        if not (1 <= self.port <= 65535):
            raise ValueError(f"Invalid port number: {self.port}. Must be between 1 and 65535")
    
    @classmethod
    def direct(cls) -> "ProxyDescriptor":
        """Create the DIRECT descriptor."""
        return cls(ProxyType.DIRECT)
    
    @classmethod
    def http(cls, host: str, port: int = DEFAULT_PROXY_PORT) -> "ProxyDescriptor":
        return cls(ProxyType.HTTP, host, port)
    
    @classmethod
    def socks(cls, host: str, port: int = DEFAULT_PROXY_PORT) -> "ProxyDescriptor":
        return cls(ProxyType.SOCKS, host, port)
    
    def is_direct(self) -> bool:
        """Check if this descriptor means no proxy."""
        return self.kind is ProxyType.DIRECT
    
    @property
    def address(self) -> Optional[Tuple[str, int]]:
        """Socket address of the proxy, None for DIRECT."""
        if self.is_direct():
            return None
        return (self.host, self.port)
    
    def to_pac_string(self) -> str:
        """Format the descriptor the way a PAC script would return it."""
        if self.is_direct():
            return "DIRECT"
        keyword = "SOCKS" if self.kind is ProxyType.SOCKS else "PROXY"
        return f"{keyword} {self.host}:{self.port}"
    
    def to_url(self) -> Optional[str]:
        """
        Get the proxy URL an HTTP client understands.
        
        Returns:
            "http://host:port" or "socks5://host:port", None for DIRECT
        """
        if self.is_direct():
            return None
        scheme = "socks5" if self.kind is ProxyType.SOCKS else "http"
        return f"{scheme}://{self.host}:{self.port}"
    
    def __str__(self) -> str:
        return self.to_pac_string()


NO_PROXY = ProxyDescriptor.direct()


def no_proxy_list() -> List[ProxyDescriptor]:
    """Get a new single entry DIRECT list."""
    return [NO_PROXY]
