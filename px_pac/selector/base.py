"""
Proxy selector interface exposed to HTTP clients.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.proxy_descriptor import ProxyDescriptor


class ProxySelector(ABC):
    """Chooses the proxies to use for a destination URI."""
    
    @abstractmethod
    def select(self, uri: str) -> List[ProxyDescriptor]:
        """
        Get the proxies to try for a URI, in order of preference.
        
        The returned list is never empty.
        """
        raise NotImplementedError
    
    @abstractmethod
    def connection_failed(self, uri: str, address: Any, error: Optional[BaseException]) -> None:
        """Notify the selector that a proxy it returned could not be reached."""
        raise NotImplementedError
    
    def proxies_for(self, uri: str) -> Dict[str, str]:
        """
        Get a requests style proxies mapping for a URI.
        
        Returns:
            {"http": url, "https": url} for the preferred proxy, or an empty
            dict when the preferred choice is a direct connection
        """
        preferred = self.select(uri)[0]
        url = preferred.to_url()
        if url is None:
            return {}
        return {'http': url, 'https': url}
