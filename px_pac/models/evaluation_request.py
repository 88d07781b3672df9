"""
Evaluation request model holding the FindProxyForURL arguments.
"""

from dataclasses import dataclass
import urllib.parse

from ..error_handling.errors import CallerError


@dataclass(frozen=True)
class EvaluationRequest:
    """
    Arguments for one FindProxyForURL call.
    
    Attributes:
        url: Full URL being requested
        host: Host component of the URL (empty if the URL has none)
    """
    url: str
    host: str
    
    @classmethod
    def from_uri(cls, uri: str) -> "EvaluationRequest":
        """
        Build a request from the URI a caller wants to reach.
        
        Args:
            uri: Destination URI
            
        Returns:
            EvaluationRequest for the URI
            
        Raises:
            CallerError: If the URI is missing or blank
        """
        if uri is None:
            raise CallerError("URI must not be None")
        
        if not isinstance(uri, str):
            uri = str(uri)
        
        if not uri.strip():
            raise CallerError("URI must not be empty")
        
        try:
            host = urllib.parse.urlsplit(uri).hostname or ""
        except ValueError:
            # Malformed authority, e.g. an unclosed IPv6 bracket
            host = ""
        
        return cls(url=uri, host=host)
