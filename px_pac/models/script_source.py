"""
PAC script source contract and an in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional


class PacScriptSource(ABC):
    """
    Supplies PAC script text and the identity it was loaded from.
    
    The identity is usually the URL or path of the script. The selector
    uses it to recognise requests for the script's own host.
    """
    
    @abstractmethod
    def get_script_text(self) -> str:
        """Return the PAC script content."""
        raise NotImplementedError
    
    @abstractmethod
    def get_identity(self) -> str:
        """Return a textual identity for the script."""
        raise NotImplementedError
    
    def __str__(self) -> str:
        return self.get_identity()


class StringPacScriptSource(PacScriptSource):
    """
    PAC source for script text that has already been loaded.
    
    Attributes:
        content: The PAC script (JavaScript)
        source_path: File path or URL the content came from (empty for inline)
        source_type: "file", "url" or "inline"
    """
    
    VALID_SOURCE_TYPES = {'file', 'url', 'inline'}
    
    def __init__(self, content: str, source_path: str = "", source_type: Optional[str] = None):
        if content is None:
            raise ValueError("PAC content cannot be None")
        
        if source_type is None:
            if not source_path:
                source_type = 'inline'
            elif source_path.startswith(('http://', 'https://')):
                source_type = 'url'
            else:
                source_type = 'file'
        
        if source_type not in self.VALID_SOURCE_TYPES:
            raise ValueError(f"Invalid source type: {source_type}. Must be one of {self.VALID_SOURCE_TYPES}")
        
        if source_type in ('file', 'url') and not source_path:
            raise ValueError(f"Source path is required for source type: {source_type}")
        
        self.content = content
        self.source_path = source_path
        self.source_type = source_type
    
    @classmethod
    def from_file(cls, path: str, encoding: str = "utf-8") -> "StringPacScriptSource":
        """Read a PAC file from disk."""
        with open(path, 'r', encoding=encoding) as f:
            return cls(f.read(), source_path=path, source_type='file')
    
    def get_script_text(self) -> str:
        return self.content
    
    def get_identity(self) -> str:
        return self.source_path
    
    def get_source_display_name(self) -> str:
        """Get a display-friendly name for the PAC source."""
        if self.source_type == 'inline':
            return "Inline Configuration"
        elif self.source_type == 'file':
            return f"File: {self.source_path}"
        return f"URL: {self.source_path}"
    
    def __repr__(self) -> str:
        return f"StringPacScriptSource(source_type={self.source_type!r}, source_path={self.source_path!r})"
