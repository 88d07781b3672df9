"""
Selector settings data model.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


ENGINE_AUTO = "auto"
ENGINE_QUICKJS = "quickjs"
ENGINE_EXECJS = "execjs"


@dataclass
class SelectorSettings:
    """
    Settings for binding a PAC script to a script engine.
    
    Attributes:
        engine: Engine preference ("auto", "quickjs" or "execjs")
        execjs_runtime: Name of the execjs runtime to use (None lets execjs pick)
        script_prelude: JavaScript evaluated before the PAC script, e.g. PAC helper functions
        time_limit: CPU time limit in seconds for one quickjs evaluation (None for no limit)
        log_level: Logging level name
    """
    engine: str = ENGINE_AUTO
    execjs_runtime: Optional[str] = None
    script_prelude: str = ""
    time_limit: Optional[float] = None
    log_level: str = "INFO"
    
    def __post_init__(self):
        """Validate settings after initialization."""
        self._validate()
    
    def _validate(self):
        """Validate selector settings."""
        valid_engines = {ENGINE_AUTO, ENGINE_QUICKJS, ENGINE_EXECJS}
        if self.engine not in valid_engines:
            raise ValueError(f"Invalid engine: {self.engine}. Must be one of {valid_engines}")
        
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError("Time limit must be positive")
        
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {self.log_level}")
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return {
            'engine': self.engine,
            'execjs_runtime': self.execjs_runtime,
            'script_prelude': self.script_prelude,
            'time_limit': self.time_limit,
            'log_level': self.log_level
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SelectorSettings':
        """Create settings from dictionary, ignoring unknown keys."""
        defaults = cls()
        return cls(
            engine=data.get('engine', defaults.engine),
            execjs_runtime=data.get('execjs_runtime', defaults.execjs_runtime),
            script_prelude=data.get('script_prelude', defaults.script_prelude),
            time_limit=data.get('time_limit', defaults.time_limit),
            log_level=data.get('log_level', defaults.log_level)
        )
