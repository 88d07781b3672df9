"""
Engine selection for binding PAC scripts.
"""

import logging
from typing import Optional

from .base import ScriptEvaluator
from ..error_handling.errors import EngineBindError
from ..config.selector_settings import SelectorSettings, ENGINE_AUTO, ENGINE_QUICKJS, ENGINE_EXECJS
from ..models.script_source import PacScriptSource

logger = logging.getLogger(__name__)


def is_quickjs_available() -> bool:
    """Check whether the embedded quickjs engine can be imported."""
    try:
        import quickjs  # noqa: F401
    except ImportError:
        return False
    return True


def select_engine_name(preference: str = ENGINE_AUTO) -> str:
    """
    Decide which engine to bind.
    
    Args:
        preference: "auto", "quickjs" or "execjs"
        
    Returns:
        "quickjs" or "execjs"
    """
    if preference == ENGINE_AUTO:
        return ENGINE_QUICKJS if is_quickjs_available() else ENGINE_EXECJS
    if preference not in (ENGINE_QUICKJS, ENGINE_EXECJS):
        raise ValueError(f"Unknown engine: {preference}")
    return preference


def create_evaluator(script_source: PacScriptSource,
                     settings: Optional[SelectorSettings] = None) -> ScriptEvaluator:
    """
    Bind a PAC script to the selected engine.
    
    Args:
        script_source: Source of the PAC script
        settings: Engine settings, defaults if None
        
    Returns:
        A ready ScriptEvaluator
        
    Raises:
        EngineBindError: If the engine cannot load the script
    """
    settings = settings or SelectorSettings()
    engine = select_engine_name(settings.engine)
    
    if engine == ENGINE_QUICKJS:
        if not is_quickjs_available():
            raise EngineBindError("quickjs engine requested but the quickjs package is not installed")
        logger.info("Using quickjs JavaScript engine.")
        from .quickjs_engine import QuickJSEvaluator
        return QuickJSEvaluator(script_source, prelude=settings.script_prelude,
                                time_limit=settings.time_limit)
    
    logger.info("Using execjs JavaScript engine.")
    from .execjs_engine import ExecJSEvaluator
    return ExecJSEvaluator(script_source, prelude=settings.script_prelude,
                           runtime_name=settings.execjs_runtime)
