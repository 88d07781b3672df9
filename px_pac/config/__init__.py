"""
Configuration management for px PAC.
"""

from .selector_settings import SelectorSettings
from .config_manager import ConfigManager

__all__ = ['SelectorSettings', 'ConfigManager']
