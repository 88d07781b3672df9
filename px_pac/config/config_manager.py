"""
Configuration manager for loading and saving selector settings.
"""

import os
import json
import logging
from pathlib import Path
from typing import Optional
from .selector_settings import SelectorSettings


class ConfigManager:
    """
    Manages loading and saving of px PAC configuration.
    
    Settings live in a JSON file inside the user configuration directory.
    A missing or broken file yields default settings.
    """
    
    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the configuration manager.
        
        Args:
            config_dir: Custom configuration directory path.
                       If None, uses default user config directory.
        """
        self.logger = logging.getLogger(__name__)
        
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = self._get_default_config_dir()
        
        self.config_file = self.config_dir / "px_pac_config.json"
    
    def _get_default_config_dir(self) -> Path:
        """Get the default configuration directory based on OS."""
        if os.name == 'nt':  # Windows
            config_base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:
            config_base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(config_base) / "px-pac"
    
    def load_settings(self) -> SelectorSettings:
        """
        Load selector settings from configuration file.
        
        Returns:
            SelectorSettings object with loaded or default settings.
        """
        if not self.config_file.exists():
            self.logger.info("Configuration file not found, using defaults")
            return SelectorSettings()
        
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            
            if not isinstance(data, dict):
                raise ValueError("Configuration root must be an object")
            
            settings = SelectorSettings.from_dict(data)
            self.logger.info(f"Loaded settings from {self.config_file}")
            return settings
            
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
            self.logger.error(f"Failed to load settings from {self.config_file}: {e}")
            self.logger.info("Using default settings")
            return SelectorSettings()
        except OSError as e:
            self.logger.error(f"Failed to read config file {self.config_file}: {e}")
            return SelectorSettings()
    
    def save_settings(self, settings: SelectorSettings) -> bool:
        """
        Save selector settings to configuration file.
        
        Args:
            settings: SelectorSettings object to save.
            
        Returns:
            True if saved successfully, False otherwise.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            
            # Keep the previous configuration as a backup
            if self.config_file.exists():
                backup_file = self.config_file.with_suffix('.json.bak')
                self.config_file.replace(backup_file)
            
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=2)
            
            self.logger.info(f"Saved settings to {self.config_file}")
            return True
            
        except OSError as e:
            self.logger.error(f"Failed to save settings to {self.config_file}: {e}")
            return False
    
    def reset_to_defaults(self) -> bool:
        """Reset configuration to defaults."""
        self.logger.info("Resetting configuration to defaults")
        return self.save_settings(SelectorSettings())
