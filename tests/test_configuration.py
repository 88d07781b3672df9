"""
Tests for selector settings and the configuration manager.
"""

import json

import pytest

from px_pac.config import SelectorSettings, ConfigManager


class TestSelectorSettings:
    """Test SelectorSettings validation and serialization."""
    
    def test_defaults(self):
        settings = SelectorSettings()
        
        assert settings.engine == "auto"
        assert settings.execjs_runtime is None
        assert settings.script_prelude == ""
        assert settings.time_limit is None
        assert settings.log_level == "INFO"
    
    @pytest.mark.parametrize("kwargs", [
        {'engine': "rhino"},
        {'time_limit': 0},
        {'time_limit': -1.5},
        {'log_level': "LOUD"},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ValueError):
            SelectorSettings(**kwargs)
    
    def test_dict_conversion(self):
        settings = SelectorSettings(engine="execjs", execjs_runtime="Node", time_limit=1.0, log_level="debug")
        
        assert SelectorSettings.from_dict(settings.to_dict()) == settings
    
    def test_from_partial_dict(self):
        settings = SelectorSettings.from_dict({'engine': "quickjs", 'unknown': True})
        
        assert settings.engine == "quickjs"
        assert settings.log_level == "INFO"


class TestConfigManager:
    """Test loading and saving configuration files."""
    
    def test_missing_file_uses_defaults(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "config"))
        
        assert manager.load_settings() == SelectorSettings()
    
    def test_save_and_load(self, tmp_path):
        manager = ConfigManager(str(tmp_path / "config"))
        settings = SelectorSettings(engine="execjs", script_prelude="function f() {}")
        
        assert manager.save_settings(settings)
        assert manager.config_file.exists()
        assert manager.load_settings() == settings
    
    def test_save_keeps_backup(self, tmp_path):
        manager = ConfigManager(str(tmp_path))
        manager.save_settings(SelectorSettings(engine="execjs"))
        manager.save_settings(SelectorSettings(engine="quickjs"))
        
        backup = json.loads((tmp_path / "px_pac_config.json.bak").read_text(encoding="utf-8"))
        assert backup['engine'] == "execjs"
    
    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"engine": "rhino"}', '{"time_limit": "soon"}'])
    def test_broken_file_uses_defaults(self, tmp_path, content):
        manager = ConfigManager(str(tmp_path))
        manager.config_file.write_text(content, encoding="utf-8")
        
        assert manager.load_settings() == SelectorSettings()
    
    def test_reset_to_defaults(self, tmp_path):
        manager = ConfigManager(str(tmp_path))
        manager.save_settings(SelectorSettings(engine="execjs"))
        
        assert manager.reset_to_defaults()
        assert manager.load_settings() == SelectorSettings()
    
    def test_default_config_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.setenv("APPDATA", str(tmp_path))
        
        manager = ConfigManager()
        
        assert manager.config_dir == tmp_path / "px-pac"
