"""
Tests for the px-pac command line entry point.
"""

from unittest.mock import patch

import pytest

from px_pac import main as main_module

from .test_mocks import answering


PAC = '''
function FindProxyForURL(url, host) {
    if (host == "internal.company.com") return "DIRECT";
    return "PROXY proxy.company.com:8080; DIRECT";
}
'''


class TestMain:
    """Test command line resolution."""
    
    def setup_method(self):
        """Set up test fixtures."""
        self.factory = answering(lambda url, host: "DIRECT" if host == "internal.company.com"
                                 else "PROXY proxy.company.com:8080; DIRECT")
    
    def run(self, argv):
        with patch("px_pac.selector.pac_selector.create_evaluator", self.factory), \
                patch.object(main_module, "setup_logging"):
            return main_module.main(argv)
    
    def test_resolve_urls(self, tmp_path, capsys):
        pac_file = tmp_path / "proxy.pac"
        pac_file.write_text(PAC, encoding="utf-8")
        
        exit_code = self.run([
            "--pac", str(pac_file), "--config-dir", str(tmp_path),
            "http://internal.company.com/", "http://www.example.com/"
        ])
        
        out = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert out == [
            "http://internal.company.com/ -> DIRECT",
            "http://www.example.com/ -> PROXY proxy.company.com:8080; DIRECT"
        ]
    
    def test_identity_used_for_loop_check(self, tmp_path, capsys):
        pac_file = tmp_path / "proxy.pac"
        pac_file.write_text(PAC, encoding="utf-8")
        
        self.run([
            "--pac", str(pac_file), "--identity", "http://wpad.corp.com/wpad.dat",
            "--config-dir", str(tmp_path), "http://wpad.corp.com/wpad.dat"
        ])
        
        assert capsys.readouterr().out.strip() == "http://wpad.corp.com/wpad.dat -> DIRECT"
        assert self.factory.created[0].calls == []
    
    def test_missing_pac_file(self, tmp_path):
        exit_code = self.run([
            "--pac", str(tmp_path / "missing.pac"), "--config-dir", str(tmp_path), "http://www.example.com/"
        ])
        
        assert exit_code == 2
    
    def test_invalid_log_level(self, tmp_path):
        with pytest.raises(SystemExit):
            self.run(["--pac", "x.pac", "--config-dir", str(tmp_path), "--log-level", "LOUD", "http://a/"])
