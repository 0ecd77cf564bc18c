"""Tests for the command line entry point."""

import json

import pytest

from plugin_catalog import __version__
from plugin_catalog.cli import main
from plugin_catalog.config import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep env overrides and the config singleton local to each test."""
    # Empty values count as unset; setenv restores whatever main() writes
    for name in ("PLUGIN_CATALOG_ROOT", "PLUGIN_CATALOG_DATA", "PLUGIN_CATALOG_SORT"):
        monkeypatch.setenv(name, "")
    monkeypatch.setattr(ConfigManager, "_instance", None)


class TestCli:
    """Test CLI commands."""
    
    def test_version(self, capsys):
        """Should print the version."""
        assert main(["--version"]) == 0
        
        assert __version__ in capsys.readouterr().out
    
    def test_build(self, bundle, tmp_path, capsys):
        """Should write the artifact and print the count."""
        data = tmp_path / "out" / "components.json"
        
        assert main(["--root", str(bundle), "--data", str(data), "build", "--sort"]) == 0
        
        items = json.loads(data.read_text(encoding="utf-8"))
        assert [item["id"] for item in items][:2] == ["agent-code-reviewer", "agent-test-writer"]
        assert "Generated data for 6 components" in capsys.readouterr().out
    
    def test_build_with_missing_sources(self, tmp_path, capsys):
        """Should still succeed when every source is missing."""
        empty = tmp_path / "empty"
        empty.mkdir()
        data = tmp_path / "components.json"
        
        assert main(["--root", str(empty), "--data", str(data), "build"]) == 0
        
        assert json.loads(data.read_text()) == []
        captured = capsys.readouterr()
        assert "Generated data for 0 components" in captured.out
        assert "agents" in captured.err
    
    def test_no_command(self, capsys):
        """Should print help and fail without a command."""
        assert main([]) == 1
        
        assert "usage:" in capsys.readouterr().out
