"""Tests for cli/version_cmd.py and cli/helpers.py."""
from __future__ import annotations

import json


class TestGetVersion:
    """get_version() reads the installed distribution's metadata."""

    def test_installed_version(self, monkeypatch):
        from cli import helpers
        monkeypatch.setattr(helpers.metadata, "version",
                            lambda name: "2.3.4" if name == helpers.DIST_NAME else None)
        assert helpers.get_version() == "2.3.4"

    def test_not_installed_falls_back(self, monkeypatch):
        from cli import helpers

        def missing(name):
            raise helpers.metadata.PackageNotFoundError(name)

        monkeypatch.setattr(helpers.metadata, "version", missing)
        assert helpers.get_version() == "0.1.0"


class TestVersionCmd:
    """Test claw-setup version subcommand."""

    def test_cmd_version_json(self, capsys, openclaw_home, monkeypatch):
        import core.openclaw as openclaw
        monkeypatch.setattr(openclaw.shutil, "which", lambda name: None)
        from cli.version_cmd import cmd_version
        assert cmd_version(json_output=True) == 0
        data = json.loads(capsys.readouterr().out)
        assert "version" in data
        assert "python" in data
        assert data["openclaw"] == {"path": None, "version": None}
        assert set(data["dependencies"]) == {"questionary", "rich", "PyYAML"}

    def test_cmd_version_text(self, capsys, monkeypatch):
        import core.openclaw as openclaw
        monkeypatch.setattr(openclaw.shutil, "which", lambda name: None)
        from cli.version_cmd import cmd_version
        assert cmd_version(json_output=False) == 0
        assert "claw-setup" in capsys.readouterr().out
