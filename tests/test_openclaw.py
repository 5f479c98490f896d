"""
tests/test_openclaw.py
ModelSource: parsing `openclaw models list --all --json` and failures.
"""

import json
import shutil
import subprocess

import pytest

import core.openclaw as openclaw
from core.openclaw import ModelFetchError, ModelSource, OpenclawModel, which_openclaw

PAYLOAD = {
    "count": 2,
    "models": [
        {
            "key": "openai/gpt-5",
            "name": "GPT-5",
            "input": "text+image",
            "contextWindow": 400000,
            "local": False,
            "available": True,
            "tags": ["default"],
            "missing": False,
        },
        {"key": "anthropic/claude-opus-4-20250514", "name": "Claude Opus 4"},
    ],
}


def _fake_run(returncode=0, stdout="", stderr="", calls=None):
    def run(cmd, **kwargs):
        if calls is not None:
            calls.append(cmd)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)
    return run


class TestFetchModels:

    def test_parses_models(self, monkeypatch):
        calls = []
        monkeypatch.setattr(openclaw.subprocess, "run",
                            _fake_run(stdout=json.dumps(PAYLOAD), calls=calls))
        models = ModelSource("openclaw").fetch_models()
        assert calls == [["openclaw", "models", "list", "--all", "--json"]]
        assert [m.key for m in models] == ["openai/gpt-5", "anthropic/claude-opus-4-20250514"]
        first = models[0]
        assert first.context_window == 400000
        assert first.available is True
        assert first.tags == ["default"]
        assert first.label == "GPT-5 (openai/gpt-5)"

    def test_defaults_for_sparse_entries(self, monkeypatch):
        monkeypatch.setattr(openclaw.subprocess, "run",
                            _fake_run(stdout=json.dumps(PAYLOAD)))
        second = ModelSource().fetch_models()[1]
        assert second.context_window == 0
        assert second.tags == []
        assert second.missing is False

    def test_nonzero_exit_uses_stderr(self, monkeypatch):
        monkeypatch.setattr(openclaw.subprocess, "run",
                            _fake_run(returncode=1, stderr="config invalid\n"))
        with pytest.raises(ModelFetchError, match="config invalid"):
            ModelSource().fetch_models()

    def test_nonzero_exit_generic_message(self, monkeypatch):
        monkeypatch.setattr(openclaw.subprocess, "run", _fake_run(returncode=2))
        with pytest.raises(ModelFetchError, match="Failed to fetch models"):
            ModelSource().fetch_models()

    def test_unparseable_output(self, monkeypatch):
        monkeypatch.setattr(openclaw.subprocess, "run", _fake_run(stdout="Doctor warnings"))
        with pytest.raises(ModelFetchError):
            ModelSource().fetch_models()

    @pytest.mark.skipif(shutil.which("printf") is None, reason="needs printf")
    def test_undecodable_output(self, monkeypatch):
        real_run = subprocess.run

        def run(cmd, **kwargs):
            return real_run(["printf", r"\377\376"], **kwargs)

        monkeypatch.setattr(openclaw.subprocess, "run", run)
        with pytest.raises(ModelFetchError, match="Unexpected output"):
            ModelSource().fetch_models()

    def test_entry_without_key(self, monkeypatch):
        monkeypatch.setattr(openclaw.subprocess, "run",
                            _fake_run(stdout=json.dumps({"models": [{"name": "x"}]})))
        with pytest.raises(ModelFetchError):
            ModelSource().fetch_models()

    def test_executable_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENCLAW_BIN", "/opt/openclaw/bin/openclaw")
        assert ModelSource().executable == "/opt/openclaw/bin/openclaw"


class TestOpenclawModel:

    def test_name_falls_back_to_key(self):
        assert OpenclawModel.from_dict({"key": "openai/gpt-5"}).name == "openai/gpt-5"


class TestWhich:

    def test_uses_env_override(self, monkeypatch):
        seen = []
        monkeypatch.setenv("OPENCLAW_BIN", "my-openclaw")
        monkeypatch.setattr(openclaw.shutil, "which", lambda name: seen.append(name) or None)
        assert which_openclaw() is None
        assert seen == ["my-openclaw"]
