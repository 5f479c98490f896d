"""
tests/conftest.py
Shared fixtures for claw-setup tests.
Provides an isolated ~/.openclaw, a scripted prompter and a fake model source.
"""

import io

import pytest
from rich.console import Console

from core.auth_profiles import AuthProfileStore
from core.config_store import ConfigStore
from core.i18n import Translator
from core.menu import MenuItem
from core.openclaw import OpenclawModel
from core.wizard import ConfigWizard

EXIT = object()


@pytest.fixture
def openclaw_home(tmp_path, monkeypatch):
    """Point HOME and OPENCLAW_CONFIG_PATH at a temp directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("OPENCLAW_CONFIG_PATH", str(tmp_path / ".openclaw" / "openclaw.json"))
    monkeypatch.delenv("OPENCLAW_BIN", raising=False)
    monkeypatch.delenv("CLAW_SETUP_LANG", raising=False)
    return tmp_path


@pytest.fixture
def config_store(openclaw_home):
    return ConfigStore()


@pytest.fixture
def auth_store(openclaw_home):
    return AuthProfileStore()


def make_model(key, name=None, **kw):
    return OpenclawModel(key=key, name=name or key.split("/")[-1].upper(), **kw)


class FakePrompter:
    """Answers prompts from a script, in order.

    select answers may be a label, an item value, a model key, None (cancel)
    or EXIT (pick the menu's exit item).
    """

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.calls = []

    def _next(self, kind, message):
        self.calls.append((kind, message))
        assert self.answers, f"unexpected {kind} prompt: {message}"
        return self.answers.pop(0)

    def select(self, message, choices, default=None):
        answer = self._next("select", message)
        if answer is None:
            return None
        for label, value in choices:
            if isinstance(value, MenuItem):
                if answer is EXIT and value.is_exit:
                    return value
                if answer is EXIT:
                    continue
                if label == answer or value.value == answer:
                    return value
                if getattr(value.value, "key", None) == answer:
                    return value
            elif label == answer or value == answer:
                return value
        raise AssertionError(f"{answer!r} not among choices for {message!r}")

    def text(self, message, default=""):
        return self._next("text", message)

    def password(self, message):
        return self._next("password", message)

    def confirm(self, message, default=True):
        return self._next("confirm", message)


class FakeModelSource:

    def __init__(self, models=None, error=None):
        self.models = models or []
        self.error = error
        self.calls = 0

    def fetch_models(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.models)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def make_wizard(config_store, auth_store, output):
    """Build a ConfigWizard wired to fakes: make_wizard(answers, models=[...])."""
    def _make(answers, models=None, error=None, locale="en"):
        prompter = FakePrompter(answers)
        source = FakeModelSource(models, error)
        console = Console(file=output, width=120, force_terminal=False)
        wizard = ConfigWizard(prompter, Translator(locale), config_store,
                              auth_store, source, console)
        return wizard, prompter, source
    return _make


@pytest.fixture
def catalog():
    """A model listing in openclaw order."""
    return [
        make_model("openai/gpt-5", "GPT-5"),
        make_model("openai/unknown-model-xyz", "Unknown"),
        make_model("anthropic/claude-sonnet-4-5-20250929", "Claude Sonnet 4.5"),
        make_model("google/gemini-2.5-pro", "Gemini 2.5 Pro"),
        make_model("openai/gpt-4o-mini", "GPT-4o mini"),
    ]
