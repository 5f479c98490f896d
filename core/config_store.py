"""
core/config_store.py
Read-merge-write access to OpenClaw's config document (openclaw.json).

Every mutation loads the whole document, patches only the keys it owns and
writes the whole document back, so fields written by OpenClaw itself or by
the user survive untouched.

No file locking: two processes writing the same file at once will race and
the last writer wins.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "OPENCLAW_CONFIG_PATH"
DEFAULT_CONFIG_PATH = os.path.join("~", ".openclaw", "openclaw.json")


class ConfigError(ValueError):
    """A config document exists but is not a JSON object."""


# ── JSON document helpers ─────────────────────────────────────────────────────

def read_json(path: str, default: Optional[dict] = None) -> dict:
    """Load a JSON object from *path*; a missing file yields *default* (or {})."""
    if not os.path.exists(path):
        return {} if default is None else default
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} does not contain a JSON object")
    return data


def write_json(path: str, data: dict):
    """Write *data* as 2-space JSON, replacing the file in one step."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    tmp_path = path + ".tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise


def _child(parent: dict, key: str) -> dict:
    """parent[key] as a dict, created (or replaced if not a dict) on demand."""
    node = parent.get(key)
    if not isinstance(node, dict):
        node = {}
        parent[key] = node
    return node


def _utc_timestamp() -> str:
    """2026-01-31T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def resolve_config_path() -> str:
    """$OPENCLAW_CONFIG_PATH, else ~/.openclaw/openclaw.json."""
    return os.path.expanduser(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)


# ── Store ─────────────────────────────────────────────────────────────────────

class ConfigStore:
    """Provider / model / meta updates on openclaw.json."""

    def __init__(self, path: str = ""):
        self.path = os.path.expanduser(path) if path else resolve_config_path()

    def load(self) -> dict:
        return read_json(self.path)

    def save(self, data: dict):
        write_json(self.path, data)
        logger.debug("Wrote %s", self.path)

    # ── Mutations ────────────────────────────────────────────────────────

    def set_provider_config(self, provider: str, config: dict):
        """Replace models.providers[provider] and switch models.mode to merge."""
        data = self.load()
        models = _child(data, "models")
        providers = _child(models, "providers")
        models["mode"] = "merge"
        providers[provider] = dict(config)
        self.save(data)
        logger.info("Provider %s saved (baseUrl=%s)", provider, config.get("baseUrl"))

    def set_model(self, model_key: str):
        """Make *model_key* the primary model and register it if new."""
        data = self.load()
        defaults = _child(_child(data, "agents"), "defaults")
        _child(defaults, "model")["primary"] = model_key
        _child(defaults, "models").setdefault(model_key, {})
        self.save(data)
        logger.info("Primary model set to %s", model_key)

    def trigger_gateway_restart(self) -> str:
        """Stamp meta.lastTouchedAt so a running gateway reloads the config."""
        data = self.load()
        stamp = _utc_timestamp()
        _child(data, "meta")["lastTouchedAt"] = stamp
        self.save(data)
        return stamp

    # ── Reads ────────────────────────────────────────────────────────────

    def _defaults(self) -> dict:
        agents = self.load().get("agents")
        if not isinstance(agents, dict):
            return {}
        defaults = agents.get("defaults")
        return defaults if isinstance(defaults, dict) else {}

    def get_configured_models(self) -> list[str]:
        models = self._defaults().get("models")
        return list(models) if isinstance(models, dict) else []

    def get_primary_model(self) -> Optional[str]:
        model = self._defaults().get("model")
        if not isinstance(model, dict):
            return None
        return model.get("primary")

    def get_provider_configs(self) -> dict[str, Any]:
        models = self.load().get("models")
        if not isinstance(models, dict):
            return {}
        providers = models.get("providers")
        return dict(providers) if isinstance(providers, dict) else {}
