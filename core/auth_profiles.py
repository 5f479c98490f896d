"""
core/auth_profiles.py
API key storage in OpenClaw's auth-profiles.json.

One profile per provider, keyed "<provider>:default". Saving a key for a
provider that already has one overwrites it. Keys are stored in plain text,
as OpenClaw expects.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from core.config_store import read_json, write_json

logger = logging.getLogger(__name__)

AUTH_PROFILES_PATH = os.path.join(
    "~", ".openclaw", "agents", "main", "agent", "auth-profiles.json")
AUTH_PROFILES_VERSION = 1


def profile_key(provider: str) -> str:
    return f"{provider}:default"


class AuthProfileStore:

    def __init__(self, path: str = ""):
        self.path = os.path.expanduser(path or AUTH_PROFILES_PATH)

    def load(self) -> dict:
        data = read_json(self.path, {"version": AUTH_PROFILES_VERSION, "profiles": {}})
        if not isinstance(data.get("profiles"), dict):
            data["profiles"] = {}
        return data

    def set_api_key(self, provider: str, api_key: str):
        data = self.load()
        data["profiles"][profile_key(provider)] = {
            "type": "api_key",
            "provider": provider,
            "key": api_key,
        }
        write_json(self.path, data)
        logger.info("API key saved for %s", provider)

    def get_profile(self, provider: str) -> Optional[dict]:
        return self.load()["profiles"].get(profile_key(provider))
