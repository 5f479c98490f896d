"""Non-interactive status: what the wizard has written so far."""
from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from core.auth_profiles import AuthProfileStore
from core.config_store import ConfigError, ConfigStore
from core.theme import theme
from core.wizard import mask_key


def collect_status(config_store: ConfigStore, auth_store: AuthProfileStore) -> dict[str, Any]:
    """Provider, key and model summary as plain data."""
    providers = {}
    for name, cfg in config_store.get_provider_configs().items():
        profile = auth_store.get_profile(name)
        providers[name] = {
            "baseUrl": cfg.get("baseUrl") if isinstance(cfg, dict) else None,
            "apiKey": mask_key(profile["key"]) if profile and profile.get("key") else None,
        }
    return {
        "configPath": config_store.path,
        "authProfilesPath": auth_store.path,
        "providers": providers,
        "primaryModel": config_store.get_primary_model(),
        "models": config_store.get_configured_models(),
    }


def cmd_status(json_output: bool = False, config_store: ConfigStore = None,
               auth_store: AuthProfileStore = None) -> int:
    """Handle `claw-setup status [--json]`."""
    config_store = config_store or ConfigStore()
    auth_store = auth_store or AuthProfileStore()
    console = Console()

    try:
        status = collect_status(config_store, auth_store)
    except (OSError, ConfigError) as e:
        console.print(f"  {theme.mark(theme.error, '✗')} {escape(str(e))}")
        return 1

    if json_output:
        print(json.dumps(status, indent=2, ensure_ascii=False))
    else:
        print(yaml.safe_dump(status, allow_unicode=True, default_flow_style=False,
                             sort_keys=False).rstrip())
    return 0
