"""
core/wizard.py
The configure-provider wizard.

Flow for one "Add provider" run:
  vendor → base URL → fetch + filter models → model → provider config → API key
  → (optional) default model

Every step may be cancelled; cancelling ends the run quietly and returns to
the top-level menu. Each successful step is written to disk straight away,
so a failure late in the run leaves the earlier writes in place (e.g. a
provider without an API key). Re-running the wizard fixes that state.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.auth_profiles import AuthProfileStore
from core.config_store import ConfigError, ConfigStore
from core.i18n import Translator
from core.menu import MenuItem, exit_item, run_menu
from core.openclaw import ModelFetchError, ModelSource, OpenclawModel
from core.theme import theme
from core.vendors import (
    VENDOR_BASE_URLS,
    VENDORS,
    allowed_providers,
    filter_models_by_vendor,
    is_supported_provider,
    provider_base_url,
)

logger = logging.getLogger(__name__)

_PERSIST_ERRORS = (OSError, ConfigError)


def mask_key(key: str) -> str:
    return key[:6] + "..." + key[-4:] if len(key) > 12 else "***"


class ConfigWizard:

    def __init__(self, prompter, translator: Translator,
                 config_store: Optional[ConfigStore] = None,
                 auth_store: Optional[AuthProfileStore] = None,
                 model_source: Optional[ModelSource] = None,
                 console: Optional[Console] = None):
        self.prompter = prompter
        self.t = translator.t
        self.config_store = config_store or ConfigStore()
        self.auth_store = auth_store or AuthProfileStore()
        self.model_source = model_source or ModelSource()
        self.console = console or Console()

    # ── Output helpers ───────────────────────────────────────────────────

    def _ok(self, msg: str):
        self.console.print(f"  {theme.mark(theme.success, '✓')} {msg}")

    def _fail(self, msg: str, err: Optional[BaseException] = None):
        self.console.print(f"  {theme.mark(theme.error, '✗')} {msg}")
        if err is not None:
            self.console.print(f"    {theme.mark(theme.muted, escape(str(err)))}")
            logger.error("%s: %s", msg, err)

    def _warn(self, msg: str):
        self.console.print(f"  {theme.mark(theme.warning, '!')} {msg}")

    # ── Steps ────────────────────────────────────────────────────────────

    def select_vendor(self) -> Optional[str]:
        return run_menu(self.prompter, self.t("select_vendor"), [
            MenuItem(self.t(f"vendor_{v}"), v) for v in VENDORS
        ])

    def get_base_url(self, vendor: str) -> Optional[str]:
        fixed = VENDOR_BASE_URLS.get(vendor)
        if fixed:
            return fixed
        url = self.prompter.text(self.t("input_base_url"))
        if not url or not url.strip():
            return None
        return url.strip().rstrip("/")

    def fetch_models(self, vendor: str) -> Optional[list[OpenclawModel]]:
        """Fetch and filter; None means the fetch failed (already reported)."""
        try:
            with self.console.status(self.t("fetching_models")):
                models = self.model_source.fetch_models()
        except (ModelFetchError, OSError) as e:
            self._fail(self.t("fetching_models_failed"), e)
            return None

        filtered = filter_models_by_vendor(models, vendor)
        logger.debug("Vendor %s: %d of %d models", vendor, len(filtered), len(models))
        if filtered:
            self._ok(self.t("fetching_models_done", count=len(filtered)))
        return filtered

    def select_model(self, models: list[OpenclawModel]) -> Optional[OpenclawModel]:
        return run_menu(self.prompter, self.t("select_model"), [
            MenuItem(m.label, m) for m in models
        ])

    def save_provider(self, provider: str, base_url: str) -> bool:
        try:
            with self.console.status(self.t("saving_provider_config")):
                self.config_store.set_provider_config(provider, {
                    "baseUrl": base_url,
                    "models": [],
                })
        except _PERSIST_ERRORS as e:
            self._fail(self.t("provider_config_failed"), e)
            return False
        self._ok(self.t("provider_config_saved", provider=provider))
        return True

    def save_api_key(self, provider: str) -> bool:
        api_key = self.prompter.password(self.t("input_api_key", provider=provider))
        if not api_key:
            self._warn(self.t("api_key_partial", provider=provider))
            return False
        try:
            with self.console.status(self.t("saving_api_key")):
                self.auth_store.set_api_key(provider, api_key)
        except _PERSIST_ERRORS as e:
            self._fail(self.t("api_key_failed"), e)
            self._warn(self.t("api_key_partial", provider=provider))
            return False
        self._ok(self.t("api_key_saved", provider=provider))
        return True

    def offer_primary_model(self, model_key: str):
        use_it = self.prompter.confirm(self.t("set_primary_model", model=model_key))
        try:
            if use_it:
                self.config_store.set_model(model_key)
                self._ok(self.t("primary_model_saved", model=escape(model_key)))
            self.config_store.trigger_gateway_restart()
        except _PERSIST_ERRORS as e:
            self._fail(self.t("primary_model_failed"), e)

    # ── Flows ────────────────────────────────────────────────────────────

    def configure_provider(self):
        """One full "Add provider" run."""
        vendor = self.select_vendor()
        if not vendor:
            return
        logger.debug("Selected vendor: %s", vendor)

        base_url = self.get_base_url(vendor)
        if not base_url:
            return
        logger.debug("Base URL: %s", base_url)

        models = self.fetch_models(vendor)
        if models is None:
            return
        if not models:
            self._warn(self.t("no_models_available"))
            return

        model = self.select_model(models)
        if model is None:
            return
        logger.debug("Selected model: %s", model.key)

        provider = is_supported_provider(model.key, allowed_providers(vendor))
        if not provider:
            logger.debug("No supported provider for model %s", model.key)
            return

        if not self.save_provider(provider, provider_base_url(base_url, provider)):
            return
        if not self.save_api_key(provider):
            return
        self.offer_primary_model(model.key)

    def show_status(self):
        """Print configured providers, key status and the default model."""
        store = self.config_store
        try:
            providers = store.get_provider_configs()
            primary = store.get_primary_model()
            registered = store.get_configured_models()
        except _PERSIST_ERRORS as e:
            self._fail(self.t("status_read_failed"), e)
            return

        self.console.print()
        self.console.print(f"  {theme.mark(theme.muted, self.t('status_config_path', path=escape(store.path)))}")
        if providers:
            table = Table(show_header=True, header_style=theme.heading or None,
                          box=None, padding=(0, 2))
            table.add_column(self.t("status_providers"))
            table.add_column(self.t("status_base_url"))
            table.add_column(self.t("status_api_key"))
            for name, cfg in providers.items():
                try:
                    profile = self.auth_store.get_profile(name)
                except _PERSIST_ERRORS:
                    profile = None
                key = mask_key(profile["key"]) if profile and profile.get("key") else "-"
                base = cfg.get("baseUrl", "") if isinstance(cfg, dict) else ""
                table.add_row(escape(name), escape(str(base)), key)
            self.console.print(table)
        else:
            self._warn(self.t("status_no_providers"))

        none = self.t("status_none")
        self.console.print(f"  {self.t('status_primary', model=escape(primary or none))}")
        self.console.print(f"  {self.t('status_models', models=escape(', '.join(registered) or none))}")
        self.console.print()

    def run_config_loop(self):
        """Top-level menu; loops until the user picks Exit."""
        run_menu(self.prompter, self.t("config_action_prompt"), [
            MenuItem(self.t("config_action_add"), "add", action=self.configure_provider),
            MenuItem(self.t("config_action_status"), "status", action=self.show_status),
            exit_item(self.t("config_action_exit")),
        ], loop=True, on_repeat=self.console.print)
