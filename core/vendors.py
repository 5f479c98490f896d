"""
core/vendors.py
Vendor catalog — which providers and models each vendor offers.

A vendor is a reseller or gateway sitting in front of one or more upstream
providers. Curated vendors restrict the OpenClaw model list by provider
prefix and by model-name suffix; the "other" vendor shows everything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

# ── Providers ─────────────────────────────────────────────────────────────────

SUPPORTED_PROVIDERS: tuple[str, ...] = ("openai", "anthropic")

# Providers whose client protocol expects a versioned path on the base URL.
_VERSIONED_PATH = {"openai": "/v1"}

PACKYCODE_BASE_URL = "https://www.packyapi.com"

# Model name suffixes (after the "provider/" prefix) served by PackyCode.
PACKYCODE_MODELS = (
    "claude-3-5-haiku-20241022",
    "claude-3-5-sonnet-20240620",
    "claude-3-5-sonnet-20241022",
    "claude-3-7-sonnet-20250219",
    "claude-haiku-4-5-20251001",
    "claude-opus-4-1-20250805",
    "claude-opus-4-20250514",
    "claude-opus-4-5-20251101",
    "claude-sonnet-4-20250514",
    "claude-sonnet-4-5-20250929",
    "gpt-4o-mini",
    "gpt-5",
    "gpt-5-codex",
    "gpt-5-pro",
    "gpt-5.1",
    "gpt-5.1-codex",
    "gpt-5.1-codex-max",
    "gpt-5.2",
    "gpt-5.2-pro",
)


@dataclass(frozen=True)
class VendorFilter:
    """Allowed providers / model suffixes. Empty means unrestricted."""
    providers: tuple[str, ...] = field(default_factory=tuple)
    models: tuple[str, ...] = field(default_factory=tuple)

    @property
    def unrestricted(self) -> bool:
        return not self.providers and not self.models


VENDOR_FILTERS: dict[str, VendorFilter] = {
    "packycode": VendorFilter(providers=("openai", "anthropic"),
                              models=PACKYCODE_MODELS),
    "other": VendorFilter(),
}

# Vendors in menu order
VENDORS: tuple[str, ...] = tuple(VENDOR_FILTERS)

# Vendors whose base URL is fixed rather than asked for
VENDOR_BASE_URLS: dict[str, str] = {
    "packycode": PACKYCODE_BASE_URL,
}


# ── Helpers ───────────────────────────────────────────────────────────────────

def is_supported_provider(key: str,
                          allowed: Optional[Sequence[str]] = None) -> Optional[str]:
    """Return the first provider whose ``provider/`` prefix matches *key*.

    Providers are tried in the order given, so overlapping identifiers
    resolve to whichever comes first. Falls back to SUPPORTED_PROVIDERS when
    *allowed* is None; an empty sequence matches nothing.
    """
    providers = SUPPORTED_PROVIDERS if allowed is None else allowed
    for provider in providers:
        if key.startswith(f"{provider}/"):
            return provider
    return None


def get_model_suffix(key: str) -> str:
    """'openai/gpt-5' → 'gpt-5'. Keys without a slash are returned whole."""
    _, sep, rest = key.partition("/")
    return rest if sep else key


def allowed_providers(vendor: str) -> Optional[tuple[str, ...]]:
    """Provider restriction for *vendor*, or None when there is none."""
    vf = VENDOR_FILTERS.get(vendor)
    if vf is None or not vf.providers:
        return None
    return vf.providers


def filter_models_by_vendor(models: Iterable, vendor: str) -> list:
    """Keep the models *vendor* can serve, preserving input order.

    Items only need a ``key`` attribute. Unknown vendors are not an error;
    they get the full list back.
    """
    models = list(models)
    vf = VENDOR_FILTERS.get(vendor)
    if vf is None or vf.unrestricted:
        return models

    result = []
    for m in models:
        if not is_supported_provider(m.key, vf.providers):
            continue
        if vf.models and get_model_suffix(m.key) not in vf.models:
            continue
        result.append(m)
    return result


def provider_base_url(base_url: str, provider: str) -> str:
    """Effective base URL for *provider* (openai gets ``/v1`` appended)."""
    return f"{base_url}{_VERSIONED_PATH.get(provider, '')}"
