"""Shared utilities for CLI modules."""
from __future__ import annotations

from importlib import metadata

DIST_NAME = "claw-setup"


def get_version() -> str:
    """Installed package version, falling back to '0.1.0' for source checkouts."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.1.0"
