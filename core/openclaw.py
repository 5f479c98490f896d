"""
core/openclaw.py
Boundary to the installed `openclaw` executable.

Lists the models OpenClaw knows about (`openclaw models list --all --json`)
and locates the executable on PATH.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

OPENCLAW_BIN_ENV = "OPENCLAW_BIN"
DEFAULT_EXECUTABLE = "openclaw"


class ModelFetchError(RuntimeError):
    """openclaw exited non-zero or printed something that is not a model list."""


@dataclass
class OpenclawModel:
    key: str
    name: str
    input: str = "text"
    context_window: int = 0
    local: bool = False
    available: bool = False
    missing: bool = False
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "OpenclawModel":
        key = data["key"]
        return cls(
            key=key,
            name=data.get("name") or key,
            input=data.get("input", "text"),
            context_window=int(data.get("contextWindow") or 0),
            local=bool(data.get("local", False)),
            available=bool(data.get("available", False)),
            missing=bool(data.get("missing", False)),
            tags=list(data.get("tags") or []),
        )

    @property
    def label(self) -> str:
        return f"{self.name} ({self.key})"


def which_openclaw() -> Optional[str]:
    """Resolve the openclaw executable, honouring $OPENCLAW_BIN."""
    return shutil.which(os.environ.get(OPENCLAW_BIN_ENV) or DEFAULT_EXECUTABLE)


class ModelSource:
    """Fetches the full model list from the openclaw CLI."""

    def __init__(self, executable: str = ""):
        self.executable = (executable or os.environ.get(OPENCLAW_BIN_ENV)
                           or DEFAULT_EXECUTABLE)

    def _run(self, *args: str) -> subprocess.CompletedProcess:
        cmd = [self.executable, *args]
        logger.debug("Running %s", " ".join(cmd))
        return subprocess.run(cmd, capture_output=True, text=True,
                              encoding="utf-8", errors="replace")

    def fetch_models(self) -> list[OpenclawModel]:
        """Return every model openclaw lists, in its order.

        Raises ModelFetchError on a non-zero exit or unparseable output.
        A missing executable surfaces as FileNotFoundError (an OSError).
        """
        result = self._run("models", "list", "--all", "--json")
        if result.returncode != 0:
            raise ModelFetchError(result.stderr.strip() or "Failed to fetch models")

        try:
            payload = json.loads(result.stdout)
            models = [OpenclawModel.from_dict(m) for m in payload.get("models", [])]
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise ModelFetchError(f"Unexpected output from openclaw: {e}") from e

        logger.info("openclaw listed %d models", len(models))
        return models
