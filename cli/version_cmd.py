"""Version subcommand — tool version, Python, openclaw and dependency versions."""
from __future__ import annotations

import json
import subprocess
import sys
from importlib import metadata

from core.openclaw import which_openclaw
from core.theme import theme


def _openclaw_version(path: str) -> str:
    try:
        result = subprocess.run([path, "--version"], capture_output=True,
                                text=True, timeout=10)
    except (OSError, subprocess.TimeoutExpired):
        return "unknown"
    if result.returncode != 0:
        return "unknown"
    return result.stdout.strip() or "unknown"


def collect_version_info() -> dict:
    from cli.helpers import get_version

    openclaw_path = which_openclaw()
    deps: dict[str, str] = {}
    for pkg in ("questionary", "rich", "PyYAML"):
        try:
            deps[pkg] = metadata.version(pkg)
        except metadata.PackageNotFoundError:
            deps[pkg] = "not installed"

    return {
        "version": get_version(),
        "python": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "openclaw": {
            "path": openclaw_path,
            "version": _openclaw_version(openclaw_path) if openclaw_path else None,
        },
        "dependencies": deps,
    }


def cmd_version(json_output: bool = False) -> int:
    """Show version, Python version, openclaw location and key dependency versions."""
    info = collect_version_info()

    if json_output:
        print(json.dumps(info, indent=2))
        return 0

    from rich.console import Console
    from rich.table import Table
    console = Console()

    openclaw = info["openclaw"]
    console.print(f"\n  {theme.mark(theme.heading, 'claw-setup')}  v{info['version']}")
    console.print(f"  {theme.mark(theme.muted, 'Python:')}    {info['python']}")
    if openclaw["path"]:
        console.print(f"  {theme.mark(theme.muted, 'openclaw:')}  "
                      f"{openclaw['version']} ({openclaw['path']})", highlight=False)
    else:
        console.print(f"  {theme.mark(theme.muted, 'openclaw:')}  "
                      f"{theme.mark(theme.error, 'not found')}")

    table = Table(show_header=True, header_style=theme.heading or None,
                  box=None, padding=(0, 2))
    table.add_column("Package", style=theme.muted or None)
    table.add_column("Version")
    for pkg, ver in info["dependencies"].items():
        style = theme.success if ver != "not installed" else theme.error
        table.add_row(pkg, theme.mark(style, ver))
    console.print()
    console.print(table)
    console.print()
    return 0
