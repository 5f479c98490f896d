"""
core/theme.py
Semantic colors for wizard output and questionary prompts.

Supports:
  - NO_COLOR=1 → disable all colors
  - CLAW_SETUP_THEME=minimal → fewer colors

Usage:
    from core.theme import theme
    console.print(f"[{theme.success}]✓[/{theme.success}] saved")
"""

from __future__ import annotations

import os

_STYLE_KEYS = ("qmark", "question", "answer", "pointer", "selected", "instruction")


class Theme:
    """Rich markup styles plus the matching questionary style."""

    def __init__(self, name: str = ""):
        self._no_color = bool(os.environ.get("NO_COLOR"))
        self.name = name or os.environ.get("CLAW_SETUP_THEME", "default")

        if self._no_color:
            self._apply_no_color()
        elif self.name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.accent = "bold cyan"
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.qmark = "fg:#00afd7 bold"
        self.question = "bold"
        self.answer = "fg:#5fd7ff bold"
        self.pointer = "fg:#00afd7 bold"
        self.selected = "fg:#5fd7ff"
        self.instruction = "fg:#9e9e9e"

    def _apply_minimal(self):
        self.accent = "bold"
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.qmark = "bold"
        self.question = "bold"
        self.answer = "bold"
        self.pointer = "bold"
        self.selected = ""
        self.instruction = "fg:#9e9e9e"

    def _apply_no_color(self):
        for attr in ("accent", "success", "warning", "error", "muted", "heading",
                     *_STYLE_KEYS):
            setattr(self, attr, "")

    def mark(self, style: str, text: str) -> str:
        """Wrap *text* in rich markup, or return it bare when *style* is empty."""
        return f"[{style}]{text}[/{style}]" if style else text

    def questionary_style(self):
        from questionary import Style
        return Style([
            ("qmark", self.qmark),
            ("question", self.question),
            ("answer", self.answer),
            ("pointer", self.pointer),
            ("highlighted", ""),
            ("selected", self.selected),
            ("instruction", self.instruction),
        ])


# Singleton instance
theme = Theme()
