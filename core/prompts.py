"""
core/prompts.py
Single point where the wizard talks to questionary.

Each method returns the answer, or None when the user cancels (Ctrl+C /
Esc). Tests swap this class for a scripted fake with the same methods.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import questionary

from core.theme import theme


class Prompter:

    def __init__(self, style=None):
        self.style = style or theme.questionary_style()

    def select(self, message: str, choices: Sequence[tuple[str, Any]],
               default: Any = None) -> Any:
        """Arrow-key single select over (label, value) pairs."""
        q_choices = [questionary.Choice(label, value=value) for label, value in choices]
        return questionary.select(
            message,
            choices=q_choices,
            default=default,
            style=self.style,
        ).ask()

    def text(self, message: str, default: str = "") -> Optional[str]:
        return questionary.text(message, default=default, style=self.style).ask()

    def password(self, message: str) -> Optional[str]:
        return questionary.password(message, style=self.style).ask()

    def confirm(self, message: str, default: bool = True) -> Optional[bool]:
        return questionary.confirm(message, default=default, style=self.style).ask()
