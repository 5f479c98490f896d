"""
core/menu.py
Generic menu loop used by every wizard screen.

    run_menu(prompter, "What next?", [
        MenuItem("Add provider", "add", action=wizard.configure_provider),
        exit_item("Exit"),
    ], loop=True)

Picking an exit item (or cancelling the prompt) ends the menu with None.
Picking anything else runs its action, then either returns the item's value
or, for looping menus, shows the menu again.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class MenuItem(Generic[T]):
    label: str
    value: Optional[T] = None
    action: Optional[Callable[[], Any]] = None
    is_exit: bool = False


def exit_item(label: str) -> MenuItem:
    """The item that ends a menu. Its value is never returned."""
    return MenuItem(label, is_exit=True)


async def _wait(awaitable):
    return await awaitable


def _run_action(action: Callable[[], Any]):
    result = action()
    if inspect.isawaitable(result):
        asyncio.run(_wait(result))


def run_menu(prompter, message: str, items: Sequence[MenuItem[T]],
             loop: bool = False, on_repeat: Optional[Callable[[], None]] = None) -> Optional[T]:
    """Present *items* until one is chosen; see module docstring.

    Exceptions raised by an action propagate to the caller unchanged.
    *on_repeat* runs between rounds of a looping menu (e.g. print a blank line).
    """
    if not items:
        raise ValueError("run_menu needs at least one item")

    choices = [(item.label, item) for item in items]
    while True:
        selected = prompter.select(message, choices)
        if selected is None or selected.is_exit:
            return None

        if selected.action is not None:
            _run_action(selected.action)

        if not loop:
            return selected.value

        if on_repeat is not None:
            on_repeat()
