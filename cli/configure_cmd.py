"""Interactive wizard: language → openclaw check → provider menu loop."""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from core.i18n import LOCALES, Translator, detect_locale
from core.openclaw import which_openclaw
from core.prompts import Prompter
from core.theme import theme
from core.wizard import ConfigWizard

logger = logging.getLogger(__name__)


def select_language(prompter, default: str) -> Optional[str]:
    return prompter.select(
        Translator().t("select_language"),
        [(name, code) for code, name in LOCALES.items()],
        default=default,
    )


def cmd_configure(lang: Optional[str] = None, prompter=None,
                  console: Optional[Console] = None) -> int:
    """Run the wizard. Returns the process exit code."""
    from cli.helpers import get_version

    console = console or Console()
    prompter = prompter or Prompter()

    locale = lang or select_language(prompter, detect_locale())
    if not locale:
        return 0
    tr = Translator(locale)
    logger.info("Language set to %s", tr.locale)

    console.print()
    console.print(f"{theme.mark(theme.accent, tr.t('welcome'))} "
                  f"{theme.mark(theme.muted, 'v' + get_version())}")
    console.print()

    with console.status(tr.t("checking_openclaw")):
        path = which_openclaw()
    if not path:
        console.print(f"  {theme.mark(theme.error, '✗')} {tr.t('openclaw_not_found')}")
        return 1
    console.print(f"  {theme.mark(theme.success, '✓')} {tr.t('openclaw_found', path=escape(path))}")
    console.print()

    wizard = ConfigWizard(prompter, tr, console=console)
    wizard.run_config_loop()

    console.print(f"  {theme.mark(theme.muted, tr.t('goodbye'))}")
    return 0
