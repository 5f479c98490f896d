"""
core/logging_config.py
Logging setup for the wizard.

The terminal belongs to the interactive prompts, so the console handler only
shows warnings unless --verbose is passed; everything goes to the log file.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_DIR = os.path.join("~", ".claw-setup", "logs")
LOG_FILE = "claw-setup.log"


def setup_logging(verbose: bool = False, log_dir: str = DEFAULT_LOG_DIR) -> logging.Logger:
    """
    Configure the root logger.
    Args:
        verbose: show DEBUG output on the console
        log_dir: directory for claw-setup.log ("" disables the file handler)
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove existing handlers
    for h in root.handlers[:]:
        root.removeHandler(h)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(
        "[%(asctime)s][%(name)s] %(message)s", datefmt="%H:%M:%S"))
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(console)

    if log_dir:
        log_dir = os.path.expanduser(log_dir)
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE),
                                               encoding="utf-8")
        except OSError as e:
            root.warning("File logging disabled: %s", e)
        else:
            file_handler.setFormatter(logging.Formatter(
                "[%(asctime)s][%(name)s][%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"))
            file_handler.setLevel(logging.DEBUG)
            root.addHandler(file_handler)

    return root
