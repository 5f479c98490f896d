#!/usr/bin/env python3
"""
main.py  —  OpenClaw provider setup CLI
Usage:
  claw-setup                  # interactive wizard (default)
  claw-setup configure        # same as above
  claw-setup status           # show configured providers and default model
  claw-setup status --json    # machine-readable status
  claw-setup version          # version info

Global options:
  --lang en|zh_CN   skip the language prompt
  --verbose         debug logging on the console

Environment:
  OPENCLAW_CONFIG_PATH   openclaw.json location (default ~/.openclaw/openclaw.json)
  OPENCLAW_BIN           openclaw executable (default: found on PATH)
  CLAW_SETUP_LANG        default language
"""

import argparse
import logging
import sys

from core.env_loader import load_dotenv

logger = logging.getLogger("claw_setup")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claw-setup",
        description="Configure model providers and API keys for OpenClaw.")
    parser.add_argument("--lang", choices=["en", "zh_CN"], default=None,
                        help="Interface language (default: ask)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show debug logging on the console")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("configure", help="Interactive provider wizard (default)")

    p_status = sub.add_parser("status", help="Show current provider configuration")
    p_status.add_argument("--json", action="store_true", help="JSON output")

    p_version = sub.add_parser("version", help="Show version info")
    p_version.add_argument("--json", action="store_true", help="JSON output")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    from core.logging_config import setup_logging
    setup_logging(verbose=args.verbose)

    from cli import dispatch_command
    try:
        return dispatch_command(args) or 0
    except KeyboardInterrupt:
        logger.info("Interrupted")
        print("\n  Cancelled.")
        return 130
    except Exception as e:
        logger.exception("Unhandled error")
        from core.theme import theme
        from rich.console import Console
        from rich.markup import escape
        Console(stderr=True).print(f"  {theme.mark(theme.error, '✗')} {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
