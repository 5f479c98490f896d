"""CLI dispatcher — lazy-loads command modules on demand."""
from __future__ import annotations


def dispatch_command(args) -> int:
    """Route args.cmd to the appropriate cli module, importing only on use."""
    cmd = getattr(args, "cmd", None)
    json_output = getattr(args, "json", False)

    if cmd is None or cmd == "configure":
        from cli.configure_cmd import cmd_configure
        return cmd_configure(lang=getattr(args, "lang", None))

    elif cmd == "status":
        from cli.status_cmd import cmd_status
        return cmd_status(json_output=json_output)

    elif cmd == "version":
        from cli.version_cmd import cmd_version
        return cmd_version(json_output=json_output)

    raise ValueError(f"Unknown command: {cmd}")
