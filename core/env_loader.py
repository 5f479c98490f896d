"""
core/env_loader.py
Loads KEY=VALUE pairs from a .env file so OPENCLAW_CONFIG_PATH,
OPENCLAW_BIN and CLAW_SETUP_LANG can live next to the project.
"""

import os


def load_dotenv(path: str = ".env") -> int:
    """
    Load a .env file into os.environ. Returns the number of keys set.
    - Skips blank lines, comments and lines without '='
    - Accepts an optional leading "export "
    - Strips surrounding quotes (' or ") from values
    - Real environment variables take precedence
    """
    if not os.path.exists(path):
        return 0

    loaded = 0
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            key, _, value = line.partition("=")
            key = key.strip()
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            if key and key not in os.environ:
                os.environ[key] = value
                loaded += 1
    return loaded
