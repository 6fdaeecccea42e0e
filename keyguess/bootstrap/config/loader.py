import argparse
import os
from pathlib import Path

DEFAULT_CONFIG_NAME = "keyguess.yaml"
CONFIG_ENV = "KEYGUESSCONFIG"


def get_configfile(args: argparse.Namespace | None = None) -> Path | None:
    """
    Locate the YAML configuration file.

    Priority: CLI > ENV > default file in current working directory.
    The default file is optional; an explicitly named one must exist.
    """
    raw = getattr(args, "config", None) or os.getenv(CONFIG_ENV)

    if raw is None:
        file = Path.cwd() / DEFAULT_CONFIG_NAME
        return file if file.is_file() else None

    file = Path(raw).expanduser()
    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Use --config <file.yaml>\n"
            f"  - Or set the {CONFIG_ENV} environment variable\n"
            f"  - Or place a '{DEFAULT_CONFIG_NAME}' file in the current working directory."
        )

    return file
