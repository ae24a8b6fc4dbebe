"""Config file discovery.

envperm is configured per user rather than per project, so instead of a
walk-up search the config lives in the XDG config directory.
Supports the ENVPERM_CONFIG env var and the --config CLI flag as overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "envperm.toml"
CONFIG_ENV_VAR = "ENVPERM_CONFIG"


def default_config_path() -> Path | None:
    """Return ``$XDG_CONFIG_HOME/envperm/envperm.toml`` (or the ~/.config default).

    Returns None when neither XDG_CONFIG_HOME nor HOME is set.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "envperm" / CONFIG_FILENAME
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config" / "envperm" / CONFIG_FILENAME
    return None


def find_config() -> Path | None:
    """Locate the config file, or None if there isn't one.

    Checks ENVPERM_CONFIG first; if that is set but missing, no config is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    candidate = default_config_path()
    if candidate is not None and candidate.is_file():
        return candidate
    return None
