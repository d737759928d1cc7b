"""Settings path helpers for jsonprep."""

import os
from pathlib import Path

CONFIG_ENV_VAR = "JSONPREP_CONFIG"


def get_config_dir() -> Path:
    """Return XDG-compliant config directory: ~/.config/jsonprep"""
    return Path.home() / ".config" / "jsonprep"


def get_config_path() -> Path:
    """Return path to the user settings file.

    Priority:
    1. JSONPREP_CONFIG environment variable (if set)
    2. ~/.config/jsonprep/settings.jsonc (default XDG location)
    """
    if CONFIG_ENV_VAR in os.environ:
        return Path(os.environ[CONFIG_ENV_VAR])
    return get_config_dir() / "settings.jsonc"


def is_explicit_config() -> bool:
    """True if the settings path was chosen through the environment."""
    return CONFIG_ENV_VAR in os.environ
