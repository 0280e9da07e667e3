"""XDG-compliant path management for dfstat.

dfstat only reads configuration, so only the config directory is
resolved here.

XDG defaults:
- Config: ~/.config/dfstat/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "dfstat"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/dfstat/ (or XDG_CONFIG_HOME/dfstat/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_theme_path() -> Path:
    """Get the user theme override file path.

    Returns:
        Path to ~/.config/dfstat/theme.toml.
    """
    return get_config_dir() / "theme.toml"
