"""Path constants and discovery for grm.

Defines the tag marker layout and application data directories.
"""

import os
import sys
from pathlib import Path
from typing import Union


# Application name for config directories
APP_NAME = "grm"

# Tag markers live under this directory, relative to the current directory
DEFAULT_WORKING_DIR = ".grm"


def get_tag_marker_path(working_dir: Union[str, Path], owner: str, repo: str) -> Path:
    """
    Get the tag marker path for a repository.

    Args:
        working_dir: Root directory for tag markers
        owner: Repository owner
        repo: Repository name

    Returns:
        Path to ``<working_dir>/<owner>/<repo>``
    """
    return Path(working_dir) / owner / repo


def get_app_data_dir() -> Path:
    """
    Get the application data directory.

    Returns:
        Path to app data directory (not created)

    Platform-specific locations:
        - Windows: %APPDATA%/grm
        - Linux: ~/.config/grm
        - macOS: ~/Library/Application Support/grm
    """
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

    return base / APP_NAME


def get_settings_path() -> Path:
    """
    Get the path to the settings JSON file.

    Returns:
        Path to settings.json
    """
    return get_app_data_dir() / "settings.json"
