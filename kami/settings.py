"""
Settings Module for Kami Solver

Provides persistent storage for solver preferences using JSON.
Settings are stored in config.json in the working directory by default.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "strategy_name": "dfs",
    "max_moves": 5,
    "timeout_sec": 20.0,
    # Empirical; regions must outweigh triangles
    "weight_regions_absorbed": 1000,
    "weight_size_absorbed": 1,
    "debug_enabled": False,
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default config.json)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE

    if not settings_file.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        if not isinstance(settings, dict):
            logger.warning(f"Settings file {settings_file} is not an object, using defaults")
            return DEFAULT_SETTINGS.copy()

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default config.json)
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
