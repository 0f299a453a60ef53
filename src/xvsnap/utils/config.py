# src/xvsnap/utils/config.py

"""
Manages application configuration settings.

This module provides a ConfigManager class that handles loading settings from a
JSON file, providing default values, and saving changes. The defaults match the
Steam release of FINAL FANTASY XV; users with saves elsewhere, or who do not
want the output folder opened, can edit the generated file.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from xvsnap.discovery.snapshot_locator import default_steam_directory

# Constants
APP_NAME = "xvsnap"
CONFIG_FILE_NAME = "config.json"

# Default settings for the application
DEFAULT_CONFIG = {
    "steam_directory": str(default_steam_directory()),
    "snapshot_extension": ".ss",
    "output_subdirectory": "converted",
    "output_extension": ".jpeg",
    "start_marker": "FFD8",
    "end_marker": "FFD9",
    "open_output_folder": True,
    "wait_for_enter": True,
    "show_progress": True,
}

# Set up a logger for this module
logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Per-OS directory for config.json."""
    if sys.platform == "win32":
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path.home() / ".config" / APP_NAME


class ConfigManager:
    """
    Handles loading, accessing, and saving application configuration.

    Settings are loaded from the JSON file on construction and written back
    whenever a value changes. A missing file is created with the defaults; a
    corrupted one is reported and ignored.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Args:
            config_dir (Path, optional): Directory holding config.json.
                Defaults to the per-OS location from get_config_dir().
        """
        self.config_dir = Path(config_dir) if config_dir is not None else get_config_dir()
        self.config_path = self.config_dir / CONFIG_FILE_NAME
        self.config = {}
        self.load_config()

    def load_config(self):
        """
        Loads configuration from the JSON file. If the file doesn't exist or is
        invalid, the defaults are used.
        """
        # Start with defaults, then override with user's config
        self.config = DEFAULT_CONFIG.copy()

        if not self.config_path.exists():
            logger.info(f"Config file not found. Creating default config at: {self.config_path}")
            self.save_config()
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
            if not isinstance(user_config, dict):
                logger.error(f"Config file {self.config_path} does not hold a JSON object. Using defaults.")
                return
            self.config.update(user_config)
            logger.info(f"Successfully loaded configuration from {self.config_path}")
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.error(
                f"Could not decode JSON from {self.config_path}. "
                "Using default configuration. The corrupted file will be overwritten on next save."
            )
        except OSError as e:
            logger.error(f"Could not read config file {self.config_path}: {e}. Using defaults.")

    def save_config(self):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4, sort_keys=True)
            logger.info(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}")

    def get(self, key: str, default=None):
        return self.config.get(key, default)

    def set(self, key: str, value):
        """Updates one setting and writes the file straight away."""
        self.config[key] = value
        self.save_config()

    def get_marker(self, key: str) -> bytes:
        """
        Returns a marker setting as bytes.

        Markers are stored as hex strings ("FFD8", "ff d8"). An empty or
        malformed value falls back to the default for that key.
        """
        value = self.config.get(key)
        try:
            marker = bytes.fromhex(value)
        except (TypeError, ValueError):
            marker = b""
        if not marker:
            logger.error(f"Invalid marker {value!r} for '{key}'. Using default {DEFAULT_CONFIG[key]}.")
            marker = bytes.fromhex(DEFAULT_CONFIG[key])
        return marker


_config_manager = None


def get_config() -> ConfigManager:
    """Returns the shared ConfigManager, creating it on first use."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
