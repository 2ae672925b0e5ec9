# src/lydio/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the paths lydio reads from.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """
        Returns the absolute path of the installed 'lydio' package directory.
        (this file lives in lydio/core/utils/)
        """
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        """Returns the path of the packaged default settings.json."""
        return PathUtils.get_package_root() / "settings.json"

    # --- User specific paths ---

    @staticmethod
    def get_user_config_dir() -> Path:
        """
        Returns the path to the user's .lydio config directory.
        (e.g., ~/.lydio/)
        """
        return Path.home() / ".lydio"

    @staticmethod
    def get_user_settings_file() -> Path:
        """Returns the path of the optional user override file (~/.lydio/settings.json)."""
        return PathUtils.get_user_config_dir() / "settings.json"
