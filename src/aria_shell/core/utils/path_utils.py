# src/aria_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the package paths the shell needs.
    """

    # --- Package specific paths

    @staticmethod
    def get_shell_package_root() -> Path:
        """Directory of the installed aria_shell package (holds settings.json)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"
