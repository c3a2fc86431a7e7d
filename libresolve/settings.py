"""Settings manager for libresolve settings.yaml files.

Two scopes, merged per key (project overrides user):
- User global (~/.libresolve/settings.yaml)
- Project (.libresolve/settings.yaml)

Logging keys can also be overridden with LIBRESOLVE_LOG_PATH and
LIBRESOLVE_LOG_LEVEL.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "libraries.yaml"
DEFAULT_BINARY_TYPE = "JarBinarySpec"
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """Reads settings across user/project scopes."""

    def __init__(self, project_dir: Path | None = None, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            project_dir: Project settings directory (for testing).
                         If None, uses .libresolve in current directory.
            user_dir: User settings directory (for testing).
                      If None, uses ~/.libresolve.
        """
        if project_dir is None:
            project_dir = Path(".libresolve")
        if user_dir is None:
            user_dir = Path.home() / ".libresolve"

        self.user_settings_file = user_dir / "settings.yaml"
        self.project_settings_file = project_dir / "settings.yaml"

    def get_manifest_path(self) -> Path:
        """Manifest describing the known projects and their libraries."""
        return Path(self._get("resolve", "manifest", DEFAULT_MANIFEST))

    def get_binary_type(self) -> str:
        """Binary kind requested when the caller does not name one."""
        return str(self._get("resolve", "binary_type", DEFAULT_BINARY_TYPE))

    def get_log_path(self) -> str | None:
        """JSONL log file, or None when file logging is off."""
        if env_value := os.getenv("LIBRESOLVE_LOG_PATH"):
            return env_value
        value = self._get("logging", "path", None)
        return str(value) if value else None

    def get_log_level(self) -> str:
        if env_value := os.getenv("LIBRESOLVE_LOG_LEVEL"):
            return env_value.upper()
        return str(self._get("logging", "level", DEFAULT_LOG_LEVEL)).upper()

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        """
        merged: dict[str, Any] = {}

        user = self._read_settings(self.user_settings_file)
        if user:
            merged = self._deep_merge(merged, user)

        project = self._read_settings(self.project_settings_file)
        if project:
            merged = self._deep_merge(merged, project)

        return merged

    def _get(self, section: str, key: str, default: Any) -> Any:
        values = self.get_merged_settings().get(section)
        if not isinstance(values, dict) or values.get(key) is None:
            return default
        return values[key]

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Returns:
            Settings dict, or None if the file is missing or unreadable
        """
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {path}: expected a mapping")
            return None
        return data

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries (overlay takes precedence)."""
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
