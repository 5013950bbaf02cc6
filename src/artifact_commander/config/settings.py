"""Application configuration and defaults."""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


def _default_config_file() -> Path:
    """Return the default config file location for the current platform.

    ACOM_CONFIG wins; otherwise the per-user config directory is used.
    """
    explicit = os.environ.get("ACOM_CONFIG", "")
    if explicit:
        return Path(explicit)
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "artifact-commander" / "config.yaml"
        return Path.home() / "AppData" / "Roaming" / "artifact-commander" / "config.yaml"
    # Linux / macOS
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg) / "artifact-commander" / "config.yaml"
    return Path.home() / ".config" / "artifact-commander" / "config.yaml"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, raw)
        return default


@dataclass
class Settings:
    backend_url: str = field(default_factory=lambda: os.environ.get("ACOM_BACKEND_URL", "http://localhost:8080"))
    token: str = field(default_factory=lambda: os.environ.get("ACOM_TOKEN", ""))
    request_timeout: float = field(default_factory=lambda: _env_float("ACOM_REQUEST_TIMEOUT", 30.0))
    config_file: Path = field(default_factory=_default_config_file)

    search_path: str = "/api/nexus/search"
    dependency_path: str = "/api/nexus/dependency"
    projects_path: str = "/api/gitlab/projects"
    tree_path: str = "/api/gitlab/projects/{repository_id}/repository/tree"
    raw_path: str = "/api/gitlab/projects/{repository_id}/repository/files/raw"

    min_query_length: int = 3
    debounce_seconds: float = 0.3
    readme_name: str = "readme.md"
    default_output: str = "table"

    def load_file(self, path: Path | None = None) -> None:
        """Overlay values from a YAML config file.

        Environment variables still win over file values, so only keys whose
        env var is unset are applied for the env-backed fields.
        """
        path = path or self.config_file
        if not path.exists():
            return
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("Failed to read config file %s", path, exc_info=True)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: top level is not a mapping", path)
            return

        env_backed = {
            "backend_url": "ACOM_BACKEND_URL",
            "token": "ACOM_TOKEN",
            "request_timeout": "ACOM_REQUEST_TIMEOUT",
        }
        known = {f.name: f for f in fields(self)}
        for key, value in data.items():
            if key not in known or key == "config_file":
                logger.debug("Unknown config key %r in %s", key, path)
                continue
            if key in env_backed and os.environ.get(env_backed[key]):
                continue
            current = getattr(self, key)
            if isinstance(current, (int, float)) and not isinstance(current, bool):
                try:
                    value = type(current)(value)
                except (TypeError, ValueError):
                    logger.warning("Ignoring invalid %s=%r in %s", key, value, path)
                    continue
            setattr(self, key, value)


# Global singleton
settings = Settings()
settings.load_file()
