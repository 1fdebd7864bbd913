"""
Configuration file loading.

Search order:
1. Explicit path (--config flag)
2. .secretlayer/config.yaml (project root)
3. ~/.secretlayer/config.yaml (user home)
4. Environment variables and defaults only

Values from the ``secrets_manager`` section of the file override
SECRETLAYER_* environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml

from secretlayer.config.properties import SecretsManagerProperties

logger = structlog.get_logger()

CONFIG_SECTION = "secrets_manager"


def get_config_path(explicit_path: str | Path | None = None) -> Path | None:
    """
    Find the configuration file to use.

    Returns:
        Path to config file or None if not found
    """
    if explicit_path:
        path = Path(explicit_path)
        if path.exists():
            return path
        return None

    cwd_config = Path.cwd() / ".secretlayer" / "config.yaml"
    if cwd_config.exists():
        return cwd_config

    home_config = Path.home() / ".secretlayer" / "config.yaml"
    if home_config.exists():
        return home_config

    return None


class ConfigLoader:
    """
    Loads secrets manager properties from a config file and the environment.
    """

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or get_config_path()

    def load_properties(self) -> SecretsManagerProperties:
        """Load properties, file values taking precedence over the environment."""
        overrides = self._read_section()
        return SecretsManagerProperties(**overrides)

    def _read_section(self) -> dict[str, Any]:
        if not self.config_path or not self.config_path.exists():
            return {}

        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f) or {}
        except Exception as e:
            logger.warning("failed_to_load_config", path=str(self.config_path), error=str(e))
            return {}

        section = data.get(CONFIG_SECTION) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            logger.debug("config_section_missing", path=str(self.config_path))
            return {}

        logger.debug("loaded_config", path=str(self.config_path), keys=sorted(section))
        return section


def load_properties(path: str | Path | None = None) -> SecretsManagerProperties:
    """
    Convenience function to load secrets manager properties.

    Args:
        path: Optional explicit config file path

    Returns:
        SecretsManagerProperties instance
    """
    config_path = get_config_path(path)
    if path and config_path is None:
        # Explicit path given but missing, do not fall back to discovered files
        logger.warning("config_file_not_found", path=str(path))
        return SecretsManagerProperties()

    loader = ConfigLoader(config_path)
    return loader.load_properties()
