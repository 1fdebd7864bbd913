"""
secretlayer configuration.

Provides:
- Pydantic-based properties (environment variables, .env files)
- YAML config file discovery and loading
"""

from secretlayer.config.loader import ConfigLoader, get_config_path, load_properties
from secretlayer.config.properties import SecretsManagerProperties

__all__ = [
    "SecretsManagerProperties",
    "ConfigLoader",
    "get_config_path",
    "load_properties",
]
