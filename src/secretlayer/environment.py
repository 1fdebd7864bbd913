"""
Environment abstraction consulted during context resolution.

Two variants exist:
- ``Environment``: simple property lookup only
- ``ConfigurableEnvironment``: property lookup plus active profiles

Context derivation needs active profiles, so it only happens for
configurable environments.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

APPLICATION_NAME_PROPERTY = "application.name"

APPLICATION_NAME_ENV = "APPLICATION_NAME"
ACTIVE_PROFILES_ENV = "ACTIVE_PROFILES"


class Environment(ABC):
    """Read-only view of application properties."""

    @abstractmethod
    def get_property(self, key: str) -> str | None:
        """Get a property value, or None when absent."""
        pass


class ConfigurableEnvironment(Environment):
    """Environment that also knows its active profiles."""

    @abstractmethod
    def get_active_profiles(self) -> list[str]:
        """Active profiles in declaration order."""
        pass


class MapEnvironment(Environment):
    """Dict-backed environment without profile support."""

    def __init__(self, properties: Mapping[str, str] | None = None):
        self.properties = dict(properties or {})

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)


class StandardEnvironment(ConfigurableEnvironment):
    """Dict-backed environment with an explicit list of active profiles."""

    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        active_profiles: list[str] | None = None,
    ):
        self.properties = dict(properties or {})
        self.active_profiles = list(active_profiles or [])

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)

    def get_active_profiles(self) -> list[str]:
        return list(self.active_profiles)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> StandardEnvironment:
        """
        Build an environment from process environment variables.

        ``APPLICATION_NAME`` becomes the ``application.name`` property and
        ``ACTIVE_PROFILES`` is read as a comma-separated profile list.
        """
        environ = os.environ if environ is None else environ

        properties = {}
        app_name = environ.get(APPLICATION_NAME_ENV)
        if app_name:
            properties[APPLICATION_NAME_PROPERTY] = app_name

        raw_profiles = environ.get(ACTIVE_PROFILES_ENV, "")
        profiles = [p.strip() for p in raw_profiles.split(",") if p.strip()]

        return cls(properties=properties, active_profiles=profiles)


__all__ = [
    "APPLICATION_NAME_PROPERTY",
    "Environment",
    "ConfigurableEnvironment",
    "MapEnvironment",
    "StandardEnvironment",
]
