"""
secretlayer: profile-aware layered secrets.

Resolves prioritized secret contexts from an application name and its
active profiles, fetches each from a secret store, and stacks the results
into a single first-match-wins source.
"""

from secretlayer.config.properties import SecretsManagerProperties
from secretlayer.contexts import resolve_contexts
from secretlayer.environment import (
    ConfigurableEnvironment,
    Environment,
    MapEnvironment,
    StandardEnvironment,
)
from secretlayer.errors import (
    FetchError,
    FetchErrorKind,
    SecretFetchFailedError,
    SecretLayerError,
)
from secretlayer.locator import LocateResult, SecretsSourceLocator
from secretlayer.sources import CompositeSecretSource, SecretLayer

__all__ = [
    "SecretsManagerProperties",
    "resolve_contexts",
    "Environment",
    "ConfigurableEnvironment",
    "MapEnvironment",
    "StandardEnvironment",
    "FetchError",
    "FetchErrorKind",
    "SecretFetchFailedError",
    "SecretLayerError",
    "LocateResult",
    "SecretsSourceLocator",
    "CompositeSecretSource",
    "SecretLayer",
]
