"""
Context resolution.

Computes the ordered list of secret store lookup keys for an application.
Position 0 has the highest precedence. For application ``orders`` with
profiles ``dev, eu`` the result is::

    secret/orders_eu
    secret/orders_dev
    secret/orders
    secret/application_eu
    secret/application_dev
    secret/application
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from secretlayer.environment import APPLICATION_NAME_PROPERTY, ConfigurableEnvironment

if TYPE_CHECKING:
    from secretlayer.config.properties import SecretsManagerProperties
    from secretlayer.environment import Environment

logger = structlog.get_logger()


def resolve_contexts(
    environment: Environment, properties: SecretsManagerProperties
) -> list[str]:
    """
    Resolve the secret contexts to fetch, highest precedence first.

    Explicit ``secret_names`` are returned as given. Otherwise contexts are
    derived from the application name and active profiles, which requires a
    ``ConfigurableEnvironment``; any other environment yields no contexts.
    """
    if properties.secret_names:
        return list(properties.secret_names)

    if not isinstance(environment, ConfigurableEnvironment):
        logger.debug("environment_not_configurable", environment=type(environment).__name__)
        return []

    app_name = properties.name
    if app_name is None:
        app_name = environment.get_property(APPLICATION_NAME_PROPERTY)
    if app_name is None:
        # Concatenated as-is below, producing "<prefix>/None"
        logger.warning("application_name_missing", prefix=properties.prefix)

    profiles = environment.get_active_profiles()
    prefix = properties.prefix
    separator = properties.profile_separator

    contexts: list[str] = []

    default_context = f"{prefix}/{properties.default_context}"
    contexts.append(default_context)
    _add_profiles(contexts, default_context, profiles, separator)

    base_context = f"{prefix}/{app_name}"
    contexts.append(base_context)
    _add_profiles(contexts, base_context, profiles, separator)

    contexts.reverse()
    return contexts


def _add_profiles(
    contexts: list[str], base_context: str, profiles: list[str], separator: str
) -> None:
    for profile in profiles:
        contexts.append(f"{base_context}{separator}{profile}")


__all__ = ["resolve_contexts"]
