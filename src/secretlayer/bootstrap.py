"""
Bootstrap wiring: properties, the AWS fetcher and the locator.
"""

from __future__ import annotations

import structlog

from secretlayer.config.loader import load_properties
from secretlayer.config.properties import SecretsManagerProperties
from secretlayer.environment import Environment, StandardEnvironment
from secretlayer.locator import Fetch, LocateResult, SecretsSourceLocator

logger = structlog.get_logger()


def create_locator(
    properties: SecretsManagerProperties | None = None,
    fetch: Fetch | None = None,
) -> SecretsSourceLocator:
    """Create a locator, defaulting to AWS Secrets Manager in the configured region."""
    properties = properties or load_properties()

    if fetch is None:
        from secretlayer.fetchers.aws import AWSSecretsManagerFetcher

        fetch = AWSSecretsManagerFetcher(region=properties.region)

    return SecretsSourceLocator(fetch, properties)


def locate_secrets(
    environment: Environment | None = None,
    properties: SecretsManagerProperties | None = None,
    fetch: Fetch | None = None,
) -> LocateResult:
    """
    Locate secrets for the current application.

    Args:
        environment: Environment to resolve against (default: process environment)
        properties: Naming and failure settings (default: loaded from config)
        fetch: Fetch callable (default: AWS Secrets Manager)

    Returns:
        LocateResult, empty when the integration is disabled
    """
    properties = properties or load_properties()

    if not properties.enabled:
        logger.info("secrets_manager_disabled")
        return LocateResult.empty()

    environment = environment or StandardEnvironment.from_environ()
    locator = create_locator(properties, fetch)
    return locator.locate(environment)


__all__ = ["create_locator", "locate_secrets"]
