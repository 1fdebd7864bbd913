"""
Layered secret source locator.

Fetches every resolved context in precedence order and stacks the results
into a ``CompositeSecretSource``. Contexts are fetched one at a time so that
a fail-fast error stops before any later context is requested.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from secretlayer.config.properties import SecretsManagerProperties
from secretlayer.contexts import resolve_contexts
from secretlayer.environment import Environment
from secretlayer.errors import FetchError, SecretFetchFailedError
from secretlayer.sources import CompositeSecretSource, SecretLayer

logger = structlog.get_logger()

SOURCE_NAME = "aws-secrets-manager"

# Store failures (missing, denied, unavailable, malformed) must be returned as
# FetchError. Anything a fetch raises is treated as a bug and propagates
# regardless of fail_fast.
Fetch = Callable[[str], SecretLayer | FetchError]


@dataclass(frozen=True)
class LocateResult:
    """Outcome of a single ``locate`` call."""

    source: CompositeSecretSource
    contexts: tuple[str, ...] = ()
    skipped: tuple[FetchError, ...] = field(default_factory=tuple)

    def get_contexts(self) -> list[str]:
        """Contexts that were attempted, highest precedence first."""
        return list(self.contexts)

    def skipped_contexts(self) -> list[str]:
        return [error.context for error in self.skipped]

    def get(self, key: str, default: Any = None) -> Any:
        return self.source.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.source

    @classmethod
    def empty(cls) -> LocateResult:
        return cls(source=CompositeSecretSource(SOURCE_NAME))


class SecretsSourceLocator:
    """
    Builds a composite secret source from profile-aware contexts.

    Each call to ``locate`` is independent and returns its own
    ``LocateResult``; the locator keeps no per-call state.
    """

    def __init__(self, fetch: Fetch, properties: SecretsManagerProperties):
        self.fetch = fetch
        self.properties = properties

    def locate(self, environment: Environment) -> LocateResult:
        contexts = resolve_contexts(environment, self.properties)
        composite = CompositeSecretSource(SOURCE_NAME)
        skipped: list[FetchError] = []

        log = logger.bind(source=SOURCE_NAME, fail_fast=self.properties.fail_fast)
        log.debug("locating_secrets", contexts=contexts)

        for context in contexts:
            outcome = self.fetch(context)

            if isinstance(outcome, FetchError):
                if self.properties.fail_fast:
                    log.error(
                        "secret_fetch_failed",
                        context=context,
                        kind=str(outcome.kind),
                        error=outcome.message,
                    )
                    raise SecretFetchFailedError(outcome)

                log.warning(
                    "secret_context_skipped",
                    context=context,
                    kind=str(outcome.kind),
                    error=outcome.message,
                )
                skipped.append(outcome)
                continue

            composite.add_layer(outcome)

        log.info(
            "secrets_located",
            contexts=len(contexts),
            layers=len(composite),
            skipped=len(skipped),
        )
        return LocateResult(source=composite, contexts=tuple(contexts), skipped=tuple(skipped))


__all__ = ["SOURCE_NAME", "LocateResult", "SecretsSourceLocator"]
