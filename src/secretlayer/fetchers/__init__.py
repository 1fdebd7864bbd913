"""
Secret fetchers: the store side of context resolution.

A fetcher turns one context into either a ``SecretLayer`` or a
``FetchError``. Expected store failures are returned, not raised.

Core fetchers (always available):
- In-memory static mapping
- YAML secrets file

Optional fetchers (loaded on demand):
- AWS Secrets Manager (requires boto3)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from secretlayer.errors import FetchError, FetchErrorKind
from secretlayer.sources import SecretLayer

logger = structlog.get_logger()


def _sanitize_error(exc: Exception) -> str:
    """Sanitize error message to avoid leaking sensitive details."""
    return type(exc).__name__


class SecretFetcher(ABC):
    """Base class for secret fetchers.

    ``fetch`` must not raise for store failures. They are returned as a
    ``FetchError`` so the locator can apply its fail-fast policy; an exception
    escapes ``locate`` even when fail-fast is off.
    """

    @abstractmethod
    def fetch(self, context: str) -> SecretLayer | FetchError:
        """Fetch all key/value secrets stored under ``context``."""
        pass

    def __call__(self, context: str) -> SecretLayer | FetchError:
        return self.fetch(context)


class StaticSecretFetcher(SecretFetcher):
    """In-memory fetcher, mostly for local development and tests.

    Values may be a mapping (returned as a layer) or a ``FetchErrorKind`` to
    simulate a store failure for that context.
    """

    def __init__(self, secrets: Mapping[str, Mapping[str, Any] | FetchErrorKind] | None = None):
        self.secrets = dict(secrets or {})

    def fetch(self, context: str) -> SecretLayer | FetchError:
        if context not in self.secrets:
            return FetchError(context, FetchErrorKind.NOT_FOUND)

        value = self.secrets[context]
        if isinstance(value, FetchErrorKind):
            return FetchError(context, value)
        return SecretLayer(context, value)


class FileSecretFetcher(SecretFetcher):
    """YAML file fetcher.

    Top-level keys are contexts, each holding a mapping of secrets::

        secret/orders:
          db.password: hunter2
        secret/application:
          region: eu-west-1

    The file is read on every fetch.
    """

    def __init__(self, secrets_file: Path):
        self.secrets_file = Path(secrets_file)

    def _load(self) -> dict[str, Any]:
        with open(self.secrets_file) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("secrets file must contain a mapping")
        return data

    def fetch(self, context: str) -> SecretLayer | FetchError:
        if not self.secrets_file.exists():
            return FetchError(context, FetchErrorKind.NOT_FOUND, "secrets file not found")

        try:
            data = self._load()
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.debug(
                "secrets_file_unreadable", file=str(self.secrets_file), error=_sanitize_error(e)
            )
            return FetchError(context, FetchErrorKind.TRANSIENT, _sanitize_error(e))

        if context not in data:
            return FetchError(context, FetchErrorKind.NOT_FOUND)

        entry = data[context]
        if not isinstance(entry, dict):
            return FetchError(context, FetchErrorKind.MALFORMED, "expected a mapping")
        return SecretLayer(context, entry)


__all__ = [
    "SecretFetcher",
    "StaticSecretFetcher",
    "FileSecretFetcher",
]
