"""
Fetch outcomes and errors for secret context resolution.

A fetcher never raises for an expected store failure. It returns a
``FetchError`` value instead, and the locator decides whether that value is
fatal (fail-fast) or recorded and skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FetchErrorKind(StrEnum):
    """Why a context could not be fetched."""

    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    TRANSIENT = "transient"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class FetchError:
    """A failed fetch of a single context."""

    context: str
    kind: FetchErrorKind
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.context}: {self.kind} ({self.message})"
        return f"{self.context}: {self.kind}"


class SecretLayerError(Exception):
    """Base error for secretlayer."""

    pass


class SecretFetchFailedError(SecretLayerError):
    """Raised when fail-fast is set and a context could not be fetched."""

    def __init__(self, error: FetchError):
        self.error = error
        self.context = error.context
        self.kind = error.kind
        super().__init__(f"Unable to load secrets from {error}")
