"""
Secrets Manager naming and failure-policy settings.

Loaded from environment variables with the SECRETLAYER_ prefix (and an
optional .env file). Instances are frozen.
"""

from __future__ import annotations

import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PREFIX_PATTERN = re.compile(r"(/)?[a-zA-Z0-9.\-]+(/[a-zA-Z0-9]+)*")
PROFILE_SEPARATOR_PATTERN = re.compile(r"[a-zA-Z0-9.\-_/\\]+")


class SecretsManagerProperties(BaseSettings):
    """Settings controlling which secret contexts are resolved and how."""

    enabled: bool = True

    # Explicit contexts, bypasses derivation when non-empty
    secret_names: tuple[str, ...] = ()

    # Application name, falls back to the environment's application.name
    name: str | None = None

    prefix: str = "secret"
    default_context: str = "application"
    profile_separator: str = "_"

    fail_fast: bool = True

    # AWS
    region: str = "us-east-1"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SECRETLAYER_",
        extra="ignore",
        frozen=True,
    )

    @field_validator("prefix")
    @classmethod
    def _validate_prefix(cls, value: str) -> str:
        if not value:
            raise ValueError("prefix should not be empty")
        if not PREFIX_PATTERN.fullmatch(value):
            raise ValueError(f"prefix must match pattern {PREFIX_PATTERN.pattern}")
        return value

    @field_validator("default_context")
    @classmethod
    def _validate_default_context(cls, value: str) -> str:
        if not value:
            raise ValueError("default_context should not be empty")
        return value

    @field_validator("profile_separator")
    @classmethod
    def _validate_profile_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("profile_separator should not be empty")
        if not PROFILE_SEPARATOR_PATTERN.fullmatch(value):
            raise ValueError(
                f"profile_separator must match pattern {PROFILE_SEPARATOR_PATTERN.pattern}"
            )
        return value
