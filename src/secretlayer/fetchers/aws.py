"""
AWS Secrets Manager fetcher - lazy loaded when needed.

Requires boto3. Each context is used as the SecretId and its SecretString
must be a JSON object.
"""

from __future__ import annotations

import json
from typing import Any

import structlog

from secretlayer.errors import FetchError, FetchErrorKind
from secretlayer.fetchers import SecretFetcher, _sanitize_error
from secretlayer.sources import SecretLayer

logger = structlog.get_logger()

NOT_FOUND_CODES = frozenset({"ResourceNotFoundException"})
ACCESS_DENIED_CODES = frozenset(
    {
        "AccessDeniedException",
        "UnrecognizedClientException",
        "ExpiredTokenException",
        "InvalidSignatureException",
        "DecryptionFailure",
    }
)


def classify_client_error(code: str) -> FetchErrorKind:
    """Map a Secrets Manager error code to a fetch error kind."""
    if code in NOT_FOUND_CODES:
        return FetchErrorKind.NOT_FOUND
    if code in ACCESS_DENIED_CODES:
        return FetchErrorKind.ACCESS_DENIED
    return FetchErrorKind.TRANSIENT


class AWSSecretsManagerFetcher(SecretFetcher):
    """AWS Secrets Manager fetcher."""

    def __init__(self, region: str = "us-east-1", client: Any = None):
        self.region = region
        self._client = client

    def _get_client(self):
        if self._client is not None:
            return self._client

        import boto3

        self._client = boto3.client("secretsmanager", region_name=self.region)
        return self._client

    def fetch(self, context: str) -> SecretLayer | FetchError:
        from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

        try:
            response = self._get_client().get_secret_value(SecretId=context)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            kind = classify_client_error(code)
            logger.debug("aws_secret_fetch_failed", context=context, code=code, kind=str(kind))
            return FetchError(context, kind, code)
        except NoCredentialsError as e:
            return FetchError(context, FetchErrorKind.ACCESS_DENIED, _sanitize_error(e))
        except BotoCoreError as e:
            logger.debug("aws_secret_fetch_failed", context=context, error=_sanitize_error(e))
            return FetchError(context, FetchErrorKind.TRANSIENT, _sanitize_error(e))

        secret_string = response.get("SecretString")
        if secret_string is None:
            return FetchError(context, FetchErrorKind.MALFORMED, "secret has no SecretString")

        try:
            data = json.loads(secret_string)
        except json.JSONDecodeError as e:
            return FetchError(context, FetchErrorKind.MALFORMED, _sanitize_error(e))

        if not isinstance(data, dict):
            return FetchError(context, FetchErrorKind.MALFORMED, "expected a JSON object")

        logger.debug("aws_secret_fetched", context=context, keys=len(data))
        return SecretLayer(context, data)


__all__ = ["AWSSecretsManagerFetcher", "classify_client_error"]
