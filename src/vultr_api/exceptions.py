# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the Vultr API client.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from VultrError, making it easy to catch every
client-originated failure with a single except clause.

A failed call never returns a partial result: the dispatcher either returns
the decoded envelope or raises exactly one of these.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .retry.headers import RateLimitInfo


class VultrError(Exception):
    """Base exception for all Vultr API client errors.

    Example:
        try:
            database = await client.database.get(database_id)
        except VultrError as e:
            logger.error(f"Vultr call failed: {e}")
    """

    pass


class ConfigurationError(VultrError):
    """Raised when client configuration is invalid.

    Raised at construction time, never per request. Common causes:
    - Missing or empty API key
    - Base URL without a scheme or host
    - Negative retry budget or non-positive delays

    Example:
        try:
            client = VultrClient(ClientConfig(api_key=""))
        except ConfigurationError as e:
            raise SystemExit(f"Invalid configuration: {e}")
    """

    pass


class TransportError(VultrError):
    """Raised when the HTTP round trip itself fails.

    Connection refused, DNS failure, TLS failure or a transport timeout.
    These are surfaced immediately and never retried by the dispatcher;
    retrying them is the caller's decision.

    Attributes:
        method: HTTP method of the failed request.
        url: Full URL of the failed request.
    """

    def __init__(self, message: str, method: str | None = None, url: str | None = None):
        super().__init__(message)
        self.method = method
        self.url = url


class APIError(VultrError):
    """Raised for any non-2xx response other than an exhausted 429.

    Attributes:
        status_code: HTTP status code returned by the API.
        message: Provider supplied error message, or the HTTP reason phrase
            when the body could not be decoded.
        provider_code: Provider specific error code, when present.

    Example:
        try:
            await client.database.get("missing")
        except APIError as e:
            if e.status_code == 404:
                return None
            raise
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        provider_code: str | None = None,
    ):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.provider_code = provider_code


class RateLimitError(VultrError):
    """Raised when HTTP 429 persists past the retry budget.

    Attributes:
        attempts: Total number of requests sent for this call
            (the initial attempt plus every retry).
        status_code: Last observed status code (always 429).
        message: Last provider message seen on a 429 response.
        retry_after: Last Retry-After hint in seconds, if the API sent one.
        rate_limit: Rate limit headers of the last 429 response
            (limit, remaining, reset, retry_after), if parsed.

    Example:
        try:
            await client.database.list_databases()
        except RateLimitError as e:
            logger.warning(f"Throttled after {e.attempts} attempts")
            if e.rate_limit is not None and e.rate_limit.reset is not None:
                schedule_after(e.rate_limit.reset)
    """

    def __init__(
        self,
        message: str,
        attempts: int,
        status_code: int = 429,
        retry_after: float | None = None,
        rate_limit: "RateLimitInfo | None" = None,
    ):
        super().__init__(f"rate limited after {attempts} attempts: {message}")
        self.message = message
        self.attempts = attempts
        self.status_code = status_code
        if retry_after is None and rate_limit is not None:
            retry_after = rate_limit.retry_after
        self.retry_after = retry_after
        self.rate_limit = rate_limit


class DecodeError(VultrError):
    """Raised when a 2xx response body cannot be decoded into the expected shape.

    Distinct from APIError: the server reported success but its payload was
    malformed JSON or lacked a required envelope key.

    Attributes:
        status_code: HTTP status code of the undecodable response.
        body: Raw response body, for debugging.
    """

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class CancellationError(VultrError):
    """Raised when a call's context is cancelled or its deadline elapses.

    Applies both to the network phase and to a retry backoff sleep.

    Attributes:
        reason: "cancelled" or "deadline_exceeded".
    """

    def __init__(self, message: str = "call cancelled", reason: str = "cancelled"):
        super().__init__(message)
        self.reason = reason


__all__ = [
    "APIError",
    "CancellationError",
    "ConfigurationError",
    "DecodeError",
    "RateLimitError",
    "TransportError",
    "VultrError",
]
