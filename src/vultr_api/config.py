# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client Configuration for the Vultr API client.

This module provides the immutable configuration objects shared by every
call: credential, base URL, transport timeouts, and the retry budget for
rate-limited responses.
"""

import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.vultr.com"
DEFAULT_USER_AGENT = "vultr-api-python/1.0.0"

API_KEY_ENV = "VULTR_API_KEY"
BASE_URL_ENV = "VULTR_BASE_URL"


@dataclass(frozen=True)
class RetryConfig:
    """
    Retry settings for HTTP 429 responses.

    Only rate-limited responses are retried. Every other failure is terminal.
    """

    max_retries: int = 3
    """Maximum number of additional attempts after the first request."""

    base_delay: float = 1.0
    """Backoff delay in seconds before the first retry."""

    backoff_base: float = 2.0
    """Multiplier applied to the delay per attempt."""

    max_delay: float = 30.0
    """Ceiling for any single backoff wait, including Retry-After hints."""

    jitter_ratio: float = 0.1
    """Fraction of the delay added as random jitter (0 disables jitter)."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be non-negative")
        if self.base_delay <= 0:
            raise ConfigurationError("base_delay must be positive")
        if self.backoff_base < 1.0:
            raise ConfigurationError("backoff_base must be at least 1.0")
        if self.max_delay < self.base_delay:
            raise ConfigurationError("max_delay must be >= base_delay")
        if not 0.0 <= self.jitter_ratio <= 1.0:
            raise ConfigurationError("jitter_ratio must be between 0 and 1.0")


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the API client.

    Constructed once and shared read-only by every call issued through a
    Dispatcher. There is no module-level default instance.
    """

    # === Credentials ===

    api_key: str = field(default="", repr=False)
    """Bearer credential attached to every request."""

    # === Endpoint ===

    base_url: str = DEFAULT_BASE_URL
    """Scheme and host of the API. Resource paths are appended to it."""

    user_agent: str = DEFAULT_USER_AGENT
    """User-Agent header value."""

    # === Transport ===

    timeout: float = 60.0
    """Read/write timeout in seconds for a single HTTP round trip."""

    connect_timeout: float = 10.0
    """Connect timeout in seconds."""

    # === Retry ===

    retry: RetryConfig = field(default_factory=RetryConfig)
    """Retry budget and backoff for HTTP 429."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("api_key must be set")
        parsed = urlparse(self.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"base_url must be an absolute http(s) URL, got {self.base_url!r}"
            )
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.connect_timeout <= 0:
            raise ConfigurationError("connect_timeout must be positive")

    @classmethod
    def from_env(cls, **overrides: object) -> "ClientConfig":
        """
        Build a configuration from the environment.

        Reads VULTR_API_KEY and, optionally, VULTR_BASE_URL. Keyword
        arguments take precedence over environment values.
        """
        values: dict[str, object] = {"api_key": os.environ.get(API_KEY_ENV, "")}
        base_url = os.environ.get(BASE_URL_ENV)
        if base_url:
            values["base_url"] = base_url
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ClientConfig",
    "RetryConfig",
]
