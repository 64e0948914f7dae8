# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Vultr API - Async Python client for the Vultr v2 API.

This library provides the dispatch core shared by every Vultr resource, plus
handlers built on top of it.

Key Features:
    - One dispatcher for every endpoint: request building, bearer
      authentication, status classification and response decoding
    - Automatic retries with exponential backoff for HTTP 429 only,
      honoring Retry-After
    - Per-call cancellation and deadlines through CallContext
    - Partial-update bodies that distinguish unset, empty and null fields
    - Cursor pagination via Meta and ListOptions
    - Optional Prometheus metrics

Quick Start:
    >>> from vultr_api import CallContext, DBListOptions, create_client
    >>>
    >>> async with create_client("my-api-key") as client:
    ...     ctx = CallContext.with_timeout(30.0)
    ...     databases, meta = await client.database.list_databases(ctx=ctx)
    ...     while meta is not None and meta.has_next:
    ...         more, meta = await client.database.list_databases(
    ...             DBListOptions().with_cursor(meta.next_cursor), ctx=ctx
    ...         )

Main Exports:
    - VultrClient, create_client: Client facade
    - Dispatcher: Core dispatch component
    - ClientConfig, RetryConfig: Configuration options
    - CallContext: Cancellation and deadlines
    - DispatcherProtocol: Protocol for resource handlers

Version: 1.0.0
"""

__version__ = "1.0.0"

from .auth import BearerAuthenticator
from .client import VultrClient, create_client
from .config import ClientConfig, RetryConfig
from .context import CallContext
from .dispatcher import Dispatcher
from .exceptions import (
    APIError,
    CancellationError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    TransportError,
    VultrError,
)
from .observability import DispatchMetrics
from .protocols import DispatcherProtocol
from .resources.database import DatabaseService, DBListOptions
from .retry import RetryPolicy
from .types import (
    HTTPMethod,
    Links,
    ListOptions,
    Meta,
    Request,
    VultrModel,
)

__all__ = [
    # Exceptions
    "APIError",
    # Authentication
    "BearerAuthenticator",
    # Context
    "CallContext",
    "CancellationError",
    # Configuration
    "ClientConfig",
    "ConfigurationError",
    "DBListOptions",
    # Resources
    "DatabaseService",
    "DecodeError",
    # Dispatch
    "Dispatcher",
    # Protocols
    "DispatcherProtocol",
    # Observability
    "DispatchMetrics",
    # Types
    "HTTPMethod",
    "Links",
    "ListOptions",
    "Meta",
    "RateLimitError",
    "Request",
    "RetryConfig",
    "RetryPolicy",
    "TransportError",
    # Client
    "VultrClient",
    "VultrError",
    "VultrModel",
    "create_client",
]
