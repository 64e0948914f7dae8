# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request dispatcher for the Vultr API.

The Dispatcher is the single component that talks to the network. Given a
method, a path, an optional body and the envelope model the caller expects,
it:

1. builds the full request (base URL + path + query) and encodes the body
2. attaches credentials through the BearerAuthenticator
3. performs the round trip, racing it against the call's CallContext
4. classifies the response status:
   - 2xx: decode the body into the expected envelope
   - 429: consult the RetryPolicy, back off and retry within the budget
   - anything else: raise APIError, never retried

Transport failures (connection refused, DNS, timeouts) raise TransportError
immediately. Only immutable configuration is shared between calls, so a
single Dispatcher may serve any number of concurrent calls.
"""

import logging
import time
from collections.abc import Mapping
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from typing_extensions import Self, overload

from .auth import BearerAuthenticator
from .codec import decode, decode_error, encode
from .config import ClientConfig
from .context import CallContext
from .exceptions import (
    APIError,
    CancellationError,
    ConfigurationError,
    DecodeError,
    RateLimitError,
    TransportError,
    VultrError,
)
from .observability.constants import (
    ERROR_KIND_API,
    ERROR_KIND_CANCELLED,
    ERROR_KIND_DECODE,
    ERROR_KIND_RATE_LIMIT,
    ERROR_KIND_TRANSPORT,
)
from .observability.metrics import DispatchMetrics
from .retry.headers import parse_rate_limit_headers
from .retry.policy import RETRYABLE_STATUS, RetryPolicy, RetryState
from .types.request import HTTPMethod, Request

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Dispatcher:
    """
    Builds, sends and classifies API requests.

    Attributes:
        config: Immutable client configuration
        authenticator: Attaches the bearer credential to each request
        retry_policy: Decides retries for HTTP 429
        metrics: Optional Prometheus metrics

    Example:
        >>> async with Dispatcher(ClientConfig(api_key="...")) as dispatcher:
        ...     envelope = await dispatcher.dispatch(
        ...         "GET", "/v2/databases/abc", shape=DatabaseEnvelope
        ...     )
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
        retry_policy: RetryPolicy | None = None,
        metrics: DispatchMetrics | None = None,
    ):
        """
        Initialize the Dispatcher.

        Args:
            config: Client configuration (credential, base URL, timeouts, retry)
            transport: Optional httpx transport for a dispatcher-owned client.
                Use it to share connection pools or to stub the wire in tests.
            http_client: Optional caller-owned httpx.AsyncClient. It is used
                as is and never closed by the dispatcher.
            retry_policy: Optional policy overriding ``config.retry``
            metrics: Optional Prometheus metrics sink

        Raises:
            ConfigurationError: If both ``transport`` and ``http_client`` are
                given, or the credential is empty
        """
        if transport is not None and http_client is not None:
            raise ConfigurationError("pass either transport or http_client, not both")

        self.config = config
        self.authenticator = BearerAuthenticator(config.api_key, config.user_agent)
        self.retry_policy = retry_policy or RetryPolicy(config.retry)
        self.metrics = metrics
        self._base_url = config.base_url.rstrip("/")

        if http_client is None:
            self._client = httpx.AsyncClient(
                transport=transport,
                timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
                follow_redirects=False,
            )
            self._owns_client = True
        else:
            self._client = http_client
            self._owns_client = False

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this dispatcher created it."""
        if self._owns_client:
            await self._client.aclose()

    @overload
    async def dispatch(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Any = None,
        *,
        shape: type[ModelT],
        ctx: CallContext | None = None,
        params: Mapping[str, str] | None = None,
    ) -> ModelT: ...

    @overload
    async def dispatch(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Any = None,
        shape: None = None,
        ctx: CallContext | None = None,
        params: Mapping[str, str] | None = None,
    ) -> None: ...

    async def dispatch(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Any = None,
        shape: type[ModelT] | None = None,
        ctx: CallContext | None = None,
        params: Mapping[str, str] | None = None,
    ) -> ModelT | None:
        """
        Send one API call and decode its response.

        Args:
            method: HTTP verb
            path: Resource path relative to the base URL, e.g. "/v2/databases"
            body: Optional request body (pydantic model, dict or list)
            shape: Envelope model (a pydantic BaseModel subclass) declared by
                the handler, or None when the endpoint returns no payload
            ctx: Cancellation/deadline context; defaults to one that never
                cancels
            params: Optional query parameters

        Returns:
            The decoded envelope, or None when ``shape`` is None

        Raises:
            TypeError: ``shape`` is not a BaseModel subclass
            TransportError: The round trip failed
            CancellationError: ``ctx`` was cancelled or its deadline passed
            RateLimitError: HTTP 429 persisted past the retry budget
            APIError: Any other non-2xx status
            DecodeError: A 2xx body did not match ``shape``
        """
        request = Request(
            method=HTTPMethod(method.upper()),
            path=path,
            body=body,
            params=params or {},
        )
        return await self.dispatch_request(request, shape=shape, ctx=ctx)

    @overload
    async def dispatch_request(
        self,
        request: Request,
        shape: type[ModelT],
        ctx: CallContext | None = None,
    ) -> ModelT: ...

    @overload
    async def dispatch_request(
        self,
        request: Request,
        shape: None = None,
        ctx: CallContext | None = None,
    ) -> None: ...

    async def dispatch_request(
        self,
        request: Request,
        shape: type[ModelT] | None = None,
        ctx: CallContext | None = None,
    ) -> ModelT | None:
        """Dispatch a prebuilt Request. See dispatch() for semantics."""
        if shape is not None and not (isinstance(shape, type) and issubclass(shape, BaseModel)):
            raise TypeError(f"shape must be a pydantic BaseModel subclass, got {shape!r}")

        ctx = ctx if ctx is not None else CallContext.background()
        method = request.method.value
        started = time.monotonic()
        try:
            return await self._execute(request, shape, ctx)
        except VultrError as e:
            if self.metrics is not None:
                self.metrics.observe_error(method, _error_kind(e))
            raise
        finally:
            if self.metrics is not None:
                self.metrics.observe_duration(method, time.monotonic() - started)

    async def _execute(
        self,
        request: Request,
        shape: type[ModelT] | None,
        ctx: CallContext,
    ) -> ModelT | None:
        content = encode(request.body) if request.has_body else None
        url = f"{self._base_url}{request.path}"
        method = request.method.value
        state = self.retry_policy.new_state()

        while True:
            ctx.check()
            attempt = state.record_attempt()
            http_request = self._client.build_request(
                method,
                url,
                content=content,
                params=dict(request.params) if request.params else None,
            )
            logger.debug(f"{method} {request.path} (attempt {attempt + 1})")

            response = await self._send(http_request, ctx)
            status = response.status_code
            if self.metrics is not None:
                self.metrics.observe_response(method, status)

            if response.is_success:
                return decode(response.content, shape, status_code=status)

            if status == RETRYABLE_STATUS:
                await self._handle_rate_limit(request, response, state, ctx)
                continue

            error = decode_error(response.content, status, response.reason_phrase)
            logger.debug(f"{method} {request.path} failed: {error}")
            raise error

    async def _send(self, http_request: httpx.Request, ctx: CallContext) -> httpx.Response:
        """Perform one round trip; the body is fully read before returning."""
        try:
            return await ctx.run(self._client.send(http_request, auth=self.authenticator))
        except httpx.TimeoutException as e:
            raise TransportError(
                f"timed out calling {http_request.method} {http_request.url}: {e}",
                method=http_request.method,
                url=str(http_request.url),
            ) from e
        except httpx.RequestError as e:
            raise TransportError(
                f"error calling {http_request.method} {http_request.url}: {e}",
                method=http_request.method,
                url=str(http_request.url),
            ) from e

    async def _handle_rate_limit(
        self,
        request: Request,
        response: httpx.Response,
        state: RetryState,
        ctx: CallContext,
    ) -> None:
        """Record a 429, then either wait for the next attempt or raise."""
        info = parse_rate_limit_headers(response.headers)
        message = decode_error(
            response.content, response.status_code, response.reason_phrase
        ).message
        state.record_rate_limit(message, info)

        decision = self.retry_policy.should_retry(state, response.status_code, info.retry_after)
        if not decision.retry:
            raise RateLimitError(
                state.last_message,
                attempts=state.attempts,
                status_code=response.status_code,
                rate_limit=state.last_rate_limit,
            )

        logger.debug(
            f"{request.method.value} {request.path} rate limited ({info}), retrying in "
            f"{decision.wait:.2f}s ({state.remaining} retries left)"
        )
        if self.metrics is not None:
            self.metrics.observe_retry(request.method.value)
        await self.retry_policy.wait(decision.wait, ctx)


def _error_kind(error: VultrError) -> str:
    if isinstance(error, RateLimitError):
        return ERROR_KIND_RATE_LIMIT
    if isinstance(error, APIError):
        return ERROR_KIND_API
    if isinstance(error, DecodeError):
        return ERROR_KIND_DECODE
    if isinstance(error, CancellationError):
        return ERROR_KIND_CANCELLED
    if isinstance(error, TransportError):
        return ERROR_KIND_TRANSPORT
    return type(error).__name__.lower()


__all__ = ["Dispatcher"]
