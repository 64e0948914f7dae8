# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Bearer token authentication for API requests."""

from collections.abc import Generator

import httpx

from .codec import JSON_CONTENT_TYPE
from .config import DEFAULT_USER_AGENT
from .exceptions import ConfigurationError


class BearerAuthenticator(httpx.Auth):
    """
    Attaches the API credential and standard headers to every request.

    Pure augmentation: nothing is read from or written to shared state, so a
    single instance serves concurrent calls.

    Headers added:
        Authorization: Bearer <api_key>
        Accept: application/json
        User-Agent: <user_agent>
        Content-Type: application/json (only when the request has a body)
    """

    def __init__(self, api_key: str, user_agent: str = DEFAULT_USER_AGENT):
        if not api_key or not api_key.strip():
            raise ConfigurationError("api_key must be set")
        self._api_key = api_key
        self.user_agent = user_agent

    def attach(self, request: httpx.Request) -> httpx.Request:
        """Add authentication and content headers to ``request``."""
        request.headers["Authorization"] = f"Bearer {self._api_key}"
        request.headers["Accept"] = JSON_CONTENT_TYPE
        request.headers["User-Agent"] = self.user_agent
        if request.content:
            request.headers["Content-Type"] = JSON_CONTENT_TYPE
        return request

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        yield self.attach(request)

    def __repr__(self) -> str:
        return f"BearerAuthenticator(user_agent={self.user_agent!r})"


__all__ = ["BearerAuthenticator"]
