# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request types for dispatching API calls.

This module defines the immutable description of a single API call as handed
to the dispatcher by a resource handler.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class HTTPMethod(str, Enum):
    """HTTP verbs used by the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request:
    """
    A single API call, immutable once dispatched.

    Attributes:
        method: HTTP verb
        path: Resource path relative to the base URL, e.g. "/v2/databases"
        body: Optional request body; anything the codec can encode
            (a pydantic model, a dict or a list)
        params: Optional query parameters, already encoded as strings
    """

    method: HTTPMethod
    path: str
    body: Any = None
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.method, HTTPMethod):
            try:
                object.__setattr__(self, "method", HTTPMethod(str(self.method).upper()))
            except ValueError:
                raise ValueError(f"unsupported HTTP method: {self.method!r}") from None
        if not self.path.startswith("/") or "://" in self.path:
            raise ValueError(f"path must be relative to the base URL: {self.path!r}")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def has_body(self) -> bool:
        """Whether a body will be sent with this request."""
        return self.body is not None


__all__ = ["HTTPMethod", "Request"]
