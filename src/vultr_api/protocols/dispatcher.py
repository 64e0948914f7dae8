# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the dispatch capability consumed by resource handlers."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel
from typing_extensions import overload

if TYPE_CHECKING:
    from ..context import CallContext
    from ..types.request import HTTPMethod

ModelT = TypeVar("ModelT", bound=BaseModel)


@runtime_checkable
class DispatcherProtocol(Protocol):
    """
    Minimal protocol for issuing API calls.

    Resource handlers depend on this single capability and nothing else:
    they never touch the HTTP client, credentials or retry policy. Anything
    exposing a compatible ``dispatch`` coroutine (including a test double)
    can back a handler.

    Declaring a ``shape`` types the result as that envelope; omitting it
    types the result as None.
    """

    @overload
    async def dispatch(
        self,
        method: "HTTPMethod | str",
        path: str,
        body: Any = None,
        *,
        shape: type[ModelT],
        ctx: "CallContext | None" = None,
        params: Mapping[str, str] | None = None,
    ) -> ModelT: ...

    @overload
    async def dispatch(
        self,
        method: "HTTPMethod | str",
        path: str,
        body: Any = None,
        shape: None = None,
        ctx: "CallContext | None" = None,
        params: Mapping[str, str] | None = None,
    ) -> None: ...

    async def dispatch(
        self,
        method: "HTTPMethod | str",
        path: str,
        body: Any = None,
        shape: type[ModelT] | None = None,
        ctx: "CallContext | None" = None,
        params: Mapping[str, str] | None = None,
    ) -> ModelT | None:
        """
        Send one API call and decode its response.

        Args:
            method: HTTP verb
            path: Resource path relative to the base URL
            body: Optional request body
            shape: Envelope model (a pydantic BaseModel subclass) to decode
                the response into, or None
            ctx: Cancellation/deadline context for the call
            params: Optional query parameters

        Returns:
            The decoded envelope, or None when ``shape`` is None
        """
        ...
