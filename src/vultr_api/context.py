# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Per-call cancellation and deadline token.

A CallContext is threaded explicitly through Dispatcher.dispatch and the
retry backoff. Every suspension point of a call (the HTTP round trip and
any backoff sleep) races against it, so cancelling the context or passing
its deadline aborts the call promptly with CancellationError instead of
waiting for the network or the sleep to finish.

Usage:
    ctx = CallContext.with_timeout(10.0)
    database = await client.database.get(database_id, ctx=ctx)

    # from another coroutine on the same event loop
    ctx.cancel()

Thread Safety:
    cancel() must be called from the event loop thread running the call.
    Use loop.call_soon_threadsafe(ctx.cancel) from other threads.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable
from typing import Any, TypeVar

from .exceptions import CancellationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

REASON_CANCELLED = "cancelled"
REASON_DEADLINE = "deadline_exceeded"


class CallContext:
    """
    Cancellation token with an optional monotonic deadline.

    Attributes:
        deadline: Absolute time.monotonic() value after which the call fails,
            or None for no deadline
    """

    def __init__(self, deadline: float | None = None) -> None:
        self.deadline = deadline
        self._cancel_event = asyncio.Event()
        self._cancel_reason: str | None = None

    @classmethod
    def background(cls) -> "CallContext":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CallContext":
        """A context whose deadline is ``seconds`` from now."""
        if seconds < 0:
            raise ValueError("timeout must be non-negative")
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self, reason: str = REASON_CANCELLED) -> None:
        """Cancel every pending and future operation bound to this context."""
        if self._cancel_reason is None:
            self._cancel_reason = reason
        self._cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None without a deadline."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def check(self) -> None:
        """Raise CancellationError if the context is already done."""
        if self.cancelled:
            raise self._error(self._cancel_reason or REASON_CANCELLED)
        if self.expired:
            raise self._error(REASON_DEADLINE)

    async def run(self, awaitable: Awaitable[T]) -> T:
        """
        Await ``awaitable`` unless the context is cancelled or expires first.

        The losing operation is cancelled. Cancellation of the enclosing
        asyncio task is propagated unchanged.

        Raises:
            CancellationError: If the context finished before the awaitable
        """
        if self.cancelled or self.expired:
            close = getattr(awaitable, "close", None)
            if close is not None:
                close()
            self.check()

        operation = asyncio.ensure_future(awaitable)
        waiter = asyncio.ensure_future(self._cancel_event.wait())
        try:
            done, _ = await asyncio.wait(
                {operation, waiter},
                timeout=self.remaining(),
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            operation.cancel()
            waiter.cancel()
            raise

        if operation in done:
            waiter.cancel()
            return operation.result()

        waiter.cancel()
        operation.cancel()
        operation.add_done_callback(_discard_result)
        reason = (
            (self._cancel_reason or REASON_CANCELLED)
            if self.cancelled
            else REASON_DEADLINE
        )
        logger.debug(f"Call context finished ({reason}), abandoning pending operation")
        raise self._error(reason)

    async def sleep(self, delay: float) -> None:
        """Sleep for ``delay`` seconds, waking early with CancellationError."""
        await self.run(asyncio.sleep(delay))

    @staticmethod
    def _error(reason: str) -> CancellationError:
        if reason == REASON_DEADLINE:
            return CancellationError("call deadline exceeded", reason=REASON_DEADLINE)
        return CancellationError("call cancelled", reason=reason)

    def __repr__(self) -> str:
        return (
            f"CallContext(deadline={self.deadline!r}, cancelled={self.cancelled}, "
            f"remaining={self.remaining()!r})"
        )


def _discard_result(task: "asyncio.Future[Any]") -> None:
    # Outcome of an abandoned operation must still be retrieved.
    if not task.cancelled():
        task.exception()


__all__ = ["REASON_CANCELLED", "REASON_DEADLINE", "CallContext"]
