# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Retry policy for rate-limited API responses.

Only HTTP 429 is retried. The wait before each retry honors a provider
Retry-After hint when one is present, and otherwise follows capped
exponential backoff:

    delay = min(base_delay * backoff_base ** attempt + jitter, max_delay)

The policy itself is stateless and shared by all calls. Per-call progress
lives in a RetryState created for each dispatch and discarded when the call
resolves.
"""

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass

from ..config import RetryConfig
from ..context import CallContext
from .headers import RateLimitInfo

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = 429


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of consulting the policy after a failed attempt."""

    retry: bool
    wait: float = 0.0


@dataclass
class RetryState:
    """
    Progress of a single logical call through its retry budget.

    Attributes:
        max_retries: Retry budget for this call
        attempts: Requests sent so far (initial attempt included)
        last_message: Provider message of the most recent 429
        last_rate_limit: Rate limit headers of the most recent 429
    """

    max_retries: int
    attempts: int = 0
    last_message: str = ""
    last_rate_limit: RateLimitInfo | None = None

    @property
    def retries_made(self) -> int:
        return max(0, self.attempts - 1)

    @property
    def remaining(self) -> int:
        """Retries still available."""
        return max(0, self.max_retries - self.retries_made)

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def record_attempt(self) -> int:
        """Count a request about to be sent; returns its 0-based index."""
        self.attempts += 1
        return self.attempts - 1

    def record_rate_limit(self, message: str, info: RateLimitInfo) -> None:
        self.last_message = message
        self.last_rate_limit = info


class RetryPolicy:
    """
    Decides whether and when to retry a rate-limited response.

    Attributes:
        config: Retry budget and backoff parameters

    Example:
        >>> policy = RetryPolicy(RetryConfig(max_retries=2, jitter_ratio=0.0))
        >>> state = policy.new_state()
        >>> state.record_attempt()
        0
        >>> policy.should_retry(state, 429)
        RetryDecision(retry=True, wait=1.0)
        >>> policy.should_retry(state, 500)
        RetryDecision(retry=False, wait=0.0)
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        random_func: Callable[[], float] = random.random,
    ):
        self.config = config or RetryConfig()
        self._random = random_func

    @property
    def max_retries(self) -> int:
        return self.config.max_retries

    def new_state(self) -> RetryState:
        return RetryState(max_retries=self.config.max_retries)

    def should_retry(
        self,
        state: RetryState,
        status_code: int,
        retry_after: float | None = None,
    ) -> RetryDecision:
        """
        Decide whether to retry after the response to the latest attempt.

        Args:
            state: Progress of the call; its latest attempt produced the response
            status_code: HTTP status of the response
            retry_after: Provider Retry-After hint in seconds, if any

        Returns:
            RetryDecision; ``wait`` is meaningful only when ``retry`` is True
        """
        if status_code != RETRYABLE_STATUS:
            return RetryDecision(retry=False)
        if state.exhausted:
            logger.debug(
                f"Retry budget exhausted after {state.attempts} attempts "
                f"(max_retries={state.max_retries})"
            )
            return RetryDecision(retry=False)
        return RetryDecision(
            retry=True, wait=self.backoff_delay(state.retries_made, retry_after)
        )

    def backoff_delay(self, attempt: int, retry_after: float | None = None) -> float:
        """
        Calculate the wait before retrying ``attempt``.

        Args:
            attempt: 0-based index of the failed attempt
            retry_after: Provider hint in seconds; wins over computed backoff

        Returns:
            Delay in seconds, never above ``max_delay``
        """
        max_delay = self.config.max_delay

        if retry_after is not None and retry_after >= 0:
            delay = min(float(retry_after), max_delay)
            logger.debug(f"Honoring Retry-After for attempt {attempt}: {delay:.2f}s")
            return delay

        delay = self.config.base_delay * (self.config.backoff_base**attempt)
        delay = min(delay, max_delay)

        # Small jitter to prevent thundering herd
        if self.config.jitter_ratio > 0:
            delay += delay * self.config.jitter_ratio * self._random()
            delay = min(delay, max_delay)

        logger.debug(f"Calculated backoff for attempt {attempt}: {delay:.2f}s")
        return delay

    async def wait(self, delay: float, ctx: CallContext) -> None:
        """
        Sleep for ``delay`` seconds, interruptible by the call context.

        Raises:
            CancellationError: If ``ctx`` is cancelled or expires while waiting
        """
        if delay <= 0:
            ctx.check()
            return
        await ctx.sleep(delay)


__all__ = [
    "RETRYABLE_STATUS",
    "RetryDecision",
    "RetryPolicy",
    "RetryState",
]
