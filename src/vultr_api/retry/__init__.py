# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Rate limit handling and retry policy.

Exported classes:
    RetryPolicy: Decides whether a response is retried and how long to wait.
    RetryDecision: Result of a retry decision.
    RetryState: Per-call attempt counter and backoff bookkeeping.
    RateLimitInfo: Rate limit data parsed from response headers.
"""

from .headers import RateLimitInfo, parse_rate_limit_headers, parse_retry_after
from .policy import RETRYABLE_STATUS, RetryDecision, RetryPolicy, RetryState

__all__ = [
    "RETRYABLE_STATUS",
    "RateLimitInfo",
    "RetryDecision",
    "RetryPolicy",
    "RetryState",
    "parse_rate_limit_headers",
    "parse_retry_after",
]
