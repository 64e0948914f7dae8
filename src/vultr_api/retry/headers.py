# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Rate limit header parsing for API responses."""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timezone
from email.utils import parsedate_to_datetime

logger = logging.getLogger(__name__)

RETRY_AFTER = "retry-after"
LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate limit state reported on an API response."""

    limit: int | None = None
    remaining: int | None = None
    reset: float | None = None  # Unix timestamp
    retry_after: float | None = None  # Seconds

    def __str__(self) -> str:
        return (
            f"limit={self.limit} remaining={self.remaining} "
            f"reset={self.reset} retry_after={self.retry_after}"
        )


def parse_rate_limit_headers(headers: Mapping[str, str]) -> RateLimitInfo:
    """
    Parse rate limit information from HTTP response headers.

    This is the only place response headers are interpreted for rate
    limiting. Malformed values are logged and treated as absent.

    Args:
        headers: Response headers. Matching is case-insensitive.

    Returns:
        RateLimitInfo with None for every value the response did not carry
    """
    lowered = {k.lower(): v for k, v in headers.items()}

    return RateLimitInfo(
        limit=_parse_int(lowered, LIMIT_HEADER),
        remaining=_parse_int(lowered, REMAINING_HEADER),
        reset=_parse_float(lowered, RESET_HEADER),
        retry_after=parse_retry_after(lowered.get(RETRY_AFTER)),
    )


def parse_retry_after(value: str | None, now: float | None = None) -> float | None:
    """
    Parse a Retry-After value into seconds from now.

    Accepts delta-seconds ("2", "1.5") and HTTP-dates
    ("Wed, 21 Oct 2015 07:28:00 GMT"). Dates in the past yield 0.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None

    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        if seconds < 0:
            logger.warning(f"Ignoring negative Retry-After header: {value}")
            return None
        return seconds

    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid Retry-After header: {value}")
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    current = now if now is not None else time.time()
    return max(0.0, when.timestamp() - current)


def _parse_int(headers: Mapping[str, str], name: str) -> int | None:
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} header: {raw}")
        return None


def _parse_float(headers: Mapping[str, str], name: str) -> float | None:
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        logger.warning(f"Invalid {name} header: {raw}")
        return None


__all__ = [
    "RETRY_AFTER",
    "RateLimitInfo",
    "parse_rate_limit_headers",
    "parse_retry_after",
]
