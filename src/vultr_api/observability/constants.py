# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `vultr_api_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`

Label Best Practices:
    Labels are restricted to bounded values:
    - `method` - HTTP verb (GET, POST, ...)
    - `status` - HTTP status code as a string
    - `kind` - Error class (transport, api, rate_limit, decode, cancelled)

    NEVER label with resource paths or identifiers; they are unbounded.
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "vultr_api"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Dispatch Metrics (dispatcher.py)
# =============================================================================

REQUESTS_TOTAL = f"{METRIC_PREFIX}_requests_total"
"""HTTP responses received, by method and status code."""

RETRIES_TOTAL = f"{METRIC_PREFIX}_retries_total"
"""Retries scheduled after a 429 response."""

REQUEST_ERRORS_TOTAL = f"{METRIC_PREFIX}_request_errors_total"
"""Calls that ended in an error, by error kind."""

REQUEST_DURATION_SECONDS = f"{METRIC_PREFIX}_request_duration_seconds"
"""Duration of a logical call, retries and backoff included."""


# =============================================================================
# Error kinds (label values for REQUEST_ERRORS_TOTAL)
# =============================================================================

ERROR_KIND_TRANSPORT = "transport"
ERROR_KIND_API = "api"
ERROR_KIND_RATE_LIMIT = "rate_limit"
ERROR_KIND_DECODE = "decode"
ERROR_KIND_CANCELLED = "cancelled"


# =============================================================================
# Histogram Buckets
# =============================================================================

LATENCY_BUCKETS: list[float] = [
    0.05,
    0.1,
    0.25,
    0.5,
    1.0,
    2.5,
    5.0,
    10.0,
    30.0,
    60.0,
    120.0,
]
"""Call latency buckets in seconds. Upper range covers rate limit backoff."""


__all__ = [
    "ERROR_KIND_API",
    "ERROR_KIND_CANCELLED",
    "ERROR_KIND_DECODE",
    "ERROR_KIND_RATE_LIMIT",
    "ERROR_KIND_TRANSPORT",
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "REQUESTS_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_ERRORS_TOTAL",
    "RETRIES_TOTAL",
]
