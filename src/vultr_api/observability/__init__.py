# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the Vultr API client.

Classes:
    DispatchMetrics: Prometheus collectors for dispatcher calls.

Constants:
    Metric names and label values from the constants module.
"""

from .constants import (
    ERROR_KIND_API,
    ERROR_KIND_CANCELLED,
    ERROR_KIND_DECODE,
    ERROR_KIND_RATE_LIMIT,
    ERROR_KIND_TRANSPORT,
    LATENCY_BUCKETS,
    METRIC_PREFIX,
    REQUEST_DURATION_SECONDS,
    REQUEST_ERRORS_TOTAL,
    REQUESTS_TOTAL,
    RETRIES_TOTAL,
)
from .metrics import DispatchMetrics

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
    # Collectors
    "DispatchMetrics",
]
