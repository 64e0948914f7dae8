# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Prometheus metrics for API dispatch.

DispatchMetrics owns one set of Prometheus collectors registered on a
CollectorRegistry chosen by the caller. There is no module-level instance:
create one, pass it to the Dispatcher, and expose the registry however the
application already exposes Prometheus metrics.

Usage:
    >>> from prometheus_client import CollectorRegistry
    >>> registry = CollectorRegistry()
    >>> metrics = DispatchMetrics(registry=registry)
    >>> dispatcher = Dispatcher(config, metrics=metrics)

Metrics:
    - vultr_api_requests_total{method,status}: responses received
    - vultr_api_retries_total{method}: 429 retries scheduled
    - vultr_api_request_errors_total{method,kind}: calls ending in an error
    - vultr_api_request_duration_seconds{method}: logical call duration
"""

import logging

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

from .constants import (
    LATENCY_BUCKETS,
    REQUEST_DURATION_SECONDS,
    REQUEST_ERRORS_TOTAL,
    REQUESTS_TOTAL,
    RETRIES_TOTAL,
)

logger = logging.getLogger(__name__)


class DispatchMetrics:
    """
    Prometheus counters and histogram for dispatcher calls.

    Thread Safety:
        prometheus_client collectors are thread-safe; a single instance may
        be shared by concurrent calls.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """
        Initialize dispatch metrics.

        Args:
            registry: CollectorRegistry to register on. Defaults to the
                global prometheus_client REGISTRY; pass a dedicated registry
                when more than one DispatchMetrics lives in a process.
        """
        self.registry = registry if registry is not None else REGISTRY

        self.requests = Counter(
            REQUESTS_TOTAL,
            "HTTP responses received from the API",
            ["method", "status"],
            registry=self.registry,
        )

        self.retries = Counter(
            RETRIES_TOTAL,
            "Retries scheduled after HTTP 429",
            ["method"],
            registry=self.registry,
        )

        self.errors = Counter(
            REQUEST_ERRORS_TOTAL,
            "API calls that ended in an error",
            ["method", "kind"],  # Values: transport, api, rate_limit, decode, cancelled
            registry=self.registry,
        )

        self.duration = Histogram(
            REQUEST_DURATION_SECONDS,
            "Duration of a logical API call including retries",
            ["method"],
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )

        logger.info("Prometheus dispatch metrics initialized")

    def observe_response(self, method: str, status_code: int) -> None:
        self.requests.labels(method=method, status=str(status_code)).inc()

    def observe_retry(self, method: str) -> None:
        self.retries.labels(method=method).inc()

    def observe_error(self, method: str, kind: str) -> None:
        self.errors.labels(method=method, kind=kind).inc()

    def observe_duration(self, method: str, seconds: float) -> None:
        self.duration.labels(method=method).observe(seconds)


__all__ = ["DispatchMetrics"]
