# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions shared by the dispatcher and resource handlers."""

from .model import MessageEnvelope, VultrModel
from .pagination import Links, ListOptions, Meta
from .request import HTTPMethod, Request

__all__ = [
    # Request description
    "HTTPMethod",
    # Pagination
    "Links",
    "ListOptions",
    "Meta",
    "MessageEnvelope",
    "Request",
    # Wire model base
    "VultrModel",
]
