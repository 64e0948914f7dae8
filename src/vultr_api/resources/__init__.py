# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Resource handlers.

Each handler is a thin layer over the dispatcher: it names the path, the
HTTP verb, the body and the envelope model, and returns the unwrapped result.
"""

from .base import ResourceService
from .database import DatabaseService

__all__ = ["DatabaseService", "ResourceService"]
