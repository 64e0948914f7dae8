# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable components.

Available protocols:
- DispatcherProtocol: The dispatch capability resource handlers depend on
"""

from .dispatcher import DispatcherProtocol

__all__ = ["DispatcherProtocol"]
