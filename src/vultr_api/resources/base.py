# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Shared plumbing for resource handlers."""

from urllib.parse import quote

from ..protocols.dispatcher import DispatcherProtocol


class ResourceService:
    """
    Base class for resource handlers.

    A handler only knows its path prefix and the DispatcherProtocol it was
    given. Each method supplies a URL, a verb, an optional body and the
    envelope model to decode; networking, authentication, retries and error
    classification all happen in the dispatcher.
    """

    base_path: str = ""

    def __init__(self, dispatcher: DispatcherProtocol):
        self._dispatcher = dispatcher

    def _path(self, *segments: str) -> str:
        """Join ``base_path`` with URL-quoted path segments."""
        parts = [self.base_path.rstrip("/")]
        parts.extend(quote(str(segment), safe="") for segment in segments)
        return "/".join(parts)


__all__ = ["ResourceService"]
