# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client facade.

VultrClient owns one Dispatcher and exposes the resource handlers bound to
it. The dispatcher holds only immutable configuration, so one client can
serve any number of concurrent calls.
"""

import logging
from types import TracebackType
from typing import Any

import httpx
from typing_extensions import Self

from .config import ClientConfig
from .dispatcher import Dispatcher
from .observability.metrics import DispatchMetrics
from .resources.database import DatabaseService
from .retry.policy import RetryPolicy

logger = logging.getLogger(__name__)


class VultrClient:
    """
    Entry point for the Vultr API.

    Attributes:
        config: Immutable client configuration
        dispatcher: Dispatcher shared by every resource handler
        database: Managed Database endpoints

    Example:
        >>> async with VultrClient(ClientConfig.from_env()) as client:
        ...     databases, meta = await client.database.list_databases()
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
        retry_policy: RetryPolicy | None = None,
        metrics: DispatchMetrics | None = None,
    ):
        self.config = config
        self.dispatcher = Dispatcher(
            config,
            transport=transport,
            http_client=http_client,
            retry_policy=retry_policy,
            metrics=metrics,
        )
        self.database = DatabaseService(self.dispatcher)
        logger.debug(f"Vultr client created for {self.dispatcher.base_url}")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.dispatcher.aclose()


def create_client(
    api_key: str | None = None,
    config: ClientConfig | None = None,
    **kwargs: Any,
) -> VultrClient:
    """
    Factory function to create a VultrClient.

    Args:
        api_key: API key. If None, the configuration is read from the
            environment (VULTR_API_KEY, VULTR_BASE_URL)
        config: Complete configuration; takes precedence over ``api_key``
        **kwargs: Additional arguments passed to VultrClient (transport,
            http_client, retry_policy, metrics)

    Returns:
        Configured VultrClient instance

    Raises:
        ConfigurationError: If no usable credential is available
    """
    if config is None:
        config = ClientConfig(api_key=api_key) if api_key is not None else ClientConfig.from_env()
    return VultrClient(config, **kwargs)


__all__ = ["VultrClient", "create_client"]
