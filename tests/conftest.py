"""Shared fixtures for the Vultr API unit tests."""

from __future__ import annotations

import httpx
import pytest
from mock_api import API_KEY, BASE_URL, MockAPI

from vultr_api.config import ClientConfig, RetryConfig
from vultr_api.dispatcher import Dispatcher


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def retry_config() -> RetryConfig:
    """Fast, deterministic backoff."""
    return RetryConfig(max_retries=3, base_delay=0.01, max_delay=0.05, jitter_ratio=0.0)


@pytest.fixture
def config(retry_config: RetryConfig) -> ClientConfig:
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL, retry=retry_config)


@pytest.fixture
async def dispatcher(config: ClientConfig, api: MockAPI):
    dispatcher = Dispatcher(config, transport=httpx.MockTransport(api))
    yield dispatcher
    await dispatcher.aclose()
