"""Unit tests for protocol conformance."""

from typing import TypeVar

import pytest
from typing_extensions import get_overloads

from vultr_api.config import ClientConfig
from vultr_api.dispatcher import Dispatcher
from vultr_api.protocols import DispatcherProtocol


class FakeDispatcher:
    """Minimal stand-in exposing only dispatch()."""

    async def dispatch(self, method, path, body=None, shape=None, ctx=None, params=None):
        return None


class TestDispatcherProtocol:
    """Tests for DispatcherProtocol runtime checks."""

    @pytest.mark.asyncio
    async def test_dispatcher_conforms(self):
        dispatcher = Dispatcher(ClientConfig(api_key="key"))
        try:
            assert isinstance(dispatcher, DispatcherProtocol)
        finally:
            await dispatcher.aclose()

    def test_fake_conforms(self):
        assert isinstance(FakeDispatcher(), DispatcherProtocol)

    def test_object_without_dispatch_does_not_conform(self):
        assert not isinstance(object(), DispatcherProtocol)


class TestTypedResults:
    """A shape yields its model type; no shape yields None."""

    @pytest.mark.parametrize(
        "func",
        [Dispatcher.dispatch, Dispatcher.dispatch_request, DispatcherProtocol.dispatch],
    )
    def test_shape_and_no_shape_overloads(self, func):
        overloads = get_overloads(func)
        assert len(overloads) == 2
        returns = {o.__annotations__["return"] for o in overloads}
        assert None in returns
        assert any(isinstance(r, TypeVar) for r in returns)
