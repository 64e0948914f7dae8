"""
Unit tests for the Managed Database handler.

Most tests run the handler against a recording dispatcher double and check
the path, verb, body and envelope each method hands over. A few run end to
end through a real Dispatcher on httpx.MockTransport.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from vultr_api.config import ClientConfig
from vultr_api.dispatcher import Dispatcher
from vultr_api.exceptions import APIError
from vultr_api.resources.database import DatabaseService, DBListOptions
from vultr_api.resources.database.models import (
    DatabaseAdvancedOptions,
    DatabaseAdvancedOptionsEnvelope,
    DatabaseBackups,
    DatabaseConnectionPoolCreateReq,
    DatabaseConnectionPoolsEnvelope,
    DatabaseCreateReq,
    DatabaseEnvelope,
    DatabaseListAlertsReq,
    DatabasePlansEnvelope,
    DatabasesEnvelope,
    DatabaseUpdateReq,
    DatabaseUserEnvelope,
    DatabaseUserUpdateReq,
    DatabaseVersionUpgradeReq,
)
from vultr_api.types import MessageEnvelope, Meta

from mock_api import MockAPI

DATABASE = {
    "id": "dbaas-1",
    "date_created": "2026-01-02 03:04:05",
    "plan": "vultr-dbaas-startup-cc-1-55-2",
    "region": "ewr",
    "status": "Running",
    "label": "prod",
    "database_engine": "pg",
    "database_engine_version": "16",
    "trusted_ips": ["10.0.0.0/8"],
}


class RecordingDispatcher:
    """Dispatcher double: records each call and replies with a canned payload."""

    def __init__(self, payload: dict[str, Any] | None = None) -> None:
        self.payload = payload
        self.calls: list[dict[str, Any]] = []

    async def dispatch(self, method, path, body=None, shape=None, ctx=None, params=None):
        self.calls.append(
            {"method": method, "path": path, "body": body, "shape": shape, "params": params}
        )
        if shape is None:
            return None
        return shape.model_validate(self.payload)

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


class TestDatabaseCrud:
    """Create, read, update, delete and list."""

    @pytest.mark.asyncio
    async def test_get(self):
        dispatcher = RecordingDispatcher({"database": DATABASE})

        database = await DatabaseService(dispatcher).get("dbaas-1")

        assert database.id == "dbaas-1"
        assert database.trusted_ips == ["10.0.0.0/8"]
        assert dispatcher.last["method"] == "GET"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1"
        assert dispatcher.last["shape"] is DatabaseEnvelope

    @pytest.mark.asyncio
    async def test_create(self):
        dispatcher = RecordingDispatcher({"database": DATABASE})
        request = DatabaseCreateReq(
            database_engine="pg", database_engine_version="16", region="ewr", plan="p"
        )

        await DatabaseService(dispatcher).create(request)

        assert dispatcher.last["method"] == "POST"
        assert dispatcher.last["path"] == "/v2/databases"
        assert dispatcher.last["body"] is request

    @pytest.mark.asyncio
    async def test_update(self):
        dispatcher = RecordingDispatcher({"database": DATABASE})

        await DatabaseService(dispatcher).update("dbaas-1", DatabaseUpdateReq(label="new"))

        assert dispatcher.last["method"] == "PUT"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1"

    @pytest.mark.asyncio
    async def test_delete(self):
        dispatcher = RecordingDispatcher()

        assert await DatabaseService(dispatcher).delete("dbaas-1") is None
        assert dispatcher.last["method"] == "DELETE"
        assert dispatcher.last["shape"] is None

    @pytest.mark.asyncio
    async def test_list_with_options(self):
        dispatcher = RecordingDispatcher(
            {
                "databases": [DATABASE],
                "meta": {"total": 2, "links": {"next": "cursor-A", "prev": ""}},
            }
        )

        databases, meta = await DatabaseService(dispatcher).list_databases(
            DBListOptions(per_page=1, region="ewr")
        )

        assert [d.id for d in databases] == ["dbaas-1"]
        assert isinstance(meta, Meta)
        assert meta.next_cursor == "cursor-A"
        assert dispatcher.last["shape"] is DatabasesEnvelope
        assert dispatcher.last["params"] == {"per_page": "1", "region": "ewr"}

    @pytest.mark.asyncio
    async def test_list_plans(self):
        dispatcher = RecordingDispatcher(
            {
                "plans": [
                    {
                        "id": "vultr-dbaas-hobbyist-cc-1-25-1",
                        "number_of_nodes": 1,
                        "vcpu_count": 1,
                        "ram": 1024,
                        "supported_engines": {"mysql": True, "pg": True, "redis": True},
                        "locations": ["ewr"],
                    }
                ],
                "meta": {"total": 1, "links": {"next": "", "prev": ""}},
            }
        )

        plans, meta = await DatabaseService(dispatcher).list_plans()

        assert plans[0].supported_engines.pg is True
        assert meta is not None and not meta.has_next
        assert dispatcher.last["path"] == "/v2/databases/plans"
        assert dispatcher.last["shape"] is DatabasePlansEnvelope
        assert dispatcher.last["params"] == {}


class TestDatabaseSubResources:
    """Users, connection pools, options and actions."""

    @pytest.mark.asyncio
    async def test_update_user_quotes_username(self):
        dispatcher = RecordingDispatcher({"user": {"username": "a/b", "password": "pw"}})

        user = await DatabaseService(dispatcher).update_user(
            "dbaas-1", "a/b", DatabaseUserUpdateReq(password="pw")
        )

        assert user.password == "pw"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/users/a%2Fb"
        assert dispatcher.last["shape"] is DatabaseUserEnvelope

    @pytest.mark.asyncio
    async def test_start_maintenance_returns_message(self):
        dispatcher = RecordingDispatcher({"message": "Maintenance started"})

        message = await DatabaseService(dispatcher).start_maintenance("dbaas-1")

        assert message == "Maintenance started"
        assert dispatcher.last["method"] == "POST"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/maintenance"
        assert dispatcher.last["shape"] is MessageEnvelope

    @pytest.mark.asyncio
    async def test_list_service_alerts(self):
        dispatcher = RecordingDispatcher(
            {"alerts": [{"timestamp": "t", "message_type": "info", "description": "d"}]}
        )

        alerts = await DatabaseService(dispatcher).list_service_alerts(
            "dbaas-1", DatabaseListAlertsReq(period="day")
        )

        assert alerts[0].message_type == "info"
        assert dispatcher.last["method"] == "POST"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/alerts"

    @pytest.mark.asyncio
    async def test_backup_information_is_unwrapped(self):
        dispatcher = RecordingDispatcher(
            {
                "latest_backup": {"date": "2026-01-02", "time": "03:00:00"},
                "oldest_backup": {"date": "2025-12-26", "time": "03:00:00"},
            }
        )

        backups = await DatabaseService(dispatcher).get_backup_information("dbaas-1")

        assert isinstance(backups, DatabaseBackups)
        assert backups.latest_backup.date == "2026-01-02"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/backups"

    @pytest.mark.asyncio
    async def test_list_connection_pools(self):
        dispatcher = RecordingDispatcher(
            {
                "connections": {"used": 5, "available": 95, "max": 100},
                "connection_pools": [
                    {"name": "pool", "database": "defaultdb", "mode": "transaction", "size": 5}
                ],
                "meta": {"total": 1, "links": {"next": "", "prev": ""}},
            }
        )

        connections, pools, meta = await DatabaseService(dispatcher).list_connection_pools(
            "dbaas-1"
        )

        assert connections is not None and connections.available == 95
        assert pools[0].name == "pool"
        assert meta is not None and meta.total == 1
        assert dispatcher.last["shape"] is DatabaseConnectionPoolsEnvelope

    @pytest.mark.asyncio
    async def test_create_connection_pool(self):
        dispatcher = RecordingDispatcher({"connection_pool": {"name": "pool"}})
        request = DatabaseConnectionPoolCreateReq(name="pool", size=5)

        pool = await DatabaseService(dispatcher).create_connection_pool("dbaas-1", request)

        assert pool.name == "pool"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/connection-pools"

    @pytest.mark.asyncio
    async def test_update_advanced_options(self):
        dispatcher = RecordingDispatcher(
            {
                "configured_options": {"jit": True, "pg_stat_statements.track": "all"},
                "available_options": [{"name": "jit", "type": "boolean"}],
            }
        )

        configured, available = await DatabaseService(dispatcher).update_advanced_options(
            "dbaas-1", DatabaseAdvancedOptions(jit=True)
        )

        assert configured.jit is True
        assert configured.pg_stat_statements_track == "all"
        assert available[0].name == "jit"
        assert dispatcher.last["method"] == "PUT"
        assert dispatcher.last["shape"] is DatabaseAdvancedOptionsEnvelope

    @pytest.mark.asyncio
    async def test_version_upgrade(self):
        dispatcher = RecordingDispatcher({"message": "Upgrade started"})

        message = await DatabaseService(dispatcher).start_version_upgrade(
            "dbaas-1", DatabaseVersionUpgradeReq(version="17")
        )

        assert message == "Upgrade started"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/version-upgrade"

    @pytest.mark.asyncio
    async def test_detach_migration(self):
        dispatcher = RecordingDispatcher()

        await DatabaseService(dispatcher).detach_migration("dbaas-1")

        assert dispatcher.last["method"] == "DELETE"
        assert dispatcher.last["path"] == "/v2/databases/dbaas-1/migration"


class TestDatabaseEndToEnd:
    """The handler through a real Dispatcher and stubbed wire."""

    @pytest.mark.asyncio
    async def test_update_sends_partial_body(self, config: ClientConfig, api: MockAPI):
        api.respond(202, json={"database": {**DATABASE, "label": ""}})

        async with Dispatcher(config, transport=httpx.MockTransport(api)) as dispatcher:
            database = await DatabaseService(dispatcher).update(
                "dbaas-1", DatabaseUpdateReq(label="", trusted_ips=[])
            )

        assert database.label == ""
        assert json.loads(api.last_request.content) == {"label": "", "trusted_ips": []}

    @pytest.mark.asyncio
    async def test_walk_all_pages(self, config: ClientConfig, api: MockAPI):
        api.respond(
            200,
            json={
                "databases": [{"id": "a"}],
                "meta": {"total": 2, "links": {"next": "cursor-A", "prev": ""}},
            },
        )
        api.respond(
            200,
            json={
                "databases": [{"id": "b"}],
                "meta": {"total": 2, "links": {"next": "", "prev": "cursor-P"}},
            },
        )

        collected = []
        async with Dispatcher(config, transport=httpx.MockTransport(api)) as dispatcher:
            service = DatabaseService(dispatcher)
            options = DBListOptions(per_page=1)
            while True:
                databases, meta = await service.list_databases(options)
                collected.extend(d.id for d in databases)
                if meta is None or meta.next_cursor is None:
                    break
                options = options.with_cursor(meta.next_cursor)

        assert collected == ["a", "b"]
        assert api.requests[1].url.params["cursor"] == "cursor-A"

    @pytest.mark.asyncio
    async def test_not_found(self, config: ClientConfig, api: MockAPI):
        api.respond(404, json={"error": "Invalid database", "status": 404})

        async with Dispatcher(config, transport=httpx.MockTransport(api)) as dispatcher:
            with pytest.raises(APIError) as exc_info:
                await DatabaseService(dispatcher).get("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Invalid database"
