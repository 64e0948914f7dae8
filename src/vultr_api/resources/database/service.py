# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Managed Database endpoints.

API reference: https://www.vultr.com/api/#tag/managed-databases

Every method is a thin call site of the dispatcher. List methods return the
page of items together with its Meta; fetch the next page by calling again
with ``options.with_cursor(meta.next_cursor)``.
"""

from ...codec import encode_query
from ...context import CallContext
from ...types.model import MessageEnvelope
from ...types.pagination import Meta
from ...types.request import HTTPMethod
from ..base import ResourceService
from .models import (
    AvailableOption,
    Database,
    DatabaseAddReplicaReq,
    DatabaseAdvancedOptions,
    DatabaseAdvancedOptionsEnvelope,
    DatabaseAlert,
    DatabaseAlertsEnvelope,
    DatabaseAvailableVersions,
    DatabaseBackupRestoreReq,
    DatabaseBackups,
    DatabaseConnectionPool,
    DatabaseConnectionPoolCreateReq,
    DatabaseConnectionPoolEnvelope,
    DatabaseConnectionPoolsEnvelope,
    DatabaseConnectionPoolUpdateReq,
    DatabaseConnections,
    DatabaseCreateReq,
    DatabaseDB,
    DatabaseDBCreateReq,
    DatabaseDBEnvelope,
    DatabaseDBsEnvelope,
    DatabaseEnvelope,
    DatabaseForkReq,
    DatabaseListAlertsReq,
    DatabaseMigration,
    DatabaseMigrationEnvelope,
    DatabaseMigrationStartReq,
    DatabasePlan,
    DatabasePlansEnvelope,
    DatabasesEnvelope,
    DatabaseUpdateReq,
    DatabaseUpdatesEnvelope,
    DatabaseUser,
    DatabaseUserCreateReq,
    DatabaseUserEnvelope,
    DatabaseUsersEnvelope,
    DatabaseUserUpdateReq,
    DatabaseVersionUpgradeReq,
    DBListOptions,
    DBPlanListOptions,
)

DATABASE_PATH = "/v2/databases"


class DatabaseService(ResourceService):
    """Handler for the Managed Database endpoints."""

    base_path = DATABASE_PATH

    # === Plans ===

    async def list_plans(
        self,
        options: DBPlanListOptions | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> tuple[list[DatabasePlan], Meta | None]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path("plans"),
            shape=DatabasePlansEnvelope,
            ctx=ctx,
            params=encode_query(options),
        )
        return envelope.plans, envelope.meta

    # === Databases ===

    async def list_databases(
        self,
        options: DBListOptions | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> tuple[list[Database], Meta | None]:
        """List Managed Databases, one page at a time."""
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(),
            shape=DatabasesEnvelope,
            ctx=ctx,
            params=encode_query(options),
        )
        return envelope.databases, envelope.meta

    async def create(
        self, request: DatabaseCreateReq, *, ctx: CallContext | None = None
    ) -> Database:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST, self._path(), body=request, shape=DatabaseEnvelope, ctx=ctx
        )
        return envelope.database

    async def get(self, database_id: str, *, ctx: CallContext | None = None) -> Database:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET, self._path(database_id), shape=DatabaseEnvelope, ctx=ctx
        )
        return envelope.database

    async def update(
        self,
        database_id: str,
        request: DatabaseUpdateReq,
        *,
        ctx: CallContext | None = None,
    ) -> Database:
        """Apply a partial update; only fields assigned on ``request`` are sent."""
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.PUT,
            self._path(database_id),
            body=request,
            shape=DatabaseEnvelope,
            ctx=ctx,
        )
        return envelope.database

    async def delete(self, database_id: str, *, ctx: CallContext | None = None) -> None:
        """Delete a Managed Database. All data is permanently lost."""
        await self._dispatcher.dispatch(HTTPMethod.DELETE, self._path(database_id), ctx=ctx)

    # === Users ===

    async def list_users(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> tuple[list[DatabaseUser], Meta | None]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "users"),
            shape=DatabaseUsersEnvelope,
            ctx=ctx,
        )
        return envelope.users, envelope.meta

    async def create_user(
        self,
        database_id: str,
        request: DatabaseUserCreateReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseUser:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "users"),
            body=request,
            shape=DatabaseUserEnvelope,
            ctx=ctx,
        )
        return envelope.user

    async def get_user(
        self, database_id: str, username: str, *, ctx: CallContext | None = None
    ) -> DatabaseUser:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "users", username),
            shape=DatabaseUserEnvelope,
            ctx=ctx,
        )
        return envelope.user

    async def update_user(
        self,
        database_id: str,
        username: str,
        request: DatabaseUserUpdateReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseUser:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.PUT,
            self._path(database_id, "users", username),
            body=request,
            shape=DatabaseUserEnvelope,
            ctx=ctx,
        )
        return envelope.user

    async def delete_user(
        self, database_id: str, username: str, *, ctx: CallContext | None = None
    ) -> None:
        await self._dispatcher.dispatch(
            HTTPMethod.DELETE, self._path(database_id, "users", username), ctx=ctx
        )

    # === Logical databases ===

    async def list_dbs(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> tuple[list[DatabaseDB], Meta | None]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "dbs"),
            shape=DatabaseDBsEnvelope,
            ctx=ctx,
        )
        return envelope.dbs, envelope.meta

    async def create_db(
        self,
        database_id: str,
        request: DatabaseDBCreateReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseDB:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "dbs"),
            body=request,
            shape=DatabaseDBEnvelope,
            ctx=ctx,
        )
        return envelope.db

    async def get_db(
        self, database_id: str, db_name: str, *, ctx: CallContext | None = None
    ) -> DatabaseDB:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "dbs", db_name),
            shape=DatabaseDBEnvelope,
            ctx=ctx,
        )
        return envelope.db

    async def delete_db(
        self, database_id: str, db_name: str, *, ctx: CallContext | None = None
    ) -> None:
        await self._dispatcher.dispatch(
            HTTPMethod.DELETE, self._path(database_id, "dbs", db_name), ctx=ctx
        )

    # === Maintenance and alerts ===

    async def list_maintenance_updates(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> list[str]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "maintenance"),
            shape=DatabaseUpdatesEnvelope,
            ctx=ctx,
        )
        return envelope.available_updates

    async def start_maintenance(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> str:
        """Start pending maintenance updates; returns the API's status message."""
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "maintenance"),
            shape=MessageEnvelope,
            ctx=ctx,
        )
        return envelope.message

    async def list_service_alerts(
        self,
        database_id: str,
        request: DatabaseListAlertsReq,
        *,
        ctx: CallContext | None = None,
    ) -> list[DatabaseAlert]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "alerts"),
            body=request,
            shape=DatabaseAlertsEnvelope,
            ctx=ctx,
        )
        return envelope.alerts

    # === Migration ===

    async def get_migration_status(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> DatabaseMigration:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "migration"),
            shape=DatabaseMigrationEnvelope,
            ctx=ctx,
        )
        return envelope.migration

    async def start_migration(
        self,
        database_id: str,
        request: DatabaseMigrationStartReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseMigration:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "migration"),
            body=request,
            shape=DatabaseMigrationEnvelope,
            ctx=ctx,
        )
        return envelope.migration

    async def detach_migration(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> None:
        await self._dispatcher.dispatch(
            HTTPMethod.DELETE, self._path(database_id, "migration"), ctx=ctx
        )

    # === Replicas, backups, restore and fork ===

    async def add_read_only_replica(
        self,
        database_id: str,
        request: DatabaseAddReplicaReq,
        *,
        ctx: CallContext | None = None,
    ) -> Database:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "read-replica"),
            body=request,
            shape=DatabaseEnvelope,
            ctx=ctx,
        )
        return envelope.database

    async def get_backup_information(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> DatabaseBackups:
        return await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "backups"),
            shape=DatabaseBackups,
            ctx=ctx,
        )

    async def restore_from_backup(
        self,
        database_id: str,
        request: DatabaseBackupRestoreReq,
        *,
        ctx: CallContext | None = None,
    ) -> Database:
        """Create a new subscription of the same plan from a backup."""
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "restore"),
            body=request,
            shape=DatabaseEnvelope,
            ctx=ctx,
        )
        return envelope.database

    async def fork(
        self,
        database_id: str,
        request: DatabaseForkReq,
        *,
        ctx: CallContext | None = None,
    ) -> Database:
        """Create a new subscription of any plan from a backup."""
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "fork"),
            body=request,
            shape=DatabaseEnvelope,
            ctx=ctx,
        )
        return envelope.database

    # === Connection pools ===

    async def list_connection_pools(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> tuple[DatabaseConnections | None, list[DatabaseConnectionPool], Meta | None]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "connection-pools"),
            shape=DatabaseConnectionPoolsEnvelope,
            ctx=ctx,
        )
        return envelope.connections, envelope.connection_pools, envelope.meta

    async def create_connection_pool(
        self,
        database_id: str,
        request: DatabaseConnectionPoolCreateReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseConnectionPool:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "connection-pools"),
            body=request,
            shape=DatabaseConnectionPoolEnvelope,
            ctx=ctx,
        )
        return envelope.connection_pool

    async def get_connection_pool(
        self, database_id: str, pool_name: str, *, ctx: CallContext | None = None
    ) -> DatabaseConnectionPool:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "connection-pools", pool_name),
            shape=DatabaseConnectionPoolEnvelope,
            ctx=ctx,
        )
        return envelope.connection_pool

    async def update_connection_pool(
        self,
        database_id: str,
        pool_name: str,
        request: DatabaseConnectionPoolUpdateReq,
        *,
        ctx: CallContext | None = None,
    ) -> DatabaseConnectionPool:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.PUT,
            self._path(database_id, "connection-pools", pool_name),
            body=request,
            shape=DatabaseConnectionPoolEnvelope,
            ctx=ctx,
        )
        return envelope.connection_pool

    async def delete_connection_pool(
        self, database_id: str, pool_name: str, *, ctx: CallContext | None = None
    ) -> None:
        await self._dispatcher.dispatch(
            HTTPMethod.DELETE,
            self._path(database_id, "connection-pools", pool_name),
            ctx=ctx,
        )

    # === Advanced options ===

    async def list_advanced_options(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> tuple[DatabaseAdvancedOptions, list[AvailableOption]]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "advanced-options"),
            shape=DatabaseAdvancedOptionsEnvelope,
            ctx=ctx,
        )
        return envelope.configured_options, envelope.available_options

    async def update_advanced_options(
        self,
        database_id: str,
        request: DatabaseAdvancedOptions,
        *,
        ctx: CallContext | None = None,
    ) -> tuple[DatabaseAdvancedOptions, list[AvailableOption]]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.PUT,
            self._path(database_id, "advanced-options"),
            body=request,
            shape=DatabaseAdvancedOptionsEnvelope,
            ctx=ctx,
        )
        return envelope.configured_options, envelope.available_options

    # === Version upgrades ===

    async def list_available_versions(
        self, database_id: str, *, ctx: CallContext | None = None
    ) -> list[str]:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.GET,
            self._path(database_id, "version-upgrade"),
            shape=DatabaseAvailableVersions,
            ctx=ctx,
        )
        return envelope.available_versions

    async def start_version_upgrade(
        self,
        database_id: str,
        request: DatabaseVersionUpgradeReq,
        *,
        ctx: CallContext | None = None,
    ) -> str:
        envelope = await self._dispatcher.dispatch(
            HTTPMethod.POST,
            self._path(database_id, "version-upgrade"),
            body=request,
            shape=MessageEnvelope,
            ctx=ctx,
        )
        return envelope.message


__all__ = ["DATABASE_PATH", "DatabaseService"]
