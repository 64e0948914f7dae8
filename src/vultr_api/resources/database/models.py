# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Managed Database request and response models.

Response models default every field so that sparse payloads decode; request
models default every field to None and rely on fields-set tracking, so only
the fields a caller assigns are sent (see VultrModel).
"""

from pydantic import Field

from ...types.model import VultrModel
from ...types.pagination import ListOptions, Meta

# =============================================================================
# Plans
# =============================================================================


class DBPlanListOptions(ListOptions):
    """Filters for listing Managed Database plans."""

    engine: str | None = None
    nodes: int | None = None
    region: str | None = None


class SupportedEngines(VultrModel):
    mysql: bool | None = None
    pg: bool | None = None
    redis: bool | None = None


class MaxConnections(VultrModel):
    mysql: int | None = None
    pg: int | None = None


class DatabasePlan(VultrModel):
    """A Managed Database plan."""

    id: str
    number_of_nodes: int = 0
    type: str = ""
    vcpu_count: int = 0
    ram: int = 0
    disk: int = 0
    monthly_cost: int = 0
    supported_engines: SupportedEngines = Field(default_factory=SupportedEngines)
    max_connections: MaxConnections | None = None
    locations: list[str] = Field(default_factory=list)


class DatabasePlansEnvelope(VultrModel):
    plans: list[DatabasePlan]
    meta: Meta | None = None


# =============================================================================
# Databases
# =============================================================================


class DBListOptions(ListOptions):
    """Filters for listing Managed Databases."""

    label: str | None = None
    tag: str | None = None
    region: str | None = None


class PGExtension(VultrModel):
    name: str
    versions: list[str] = Field(default_factory=list)


class Database(VultrModel):
    """A Managed Database subscription."""

    id: str
    date_created: str = ""
    plan: str = ""
    plan_disk: int = 0
    plan_ram: int = 0
    plan_vcpus: int = 0
    plan_replicas: int = 0
    region: str = ""
    status: str = ""
    label: str = ""
    tag: str = ""
    database_engine: str = ""
    database_engine_version: str = ""
    dbname: str | None = None
    host: str = ""
    user: str = ""
    password: str = ""
    port: str = ""
    maintenance_dow: str = ""
    maintenance_time: str = ""
    latest_backup: str = ""
    trusted_ips: list[str] = Field(default_factory=list)
    mysql_sql_modes: list[str] | None = None
    mysql_require_primary_key: bool | None = None
    mysql_slow_query_log: bool | None = None
    mysql_long_query_time: int | None = None
    pg_available_extensions: list[PGExtension] | None = None
    redis_eviction_policy: str | None = None
    cluster_time_zone: str | None = None
    read_replicas: list["Database"] | None = None


class DatabaseEnvelope(VultrModel):
    database: Database


class DatabasesEnvelope(VultrModel):
    databases: list[Database]
    meta: Meta | None = None


class DatabaseCreateReq(VultrModel):
    """Body for creating a Managed Database."""

    database_engine: str | None = None
    database_engine_version: str | None = None
    region: str | None = None
    plan: str | None = None
    label: str | None = None
    tag: str | None = None
    maintenance_dow: str | None = None
    maintenance_time: str | None = None
    trusted_ips: list[str] | None = None
    mysql_sql_modes: list[str] | None = None
    mysql_require_primary_key: bool | None = None
    mysql_slow_query_log: bool | None = None
    mysql_long_query_time: int | None = None
    redis_eviction_policy: str | None = None


class DatabaseUpdateReq(VultrModel):
    """
    Partial update of a Managed Database.

    Fields never assigned are omitted and left unchanged by the API. Assign
    an empty value (e.g. ``tag=""`` or ``trusted_ips=[]``) to clear a field.
    """

    database_engine: str | None = None
    database_engine_version: str | None = None
    region: str | None = None
    plan: str | None = None
    label: str | None = None
    tag: str | None = None
    maintenance_dow: str | None = None
    maintenance_time: str | None = None
    cluster_time_zone: str | None = None
    trusted_ips: list[str] | None = None
    mysql_sql_modes: list[str] | None = None
    mysql_require_primary_key: bool | None = None
    mysql_slow_query_log: bool | None = None
    mysql_long_query_time: int | None = None
    redis_eviction_policy: str | None = None


# =============================================================================
# Users and logical databases
# =============================================================================


class DatabaseUser(VultrModel):
    username: str
    password: str = ""
    encryption: str | None = None


class DatabaseUserEnvelope(VultrModel):
    user: DatabaseUser


class DatabaseUsersEnvelope(VultrModel):
    users: list[DatabaseUser]
    meta: Meta | None = None


class DatabaseUserCreateReq(VultrModel):
    username: str
    password: str | None = None
    encryption: str | None = None


class DatabaseUserUpdateReq(VultrModel):
    password: str | None = None


class DatabaseDB(VultrModel):
    name: str


class DatabaseDBEnvelope(VultrModel):
    db: DatabaseDB


class DatabaseDBsEnvelope(VultrModel):
    dbs: list[DatabaseDB]
    meta: Meta | None = None


class DatabaseDBCreateReq(VultrModel):
    name: str


# =============================================================================
# Maintenance, alerts and actions
# =============================================================================


class DatabaseUpdatesEnvelope(VultrModel):
    available_updates: list[str]


class DatabaseAlert(VultrModel):
    timestamp: str = ""
    message_type: str = ""
    description: str = ""
    recommendation: str | None = None
    maintenance_scheduled: str | None = None
    resource_type: str | None = None
    table_count: int | None = None


class DatabaseAlertsEnvelope(VultrModel):
    alerts: list[DatabaseAlert]


class DatabaseListAlertsReq(VultrModel):
    period: str


# =============================================================================
# Migration
# =============================================================================


class DatabaseCredentials(VultrModel):
    host: str = ""
    port: int = 0
    username: str = ""
    password: str = ""
    database: str | None = None
    ignored_databases: str | None = None
    ssl: bool | None = None


class DatabaseMigration(VultrModel):
    status: str
    method: str | None = None
    error: str | None = None
    credentials: DatabaseCredentials = Field(default_factory=DatabaseCredentials)


class DatabaseMigrationEnvelope(VultrModel):
    migration: DatabaseMigration


class DatabaseMigrationStartReq(VultrModel):
    host: str
    port: int
    username: str
    password: str
    database: str | None = None
    ignored_databases: str | None = None
    ssl: bool | None = None


# =============================================================================
# Replicas, backups, restore and fork
# =============================================================================


class DatabaseAddReplicaReq(VultrModel):
    region: str | None = None
    label: str | None = None


class DatabaseBackup(VultrModel):
    date: str = ""
    time: str = ""


class DatabaseBackups(VultrModel):
    """Backup information. The endpoint returns this object unwrapped."""

    latest_backup: DatabaseBackup
    oldest_backup: DatabaseBackup = Field(default_factory=DatabaseBackup)


class DatabaseBackupRestoreReq(VultrModel):
    label: str | None = None
    type: str | None = None
    date: str | None = None
    time: str | None = None


class DatabaseForkReq(VultrModel):
    label: str | None = None
    region: str | None = None
    plan: str | None = None
    type: str | None = None
    date: str | None = None
    time: str | None = None


# =============================================================================
# Connection pools (PostgreSQL)
# =============================================================================


class DatabaseConnectionPool(VultrModel):
    name: str
    database: str = ""
    username: str = ""
    mode: str = ""
    size: int = 0


class DatabaseConnections(VultrModel):
    used: int = 0
    available: int = 0
    max: int = 0


class DatabaseConnectionPoolEnvelope(VultrModel):
    connection_pool: DatabaseConnectionPool


class DatabaseConnectionPoolsEnvelope(VultrModel):
    connections: DatabaseConnections | None = None
    connection_pools: list[DatabaseConnectionPool]
    meta: Meta | None = None


class DatabaseConnectionPoolCreateReq(VultrModel):
    name: str | None = None
    database: str | None = None
    username: str | None = None
    mode: str | None = None
    size: int | None = None


class DatabaseConnectionPoolUpdateReq(VultrModel):
    database: str | None = None
    username: str | None = None
    mode: str | None = None
    size: int | None = None


# =============================================================================
# Advanced options (PostgreSQL)
# =============================================================================


class DatabaseAdvancedOptions(VultrModel):
    """
    User configurable PostgreSQL options.

    Used both as the configured-options response and as the update body;
    only assigned options are sent on update.
    """

    autovacuum_analyze_scale_factor: float | None = None
    autovacuum_analyze_threshold: int | None = None
    autovacuum_freeze_max_age: int | None = None
    autovacuum_max_workers: int | None = None
    autovacuum_naptime: int | None = None
    autovacuum_vacuum_cost_delay: int | None = None
    autovacuum_vacuum_cost_limit: int | None = None
    autovacuum_vacuum_scale_factor: float | None = None
    autovacuum_vacuum_threshold: int | None = None
    bgwriter_delay: int | None = None
    bgwriter_flush_after: int | None = None
    bgwriter_lru_maxpages: int | None = None
    bgwriter_lru_multiplier: float | None = None
    deadlock_timeout: int | None = None
    default_toast_compression: str | None = None
    idle_in_transaction_session_timeout: int | None = None
    jit: bool | None = None
    log_autovacuum_min_duration: int | None = None
    log_error_verbosity: str | None = None
    log_line_prefix: str | None = None
    log_min_duration_statement: int | None = None
    max_files_per_process: int | None = None
    max_locks_per_transaction: int | None = None
    max_logical_replication_workers: int | None = None
    max_parallel_workers: int | None = None
    max_parallel_workers_per_gather: int | None = None
    max_pred_locks_per_transaction: int | None = None
    max_prepared_transactions: int | None = None
    max_replication_slots: int | None = None
    max_stack_depth: int | None = None
    max_standby_archive_delay: int | None = None
    max_standby_streaming_delay: int | None = None
    max_wal_senders: int | None = None
    max_worker_processes: int | None = None
    pg_partman_bgw_interval: int | None = Field(default=None, alias="pg_partman_bgw.interval")
    pg_partman_bgw_role: str | None = Field(default=None, alias="pg_partman_bgw.role")
    pg_stat_statements_track: str | None = Field(
        default=None, alias="pg_stat_statements.track"
    )
    temp_file_limit: int | None = None
    track_activity_query_size: int | None = None
    track_commit_timestamp: str | None = None
    track_functions: str | None = None
    track_io_timing: str | None = None
    wal_sender_timeout: int | None = None
    wal_writer_delay: int | None = None


class AvailableOption(VultrModel):
    name: str
    type: str = ""
    enumerals: list[str] | None = None
    min_value: int | None = None
    max_value: int | None = None
    alt_values: list[int] | None = None
    units: str | None = None


class DatabaseAdvancedOptionsEnvelope(VultrModel):
    configured_options: DatabaseAdvancedOptions
    available_options: list[AvailableOption] = Field(default_factory=list)


# =============================================================================
# Version upgrades
# =============================================================================


class DatabaseAvailableVersions(VultrModel):
    available_versions: list[str]


class DatabaseVersionUpgradeReq(VultrModel):
    version: str | None = None


__all__ = [
    "AvailableOption",
    "DBListOptions",
    "DBPlanListOptions",
    "Database",
    "DatabaseAddReplicaReq",
    "DatabaseAdvancedOptions",
    "DatabaseAdvancedOptionsEnvelope",
    "DatabaseAlert",
    "DatabaseAlertsEnvelope",
    "DatabaseAvailableVersions",
    "DatabaseBackup",
    "DatabaseBackupRestoreReq",
    "DatabaseBackups",
    "DatabaseConnectionPool",
    "DatabaseConnectionPoolCreateReq",
    "DatabaseConnectionPoolEnvelope",
    "DatabaseConnectionPoolUpdateReq",
    "DatabaseConnectionPoolsEnvelope",
    "DatabaseConnections",
    "DatabaseCreateReq",
    "DatabaseCredentials",
    "DatabaseDB",
    "DatabaseDBCreateReq",
    "DatabaseDBEnvelope",
    "DatabaseDBsEnvelope",
    "DatabaseEnvelope",
    "DatabaseForkReq",
    "DatabaseListAlertsReq",
    "DatabaseMigration",
    "DatabaseMigrationEnvelope",
    "DatabaseMigrationStartReq",
    "DatabasePlan",
    "DatabasePlansEnvelope",
    "DatabaseUpdateReq",
    "DatabaseUpdatesEnvelope",
    "DatabaseUser",
    "DatabaseUserCreateReq",
    "DatabaseUserEnvelope",
    "DatabaseUserUpdateReq",
    "DatabaseUsersEnvelope",
    "DatabasesEnvelope",
    "MaxConnections",
    "PGExtension",
    "SupportedEngines",
]
