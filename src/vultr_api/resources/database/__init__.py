# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Managed Database handler and its request/response models."""

from .models import (
    Database,
    DatabaseAdvancedOptions,
    DatabaseBackups,
    DatabaseConnectionPool,
    DatabaseCreateReq,
    DatabasePlan,
    DatabaseUpdateReq,
    DatabaseUser,
    DBListOptions,
    DBPlanListOptions,
)
from .service import DATABASE_PATH, DatabaseService

__all__ = [
    "DATABASE_PATH",
    "DBListOptions",
    "DBPlanListOptions",
    "Database",
    "DatabaseAdvancedOptions",
    "DatabaseBackups",
    "DatabaseConnectionPool",
    "DatabaseCreateReq",
    "DatabasePlan",
    "DatabaseService",
    "DatabaseUpdateReq",
    "DatabaseUser",
]
