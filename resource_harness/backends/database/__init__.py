"""Database backend module."""

from resource_harness.backends.database.backend import PostgresBackend
from resource_harness.backends.database.config import DatabaseConfig
from resource_harness.backends.database.manifest import database_manifest

__all__ = ["DatabaseConfig", "PostgresBackend", "database_manifest"]
