"""Database backend manifest."""

from resource_harness.backends.database.backend import PostgresBackend
from resource_harness.backends.database.config import DatabaseConfig
from resource_harness.backends.manifest import BackendManifest

database_manifest = BackendManifest(
    config_cls=DatabaseConfig,
    backend_factory=PostgresBackend.from_config,
)
