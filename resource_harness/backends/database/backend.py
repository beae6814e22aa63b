"""Database backend implementation on psycopg's async connection."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from resource_harness.backends.base import ResourceBackend
from resource_harness.backends.database.config import DatabaseConfig

log = logging.getLogger(__name__)

type Row = Mapping[str, Any]
type QueryParams = Sequence[Any] | Mapping[str, Any] | None


@dataclass(frozen=True, kw_only=True)
class PostgresBackend(ResourceBackend[AsyncConnection[dict[str, Any]]]):
    """Database backend opening one dedicated connection per resource."""

    config: DatabaseConfig

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "PostgresBackend":
        """Create backend from its configuration."""
        return cls(config=config)

    async def open(self) -> AsyncConnection[dict[str, Any]]:
        """Open a connection using the configured credentials and address."""
        log.info("Connecting to database: user=%s", self.config.user)
        return await AsyncConnection.connect(
            self.config.connect_string,
            user=self.config.user,
            password=self.config.password.get_secret_value(),
            autocommit=True,
            row_factory=dict_row,
        )

    async def execute(
        self,
        connection: AsyncConnection[dict[str, Any]],
        query: str,
        params: QueryParams = None,
    ) -> Sequence[Row]:
        """Run a parameterized query and return its rows.

        Statements without a result set (DDL, plain inserts) return an empty
        list.
        """
        log.debug("Executing query: %s", query)
        async with connection.cursor() as cursor:
            await cursor.execute(query, params)  # type: ignore[arg-type]
            if cursor.description is None:
                return []
            return await cursor.fetchall()

    async def close(self, connection: AsyncConnection[dict[str, Any]]) -> None:
        """Close the connection."""
        await connection.close()
