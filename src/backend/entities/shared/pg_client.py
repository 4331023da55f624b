"""
Shared PostgreSQL client for executing queries.

This module provides a reusable async client that owns an ``asyncpg``
connection pool. The pool is created and closed explicitly by whoever
owns the client (the API lifespan in production).
"""

import logging
from typing import Any

import asyncpg
from config.settings import get_settings
from models import QueryResult

logger = logging.getLogger(__name__)


class PostgresClient:
    """
    Async context manager around an ``asyncpg`` pool.

    Satisfies the ``SqlExecutor`` protocol.

    Usage:
        async with PostgresClient() as client:
            result = await client.execute("SELECT * FROM users WHERE id = $1", [1])
    """

    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        user: str | None = None,
        password: str | None = None,
        database: str | None = None,
        min_size: int | None = None,
        max_size: int | None = None,
    ):
        """
        Initialize the client. Nothing connects until ``connect()``.

        Args:
            host: Server hostname. Defaults to ``DATABASE_HOST``.
            port: Server port. Defaults to ``DATABASE_PORT``.
            user: Login role. Defaults to ``DATABASE_USER``.
            password: Role password. Defaults to ``DATABASE_PASSWORD``.
            database: Database name. Defaults to ``DATABASE_NAME``.
            min_size: Connections opened up front. Defaults to ``DATABASE_POOL_MIN_SIZE``.
            max_size: Pool ceiling. Defaults to ``DATABASE_POOL_MAX_SIZE``.
        """
        settings = get_settings()
        self.host = host or settings.database_host
        self.port = port or settings.database_port
        self.user = user or settings.database_user
        self.password = password if password is not None else settings.database_password
        self.database = database or settings.database_name
        self.min_size = min_size if min_size is not None else settings.database_pool_min_size
        self.max_size = max_size if max_size is not None else settings.database_pool_max_size
        self._pool: asyncpg.Pool | None = None

    @property
    def is_connected(self) -> bool:
        """Whether the pool has been created and not yet closed."""
        return self._pool is not None

    async def connect(self) -> None:
        """Create the connection pool."""
        if self._pool is not None:
            return
        if not self.database:
            raise ValueError("DATABASE_NAME environment variable is required")

        logger.info(
            "Creating connection pool for %s@%s:%s/%s (min=%d, max=%d)",
            self.user,
            self.host,
            self.port,
            self.database,
            self.min_size,
            self.max_size,
        )
        self._pool = await asyncpg.create_pool(
            host=self.host,
            port=self.port,
            user=self.user,
            password=self.password,
            database=self.database,
            min_size=self.min_size,
            max_size=self.max_size,
        )

    async def close(self) -> None:
        """Close the pool and every connection in it."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("Connection pool closed")

    async def __aenter__(self):
        """Establish the connection pool."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the connection pool."""
        await self.close()

    async def execute(self, query: str, params: list[Any] | None = None) -> QueryResult:
        """
        Execute a SQL statement and return its rows.

        Args:
            query: The SQL statement, with ``$n`` placeholders
            params: Values bound to the placeholders, in order

        Returns:
            A ``QueryResult``. Row values are passed through exactly as
            asyncpg decodes them.
        """
        if self._pool is None:
            return QueryResult.failure(
                "Database pool not established. Call connect() or use 'async with'."
            )

        try:
            async with self._pool.acquire() as connection:
                records = await connection.fetch(query, *(params or []))
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("SQL execution error: %s", e)
            return QueryResult.failure(str(e))

        # Duplicate column names collapse to one key; the last one selected wins
        rows = [dict(record) for record in records]
        columns = list(rows[0].keys()) if rows else []

        logger.debug("Query returned %d rows", len(rows))

        return QueryResult(success=True, columns=columns, rows=rows, row_count=len(rows))
