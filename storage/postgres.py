"""Key-value slot in a PostgreSQL table, for running against a shared database."""

import asyncio

import asyncpg
from typing import Optional

from storage.exceptions import StorageError

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
)
"""

_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)


class PostgresKeyValueStore:
    """Async get/set over the kv_store table."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def ensure_schema(self) -> None:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(CREATE_TABLE_SQL)
        except _DB_ERRORS as exc:
            raise StorageError(f"Could not create kv_store table: {exc}") from exc

    async def get(self, key: str) -> Optional[str]:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    "SELECT value FROM kv_store WHERE key = $1", key
                )
        except _DB_ERRORS as exc:
            raise StorageError(f"Could not read key {key!r}: {exc}") from exc
        return row["value"] if row else None

    async def set(self, key: str, blob: str) -> None:
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(
                    """INSERT INTO kv_store (key, value) VALUES ($1, $2)
                       ON CONFLICT (key) DO UPDATE
                       SET value = EXCLUDED.value, updated_at = now()""",
                    key, blob,
                )
        except _DB_ERRORS as exc:
            raise StorageError(f"Could not write key {key!r}: {exc}") from exc
