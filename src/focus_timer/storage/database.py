"""Async SQLite access for the task list."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import aiosqlite

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    category TEXT NOT NULL DEFAULT 'General',
    minutes INTEGER NOT NULL DEFAULT 25,
    completed BOOLEAN DEFAULT FALSE,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""

PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA busy_timeout=5000",
)

Row = dict[str, Any]


class Database:
    """One autocommit aiosqlite connection; rows come back as dicts.

    Usage:
        db = Database(config.db_path)
        await db.connect()
        rows = await db.fetch_all("SELECT * FROM tasks")
        await db.close()
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._conn: aiosqlite.Connection | None = None
        self._write_lock = asyncio.Lock()

    @property
    def conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError(f"Database {self.db_path} is not connected")
        return self._conn

    async def connect(self) -> None:
        if self._conn is not None:
            return

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = await aiosqlite.connect(self.db_path, isolation_level=None)
        self._conn.row_factory = aiosqlite.Row
        for pragma in PRAGMAS:
            await self._conn.execute(pragma)

        await self._migrate()
        logger.info(f"Database connected: {self.db_path}")

    async def _migrate(self) -> None:
        """Create the tables and stamp ``user_version``."""
        version = await self.fetch_value("PRAGMA user_version")
        await self.conn.executescript(SCHEMA)
        if version < SCHEMA_VERSION:
            await self.conn.execute(f"PRAGMA user_version={SCHEMA_VERSION}")
            logger.info(f"Schema version {version} -> {SCHEMA_VERSION}")

    async def close(self) -> None:
        if self._conn is None:
            return
        await self._conn.close()
        self._conn = None
        logger.info("Database connection closed")

    async def execute(self, query: str, params: tuple[Any, ...] = ()) -> int:
        """Run a write statement; returns the last inserted row id (0 if none)."""
        async with self._write_lock:
            cursor = await self.conn.execute(query, params)
            return cursor.lastrowid or 0

    async def insert(self, table: str, data: Row) -> int:
        columns = ", ".join(data)
        placeholders = ", ".join("?" for _ in data)
        return await self.execute(
            f"INSERT INTO {table} ({columns}) VALUES ({placeholders})",
            tuple(data.values()),
        )

    async def fetch_all(self, query: str, params: tuple[Any, ...] = ()) -> list[Row]:
        async with self.conn.execute(query, params) as cursor:
            return [dict(row) for row in await cursor.fetchall()]

    async def fetch_one(self, query: str, params: tuple[Any, ...] = ()) -> Row | None:
        rows = await self.fetch_all(query, params)
        return rows[0] if rows else None

    async def fetch_value(self, query: str, params: tuple[Any, ...] = ()) -> Any:
        """First column of the first row, or None."""
        async with self.conn.execute(query, params) as cursor:
            row = await cursor.fetchone()
        return row[0] if row else None

    async def get_size_mb(self) -> float:
        try:
            return self.db_path.stat().st_size / (1024 * 1024)
        except FileNotFoundError:
            return 0.0
