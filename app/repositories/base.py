"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger


class BaseRepository:
    """Base repository with common functionality.

    Repositories hold no cached rows: every read reflects the store at call
    time. The connection is injected (see ``app.container``).
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection, read_only: bool = True):
        self._db = conn
        self._read_only = read_only
        logger.debug("{} initialized (read_only={})", self.__class__.__name__, read_only)

    def _require_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    def cursor(self) -> duckdb.DuckDBPyConnection:
        """Duplicate connection for use from another thread."""
        return self._db.cursor()

    def execute(self, query: str, params: list | None = None, conn: Any = None) -> Any:
        """Execute SQL query."""
        db = conn if conn is not None else self._db
        if params:
            return db.execute(query, params)
        return db.execute(query)

    def fetchall(self, query: str, params: list | None = None, conn: Any = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params, conn).fetchall()

    def fetchone(self, query: str, params: list | None = None, conn: Any = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params, conn).fetchone()
