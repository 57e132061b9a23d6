"""DuckDB connection management."""

import duckdb
from loguru import logger

from app.models import ALL_DDL, ALL_INDEXES
from settings import DB_PATH


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if the velocity table already exists."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'backlink_velocity'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    for index in ALL_INDEXES:
        conn.execute(index)
    logger.info("DB tables initialized ({} tables, {} indexes)", len(ALL_DDL), len(ALL_INDEXES))


def get_write_connection(db_path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Get a writable connection with all tables in place (ingestion, ETL, tests)."""
    conn = duckdb.connect(db_path)
    init_tables(conn)
    return conn
