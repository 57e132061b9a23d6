"""Bulk loaders - CSV/rows to DuckDB via polars frames."""

from datetime import datetime
from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from app.errors import ValidationError
from app.services.velocity import VelocityIngestor
from helpers.validators import validate_count, validate_day
from settings import BATCH_SIZE

KEYWORD_SCHEMA = {
    "id": pl.Utf8,
    "domain_id": pl.Utf8,
    "phrase": pl.Utf8,
    "created_at": pl.Datetime,
}

POSITION_SCHEMA = {
    "keyword_id": pl.Utf8,
    "date": pl.Utf8,
    "position": pl.Int64,
    "url": pl.Utf8,
    "search_volume": pl.Int64,
    "difficulty": pl.Float64,
    "fetched_at": pl.Datetime,
}


def read_rows(path: str | Path) -> list[dict]:
    """Read a CSV export into row dicts."""
    df = pl.read_csv(path, infer_schema_length=10000)
    logger.info("Read {} rows from {}", df.height, path)
    return df.to_dicts()


def _timestamp(value, default: datetime) -> datetime:
    if value is None or value == "":
        return default
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def _optional(value, cast):
    return None if value is None or value == "" else cast(value)


def _frame(rows: list[dict], schema: dict) -> pl.DataFrame:
    """Frame with exactly the schema columns, in schema order."""
    return pl.DataFrame([tuple(row.get(col) for col in schema) for row in rows], schema=schema, orient="row")


def load_keywords(conn: duckdb.DuckDBPyConnection, rows: list[dict]) -> int:
    """Insert or replace keyword reference rows by id."""
    if not rows:
        return 0

    now = datetime.now()
    keywords_df = _frame(
        [
            {
                "id": str(r["id"]),
                "domain_id": str(r["domain_id"]),
                "phrase": r["phrase"],
                "created_at": _timestamp(r.get("created_at"), now),
            }
            for r in rows
        ],
        KEYWORD_SCHEMA,
    ).unique(subset=["id"], keep="last", maintain_order=True)

    conn.register("keywords_df", keywords_df)
    conn.execute("INSERT OR REPLACE INTO keyword SELECT id, domain_id, phrase, created_at FROM keywords_df")
    conn.unregister("keywords_df")

    logger.info("Keywords: {} loaded", keywords_df.height)
    return keywords_df.height


def load_position_samples(conn: duckdb.DuckDBPyConnection, rows: list[dict]) -> int:
    """Insert rank samples, replacing any existing (keyword_id, date) rows."""
    if not rows:
        return 0

    now = datetime.now()
    positions_df = _frame(
        [
            {
                "keyword_id": str(r["keyword_id"]),
                "date": validate_day(str(r["date"])),
                "position": _optional(r.get("position"), int),
                "url": _optional(r.get("url"), str),
                "search_volume": _optional(r.get("search_volume"), int),
                "difficulty": _optional(r.get("difficulty"), float),
                "fetched_at": _timestamp(r.get("fetched_at"), now),
            }
            for r in rows
        ],
        POSITION_SCHEMA,
    )
    positions_df = positions_df.unique(subset=["keyword_id", "date"], keep="last", maintain_order=True)

    conn.execute("BEGIN TRANSACTION")
    try:
        conn.register("positions_df", positions_df)
        conn.execute(
            """
            DELETE FROM keyword_position
            WHERE EXISTS (
                SELECT 1 FROM positions_df p
                WHERE p.keyword_id = keyword_position.keyword_id AND p.date = keyword_position.date
            )
            """
        )
        conn.execute(
            """
            INSERT INTO keyword_position
            SELECT keyword_id, date, position, url, search_volume, difficulty, fetched_at
            FROM positions_df
            """
        )
        conn.unregister("positions_df")
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    unranked = positions_df.filter(pl.col("position").is_null()).height
    logger.info("Positions: {} loaded ({} unranked)", positions_df.height, unranked)
    return positions_df.height


def _velocity_args(row_number: int, r: dict) -> tuple:
    """(domain_id, date, new_count, lost_count, total_count) of one CSV row."""
    try:
        domain_id = r["domain_id"]
        if domain_id is None or str(domain_id).strip() == "":
            raise ValidationError("domain_id is empty")
        day = validate_day(str(r["date"]))
        counts = tuple(validate_count(name, int(r[name])) for name in ("new_count", "lost_count", "total_count"))
    except KeyError as e:
        raise ValidationError(f"Velocity row {row_number}: missing column {e}") from e
    except (TypeError, ValueError, ValidationError) as e:
        raise ValidationError(f"Velocity row {row_number}: {e}") from e
    return (str(domain_id), day, *counts)


def load_velocity_facts(ingestor: VelocityIngestor, rows: list[dict], batch_size: int = BATCH_SIZE) -> dict:
    """Feed velocity rows through the ingestor so each day stays a single fact.

    Every row is checked before the first write; a bad row raises
    ValidationError naming its 1-based row number and nothing is written.
    """
    parsed = [_velocity_args(i, r) for i, r in enumerate(rows, 1)]

    counts = {"created": 0, "updated": 0}
    for i, args in enumerate(parsed, 1):
        outcome = ingestor.record_daily_velocity(*args)
        counts[outcome] += 1
        if i % batch_size == 0:
            logger.info("Velocity: {}/{} rows processed", i, len(rows))

    logger.info("Velocity: +{} new, {} updated", counts["created"], counts["updated"])
    return counts
