"""Position repository - keyword rank samples."""

import duckdb

from app.models.keywords import KEYWORD_POSITION_COLUMNS, PositionSample
from app.repositories.base import BaseRepository


class PositionRepository(BaseRepository):
    """Read access to keyword position history."""

    def get_since(
        self,
        keyword_id: str,
        cutoff: str,
        conn: duckdb.DuckDBPyConnection | None = None,
    ) -> list[PositionSample]:
        """Get samples dated on or after cutoff, oldest first.

        Pass a cursor from ``self.cursor()`` when calling from a worker thread.
        """
        rows = self.fetchall(
            f"""
            SELECT {KEYWORD_POSITION_COLUMNS} FROM keyword_position
            WHERE keyword_id = ? AND date >= ?
            ORDER BY date ASC
            """,
            [keyword_id, cutoff],
            conn,
        )
        return [PositionSample.from_row(r) for r in rows]

    def get_latest(self, keyword_id: str) -> PositionSample | None:
        """Get the most recent sample for a keyword."""
        row = self.fetchone(
            f"""
            SELECT {KEYWORD_POSITION_COLUMNS} FROM keyword_position
            WHERE keyword_id = ?
            ORDER BY date DESC, fetched_at DESC
            LIMIT 1
            """,
            [keyword_id],
        )
        return PositionSample.from_row(row) if row else None
