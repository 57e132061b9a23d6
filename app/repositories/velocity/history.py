"""Velocity repository - daily backlink velocity facts."""

import threading

from loguru import logger

from app.models.velocity import VELOCITY_COLUMNS, VelocityFact
from app.repositories.base import BaseRepository


class VelocityRepository(BaseRepository):
    """Repository for backlink velocity history.

    The table has no unique key; one fact per (domain_id, date) is kept by
    running every upsert under a process-wide lock, shared by all instances
    and cursors.
    """

    _write_lock = threading.Lock()

    def get(self, domain_id: str, date: str) -> VelocityFact | None:
        """Get the fact for one (domain, day), if any."""
        row = self.fetchone(
            f"SELECT {VELOCITY_COLUMNS} FROM backlink_velocity WHERE domain_id = ? AND date = ?",
            [domain_id, date],
        )
        return VelocityFact.from_row(row) if row else None

    def upsert(self, fact: VelocityFact) -> str:
        """Insert or overwrite the fact keyed by (domain_id, date).

        Concurrent writers are serialized, so the last write wins.
        Returns "created" or "updated".
        """
        self._require_writable()

        with self._write_lock:
            outcome = self._upsert(fact)

        logger.debug("Velocity {}: domain={}, date={}", outcome, fact.domain_id, fact.date)
        return outcome

    def _upsert(self, fact: VelocityFact) -> str:
        self.execute("BEGIN TRANSACTION")
        try:
            existing = self.fetchone(
                "SELECT COUNT(*) FROM backlink_velocity WHERE domain_id = ? AND date = ?",
                [fact.domain_id, fact.date],
            )
            if existing[0] > 0:
                self.execute(
                    """
                    UPDATE backlink_velocity
                    SET new_count = ?, lost_count = ?, net_change = ?, total_count = ?, recorded_at = ?
                    WHERE domain_id = ? AND date = ?
                    """,
                    [
                        fact.new_count,
                        fact.lost_count,
                        fact.net_change,
                        fact.total_count,
                        fact.recorded_at,
                        fact.domain_id,
                        fact.date,
                    ],
                )
                outcome = "updated"
            else:
                self.execute(
                    f"INSERT INTO backlink_velocity ({VELOCITY_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    [
                        fact.domain_id,
                        fact.date,
                        fact.new_count,
                        fact.lost_count,
                        fact.net_change,
                        fact.total_count,
                        fact.recorded_at,
                    ],
                )
                outcome = "created"
            self.execute("COMMIT")
        except Exception:
            self.execute("ROLLBACK")
            raise
        return outcome

    def get_since(self, domain_id: str, cutoff: str) -> list[VelocityFact]:
        """Get facts dated on or after cutoff, oldest first."""
        rows = self.fetchall(
            f"""
            SELECT {VELOCITY_COLUMNS} FROM backlink_velocity
            WHERE domain_id = ? AND date >= ?
            ORDER BY date ASC
            """,
            [domain_id, cutoff],
        )
        logger.debug("get_since({}, {}): {} facts", domain_id, cutoff, len(rows))
        return [VelocityFact.from_row(r) for r in rows]

    def get_latest(self, domain_id: str) -> VelocityFact | None:
        """Get the most recent fact for a domain."""
        row = self.fetchone(
            f"""
            SELECT {VELOCITY_COLUMNS} FROM backlink_velocity
            WHERE domain_id = ?
            ORDER BY date DESC
            LIMIT 1
            """,
            [domain_id],
        )
        return VelocityFact.from_row(row) if row else None
