"""Keyword repository - lookups of tracked keywords."""

from app.models.keywords import Keyword
from app.repositories.base import BaseRepository


class KeywordRepository(BaseRepository):
    """Read access to keyword reference data."""

    def get(self, keyword_id: str) -> Keyword | None:
        """Get a keyword by id."""
        row = self.fetchone(
            "SELECT id, domain_id, phrase, created_at FROM keyword WHERE id = ?",
            [keyword_id],
        )
        return Keyword.from_row(row) if row else None

    def get_by_domain(self, domain_id: str) -> list[Keyword]:
        """Get all keywords of a domain."""
        rows = self.fetchall(
            "SELECT id, domain_id, phrase, created_at FROM keyword WHERE domain_id = ? ORDER BY phrase",
            [domain_id],
        )
        return [Keyword.from_row(r) for r in rows]
