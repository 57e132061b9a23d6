"""Keyword group repository - groups and their memberships."""

import uuid
from datetime import datetime

from loguru import logger

from app.models.keywords import KeywordGroup
from app.repositories.base import BaseRepository

_GROUP_COLUMNS = "g.id, g.domain_id, g.name, g.color, g.description, g.created_at"


class GroupRepository(BaseRepository):
    """Repository for keyword groups and group membership links."""

    def get(self, group_id: str) -> KeywordGroup | None:
        """Get a group by id."""
        row = self.fetchone(f"SELECT {_GROUP_COLUMNS} FROM keyword_group g WHERE g.id = ?", [group_id])
        return KeywordGroup.from_row(row) if row else None

    def get_by_domain(self, domain_id: str) -> list[KeywordGroup]:
        """Get all groups of a domain, oldest first."""
        rows = self.fetchall(
            f"SELECT {_GROUP_COLUMNS} FROM keyword_group g WHERE g.domain_id = ? ORDER BY g.created_at, g.name",
            [domain_id],
        )
        return [KeywordGroup.from_row(r) for r in rows]

    def find_by_name(self, domain_id: str, name: str) -> KeywordGroup | None:
        """Get the group with this name under a domain."""
        row = self.fetchone(
            f"SELECT {_GROUP_COLUMNS} FROM keyword_group g WHERE g.domain_id = ? AND g.name = ?",
            [domain_id, name],
        )
        return KeywordGroup.from_row(row) if row else None

    def get_groups_for_keyword(self, keyword_id: str) -> list[KeywordGroup]:
        """Get every group a keyword belongs to."""
        rows = self.fetchall(
            f"""
            SELECT {_GROUP_COLUMNS}
            FROM keyword_group_membership m
            JOIN keyword_group g ON g.id = m.group_id
            WHERE m.keyword_id = ?
            ORDER BY g.created_at, g.name
            """,
            [keyword_id],
        )
        return [KeywordGroup.from_row(r) for r in rows]

    def insert(self, group: KeywordGroup) -> None:
        """Store a new group."""
        self._require_writable()
        self.execute(
            "INSERT INTO keyword_group (id, domain_id, name, color, description, created_at) VALUES (?, ?, ?, ?, ?, ?)",
            [group.id, group.domain_id, group.name, group.color, group.description, group.created_at],
        )
        logger.debug("Group created: {} ({})", group.id, group.name)

    def update(self, group_id: str, updates: dict) -> None:
        """Patch name/color/description of a group."""
        self._require_writable()
        allowed = {k: v for k, v in updates.items() if k in ("name", "color", "description")}
        if not allowed:
            return

        assignments = ", ".join(f"{k} = ?" for k in allowed)
        self.execute(
            f"UPDATE keyword_group SET {assignments} WHERE id = ?",
            [*allowed.values(), group_id],
        )
        logger.debug("Group updated: {} {}", group_id, sorted(allowed))

    def delete(self, group_id: str) -> int:
        """Delete a group and its memberships. Returns removed membership count."""
        self._require_writable()

        self.execute("BEGIN TRANSACTION")
        try:
            removed = self.fetchone(
                "SELECT COUNT(*) FROM keyword_group_membership WHERE group_id = ?",
                [group_id],
            )[0]
            self.execute("DELETE FROM keyword_group_membership WHERE group_id = ?", [group_id])
            self.execute("DELETE FROM keyword_group WHERE id = ?", [group_id])
            self.execute("COMMIT")
        except Exception:
            self.execute("ROLLBACK")
            raise

        logger.debug("Group deleted: {} ({} memberships)", group_id, removed)
        return removed

    def get_member_ids(self, group_id: str) -> list[str]:
        """Get keyword ids linked to a group, in the order they were added."""
        rows = self.fetchall(
            "SELECT keyword_id FROM keyword_group_membership WHERE group_id = ? ORDER BY added_at, keyword_id",
            [group_id],
        )
        return [r[0] for r in rows]

    def count_members(self, group_id: str) -> int:
        """Number of keywords in a group."""
        row = self.fetchone("SELECT COUNT(*) FROM keyword_group_membership WHERE group_id = ?", [group_id])
        return row[0]

    def has_member(self, group_id: str, keyword_id: str) -> bool:
        """Check if a keyword is already in a group."""
        row = self.fetchone(
            "SELECT COUNT(*) FROM keyword_group_membership WHERE group_id = ? AND keyword_id = ?",
            [group_id, keyword_id],
        )
        return row[0] > 0

    def add_member(self, group_id: str, keyword_id: str) -> None:
        """Link a keyword to a group."""
        self._require_writable()
        self.execute(
            "INSERT INTO keyword_group_membership (id, group_id, keyword_id, added_at) VALUES (?, ?, ?, ?)",
            [uuid.uuid4().hex, group_id, keyword_id, datetime.now()],
        )

    def remove_member(self, group_id: str, keyword_id: str) -> bool:
        """Unlink a keyword from a group. Returns False if it was not a member."""
        self._require_writable()
        if not self.has_member(group_id, keyword_id):
            return False
        self.execute(
            "DELETE FROM keyword_group_membership WHERE group_id = ? AND keyword_id = ?",
            [group_id, keyword_id],
        )
        return True
