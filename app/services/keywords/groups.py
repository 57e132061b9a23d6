"""Keyword group management and lookups."""

import uuid
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.errors import NotFoundError, ValidationError
from app.models.keywords import GroupKeyword, GroupStats, GroupSummary, KeywordGroup
from app.repositories.keywords import GroupRepository, KeywordRepository, PositionRepository
from helpers import formulas

# Default of update_group fields that were not passed; None clears a description.
UNSET = object()


class KeywordGroups:
    """Group CRUD, membership changes and latest-position snapshots."""

    def __init__(
        self,
        group_repo: GroupRepository,
        keyword_repo: KeywordRepository,
        position_repo: PositionRepository,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._groups = group_repo
        self._keywords = keyword_repo
        self._positions = position_repo
        self._clock = clock

    def _require_group(self, group_id: str) -> KeywordGroup:
        group = self._groups.get(group_id)
        if group is None:
            raise NotFoundError(f"Keyword group not found: {group_id}")
        return group

    def create_group(self, domain_id: str, name: str, color: str, description: str | None = None) -> str:
        """Create a group; names are unique within a domain."""
        if not name or not name.strip():
            raise ValidationError("Group name must not be empty")
        if self._groups.find_by_name(domain_id, name):
            raise ValidationError(f"A group named {name!r} already exists")

        group = KeywordGroup(
            id=uuid.uuid4().hex,
            domain_id=domain_id,
            name=name,
            color=color,
            description=description,
            created_at=self._clock(),
        )
        self._groups.insert(group)
        logger.info("Created group {} ({}) for {}", group.id, name, domain_id)
        return group.id

    def update_group(
        self,
        group_id: str,
        name: str | None = None,
        color: str | None = None,
        description: str | None = UNSET,
    ) -> str:
        """Patch the given fields of a group.

        ``name`` and ``color`` are left alone when None; ``description=None``
        clears the description.
        """
        group = self._require_group(group_id)

        if name is not None and name != group.name:
            if not name.strip():
                raise ValidationError("Group name must not be empty")
            if self._groups.find_by_name(group.domain_id, name):
                raise ValidationError(f"A group named {name!r} already exists")

        updates = {k: v for k, v in (("name", name), ("color", color)) if v is not None}
        if description is not UNSET:
            updates["description"] = description
        self._groups.update(group_id, updates)
        return group_id

    def delete_group(self, group_id: str) -> None:
        """Delete a group together with its memberships."""
        self._require_group(group_id)
        removed = self._groups.delete(group_id)
        logger.info("Deleted group {} ({} memberships)", group_id, removed)

    def add_keywords_to_group(self, group_id: str, keyword_ids: list[str]) -> dict:
        """Link keywords of the group's domain; others and existing members are skipped."""
        group = self._require_group(group_id)

        added = 0
        for keyword_id in keyword_ids:
            keyword = self._keywords.get(keyword_id)
            if keyword is None or keyword.domain_id != group.domain_id:
                logger.debug("Skipping keyword {} (unknown or other domain)", keyword_id)
                continue
            if self._groups.has_member(group_id, keyword_id):
                continue
            self._groups.add_member(group_id, keyword_id)
            added += 1

        logger.info("Group {}: +{} keywords", group_id, added)
        return {"added": added}

    def remove_keywords_from_group(self, group_id: str, keyword_ids: list[str]) -> dict:
        """Unlink keywords from a group."""
        self._require_group(group_id)
        removed = sum(1 for k in keyword_ids if self._groups.remove_member(group_id, k))
        logger.info("Group {}: -{} keywords", group_id, removed)
        return {"removed": removed}

    def get_groups_by_domain(self, domain_id: str) -> list[GroupSummary]:
        """All groups of a domain with member counts."""
        return [
            GroupSummary(group=g, keyword_count=self._groups.count_members(g.id))
            for g in self._groups.get_by_domain(domain_id)
        ]

    def get_group_stats(self, group_id: str) -> GroupStats:
        """Average latest position and total latest search volume of the members."""
        group = self._require_group(group_id)
        member_ids = self._groups.get_member_ids(group_id)

        positions = []
        total_volume = 0
        for keyword_id in member_ids:
            if self._keywords.get(keyword_id) is None:
                continue
            latest = self._positions.get_latest(keyword_id)
            if latest is None:
                continue
            if latest.position:
                positions.append(latest.position)
            if latest.search_volume:
                total_volume += latest.search_volume

        avg_position = formulas.round_half_up(sum(positions) / len(positions)) if positions else None
        return GroupStats(
            group=group,
            keyword_count=len(member_ids),
            avg_position=avg_position,
            total_volume=total_volume,
        )

    def get_keywords_by_group(self, group_id: str) -> list[GroupKeyword]:
        """Member keywords with their latest rank check."""
        self._require_group(group_id)

        result = []
        for keyword_id in self._groups.get_member_ids(group_id):
            keyword = self._keywords.get(keyword_id)
            if keyword is None:
                continue
            latest = self._positions.get_latest(keyword_id)
            result.append(
                GroupKeyword(
                    id=keyword.id,
                    phrase=keyword.phrase,
                    current_position=latest.position if latest else None,
                    url=latest.url if latest else None,
                    search_volume=latest.search_volume if latest else None,
                    difficulty=latest.difficulty if latest else None,
                    last_updated=latest.fetched_at if latest else keyword.created_at,
                )
            )
        return result

    def get_groups_for_keyword(self, keyword_id: str) -> list[KeywordGroup]:
        """Every group a keyword belongs to."""
        if self._keywords.get(keyword_id) is None:
            raise NotFoundError(f"Keyword not found: {keyword_id}")
        return self._groups.get_groups_for_keyword(keyword_id)
