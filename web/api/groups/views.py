"""Keyword group API views - thin layer over services."""

from app.container import container
from app.models.keywords import GroupPerformance, KeywordGroup, PerformancePoint
from app.services.keywords import UNSET
from web.api.errors import validate_id, validate_window_days

from .schemas import (
    AddedResponse,
    GroupItem,
    GroupKeywordItem,
    GroupPerformanceItem,
    GroupStatsResponse,
    GroupSummaryItem,
    PerformancePointItem,
    RemovedResponse,
)


def _point(p: PerformancePoint) -> PerformancePointItem:
    return PerformancePointItem(date=p.date, average_position=p.average_position)


def _group(g: KeywordGroup) -> GroupItem:
    return GroupItem(**g.to_dict())


def _performance(g: GroupPerformance) -> GroupPerformanceItem:
    return GroupPerformanceItem(
        group_id=g.group_id,
        name=g.name,
        color=g.color,
        series=[_point(p) for p in g.history],
    )


def get_group_performance_history(group_id: str, days: int | None = None) -> list[PerformancePointItem]:
    """Get the average position series of a group."""
    validate_id("group_id", group_id)
    series = container.group_performance.get_group_performance(group_id, validate_window_days(days))
    return [_point(p) for p in series]


def get_all_groups_performance(domain_id: str, days: int | None = None) -> list[GroupPerformanceItem]:
    """Get performance series for every group of a domain."""
    validate_id("domain_id", domain_id)
    data = container.group_performance.get_all_groups_performance(domain_id, validate_window_days(days))
    return [_performance(g) for g in data]


def get_groups_by_domain(domain_id: str) -> list[GroupSummaryItem]:
    """Get groups of a domain with keyword counts."""
    validate_id("domain_id", domain_id)
    return [
        GroupSummaryItem(**s.group.to_dict(), keyword_count=s.keyword_count)
        for s in container.keyword_groups.get_groups_by_domain(domain_id)
    ]


def get_group_stats(group_id: str) -> GroupStatsResponse:
    """Get a group with its latest average position and search volume."""
    validate_id("group_id", group_id)
    stats = container.keyword_groups.get_group_stats(group_id)
    return GroupStatsResponse(
        **stats.group.to_dict(),
        keyword_count=stats.keyword_count,
        avg_position=stats.avg_position,
        total_volume=stats.total_volume,
    )


def get_keywords_by_group(group_id: str) -> list[GroupKeywordItem]:
    """Get member keywords with their latest positions."""
    validate_id("group_id", group_id)
    return [GroupKeywordItem(**k.to_dict()) for k in container.keyword_groups.get_keywords_by_group(group_id)]


def get_groups_for_keyword(keyword_id: str) -> list[GroupItem]:
    """Get groups containing a keyword."""
    validate_id("keyword_id", keyword_id)
    return [_group(g) for g in container.keyword_groups.get_groups_for_keyword(keyword_id)]


def create_group(domain_id: str, name: str, color: str, description: str | None = None) -> str:
    """Create a keyword group, returning its id."""
    validate_id("domain_id", domain_id)
    return container.keyword_groups.create_group(domain_id, name, color, description)


def update_group(
    group_id: str,
    name: str | None = None,
    color: str | None = None,
    description: str | None = UNSET,
) -> str:
    """Update a keyword group; pass description=None to clear it."""
    validate_id("group_id", group_id)
    return container.keyword_groups.update_group(group_id, name=name, color=color, description=description)


def delete_group(group_id: str) -> None:
    """Delete a keyword group and its memberships."""
    validate_id("group_id", group_id)
    container.keyword_groups.delete_group(group_id)


def add_keywords_to_group(group_id: str, keyword_ids: list[str]) -> AddedResponse:
    """Add keywords to a group."""
    validate_id("group_id", group_id)
    return AddedResponse(**container.keyword_groups.add_keywords_to_group(group_id, keyword_ids))


def remove_keywords_from_group(group_id: str, keyword_ids: list[str]) -> RemovedResponse:
    """Remove keywords from a group."""
    validate_id("group_id", group_id)
    return RemovedResponse(**container.keyword_groups.remove_keywords_from_group(group_id, keyword_ids))
