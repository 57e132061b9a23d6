"""Keyword group API response schemas."""

from datetime import datetime

from web.api.base import CamelModel


class PerformancePointItem(CamelModel):
    """Average member position on one date."""

    date: str
    average_position: float


class GroupPerformanceItem(CamelModel):
    """Performance series of one group."""

    group_id: str
    name: str
    color: str
    series: list[PerformancePointItem]


class GroupItem(CamelModel):
    """Keyword group."""

    id: str
    domain_id: str
    name: str
    color: str
    description: str | None = None
    created_at: datetime


class GroupSummaryItem(GroupItem):
    """Group with its member count."""

    keyword_count: int


class GroupStatsResponse(GroupSummaryItem):
    """Group with latest-position snapshot."""

    avg_position: float | None
    total_volume: int


class GroupKeywordItem(CamelModel):
    """Member keyword with its latest rank check."""

    id: str
    phrase: str
    current_position: int | None
    url: str | None
    search_volume: int | None
    difficulty: float | None
    last_updated: datetime | None


class AddedResponse(CamelModel):
    added: int


class RemovedResponse(CamelModel):
    removed: int
