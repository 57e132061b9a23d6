"""Keyword domain entities - groups, samples and performance series."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity


@dataclass
class Keyword(BaseEntity):
    """Tracked search phrase of a domain."""

    id: str
    domain_id: str
    phrase: str
    created_at: datetime | None = None


@dataclass
class KeywordGroup(BaseEntity):
    """Named, colored cluster of keywords under one domain."""

    id: str
    domain_id: str
    name: str
    color: str
    description: str | None
    created_at: datetime


@dataclass
class PositionSample(BaseEntity):
    """Rank check result; position is None when the keyword was not ranked."""

    keyword_id: str
    date: str
    position: int | None
    url: str | None
    search_volume: int | None
    difficulty: float | None
    fetched_at: datetime


@dataclass
class PerformancePoint(BaseEntity):
    """Average member position of a group on one date."""

    date: str
    average_position: float


@dataclass
class GroupPerformance(BaseEntity):
    """Performance series of one group, with display metadata."""

    group_id: str
    name: str
    color: str
    history: list[PerformancePoint] = field(default_factory=list)


@dataclass
class GroupSummary(BaseEntity):
    """Group with its member count."""

    group: KeywordGroup
    keyword_count: int


@dataclass
class GroupStats(BaseEntity):
    """Group snapshot built from each member's latest rank check."""

    group: KeywordGroup
    keyword_count: int
    avg_position: float | None
    total_volume: int


@dataclass
class GroupKeyword(BaseEntity):
    """Member keyword with its latest rank check."""

    id: str
    phrase: str
    current_position: int | None
    url: str | None
    search_volume: int | None
    difficulty: float | None
    last_updated: datetime | None
