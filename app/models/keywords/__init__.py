"""Keyword domain models - keywords, groups, memberships and rank samples."""

from app.models.keywords.entities import (
    GroupKeyword,
    GroupPerformance,
    GroupStats,
    GroupSummary,
    Keyword,
    KeywordGroup,
    PerformancePoint,
    PositionSample,
)
from app.models.keywords.group import GROUP_MEMBERSHIP_DDL, KEYWORD_GROUP_DDL, KEYWORD_GROUP_INDEXES
from app.models.keywords.keyword import KEYWORD_DDL, KEYWORD_INDEXES
from app.models.keywords.position import (
    KEYWORD_POSITION_COLUMNS,
    KEYWORD_POSITION_DDL,
    KEYWORD_POSITION_INDEXES,
)

__all__ = [
    "KEYWORD_DDL",
    "KEYWORD_INDEXES",
    "KEYWORD_GROUP_DDL",
    "GROUP_MEMBERSHIP_DDL",
    "KEYWORD_GROUP_INDEXES",
    "KEYWORD_POSITION_DDL",
    "KEYWORD_POSITION_INDEXES",
    "KEYWORD_POSITION_COLUMNS",
    "Keyword",
    "KeywordGroup",
    "PositionSample",
    "PerformancePoint",
    "GroupPerformance",
    "GroupSummary",
    "GroupStats",
    "GroupKeyword",
]
