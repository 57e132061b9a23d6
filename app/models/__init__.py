"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.keywords import (
    GROUP_MEMBERSHIP_DDL,
    KEYWORD_DDL,
    KEYWORD_GROUP_DDL,
    KEYWORD_GROUP_INDEXES,
    KEYWORD_INDEXES,
    KEYWORD_POSITION_DDL,
    KEYWORD_POSITION_INDEXES,
    GroupPerformance,
    Keyword,
    KeywordGroup,
    PerformancePoint,
    PositionSample,
)
from app.models.velocity import (
    VELOCITY_DDL,
    VELOCITY_INDEXES,
    AnomalyType,
    Severity,
    VelocityAnomaly,
    VelocityFact,
    VelocityStats,
)

ALL_DDL = [
    # Velocity
    VELOCITY_DDL,
    # Keywords
    KEYWORD_DDL,
    KEYWORD_GROUP_DDL,
    GROUP_MEMBERSHIP_DDL,
    KEYWORD_POSITION_DDL,
]

ALL_INDEXES = [
    *VELOCITY_INDEXES,
    *KEYWORD_INDEXES,
    *KEYWORD_GROUP_INDEXES,
    *KEYWORD_POSITION_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Velocity
    "VELOCITY_DDL",
    "AnomalyType",
    "Severity",
    "VelocityFact",
    "VelocityStats",
    "VelocityAnomaly",
    # Keywords
    "KEYWORD_DDL",
    "KEYWORD_GROUP_DDL",
    "GROUP_MEMBERSHIP_DDL",
    "KEYWORD_POSITION_DDL",
    "Keyword",
    "KeywordGroup",
    "PositionSample",
    "PerformancePoint",
    "GroupPerformance",
    # All DDL
    "ALL_DDL",
    "ALL_INDEXES",
]
