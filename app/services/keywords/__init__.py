"""Keyword services."""

from app.services.keywords.groups import UNSET, KeywordGroups
from app.services.keywords.performance import GroupPerformanceAnalytics

__all__ = [
    "GroupPerformanceAnalytics",
    "KeywordGroups",
    "UNSET",
]
