"""Keyword repositories."""

from app.repositories.keywords.group import GroupRepository
from app.repositories.keywords.keyword import KeywordRepository
from app.repositories.keywords.position import PositionRepository

__all__ = [
    "GroupRepository",
    "KeywordRepository",
    "PositionRepository",
]
