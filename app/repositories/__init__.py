"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.db import get_write_connection, init_tables
from app.repositories.keywords import GroupRepository, KeywordRepository, PositionRepository
from app.repositories.velocity import VelocityRepository

__all__ = [
    # DB
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Velocity
    "VelocityRepository",
    # Keywords
    "GroupRepository",
    "KeywordRepository",
    "PositionRepository",
]
