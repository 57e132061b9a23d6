"""Velocity domain models - daily backlink facts and anomaly entities."""

from app.models.velocity.entities import (
    AnomalyType,
    Severity,
    VelocityAnomaly,
    VelocityFact,
    VelocityStats,
)
from app.models.velocity.history import VELOCITY_COLUMNS, VELOCITY_DDL, VELOCITY_INDEXES

__all__ = [
    "VELOCITY_DDL",
    "VELOCITY_INDEXES",
    "VELOCITY_COLUMNS",
    "AnomalyType",
    "Severity",
    "VelocityFact",
    "VelocityStats",
    "VelocityAnomaly",
]
