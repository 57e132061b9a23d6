"""Velocity domain entities - stored facts and computed analytics."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity


class AnomalyType(StrEnum):
    """Direction of an unusual day."""

    SPIKE = "spike"
    DROP = "drop"


class Severity(StrEnum):
    """Severity tier by absolute z-score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class VelocityFact(BaseEntity):
    """Backlinks gained/lost by a domain on one day."""

    domain_id: str
    date: str
    new_count: int
    lost_count: int
    net_change: int
    total_count: int
    recorded_at: datetime


@dataclass
class VelocityStats(BaseEntity):
    """Window summary of velocity facts."""

    avg_new_per_day: float
    avg_lost_per_day: float
    avg_net_change: float
    total_new: int
    total_lost: int
    net_change: int
    days_tracked: int


@dataclass
class VelocityAnomaly(BaseEntity):
    """A day whose net change lies far from the window mean."""

    date: str
    new_count: int
    lost_count: int
    net_change: int
    z_score: float
    type: AnomalyType
    severity: Severity
