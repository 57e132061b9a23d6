"""Velocity API response schemas."""

from datetime import datetime
from typing import Literal

from web.api.base import CamelModel


class RecordVelocityResponse(CamelModel):
    """Outcome of a daily velocity write: exactly one flag is set."""

    created: bool | None = None
    updated: bool | None = None

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class VelocityFactItem(CamelModel):
    """One day of backlink velocity."""

    domain_id: str
    date: str
    new_count: int
    lost_count: int
    net_change: int
    total_count: int
    recorded_at: datetime


class VelocityStatsResponse(CamelModel):
    """Window summary."""

    avg_new_per_day: float
    avg_lost_per_day: float
    avg_net_change: float
    total_new: int
    total_lost: int
    net_change: int
    days_tracked: int


class AnomalyItem(CamelModel):
    """Unusual velocity day."""

    date: str
    new_count: int
    lost_count: int
    net_change: int
    z_score: float
    type: Literal["spike", "drop"]
    severity: Literal["low", "medium", "high"]
