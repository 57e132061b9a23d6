"""Velocity API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_id, validate_window_days

from .schemas import AnomalyItem, RecordVelocityResponse, VelocityFactItem, VelocityStatsResponse


def save_daily_velocity(
    domain_id: str,
    date: str,
    new_count: int,
    lost_count: int,
    total_count: int,
) -> RecordVelocityResponse:
    """Record one day of backlink velocity for a domain."""
    validate_id("domain_id", domain_id)
    outcome = container.velocity_ingestor.record_daily_velocity(domain_id, date, new_count, lost_count, total_count)

    if outcome == "created":
        return RecordVelocityResponse(created=True)
    return RecordVelocityResponse(updated=True)


def get_velocity_history(domain_id: str, days: int | None = None) -> list[VelocityFactItem]:
    """Get velocity facts of the last `days` days, oldest first."""
    validate_id("domain_id", domain_id)
    history = container.velocity_analytics.get_history(domain_id, validate_window_days(days))
    return [VelocityFactItem(**h.to_dict()) for h in history]


def get_velocity_stats(domain_id: str, days: int | None = None) -> VelocityStatsResponse:
    """Get velocity averages and totals."""
    validate_id("domain_id", domain_id)
    stats = container.velocity_analytics.get_stats(domain_id, validate_window_days(days))
    return VelocityStatsResponse(**stats.to_dict())


def detect_velocity_anomalies(domain_id: str, days: int | None = None) -> list[AnomalyItem]:
    """Get velocity spikes and drops beyond the z-score threshold."""
    validate_id("domain_id", domain_id)
    anomalies = container.anomaly_detector.detect_anomalies(domain_id, validate_window_days(days))
    return [
        AnomalyItem(
            date=a.date,
            new_count=a.new_count,
            lost_count=a.lost_count,
            net_change=a.net_change,
            z_score=a.z_score,
            type=a.type.value,
            severity=a.severity.value,
        )
        for a in anomalies
    ]
