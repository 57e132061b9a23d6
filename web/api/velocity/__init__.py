"""Velocity API."""

from web.api.velocity.views import (
    detect_velocity_anomalies,
    get_velocity_history,
    get_velocity_stats,
    save_daily_velocity,
)

__all__ = [
    "save_daily_velocity",
    "get_velocity_history",
    "get_velocity_stats",
    "detect_velocity_anomalies",
]
