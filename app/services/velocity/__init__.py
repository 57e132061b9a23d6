"""Velocity services."""

from app.services.velocity.analytics import VelocityAnalytics
from app.services.velocity.anomalies import AnomalyDetector
from app.services.velocity.ingest import VelocityIngestor

__all__ = [
    "AnomalyDetector",
    "VelocityAnalytics",
    "VelocityIngestor",
]
