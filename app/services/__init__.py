"""Services package - service class exports."""

from app.services.keywords import GroupPerformanceAnalytics, KeywordGroups
from app.services.velocity import AnomalyDetector, VelocityAnalytics, VelocityIngestor

__all__ = [
    "AnomalyDetector",
    "GroupPerformanceAnalytics",
    "KeywordGroups",
    "VelocityAnalytics",
    "VelocityIngestor",
]
