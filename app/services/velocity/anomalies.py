"""Velocity anomaly detection - z-score on daily net change."""

from loguru import logger

from app.models.velocity import AnomalyType, Severity, VelocityAnomaly
from app.services.velocity.analytics import VelocityAnalytics
from helpers import formulas
from settings import (
    ANOMALY_THRESHOLD,
    DEFAULT_WINDOW_DAYS,
    MIN_ANOMALY_POINTS,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
)


class AnomalyDetector:
    """Flags days whose net change is more than `threshold` stds from the mean."""

    def __init__(
        self,
        analytics: VelocityAnalytics,
        threshold: float = ANOMALY_THRESHOLD,
        min_points: int = MIN_ANOMALY_POINTS,
        medium: float = SEVERITY_MEDIUM,
        high: float = SEVERITY_HIGH,
    ):
        self._analytics = analytics
        self.threshold = threshold
        self.min_points = min_points
        self.medium = medium
        self.high = high

    def detect_anomalies(self, domain_id: str, window_days: int = DEFAULT_WINDOW_DAYS) -> list[VelocityAnomaly]:
        """Anomalous days of the window, in chronological order.

        Fewer than `min_points` days gives an empty list.
        """
        history = self._analytics.get_history(domain_id, window_days)
        if len(history) < self.min_points:
            logger.debug("Not enough history for {} ({} < {})", domain_id, len(history), self.min_points)
            return []

        scores = formulas.z_scores([h.net_change for h in history])

        anomalies = [
            VelocityAnomaly(
                date=h.date,
                new_count=h.new_count,
                lost_count=h.lost_count,
                net_change=h.net_change,
                z_score=z,
                type=AnomalyType.SPIKE if z > 0 else AnomalyType.DROP,
                severity=Severity(formulas.severity(z, self.medium, self.high)),
            )
            for h, z in zip(history, scores)
            if formulas.is_anomalous(z, self.threshold)
        ]

        logger.info("Detected {} anomalies for {} over {} days", len(anomalies), domain_id, len(history))
        return anomalies
