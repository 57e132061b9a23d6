"""Velocity analytics - windowed history and summary statistics."""

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone

from loguru import logger

from app.models.velocity import VelocityFact, VelocityStats
from app.repositories.velocity import VelocityRepository
from helpers import formulas
from helpers.validators import day_string, validate_window
from settings import DEFAULT_WINDOW_DAYS, STALENESS_DAYS


def utc_today() -> date:
    """Current UTC calendar day (date keys are UTC days)."""
    return datetime.now(timezone.utc).date()


class VelocityAnalytics:
    """Reads a trailing window of velocity facts and reduces it."""

    def __init__(self, repo: VelocityRepository, today: Callable[[], date] = utc_today):
        self._repo = repo
        self._today = today
        logger.debug("VelocityAnalytics initialized")

    def cutoff(self, window_days: int) -> str:
        """First day (inclusive) of a window ending today."""
        validate_window(window_days)
        return day_string(self._today() - timedelta(days=window_days))

    def get_history(self, domain_id: str, window_days: int = DEFAULT_WINDOW_DAYS) -> list[VelocityFact]:
        """Facts dated on or after today - window_days, oldest first."""
        return self._repo.get_since(domain_id, self.cutoff(window_days))

    def get_stats(self, domain_id: str, window_days: int = DEFAULT_WINDOW_DAYS) -> VelocityStats:
        """Totals and per-day averages over the days actually tracked."""
        history = self.get_history(domain_id, window_days)
        days_tracked = len(history)

        total_new = sum(h.new_count for h in history)
        total_lost = sum(h.lost_count for h in history)
        net_change = total_new - total_lost

        stats = VelocityStats(
            avg_new_per_day=formulas.safe_average(total_new, days_tracked),
            avg_lost_per_day=formulas.safe_average(total_lost, days_tracked),
            avg_net_change=formulas.safe_average(net_change, days_tracked),
            total_new=total_new,
            total_lost=total_lost,
            net_change=net_change,
            days_tracked=days_tracked,
        )
        logger.info("Velocity stats for {} ({}d): {} days tracked", domain_id, window_days, days_tracked)
        return stats

    def is_stale(self, domain_id: str, max_age_days: int = STALENESS_DAYS) -> bool:
        """True when the newest fact is older than max_age_days, or missing."""
        latest = self._repo.get_latest(domain_id)
        if latest is None:
            return True
        age = self._today() - date.fromisoformat(latest.date)
        return age.days > max_age_days
