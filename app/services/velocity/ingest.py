"""Velocity ingestion - one fact per domain per day."""

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from app.models.velocity import VelocityFact
from app.repositories.velocity import VelocityRepository
from helpers.validators import validate_count, validate_day


class VelocityIngestor:
    """Writes daily backlink velocity facts through an idempotent upsert."""

    def __init__(self, repo: VelocityRepository, clock: Callable[[], datetime] = datetime.now):
        self._repo = repo
        self._clock = clock

    def record_daily_velocity(
        self,
        domain_id: str,
        date: str,
        new_count: int,
        lost_count: int,
        total_count: int,
    ) -> str:
        """Create or overwrite the fact for (domain_id, date).

        Replaying the same call converges on a single fact holding the latest
        counts. Returns "created" or "updated". Store errors propagate.
        """
        validate_day(date)
        validate_count("new_count", new_count)
        validate_count("lost_count", lost_count)
        validate_count("total_count", total_count)

        fact = VelocityFact(
            domain_id=domain_id,
            date=date,
            new_count=new_count,
            lost_count=lost_count,
            net_change=new_count - lost_count,
            total_count=total_count,
            recorded_at=self._clock(),
        )
        outcome = self._repo.upsert(fact)
        logger.info(
            "Velocity {} for {} on {}: +{} / -{} (total {})",
            outcome,
            domain_id,
            date,
            new_count,
            lost_count,
            total_count,
        )
        return outcome
