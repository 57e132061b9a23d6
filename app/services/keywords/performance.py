"""Keyword group performance - average member position per day."""

import asyncio
from collections.abc import Callable
from datetime import date, timedelta

from loguru import logger

from app.errors import NotFoundError
from app.models.keywords import GroupPerformance, KeywordGroup, PerformancePoint, PositionSample
from app.repositories.keywords import GroupRepository, PositionRepository
from app.services.velocity.analytics import utc_today
from helpers import formulas
from helpers.validators import day_string, validate_window
from settings import DEFAULT_WINDOW_DAYS, MAX_CONCURRENT


class GroupPerformanceAnalytics:
    """Builds per-group rank curves from membership and position history.

    Member histories are read concurrently (one worker thread and DuckDB
    cursor per keyword) and only reduced once every read has finished.
    """

    def __init__(
        self,
        group_repo: GroupRepository,
        position_repo: PositionRepository,
        today: Callable[[], date] = utc_today,
        max_concurrent: int = MAX_CONCURRENT,
    ):
        self._groups = group_repo
        self._positions = position_repo
        self._today = today
        self._max_concurrent = max_concurrent
        logger.debug("GroupPerformanceAnalytics initialized (max_concurrent={})", max_concurrent)

    def _cutoff(self, window_days: int) -> str:
        validate_window(window_days)
        return day_string(self._today() - timedelta(days=window_days))

    def _read_since(self, keyword_id: str, cutoff: str) -> list[PositionSample]:
        """Worker-thread read on a private cursor."""
        cursor = self._positions.cursor()
        try:
            return self._positions.get_since(keyword_id, cutoff, cursor)
        finally:
            cursor.close()

    async def _fetch_samples(
        self,
        keyword_ids: list[str],
        cutoff: str,
        sem: asyncio.Semaphore,
    ) -> list[list[PositionSample]]:
        async def fetch(keyword_id: str) -> list[PositionSample]:
            async with sem:
                return await asyncio.to_thread(self._read_since, keyword_id, cutoff)

        return await asyncio.gather(*[fetch(k) for k in keyword_ids])

    async def _series(self, group: KeywordGroup, cutoff: str, sem: asyncio.Semaphore) -> list[PerformancePoint]:
        keyword_ids = self._groups.get_member_ids(group.id)
        per_keyword = await self._fetch_samples(keyword_ids, cutoff, sem)

        averaged = formulas.average_by_date((s.date, s.position) for samples in per_keyword for s in samples)
        logger.debug("Group {}: {} members, {} dated points", group.id, len(keyword_ids), len(averaged))
        return [PerformancePoint(date=d, average_position=avg) for d, avg in averaged]

    def _require_group(self, group_id: str) -> KeywordGroup:
        group = self._groups.get(group_id)
        if group is None:
            raise NotFoundError(f"Keyword group not found: {group_id}")
        return group

    async def aget_group_performance(
        self,
        group_id: str,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> list[PerformancePoint]:
        """Async variant of get_group_performance for callers inside an event loop."""
        cutoff = self._cutoff(window_days)
        group = self._require_group(group_id)
        return await self._series(group, cutoff, asyncio.Semaphore(self._max_concurrent))

    async def aget_all_groups_performance(
        self,
        domain_id: str,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> list[GroupPerformance]:
        """Async variant of get_all_groups_performance."""
        cutoff = self._cutoff(window_days)
        groups = self._groups.get_by_domain(domain_id)
        sem = asyncio.Semaphore(self._max_concurrent)

        series = await asyncio.gather(*[self._series(g, cutoff, sem) for g in groups])

        logger.info("Computed performance for {} groups of {}", len(groups), domain_id)
        return [
            GroupPerformance(group_id=g.id, name=g.name, color=g.color, history=s)
            for g, s in zip(groups, series)
        ]

    def get_group_performance(self, group_id: str, window_days: int = DEFAULT_WINDOW_DAYS) -> list[PerformancePoint]:
        """Average position of the group's members per day, oldest first.

        Unranked samples are ignored; days where no member ranked are absent.
        Raises NotFoundError for an unknown group.
        """
        return asyncio.run(self.aget_group_performance(group_id, window_days))

    def get_all_groups_performance(
        self,
        domain_id: str,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> list[GroupPerformance]:
        """Performance series for every group of a domain, with name and color."""
        return asyncio.run(self.aget_all_groups_performance(domain_id, window_days))
