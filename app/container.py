"""Dependency Injection container - initialized at app startup."""

from collections.abc import Callable
from datetime import date

import duckdb

from app.repositories.db import get_write_connection
from app.repositories.keywords import GroupRepository, KeywordRepository, PositionRepository
from app.repositories.velocity import VelocityRepository
from app.services.keywords import GroupPerformanceAnalytics, KeywordGroups
from app.services.velocity import AnomalyDetector, VelocityAnalytics, VelocityIngestor


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup.

        ``conn`` overrides the default database (tests pass an in-memory one),
        ``today`` pins the clock of the windowed services.
        """
        if self._initialized:
            return

        self._conn = conn if conn is not None else get_write_connection()
        windowed = {"today": today} if today else {}

        # Repositories (singletons, one shared connection)
        self._velocity_repo = VelocityRepository(self._conn, read_only=False)
        self._group_repo = GroupRepository(self._conn, read_only=False)
        self._keyword_repo = KeywordRepository(self._conn)
        self._position_repo = PositionRepository(self._conn)

        # Services (with injected repos)
        self.velocity_ingestor = VelocityIngestor(repo=self._velocity_repo)
        self.velocity_analytics = VelocityAnalytics(repo=self._velocity_repo, **windowed)
        self.anomaly_detector = AnomalyDetector(analytics=self.velocity_analytics)

        self.keyword_groups = KeywordGroups(
            group_repo=self._group_repo,
            keyword_repo=self._keyword_repo,
            position_repo=self._position_repo,
        )
        self.group_performance = GroupPerformanceAnalytics(
            group_repo=self._group_repo,
            position_repo=self._position_repo,
            **windowed,
        )

        self._initialized = True

    @property
    def conn(self) -> duckdb.DuckDBPyConnection:
        """Shared connection (ETL loaders write through it)."""
        return self._conn

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
