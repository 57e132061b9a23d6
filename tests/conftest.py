"""Shared fixtures - in-memory DuckDB with all tables and wired services."""

from datetime import date, datetime, timedelta

import duckdb
import pytest

from app.container import container
from app.repositories import (
    GroupRepository,
    KeywordRepository,
    PositionRepository,
    VelocityRepository,
    init_tables,
)
from app.services import (
    AnomalyDetector,
    GroupPerformanceAnalytics,
    KeywordGroups,
    VelocityAnalytics,
    VelocityIngestor,
)

TODAY = date(2026, 3, 15)


def days_ago(n: int) -> str:
    """Date key n days before TODAY."""
    return (TODAY - timedelta(days=n)).isoformat()


@pytest.fixture
def conn():
    c = duckdb.connect(":memory:")
    init_tables(c)
    yield c
    c.close()


@pytest.fixture
def velocity_repo(conn):
    return VelocityRepository(conn, read_only=False)


@pytest.fixture
def ingestor(velocity_repo):
    return VelocityIngestor(velocity_repo)


@pytest.fixture
def analytics(velocity_repo):
    return VelocityAnalytics(velocity_repo, today=lambda: TODAY)


@pytest.fixture
def detector(analytics):
    return AnomalyDetector(analytics)


@pytest.fixture
def group_repo(conn):
    return GroupRepository(conn, read_only=False)


@pytest.fixture
def keyword_repo(conn):
    return KeywordRepository(conn)


@pytest.fixture
def position_repo(conn):
    return PositionRepository(conn)


@pytest.fixture
def groups(group_repo, keyword_repo, position_repo):
    return KeywordGroups(group_repo, keyword_repo, position_repo)


@pytest.fixture
def performance(group_repo, position_repo):
    return GroupPerformanceAnalytics(group_repo, position_repo, today=lambda: TODAY, max_concurrent=4)


@pytest.fixture
def add_keyword(conn):
    """Insert a keyword row."""

    def add(keyword_id: str, domain_id: str = "example.com", phrase: str | None = None):
        conn.execute(
            "INSERT INTO keyword (id, domain_id, phrase, created_at) VALUES (?, ?, ?, ?)",
            [keyword_id, domain_id, phrase or f"phrase {keyword_id}", datetime(2026, 1, 1)],
        )
        return keyword_id

    return add


@pytest.fixture
def add_position(conn):
    """Insert one rank sample; position None means not ranked."""

    def add(keyword_id: str, day: str, position: int | None, search_volume: int | None = None):
        conn.execute(
            """
            INSERT INTO keyword_position (keyword_id, date, position, url, search_volume, difficulty, fetched_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                keyword_id,
                day,
                position,
                f"https://example.com/{keyword_id}",
                search_volume,
                None,
                datetime.fromisoformat(day),
            ],
        )

    return add


@pytest.fixture
def wired(conn):
    """Global container bound to the in-memory DB."""
    container.reset()
    container.init(conn, today=lambda: TODAY)
    yield container
    container.reset()
