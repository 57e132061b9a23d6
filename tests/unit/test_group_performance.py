"""Tests for keyword group performance series."""

import asyncio

import pytest

from app.errors import NotFoundError, ValidationError
from tests.conftest import days_ago


@pytest.fixture
def group_with_members(groups, add_keyword):
    """Group 'brand' with keywords k1, k2, k3 on example.com."""
    for k in ("k1", "k2", "k3"):
        add_keyword(k)
    group_id = groups.create_group("example.com", "brand", "#ff0000")
    groups.add_keywords_to_group(group_id, ["k1", "k2", "k3"])
    return group_id


class TestGroupPerformance:
    def test_average_per_date(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(2), 4)
        add_position("k2", days_ago(2), 5)
        add_position("k3", days_ago(2), 6)

        series = performance.get_group_performance(group_with_members)

        assert [(p.date, p.average_position) for p in series] == [(days_ago(2), 5.0)]

    def test_unranked_samples_ignored(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(1), 4)
        add_position("k2", days_ago(1), 5)
        add_position("k3", days_ago(1), None)

        series = performance.get_group_performance(group_with_members)

        assert series[0].average_position == 4.5

    def test_all_unranked_date_absent(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(3), None)
        add_position("k2", days_ago(3), None)
        add_position("k1", days_ago(2), 7)

        series = performance.get_group_performance(group_with_members)

        assert [p.date for p in series] == [days_ago(2)]

    def test_ascending_and_windowed(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(45), 1)
        add_position("k1", days_ago(1), 3)
        add_position("k2", days_ago(20), 8)
        add_position("k3", days_ago(30), 9)

        series = performance.get_group_performance(group_with_members, 30)

        assert [p.date for p in series] == [days_ago(30), days_ago(20), days_ago(1)]

    def test_rounded_to_one_decimal(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(1), 1)
        add_position("k2", days_ago(1), 2)
        add_position("k3", days_ago(1), 2)

        assert performance.get_group_performance(group_with_members)[0].average_position == 1.7

    def test_non_members_ignored(self, performance, group_with_members, add_keyword, add_position):
        add_keyword("outsider")
        add_position("outsider", days_ago(1), 90)
        add_position("k1", days_ago(1), 10)

        assert performance.get_group_performance(group_with_members)[0].average_position == 10.0

    def test_empty_group(self, performance, groups):
        group_id = groups.create_group("example.com", "empty", "#000000")
        assert performance.get_group_performance(group_id) == []

    def test_unknown_group(self, performance):
        with pytest.raises(NotFoundError):
            performance.get_group_performance("missing")

    def test_invalid_window(self, performance, group_with_members):
        with pytest.raises(ValidationError):
            performance.get_group_performance(group_with_members, -5)

    def test_async_variant(self, performance, group_with_members, add_position):
        add_position("k1", days_ago(1), 2)

        series = asyncio.run(performance.aget_group_performance(group_with_members))

        assert series[0].average_position == 2.0


class TestAllGroupsPerformance:
    def test_each_group_has_its_own_series(self, performance, groups, add_keyword, add_position):
        for k in ("a1", "a2", "b1"):
            add_keyword(k)
        brand = groups.create_group("example.com", "brand", "#ff0000")
        generic = groups.create_group("example.com", "generic", "#00ff00")
        groups.add_keywords_to_group(brand, ["a1", "a2"])
        groups.add_keywords_to_group(generic, ["b1", "a1"])

        add_position("a1", days_ago(1), 2)
        add_position("a2", days_ago(1), 4)
        add_position("b1", days_ago(1), 20)

        result = {g.name: g for g in performance.get_all_groups_performance("example.com")}

        assert set(result) == {"brand", "generic"}
        assert result["brand"].group_id == brand
        assert result["brand"].color == "#ff0000"
        assert result["brand"].history[0].average_position == 3.0
        assert result["generic"].history[0].average_position == 11.0

    def test_groups_are_independent(self, performance, groups, add_keyword, add_position):
        add_keyword("x")
        add_keyword("y")
        first = groups.create_group("example.com", "first", "#111111")
        second = groups.create_group("example.com", "second", "#222222")
        groups.add_keywords_to_group(first, ["x"])
        groups.add_keywords_to_group(second, ["y"])
        add_position("x", days_ago(1), 5)
        add_position("y", days_ago(1), 50)

        before = performance.get_group_performance(first)
        groups.remove_keywords_from_group(second, ["y"])

        assert performance.get_group_performance(first) == before
        assert performance.get_group_performance(second) == []

    def test_other_domain_excluded(self, performance, groups):
        groups.create_group("example.com", "mine", "#111111")
        groups.create_group("other.com", "theirs", "#222222")

        result = performance.get_all_groups_performance("example.com")

        assert [g.name for g in result] == ["mine"]

    def test_domain_without_groups(self, performance):
        assert performance.get_all_groups_performance("nobody.com") == []
