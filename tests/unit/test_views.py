"""Tests for API views - camelCase payloads over the wired container."""

import pytest

from web.api.errors import NotFoundError, ValidationError
from web.api.groups import (
    add_keywords_to_group,
    create_group,
    get_all_groups_performance,
    get_group_performance_history,
    get_group_stats,
    get_groups_by_domain,
    get_groups_for_keyword,
    get_keywords_by_group,
    update_group,
)
from web.api.velocity import (
    detect_velocity_anomalies,
    get_velocity_history,
    get_velocity_stats,
    save_daily_velocity,
)
from tests.conftest import days_ago


class TestVelocityViews:
    def test_save_reports_outcome(self, wired):
        assert save_daily_velocity("d1", days_ago(1), 5, 2, 100).to_json_dict() == {"created": True}
        assert save_daily_velocity("d1", days_ago(1), 6, 2, 101).to_json_dict() == {"updated": True}

    def test_history_payload(self, wired):
        save_daily_velocity("d1", days_ago(1), 5, 2, 100)

        item = get_velocity_history("d1")[0].to_json_dict()

        assert set(item) == {"domainId", "date", "newCount", "lostCount", "netChange", "totalCount", "recordedAt"}
        assert item["netChange"] == 3

    def test_stats_payload(self, wired):
        save_daily_velocity("d1", days_ago(1), 5, 2, 100)

        stats = get_velocity_stats("d1", 7).to_json_dict()

        assert stats == {
            "avgNewPerDay": 5.0,
            "avgLostPerDay": 2.0,
            "avgNetChange": 3.0,
            "totalNew": 5,
            "totalLost": 2,
            "netChange": 3,
            "daysTracked": 1,
        }

    def test_anomaly_payload(self, wired):
        for offset in range(10, 0, -1):
            save_daily_velocity("d1", days_ago(offset), 10, 10, 500)
        save_daily_velocity("d1", days_ago(0), 110, 10, 600)

        anomalies = [a.to_json_dict() for a in detect_velocity_anomalies("d1")]

        assert len(anomalies) == 1
        assert anomalies[0]["type"] == "spike"
        assert anomalies[0]["severity"] == "high"
        assert set(anomalies[0]) == {"date", "newCount", "lostCount", "netChange", "zScore", "type", "severity"}

    def test_default_window(self, wired):
        save_daily_velocity("d1", days_ago(30), 1, 0, 1)
        save_daily_velocity("d1", days_ago(31), 1, 0, 1)
        assert len(get_velocity_history("d1")) == 1

    def test_bad_window(self, wired):
        with pytest.raises(ValidationError):
            get_velocity_stats("d1", -1)

    def test_zero_window_means_default(self, wired):
        save_daily_velocity("d1", days_ago(30), 1, 0, 1)
        save_daily_velocity("d1", days_ago(31), 1, 0, 1)
        assert len(get_velocity_history("d1", 0)) == 1
        assert get_velocity_stats("d1", 0).days_tracked == 1

    def test_blank_domain(self, wired):
        with pytest.raises(ValidationError):
            get_velocity_history(" ")


class TestGroupViews:
    @pytest.fixture
    def group_id(self, wired, add_keyword, add_position):
        add_keyword("k1")
        add_keyword("k2")
        group_id = create_group("example.com", "brand", "#ff0000")
        add_keywords_to_group(group_id, ["k1", "k2"])
        add_position("k1", days_ago(1), 4, search_volume=100)
        add_position("k2", days_ago(1), 5, search_volume=40)
        return group_id

    def test_performance_history(self, group_id):
        points = [p.to_json_dict() for p in get_group_performance_history(group_id)]
        assert points == [{"date": days_ago(1), "averagePosition": 4.5}]

    def test_all_groups(self, group_id):
        data = [g.to_json_dict() for g in get_all_groups_performance("example.com")]
        assert data == [
            {
                "groupId": group_id,
                "name": "brand",
                "color": "#ff0000",
                "series": [{"date": days_ago(1), "averagePosition": 4.5}],
            }
        ]

    def test_unknown_group(self, wired):
        with pytest.raises(NotFoundError):
            get_group_performance_history("missing")

    def test_groups_by_domain(self, group_id):
        item = get_groups_by_domain("example.com")[0].to_json_dict()
        assert item["keywordCount"] == 2
        assert item["domainId"] == "example.com"

    def test_group_stats(self, group_id):
        stats = get_group_stats(group_id).to_json_dict()
        assert stats["avgPosition"] == 4.5
        assert stats["totalVolume"] == 140

    def test_keywords_by_group(self, group_id):
        keywords = {k.id: k.to_json_dict() for k in get_keywords_by_group(group_id)}
        assert keywords["k1"]["currentPosition"] == 4
        assert "searchVolume" in keywords["k1"]

    def test_unranked_group_keeps_null_fields(self, wired, add_keyword):
        add_keyword("k1")
        group_id = create_group("example.com", "unchecked", "#cccccc")
        add_keywords_to_group(group_id, ["k1"])

        stats = get_group_stats(group_id).to_json_dict()
        keyword = get_keywords_by_group(group_id)[0].to_json_dict()

        assert stats["avgPosition"] is None
        assert stats["keywordCount"] == 1
        assert stats["totalVolume"] == 0
        assert stats["description"] is None
        assert keyword["currentPosition"] is None
        assert keyword["url"] is None
        assert keyword["searchVolume"] is None
        assert keyword["difficulty"] is None

    def test_groups_for_keyword_have_no_count(self, group_id):
        item = get_groups_for_keyword("k1")[0].to_json_dict()
        assert item["id"] == group_id
        assert "keywordCount" not in item

    def test_clear_description(self, wired):
        group_id = create_group("example.com", "brand", "#ff0000", "Brand terms")

        update_group(group_id, color="#00ff00")
        assert get_groups_by_domain("example.com")[0].description == "Brand terms"

        update_group(group_id, description=None)
        item = get_groups_by_domain("example.com")[0].to_json_dict()
        assert item["description"] is None
        assert item["color"] == "#00ff00"
