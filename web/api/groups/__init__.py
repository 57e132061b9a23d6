"""Keyword group API."""

from web.api.groups.views import (
    add_keywords_to_group,
    create_group,
    delete_group,
    get_all_groups_performance,
    get_group_performance_history,
    get_group_stats,
    get_groups_by_domain,
    get_groups_for_keyword,
    get_keywords_by_group,
    remove_keywords_from_group,
    update_group,
)

__all__ = [
    "get_group_performance_history",
    "get_all_groups_performance",
    "get_groups_by_domain",
    "get_group_stats",
    "get_keywords_by_group",
    "get_groups_for_keyword",
    "create_group",
    "update_group",
    "delete_group",
    "add_keywords_to_group",
    "remove_keywords_from_group",
]
