"""Keyword group and group membership models."""

KEYWORD_GROUP_DDL = """
CREATE TABLE IF NOT EXISTS keyword_group (
    id VARCHAR PRIMARY KEY,
    domain_id VARCHAR NOT NULL,
    name VARCHAR NOT NULL,
    color VARCHAR NOT NULL,
    description VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""

GROUP_MEMBERSHIP_DDL = """
CREATE TABLE IF NOT EXISTS keyword_group_membership (
    id VARCHAR PRIMARY KEY,
    group_id VARCHAR NOT NULL,
    keyword_id VARCHAR NOT NULL,
    added_at TIMESTAMP NOT NULL
)
"""

KEYWORD_GROUP_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_group_domain ON keyword_group(domain_id)",
    "CREATE INDEX IF NOT EXISTS idx_membership_group ON keyword_group_membership(group_id)",
    "CREATE INDEX IF NOT EXISTS idx_membership_keyword ON keyword_group_membership(keyword_id)",
]
