"""Keyword model (reference data owned by the rank-check side)."""

KEYWORD_DDL = """
CREATE TABLE IF NOT EXISTS keyword (
    id VARCHAR PRIMARY KEY,
    domain_id VARCHAR NOT NULL,
    phrase VARCHAR NOT NULL,
    created_at TIMESTAMP
)
"""

KEYWORD_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_keyword_domain ON keyword(domain_id)",
]
