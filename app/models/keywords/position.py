"""Keyword position sample model (one rank check per keyword per day)."""

KEYWORD_POSITION_DDL = """
CREATE TABLE IF NOT EXISTS keyword_position (
    keyword_id VARCHAR NOT NULL,
    date VARCHAR NOT NULL,
    position INTEGER,
    url VARCHAR,
    search_volume INTEGER,
    difficulty DOUBLE,
    fetched_at TIMESTAMP NOT NULL
)
"""

KEYWORD_POSITION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_position_keyword ON keyword_position(keyword_id)",
    "CREATE INDEX IF NOT EXISTS idx_position_keyword_date ON keyword_position(keyword_id, date)",
]

KEYWORD_POSITION_COLUMNS = "keyword_id, date, position, url, search_volume, difficulty, fetched_at"
