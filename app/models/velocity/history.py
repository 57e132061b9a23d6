"""Backlink velocity history model (one row per domain per day)."""

# No unique constraint: one-row-per-(domain_id, date) is kept by the upsert
# in VelocityRepository.
VELOCITY_DDL = """
CREATE TABLE IF NOT EXISTS backlink_velocity (
    domain_id VARCHAR NOT NULL,
    date VARCHAR NOT NULL,
    new_count INTEGER NOT NULL,
    lost_count INTEGER NOT NULL,
    net_change INTEGER NOT NULL,
    total_count INTEGER NOT NULL,
    recorded_at TIMESTAMP NOT NULL
)
"""

VELOCITY_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_velocity_domain ON backlink_velocity(domain_id)",
    "CREATE INDEX IF NOT EXISTS idx_velocity_domain_date ON backlink_velocity(domain_id, date)",
]

VELOCITY_COLUMNS = "domain_id, date, new_count, lost_count, net_change, total_count, recorded_at"
