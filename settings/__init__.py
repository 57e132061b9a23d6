"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("VISIBILITY_DB_PATH", "visibility.duckdb")

# Logging
LOG_DIR = Path("logs")

# Analytics windows
DEFAULT_WINDOW_DAYS = int(os.getenv("VISIBILITY_WINDOW_DAYS", "30"))
STALENESS_DAYS = int(os.getenv("VISIBILITY_STALENESS_DAYS", "7"))

# Anomaly detection (z-score on daily net change)
ANOMALY_THRESHOLD = float(os.getenv("VISIBILITY_ANOMALY_THRESHOLD", "2.0"))
SEVERITY_MEDIUM = 2.5
SEVERITY_HIGH = 3.0
MIN_ANOMALY_POINTS = 3

# Fan-out / ETL
MAX_CONCURRENT = int(os.getenv("VISIBILITY_MAX_CONCURRENT", "20"))
BATCH_SIZE = 500

# Log sinks
LOG_LEVEL = os.getenv("VISIBILITY_LOG_LEVEL", "INFO")
LOG_RETENTION_DAYS = 7
