"""ETL package - bulk loading of velocity facts, keywords and rank samples."""

from etl.loaders import load_keywords, load_position_samples, load_velocity_facts, read_rows
from etl.validation import validate_domain

__all__ = [
    "read_rows",
    "load_keywords",
    "load_position_samples",
    "load_velocity_facts",
    "validate_domain",
]
