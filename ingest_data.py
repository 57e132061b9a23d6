#!/usr/bin/env python3
"""
Load visibility history and print velocity/group reports.

Usage:
    python ingest_data.py velocity facts.csv        # domain_id,date,new_count,lost_count,total_count
    python ingest_data.py keywords keywords.csv     # id,domain_id,phrase
    python ingest_data.py positions positions.csv   # keyword_id,date,position,url,search_volume,difficulty
    python ingest_data.py report example.com 30     # Velocity stats + anomalies (+ groups)
    python ingest_data.py --validate example.com    # Check velocity history integrity
"""

import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from etl import load_keywords, load_position_samples, load_velocity_facts, read_rows, validate_domain  # noqa: E402
from settings import DEFAULT_WINDOW_DAYS  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import groups, velocity  # noqa: E402

logger = setup_logging(to_file=True)


def run_validation(domain_id: str) -> bool:
    """Validate one domain's velocity history."""
    result = validate_domain(container.conn, domain_id)
    status = "OK" if result["valid"] else "ISSUES"

    print("\n" + "=" * 60)
    print(f"VELOCITY VALIDATION: {domain_id} [{status}]")
    print("=" * 60)
    for key, value in result["stats"].items():
        print(f"  {key}: {value}")
    for issue in result["issues"]:
        print(f"  ! {issue}")
    print("=" * 60 + "\n")

    return result["valid"]


def run_report(domain_id: str, days: int) -> None:
    """Print velocity stats, anomalies and group curves as JSON."""
    report = {
        "stale": container.velocity_analytics.is_stale(domain_id),
        "stats": velocity.get_velocity_stats(domain_id, days).to_json_dict(),
        "anomalies": [a.to_json_dict() for a in velocity.detect_velocity_anomalies(domain_id, days)],
        "groups": [g.to_json_dict() for g in groups.get_all_groups_performance(domain_id, days)],
    }
    print(json.dumps(report, indent=2))


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    container.init()

    if args[0] in ("--validate", "validate") and len(args) == 2:
        ok = run_validation(args[1])
        sys.exit(0 if ok else 2)

    if args[0] == "report" and len(args) in (2, 3):
        days = int(args[2]) if len(args) == 3 else DEFAULT_WINDOW_DAYS
        run_report(args[1], days)
        return

    if len(args) != 2 or args[0] not in ("velocity", "keywords", "positions"):
        print(__doc__)
        sys.exit(1)

    kind, path = args
    rows = read_rows(path)

    if kind == "velocity":
        counts = load_velocity_facts(container.velocity_ingestor, rows)
        logger.info("Velocity load complete: {}", counts)
    elif kind == "keywords":
        load_keywords(container.conn, rows)
    else:
        load_position_samples(container.conn, rows)


if __name__ == "__main__":
    main()
