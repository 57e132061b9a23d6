"""Data validation functions."""

import duckdb


def validate_domain(conn: duckdb.DuckDBPyConnection, domain_id: str) -> dict:
    """Validate velocity history integrity for a domain."""
    issues = []
    stats = {}

    summary = conn.execute(
        """
        SELECT COUNT(*), COUNT(DISTINCT date), MIN(date), MAX(date)
        FROM backlink_velocity WHERE domain_id = ?
        """,
        [domain_id],
    ).fetchone()
    stats["facts"] = summary[0]
    stats["days"] = summary[1]
    stats["first_date"] = summary[2]
    stats["last_date"] = summary[3]
    if summary[0] == 0:
        issues.append("No velocity facts found")

    duplicates = summary[0] - summary[1]
    stats["duplicate_days"] = duplicates
    if duplicates > 0:
        issues.append(f"{duplicates} extra facts share a day with another fact")

    net_mismatch = conn.execute(
        "SELECT COUNT(*) FROM backlink_velocity WHERE domain_id = ? AND net_change <> new_count - lost_count",
        [domain_id],
    ).fetchone()[0]
    stats["net_change_mismatches"] = net_mismatch
    if net_mismatch > 0:
        issues.append(f"{net_mismatch} facts have net_change != new_count - lost_count")

    negative = conn.execute(
        """
        SELECT COUNT(*) FROM backlink_velocity
        WHERE domain_id = ? AND (new_count < 0 OR lost_count < 0 OR total_count < 0)
        """,
        [domain_id],
    ).fetchone()[0]
    stats["negative_counts"] = negative
    if negative > 0:
        issues.append(f"{negative} facts have negative counts")

    if summary[0] > 0:
        span = conn.execute(
            "SELECT date_diff('day', CAST(? AS DATE), CAST(? AS DATE)) + 1",
            [summary[2], summary[3]],
        ).fetchone()[0]
        stats["coverage_pct"] = round(summary[1] / span * 100, 1)
    else:
        stats["coverage_pct"] = 0

    return {
        "domain_id": domain_id,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
