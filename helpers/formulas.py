"""Pure math formulas - no I/O, easily testable."""

import math
from collections import defaultdict
from collections.abc import Iterable

import numpy as np


def round_half_up(value: float, digits: int = 1) -> float:
    """Round like JavaScript's Math.round(x * 10**d) / 10**d."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def safe_average(total: float, count: int) -> float:
    """total / count, or 0.0 when there is nothing to average."""
    return total / count if count else 0.0


def z_scores(values: list[float]) -> list[float]:
    """Z-score of each value against the population mean and std (ddof=0).

    A flat series (std == 0) scores 0.0 everywhere.
    """
    if not values:
        return []

    arr = np.asarray(values, dtype=float)
    std = float(arr.std())
    if std == 0:
        return [0.0] * len(values)

    mean = float(arr.mean())
    return [(float(v) - mean) / std for v in arr]


def severity(z: float, medium: float = 2.5, high: float = 3.0) -> str:
    """Severity tier for an anomalous z-score."""
    magnitude = abs(z)
    if magnitude > high:
        return "high"
    if magnitude > medium:
        return "medium"
    return "low"


def is_anomalous(z: float, threshold: float = 2.0) -> bool:
    """Strictly beyond the threshold; exactly at it does not count."""
    return abs(z) > threshold


def average_by_date(samples: Iterable[tuple[str, float | None]], digits: int = 1) -> list[tuple[str, float]]:
    """Mean value per date across series, ascending by date.

    None values are skipped; a date with only None values is omitted.
    """
    buckets: dict[str, list[float]] = defaultdict(list)
    for day, value in samples:
        if value is None:
            continue
        buckets[day].append(value)

    return [(day, round_half_up(sum(vals) / len(vals), digits)) for day, vals in sorted(buckets.items())]
