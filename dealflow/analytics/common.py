"""
Safe math, quarter arithmetic, and formatting helpers used across analytics modules.
"""
from __future__ import annotations

import datetime as dt
import math

import numpy as np
import pandas as pd


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def pct_of_total(part: float, total: float) -> float:
    """Percentage of total."""
    return safe_divide(part, total) * 100


# ---------------------------------------------------------------------------
# Quarters
# ---------------------------------------------------------------------------

def quarter_of(month: int) -> int:
    """Fiscal quarter (1-4) for a calendar month: ceil(month / 3)."""
    return (month + 2) // 3


def quarter_label(year: int, quarter: int) -> str:
    return f"Q{quarter} {year}"


def trailing_quarters(now: dt.date, count: int) -> list[tuple[int, int]]:
    """The `count` (year, quarter) pairs ending with the quarter containing `now`, oldest first."""
    index = now.year * 4 + quarter_of(now.month) - 1
    pairs = []
    for i in range(index - count + 1, index + 1):
        pairs.append((i // 4, i % 4 + 1))
    return pairs


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_amount(value: float | None) -> str:
    """Compact currency string: $1.2B, $750M, $12K; None is "Undisclosed"."""
    if value is None or pd.isna(value):
        return "Undisclosed"
    if value >= 1_000_000_000_000:
        return f"${value / 1_000_000_000_000:.1f}T"
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.0f}M"
    if value >= 1_000:
        return f"${value / 1_000:.0f}K"
    return f"${value:.0f}"


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, (np.integer,)):
        return int(obj)
    if isinstance(obj, (np.floating,)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if isinstance(obj, (dt.date, pd.Timestamp)):
        return obj.isoformat()
    return obj
