"""
Deal Flow — Configuration: paths, constants, display labels.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with DEALFLOW_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("DEALFLOW_DATA_DIR", str(Path.home() / "Desktop" / "Deal Flow")))
REPORTS_FOLDER = _data_dir / "reports"

# Optional JSON dataset that replaces the compiled-in seed table
DEALS_FILE = os.environ.get("DEALFLOW_DEALS_FILE") or None

# Comma-separated origins allowed to call the API; "*" for any
CORS_ORIGINS = [o.strip() for o in os.environ.get("DEALFLOW_CORS_ORIGINS", "*").split(",") if o.strip()]

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100
RECENT_DAYS_DEFAULT = 90
TRAILING_QUARTERS = 12

# ---------------------------------------------------------------------------
# Deal types: order matters (statistics breakdown order)
# ---------------------------------------------------------------------------
DEAL_TYPE_ORDER = ["funding_round", "acquisition", "contract_win", "ipo", "spac"]

DEAL_TYPE_LABELS = {
    "funding_round": "FUNDING",
    "acquisition": "M&A",
    "contract_win": "CONTRACT",
    "ipo": "IPO",
    "spac": "SPAC",
}

DEAL_TYPE_DESCRIPTIONS = [
    ("FUNDING", "Equity and venture rounds: Seed, Series A-N, growth equity"),
    ("M&A", "Acquisitions, mergers and joint ventures"),
    ("CONTRACT", "Government and commercial contract awards, task orders, launch contracts"),
    ("IPO", "Traditional initial public offerings"),
    ("SPAC", "Public listings via special purpose acquisition company mergers"),
]

# ---------------------------------------------------------------------------
# Amount range presets (min, max): used by the deals page dropdown
# ---------------------------------------------------------------------------
AMOUNT_RANGES = [
    {"label": "Under $100M", "min_amount": 0, "max_amount": 100_000_000},
    {"label": "$100M - $1B", "min_amount": 100_000_000, "max_amount": 1_000_000_000},
    {"label": "$1B+", "min_amount": 1_000_000_000, "max_amount": None},
]
