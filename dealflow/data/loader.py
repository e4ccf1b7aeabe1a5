"""
Deal dataset loading: compiled-in seed table or a JSON file, parsed and validated.
"""
from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Iterable

from dealflow.config import DEALS_FILE
from dealflow.data.schemas import Deal, DealParty, DealType, PartyRole


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_party(raw: dict) -> DealParty:
    return DealParty(
        company=raw["company"],
        role=PartyRole(raw["role"]),
        company_slug=raw.get("companySlug") or raw.get("company_slug") or None,
    )


def parse_deal(raw: dict) -> Deal:
    """Build a Deal from a raw mapping (camelCase or snake_case keys).

    Raises ValueError naming the record when a field is malformed.
    """
    deal_id = raw.get("id", "<missing id>")
    try:
        amount = raw.get("amount")
        return Deal(
            id=raw["id"],
            type=DealType(raw["type"]),
            title=raw["title"],
            amount=float(amount) if amount is not None else None,
            date=dt.date.fromisoformat(raw["date"]),
            parties=tuple(_parse_party(p) for p in raw.get("parties", [])),
            source=raw.get("source", ""),
            description=raw.get("description", ""),
            verified=bool(raw.get("verified", False)),
            stage=raw.get("stage"),
            source_url=raw.get("sourceUrl") or raw.get("source_url"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Malformed deal record {deal_id!r}: {exc}") from exc


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_deals(deals: Iterable[Deal]) -> None:
    """Reject a bad snapshot: unique ids, amount >= 0 or None, non-empty parties."""
    seen: set[str] = set()
    for d in deals:
        if d.id in seen:
            raise ValueError(f"Duplicate deal id: {d.id!r}")
        seen.add(d.id)
        if d.amount is not None and d.amount < 0:
            raise ValueError(f"Deal {d.id!r} has negative amount {d.amount}")
        if not d.parties:
            raise ValueError(f"Deal {d.id!r} has no parties")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def read_json_deals(path: Path) -> list[dict]:
    """Read a JSON dataset: either a list of deals or {"deals": [...]}."""
    payload = json.loads(Path(path).read_text())
    if isinstance(payload, dict):
        payload = payload.get("deals", [])
    return payload


def load_deals(source: str | Path | None = None) -> list[Deal]:
    """Load deals from a JSON file, else DEALFLOW_DEALS_FILE, else the seed table."""
    if source is None and DEALS_FILE:
        source = DEALS_FILE

    if source is None:
        from dealflow.data.seed import SEED_DEALS
        raw_deals = SEED_DEALS
        print("  Source: compiled-in seed table")
    else:
        raw_deals = read_json_deals(Path(source))
        print(f"  Source: {source}")

    deals = [parse_deal(r) for r in raw_deals]
    validate_deals(deals)
    return deals
