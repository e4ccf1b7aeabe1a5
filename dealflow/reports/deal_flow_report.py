"""
Deal Flow Report — KPIs, type breakdown, quarterly and yearly series, deal list.
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

from dealflow.analytics.common import format_amount, pct_of_total
from dealflow.analytics.stats import compute_stats
from dealflow.config import DEAL_TYPE_DESCRIPTIONS, DEAL_TYPE_LABELS, MAX_PAGE_SIZE
from dealflow.data.schemas import DateLike, DealQuery, resolve_now
from dealflow.data.store import DealStore
from dealflow.excel.writer import DealWorkbook


def _deal_row(deal) -> dict:
    return {
        "date": deal.date,
        "type": DEAL_TYPE_LABELS[deal.type.value],
        "title": deal.title,
        "amount": deal.amount,
        "amount_label": format_amount(deal.amount),
        "parties": ", ".join(p.company for p in deal.parties),
        "stage": deal.stage or "",
        "source": deal.source,
        "verified": "Yes" if deal.verified else "No",
    }


def _all_matching(store: DealStore, query: DealQuery | None) -> tuple[list, int]:
    """Every deal matching the query criteria, across all pages."""
    if query is None:
        deals = store.get_all()
        return deals, len(deals)
    first = store.filter(replace(query, page=1, limit=MAX_PAGE_SIZE))
    deals = list(first.records)
    for page in range(2, first.total_pages + 1):
        deals.extend(store.filter(replace(query, page=page, limit=MAX_PAGE_SIZE)).records)
    return deals, first.total


def generate_json(
    store: DealStore,
    query: DealQuery | None = None,
    now: Optional[DateLike] = None,
) -> dict:
    stats = compute_stats(store, now)
    deals, total = _all_matching(store, query)

    by_type = []
    for bucket in stats.by_type:
        by_type.append({
            "type": bucket.type.value,
            "label": DEAL_TYPE_LABELS[bucket.type.value],
            "count": bucket.count,
            "volume": bucket.volume,
            "share_of_count": round(pct_of_total(bucket.count, stats.total_deals), 1),
            "share_of_volume": round(pct_of_total(bucket.volume, stats.total_volume), 1),
        })

    return {
        "as_of": stats.as_of,
        "date_range": store.date_range(),
        "summary": {
            "total_deals": stats.total_deals,
            "total_volume": stats.total_volume,
            "avg_deal_size": stats.avg_deal_size,
            "deals_this_month": stats.deals_this_month,
            "volume_this_month": stats.volume_this_month,
            "ytd_deal_count": stats.ytd_deal_count,
            "ytd_volume": stats.ytd_volume,
        },
        "by_type": by_type,
        "by_quarter": [{"quarter": q.quarter, "count": q.count, "volume": q.volume} for q in stats.by_quarter],
        "by_year": [{"year": y.year, "count": y.count, "volume": y.volume} for y in stats.by_year],
        "deals": [_deal_row(d) for d in deals],
        "matching_deals": total,
    }


def generate_excel(
    store: DealStore,
    output_path: str | Path,
    query: DealQuery | None = None,
    now: Optional[DateLike] = None,
) -> Path:
    today = resolve_now(now)
    data = generate_json(store, query, today)
    s = data["summary"]
    wb = DealWorkbook()

    # Summary: KPIs, legend, by type
    ws = wb.sheet("Summary")
    wb.heading(ws, "DEAL FLOW", f"Deal Flow Report  |  {data['date_range']}  |  as of {data['as_of']}")
    row = wb.kpis(ws, 4, [
        (s["total_deals"], "Total Deals", "number"),
        (s["total_volume"], "Total Volume", "currency"),
        (s["avg_deal_size"], "Avg Deal Size", "currency"),
        (s["ytd_deal_count"], "YTD Deals", "number"),
    ])

    row = wb.section(ws, row, "DEAL TYPE KEY")
    row = wb.key_table(ws, row, DEAL_TYPE_DESCRIPTIONS)

    row = wb.section(ws, row, "DEALS BY TYPE")
    wb.table(ws, row, [
        ("label", "text", "Deal Type"),
        ("count", "number", "Deals"),
        ("volume", "currency", "Disclosed Volume"),
        ("share_of_count", "percent", "% of Deals"),
        ("share_of_volume", "percent", "% of Volume"),
    ], data["by_type"], total=True, freeze=False)

    # Trailing quarters, current quarter highlighted
    ws_q = wb.sheet("By Quarter")
    last = len(data["by_quarter"]) - 1
    wb.table(ws_q, 1, [
        ("quarter", "text", "Quarter"),
        ("count", "number", "Deals"),
        ("volume", "currency", "Disclosed Volume"),
    ], data["by_quarter"], total=True,
        highlight=lambda i, r: "current" if i == last else None)

    ws_y = wb.sheet("By Year")
    wb.table(ws_y, 1, [
        ("year", "text", "Year"),
        ("count", "number", "Deals"),
        ("volume", "currency", "Disclosed Volume"),
    ], data["by_year"], total=True)

    # Filtered deals; undisclosed amounts flagged
    ws_d = wb.sheet("Deals")
    wb.table(ws_d, 1, [
        ("date", "date", "Date"),
        ("type", "text", "Type"),
        ("title", "text", "Deal"),
        ("amount", "currency", "Amount"),
        ("parties", "text", "Parties"),
        ("stage", "text", "Stage"),
        ("source", "text", "Source"),
        ("verified", "text", "Verified"),
    ], data["deals"], highlight=lambda i, r: "undisclosed" if r["amount"] is None else None)

    return wb.save(output_path)
