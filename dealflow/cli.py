#!/usr/bin/env python3
"""
Deal Flow CLI — query, aggregate and export the deal snapshot, or run the API server.

USAGE:
  python -m dealflow.cli list                                  # Most recent 25 deals
  python -m dealflow.cli list --type acquisition --min-amount 1000000000
  python -m dealflow.cli list --search kuiper --from 2020-01-01
  python -m dealflow.cli list --participant "Rocket Lab" --page 2 --limit 10
  python -m dealflow.cli list --period quarter --year 2024 --quarter 3

  python -m dealflow.cli stats                                 # Statistics as of today
  python -m dealflow.cli stats --as-of 2024-06-30

  python -m dealflow.cli participant spacex                    # All deals for a company
  python -m dealflow.cli recent --days 180                     # Deals in the last 180 days

  python -m dealflow.cli report                                # Excel deal flow report
  python -m dealflow.cli report --output ./out --as-of 2024-12-31

  python -m dealflow.cli serve                                 # Start API server
  python -m dealflow.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from dealflow.analytics.common import format_amount
from dealflow.analytics.stats import compute_stats
from dealflow.config import DEAL_TYPE_LABELS, DEAL_TYPE_ORDER, DEFAULT_PAGE_SIZE, RECENT_DAYS_DEFAULT, REPORTS_FOLDER
from dealflow.data.store import DealStore
from dealflow.data.schemas import DealQuery, PeriodFilter, PeriodType, resolve_now


def _banner(title: str) -> None:
    print("\n" + "=" * 70)
    print(f"  DEAL FLOW — {title}")
    print("=" * 70)


def _print_deals(deals) -> None:
    for d in deals:
        parties = ", ".join(p.company for p in d.parties)
        print(f"  {d.date:%Y-%m-%d}  {DEAL_TYPE_LABELS[d.type.value]:<9}{format_amount(d.amount):>12}  {d.title[:40]:<42}")
        print(f"  {'':<10}  {parties[:70]}")


def _build_period(args) -> PeriodFilter | None:
    """Build a PeriodFilter from CLI args."""
    pt = getattr(args, "period", None)
    if pt is None:
        return None
    return PeriodFilter(
        period_type=PeriodType(pt),
        year=getattr(args, "year", None),
        month=getattr(args, "month", None),
        quarter=getattr(args, "quarter", None),
    )


def cmd_list(args):
    """Filter, sort and page through deals."""
    _banner("DEALS")
    store = DealStore().load()
    period = _build_period(args)
    query = DealQuery(
        type=args.type,
        search=args.search,
        participant=args.participant,
        min_amount=args.min_amount,
        max_amount=args.max_amount,
        date_from=args.date_from,
        date_to=args.date_to,
        page=args.page,
        limit=args.limit,
    ).within(period)
    result = store.filter(query)
    if period is not None:
        print(f"\n  Period: {period.label}")
    print(f"\n{result.total:,} matching deals  |  page {result.page} of {result.total_pages}\n")
    _print_deals(result.records)
    print()


def cmd_stats(args):
    """Print the statistics snapshot."""
    _banner("STATISTICS")
    store = DealStore().load()
    stats = compute_stats(store, args.as_of)

    print(f"\n  As of {stats.as_of}  |  {store.date_range()}\n")
    print(f"  Total deals:        {stats.total_deals:,}")
    print(f"  Disclosed volume:   {format_amount(stats.total_volume)}")
    print(f"  Avg deal size:      {format_amount(stats.avg_deal_size)}")
    print(f"  This month:         {stats.deals_this_month:,} deals  |  {format_amount(stats.volume_this_month)}")
    print(f"  Year to date:       {stats.ytd_deal_count:,} deals  |  {format_amount(stats.ytd_volume)}")

    print("\n  BY TYPE")
    for b in stats.by_type:
        print(f"    {DEAL_TYPE_LABELS[b.type.value]:<10}{b.count:>5}  {format_amount(b.volume):>10}")

    print("\n  TRAILING QUARTERS")
    for q in stats.by_quarter:
        print(f"    {q.quarter:<10}{q.count:>5}  {format_amount(q.volume):>10}")

    print("\n  BY YEAR")
    for y in stats.by_year:
        print(f"    {y.year:<10}{y.count:>5}  {format_amount(y.volume):>10}")
    print()


def cmd_participant(args):
    """Every deal a company took part in."""
    _banner("PARTICIPANT")
    store = DealStore().load()
    canonical = store.resolve_participant(args.identifier)
    deals = store.get_by_participant(args.identifier)
    if not deals:
        print(f"\n  No deals found for '{args.identifier}' ({canonical})\n")
        return
    print(f"\n{canonical}: {len(deals)} deal(s)\n")
    _print_deals(deals)
    print()


def cmd_recent(args):
    """Deals within the last N days."""
    _banner("RECENT DEALS")
    store = DealStore().load()
    today = resolve_now(args.as_of)
    deals = store.get_recent(args.days, today)
    print(f"\n{len(deals)} deal(s) in the {args.days} days to {today}\n")
    _print_deals(deals)
    print()


def cmd_report(args):
    """Generate the Excel deal flow report."""
    from dealflow.reports.deal_flow_report import generate_excel, generate_json

    _banner("REPORT")
    store = DealStore().load()
    out_dir = Path(args.output) if args.output else REPORTS_FOLDER
    out = generate_excel(store, out_dir / "Deal_Flow_Report.xlsx", now=args.as_of)
    s = generate_json(store, now=args.as_of)["summary"]
    print(f"\n  {s['total_deals']:,} deals  |  {format_amount(s['total_volume'])} disclosed  |  "
          f"YTD {s['ytd_deal_count']:,}")
    print(f"\nReport saved to: {out}\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Deal Flow API on port {args.port}...")
    uvicorn.run("dealflow.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Deal Flow — deal query and aggregation engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # list subcommand
    list_parser = subparsers.add_parser("list", help="Filter and page through deals")
    list_parser.add_argument("--type", choices=DEAL_TYPE_ORDER, help="Deal type")
    list_parser.add_argument("--search", help="Text in title, description or party names")
    list_parser.add_argument("--participant", help="Company name or slug")
    list_parser.add_argument("--min-amount", type=float, help="Minimum disclosed amount (USD)")
    list_parser.add_argument("--max-amount", type=float, help="Maximum disclosed amount (USD)")
    list_parser.add_argument("--from", dest="date_from", help="Start date YYYY-MM-DD")
    list_parser.add_argument("--to", dest="date_to", help="End date YYYY-MM-DD")
    list_parser.add_argument("--period", choices=["month", "quarter", "year"], help="Calendar period")
    list_parser.add_argument("--year", type=int, help="Year")
    list_parser.add_argument("--month", type=int, choices=range(1, 13), metavar="MONTH", help="Month (1-12)")
    list_parser.add_argument("--quarter", type=int, choices=range(1, 5), metavar="QUARTER", help="Quarter (1-4)")
    list_parser.add_argument("--page", type=int, default=1, help="Page number (default 1)")
    list_parser.add_argument("--limit", type=int, default=DEFAULT_PAGE_SIZE,
                             help=f"Deals per page (default {DEFAULT_PAGE_SIZE})")
    list_parser.set_defaults(func=cmd_list)

    # stats subcommand
    stats_parser = subparsers.add_parser("stats", help="Statistics snapshot")
    stats_parser.add_argument("--as-of", help="Reference date YYYY-MM-DD (default today)")
    stats_parser.set_defaults(func=cmd_stats)

    # participant subcommand
    participant_parser = subparsers.add_parser("participant", help="Deals for one company")
    participant_parser.add_argument("identifier", help="Company slug or name")
    participant_parser.set_defaults(func=cmd_participant)

    # recent subcommand
    recent_parser = subparsers.add_parser("recent", help="Deals in the last N days")
    recent_parser.add_argument("--days", type=int, default=RECENT_DAYS_DEFAULT,
                               help=f"Look-back window (default {RECENT_DAYS_DEFAULT})")
    recent_parser.add_argument("--as-of", help="Reference date YYYY-MM-DD (default today)")
    recent_parser.set_defaults(func=cmd_recent)

    # report subcommand
    report_parser = subparsers.add_parser("report", help="Generate Excel deal flow report")
    report_parser.add_argument("--output", help=f"Output directory (default: {REPORTS_FOLDER})")
    report_parser.add_argument("--as-of", help="Reference date YYYY-MM-DD (default today)")
    report_parser.set_defaults(func=cmd_report)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    period = _build_period(args)
    if period is not None and period.missing_fields():
        flags = ", ".join(f"--{name}" for name in period.missing_fields())
        parser.error(f"--period {args.period} requires {flags}")

    args.func(args)


if __name__ == "__main__":
    main()
