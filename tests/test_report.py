from __future__ import annotations

from openpyxl import load_workbook

from dealflow.data.schemas import DealQuery
from dealflow.reports.deal_flow_report import generate_excel, generate_json


def test_generate_json(store, now):
    data = generate_json(store, now=now)
    assert data["as_of"] == "2022-06-30"
    assert data["date_range"] == "2021-01-10 to 2022-06-15"
    assert data["summary"]["total_deals"] == 4
    assert data["matching_deals"] == 4

    funding = data["by_type"][0]
    assert funding["label"] == "FUNDING"
    assert funding["share_of_count"] == 50.0
    assert funding["share_of_volume"] == 85.7

    d2 = next(d for d in data["deals"] if d["title"].startswith("Big Aero"))
    assert d2["amount"] is None
    assert d2["amount_label"] == "Undisclosed"


def test_generate_json_collects_every_page(store, now):
    data = generate_json(store, DealQuery(min_amount=1, limit=1), now)
    assert data["matching_deals"] == 3
    assert [d["title"] for d in data["deals"]] == ["Acme Series B", "Lunar lander contract", "Acme Series A"]


def test_generate_excel(store, now, tmp_path):
    path = generate_excel(store, tmp_path / "out" / "deal_flow.xlsx", now=now)
    assert path.exists()

    wb = load_workbook(path)
    assert wb.sheetnames == ["Summary", "By Quarter", "By Year", "Deals"]

    deals = wb["Deals"]
    assert deals.cell(row=1, column=1).value == "Date"
    assert [deals.cell(row=r, column=3).value for r in range(2, 6)] == [
        "Acme Series B", "Lunar lander contract", "Big Aero acquires Tiny Sat", "Acme Series A",
    ]
    assert deals.cell(row=4, column=4).value == "Undisclosed"

    quarters = wb["By Quarter"]
    assert quarters.cell(row=2, column=1).value == "Q3 2019"
    assert quarters.cell(row=13, column=1).value == "Q2 2022"
    assert quarters.cell(row=14, column=1).value == "TOTAL"
    assert quarters.cell(row=14, column=2).value == 4


def test_generate_excel_without_matches(store, now, tmp_path):
    path = generate_excel(store, tmp_path / "empty.xlsx", DealQuery(type="ipo"), now)
    deals = load_workbook(path)["Deals"]
    assert deals.cell(row=2, column=1).value == "No matching deals"
    assert deals.cell(row=3, column=1).value is None
