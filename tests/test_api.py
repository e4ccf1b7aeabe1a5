from __future__ import annotations

from fastapi.testclient import TestClient

from dealflow import config
from dealflow.api import dependencies
from dealflow.main import create_app


def _ids(payload) -> list[str]:
    return [d["id"] for d in payload["deals"]]


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["deals"] == 4
    assert body["participants"] == 5
    assert body["years"] == [2021, 2022]


def test_store_not_loaded_returns_503(monkeypatch):
    monkeypatch.setattr(dependencies, "_store", None)
    client = TestClient(create_app())
    assert client.get("/api/deals").status_code == 503
    assert client.get("/api/health").status_code == 503


# ---------------------------------------------------------------------------
# /api/deals
# ---------------------------------------------------------------------------

def test_list_deals_default(client):
    body = client.get("/api/deals").json()
    assert _ids(body) == ["d4", "d3", "d2", "d1"]
    assert body["total"] == 4
    assert body["page"] == 1
    assert body["total_pages"] == 1
    assert "stats" not in body


def test_list_deals_filters(client):
    assert _ids(client.get("/api/deals", params={"type": "funding_round"}).json()) == ["d4", "d1"]
    assert _ids(client.get("/api/deals", params={"min_amount": 60}).json()) == ["d4", "d1"]
    assert _ids(client.get("/api/deals", params={"search": "lander"}).json()) == ["d3"]
    assert _ids(client.get("/api/deals", params={"participant": "orbital"}).json()) == ["d4", "d1"]
    assert _ids(client.get("/api/deals", params={
        "date_from": "2021-04-05", "date_to": "2022-01-20",
    }).json()) == ["d3", "d2"]


def test_list_deals_undisclosed_amount_is_null(client):
    body = client.get("/api/deals", params={"type": "acquisition"}).json()
    assert body["deals"][0]["amount"] is None


def test_list_deals_pagination(client):
    body = client.get("/api/deals", params={"page": 2, "limit": 3}).json()
    assert _ids(body) == ["d1"]
    assert body["total"] == 4
    assert body["total_pages"] == 2

    beyond = client.get("/api/deals", params={"page": 5, "limit": 3}).json()
    assert beyond["deals"] == []
    assert beyond["total"] == 4


def test_list_deals_period_filter(client):
    assert _ids(client.get("/api/deals", params={"period_type": "year", "year": 2021}).json()) == ["d2", "d1"]
    assert _ids(client.get("/api/deals", params={
        "period_type": "quarter", "year": 2022, "quarter": 1,
    }).json()) == ["d3"]


def test_period_intersects_explicit_dates(client):
    body = client.get("/api/deals", params={
        "period_type": "year", "year": 2022, "date_from": "2022-03-01",
    }).json()
    assert _ids(body) == ["d4"]


def test_list_deals_with_stats(client):
    body = client.get("/api/deals", params={"include_stats": True, "as_of": "2022-06-30"}).json()
    assert body["stats"]["total_deals"] == 4
    assert body["stats"]["ytd_deal_count"] == 2


def test_list_deals_bad_params(client):
    assert client.get("/api/deals", params={"type": "merger"}).status_code == 400
    assert client.get("/api/deals", params={"date_from": "2022-13-01"}).status_code == 400
    assert client.get("/api/deals", params={"period_type": "week"}).status_code == 400
    assert client.get("/api/deals", params={"period_type": "quarter"}).status_code == 400
    assert client.get("/api/deals", params={"period_type": "month", "year": 2022}).status_code == 400
    assert client.get("/api/deals", params={"limit": 0}).status_code == 422
    assert client.get("/api/deals", params={"limit": 101}).status_code == 422
    assert client.get("/api/deals", params={"page": 0}).status_code == 422
    assert client.get("/api/deals", params={"month": 13, "period_type": "month"}).status_code == 422


# ---------------------------------------------------------------------------
# Stats, recent, participants, detail
# ---------------------------------------------------------------------------

def test_stats(client):
    body = client.get("/api/deals/stats", params={"as_of": "2022-06-30"}).json()
    assert body["total_deals"] == 4
    assert body["total_volume"] == 350
    assert body["avg_deal_size"] == 350 / 3
    assert len(body["by_quarter"]) == 12
    assert body["by_quarter"][-1]["quarter"] == "Q2 2022"
    assert [b["type"] for b in body["by_type"]] == ["funding_round", "acquisition", "contract_win", "ipo", "spac"]
    assert body["by_year"] == [
        {"year": 2021, "count": 2, "volume": 100.0},
        {"year": 2022, "count": 2, "volume": 250.0},
    ]


def test_stats_bad_as_of(client):
    assert client.get("/api/deals/stats", params={"as_of": "yesterday"}).status_code == 400


def test_recent(client):
    body = client.get("/api/deals/recent", params={"days": 200, "as_of": "2022-06-30"}).json()
    assert body["count"] == 2
    assert _ids(body) == ["d4", "d3"]
    assert body["as_of"] == "2022-06-30"


def test_deal_types(client):
    types = client.get("/api/deals/types").json()["types"]
    assert [t["value"] for t in types] == ["funding_round", "acquisition", "contract_win", "ipo", "spac"]
    assert types[0]["label"] == "FUNDING"
    assert types[1]["label"] == "M&A"


def test_amount_ranges(client):
    ranges = client.get("/api/deals/amount-ranges").json()["ranges"]
    assert [r["label"] for r in ranges] == ["Under $100M", "$100M - $1B", "$1B+"]
    assert ranges[-1]["max_amount"] is None


def test_participant_deals(client):
    body = client.get("/api/participants/Acme Rockets/deals").json()
    assert body["participant_id"] == "acme"
    assert body["count"] == 3
    assert _ids(body) == ["d4", "d3", "d1"]


def test_participant_unknown_is_empty(client):
    body = client.get("/api/participants/nobody/deals").json()
    assert body["count"] == 0
    assert body["deals"] == []


def test_deal_detail(client):
    res = client.get("/api/deals/d3")
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Lunar lander contract"
    assert body["source_url"] == "https://example.com/lander"
    assert body["parties"][1] == {"company": "NASA", "company_slug": None, "role": "awarder"}


def test_deal_detail_not_found(client):
    assert client.get("/api/deals/nope").status_code == 404


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def test_report_json(client):
    body = client.get("/api/reports/deal-flow", params={"as_of": "2022-06-30", "type": "funding_round"}).json()
    assert body["summary"]["total_deals"] == 4
    assert body["matching_deals"] == 2
    assert [d["title"] for d in body["deals"]] == ["Acme Series B", "Acme Series A"]


def test_report_excel_download(client, tmp_path, monkeypatch):
    monkeypatch.setattr(config, "REPORTS_FOLDER", tmp_path)
    res = client.get("/api/reports/deal-flow/excel", params={"as_of": "2022-06-30"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert (tmp_path / "Deal_Flow_Report.xlsx").exists()
