from __future__ import annotations

import pytest

from dealflow.cli import build_parser, main


def test_no_command_prints_help(capsys):
    main([])
    assert "usage" in capsys.readouterr().out.lower()


def test_list(capsys):
    main(["list", "--type", "acquisition", "--limit", "5"])
    out = capsys.readouterr().out
    assert "DEAL FLOW — DEALS" in out
    assert "matching deals" in out
    assert "page 1 of" in out


def test_list_rejects_unknown_type():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "--type", "merger"])


def test_stats(capsys):
    main(["stats", "--as-of", "2024-12-31"])
    out = capsys.readouterr().out
    assert "As of 2024-12-31" in out
    assert "TRAILING QUARTERS" in out
    assert "Q4 2024" in out


def test_participant(capsys):
    main(["participant", "SpaceX"])
    out = capsys.readouterr().out
    assert "spacex:" in out
    assert "SpaceX Series A" in out


def test_participant_not_found(capsys):
    main(["participant", "Nobody Aerospace"])
    assert "No deals found" in capsys.readouterr().out


def test_recent(capsys):
    main(["recent", "--days", "30", "--as-of", "2025-02-01"])
    out = capsys.readouterr().out
    assert "in the 30 days to 2025-02-01" in out


def test_report(tmp_path, capsys):
    main(["report", "--output", str(tmp_path), "--as-of", "2024-12-31"])
    assert (tmp_path / "Deal_Flow_Report.xlsx").exists()
    assert "Report saved to" in capsys.readouterr().out


def test_list_with_period(capsys):
    main(["list", "--period", "year", "--year", "2021"])
    out = capsys.readouterr().out
    assert "Period: 2021" in out
    assert "matching deals" in out


def test_list_period_without_bounds_is_rejected(capsys):
    with pytest.raises(SystemExit):
        main(["list", "--period", "quarter"])
    assert "--period quarter requires --year, --quarter" in capsys.readouterr().err


def test_list_rejects_out_of_range_quarter():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "--period", "quarter", "--year", "2022", "--quarter", "5"])
