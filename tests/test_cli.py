import sys

import pytest

import src.main as cli


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["econ-dashboard", "--log-level", "WARNING", *args])
    cli.main()


def test_summary_for_comparison_metric(monkeypatch, capsys) -> None:
    run_cli(monkeypatch, "summary", "--metric", "gdp")

    assert capsys.readouterr().out.strip() == "The U.S. GDP value is: 25 Trillions USD"


def test_summary_for_stock(monkeypatch, capsys, fake_fetcher) -> None:
    monkeypatch.setattr(cli, "MarketDataFetcher", lambda: fake_fetcher)

    run_cli(
        monkeypatch,
        "summary",
        "--metric",
        "stock_prices",
        "--symbol",
        "MSFT",
        "--start",
        "2023-01-01",
        "--end",
        "2023-06-30",
    )

    assert capsys.readouterr().out.strip() == "The latest closing price for MSFT is: $150.00"
    assert len(fake_fetcher.calls) == 1
    assert fake_fetcher.calls[0][0] == "MSFT"


def test_summary_exits_nonzero_on_fetch_failure(monkeypatch, capsys, failing_fetcher) -> None:
    monkeypatch.setattr(cli, "MarketDataFetcher", lambda: failing_fetcher)

    with pytest.raises(SystemExit) as exc_info:
        run_cli(monkeypatch, "summary", "--metric", "stock_prices")

    assert exc_info.value.code == 1
    assert capsys.readouterr().out.strip() == "Error: Could not fetch stock data"


def test_metrics_lists_table(monkeypatch, capsys) -> None:
    run_cli(monkeypatch, "metrics")

    out = capsys.readouterr().out
    assert "Innovation Index" in out
    assert "Trillions USD" in out
