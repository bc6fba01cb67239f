"""Economic Comparison Dashboard - Main Entry Point with CLI Commands.

Supports:
- serve: Launch the Streamlit dashboard
- summary: Print the summary line for a metric (headless)
- metrics: List the static economic comparison table
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from loguru import logger

from src.app.logic.dashboard import DashboardController
from src.core.config import settings
from src.core.domain_models import MetricSelection, StockQuery, StockSymbol
from src.core.economic_data import records_to_df
from src.core.log_config import configure_logging
from src.etl.extract import MarketDataFetcher

APP_PATH = Path(__file__).parent / "app" / "main.py"


def cmd_serve(args: argparse.Namespace) -> None:
    """Launch the Streamlit app."""
    from streamlit.web import cli as stcli

    logger.info(f"=== Starting {settings.app_name} v{settings.app_version} ===")
    sys.argv = ["streamlit", "run", str(APP_PATH), "--server.port", str(args.port)]
    sys.exit(stcli.main())


def cmd_summary(args: argparse.Namespace) -> None:
    """Run the selection controller headless and print its summary."""
    metric = MetricSelection(args.metric)
    default_query = StockQuery.default(lookback_days=settings.default_lookback_days)
    controller = DashboardController(MarketDataFetcher(), query=default_query)

    if metric.is_stock:
        controller.select_stock(
            StockSymbol(args.symbol),
            args.start or default_query.start,
            args.end or default_query.end,
        )
    result = controller.select_metric(metric)

    if result.is_error:
        logger.error(result.summary)
    print(result.summary)
    if result.is_error:
        sys.exit(1)


def cmd_metrics(args: argparse.Namespace) -> None:
    """Print the static economic comparison table."""
    print(records_to_df())


def main() -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Economic Comparison Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # Serve command
    parser_serve = subparsers.add_parser("serve", help="Launch the Streamlit dashboard")
    parser_serve.add_argument("--port", type=int, default=8501, help="Server port")
    parser_serve.set_defaults(func=cmd_serve)

    # Summary command
    parser_summary = subparsers.add_parser("summary", help="Print the summary for a metric")
    parser_summary.add_argument(
        "--metric",
        choices=[m.value for m in MetricSelection],
        default=MetricSelection.GDP.value,
        help="Metric to summarise (default: gdp)",
    )
    parser_summary.add_argument(
        "--symbol",
        choices=[s.value for s in StockSymbol],
        default=StockSymbol.AAPL.value,
        help="Stock symbol for stock_prices",
    )
    parser_summary.add_argument("--start", type=date.fromisoformat, help="Start date (YYYY-MM-DD)")
    parser_summary.add_argument("--end", type=date.fromisoformat, help="End date (YYYY-MM-DD)")
    parser_summary.set_defaults(func=cmd_summary)

    # Metrics command
    parser_metrics = subparsers.add_parser("metrics", help="List the economic comparison table")
    parser_metrics.set_defaults(func=cmd_metrics)

    # Parse arguments and execute
    args = parser.parse_args()
    configure_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
