"""Static US vs. Global comparison table.

Values are fixed at import time and never mutated at runtime.
"""

import polars as pl

from src.core.domain_models import EconomicRecord, MetricSelection, Region

TRILLIONS_USD = "Trillions USD"

ECONOMIC_RECORDS: tuple[EconomicRecord, ...] = (
    EconomicRecord(
        metric=MetricSelection.GDP, region=Region.US, value=25.0, unit_label=TRILLIONS_USD
    ),
    EconomicRecord(
        metric=MetricSelection.GDP, region=Region.GLOBAL, value=70.0, unit_label=TRILLIONS_USD
    ),
    EconomicRecord(
        metric=MetricSelection.CONSUMER_SPENDING,
        region=Region.US,
        value=17.5,
        unit_label=TRILLIONS_USD,
    ),
    EconomicRecord(
        metric=MetricSelection.CONSUMER_SPENDING,
        region=Region.GLOBAL,
        value=45.0,
        unit_label=TRILLIONS_USD,
    ),
    EconomicRecord(
        metric=MetricSelection.FDI, region=Region.US, value=0.3, unit_label=TRILLIONS_USD
    ),
    EconomicRecord(
        metric=MetricSelection.FDI, region=Region.GLOBAL, value=1.3, unit_label=TRILLIONS_USD
    ),
    EconomicRecord(
        metric=MetricSelection.INNOVATION_INDEX, region=Region.US, value=61.8, unit_label="Score"
    ),
    EconomicRecord(
        metric=MetricSelection.INNOVATION_INDEX,
        region=Region.GLOBAL,
        value=35.0,
        unit_label="Score",
    ),
)

COMPARISON_METRICS = [m for m in MetricSelection if not m.is_stock]


def get_record(metric: MetricSelection, region: Region) -> EconomicRecord:
    """Look up the single record for a metric and region.

    Raises:
        KeyError: If the metric has no static record (e.g. STOCK_PRICES)
    """
    for record in ECONOMIC_RECORDS:
        if record.metric is metric and record.region is region:
            return record
    raise KeyError(f"No economic record for {metric.value}/{region.value}")


def get_comparison(metric: MetricSelection) -> tuple[EconomicRecord, EconomicRecord]:
    """Return the (US, Global) pair for a comparison metric."""
    return get_record(metric, Region.US), get_record(metric, Region.GLOBAL)


def records_to_df(records: tuple[EconomicRecord, ...] = ECONOMIC_RECORDS) -> pl.DataFrame:
    """Flatten records into a display table with readable labels."""
    return pl.DataFrame(
        {
            "metric": [r.metric.label for r in records],
            "region": [r.region.label for r in records],
            "value": [r.value for r in records],
            "unit": [r.unit_label for r in records],
        }
    )
