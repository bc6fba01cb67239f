import pytest
from pydantic import ValidationError

from src.core.domain_models import EconomicRecord, MetricSelection, Region
from src.core.economic_data import (
    COMPARISON_METRICS,
    ECONOMIC_RECORDS,
    get_comparison,
    get_record,
    records_to_df,
)


def test_table_has_one_us_and_one_global_row_per_metric() -> None:
    assert len(ECONOMIC_RECORDS) == 8
    for metric in COMPARISON_METRICS:
        rows = [r for r in ECONOMIC_RECORDS if r.metric is metric]
        assert sorted(r.region.value for r in rows) == ["global", "us"]


def test_get_comparison_returns_us_then_global() -> None:
    us, world = get_comparison(MetricSelection.GDP)

    assert (us.region, us.value, us.unit_label) == (Region.US, 25.0, "Trillions USD")
    assert (world.region, world.value) == (Region.GLOBAL, 70.0)


def test_stock_prices_have_no_static_record() -> None:
    with pytest.raises(KeyError):
        get_record(MetricSelection.STOCK_PRICES, Region.US)


def test_records_are_immutable() -> None:
    with pytest.raises(ValidationError):
        ECONOMIC_RECORDS[0].value = 1.0  # type: ignore[misc]
    assert isinstance(ECONOMIC_RECORDS[0], EconomicRecord)


def test_records_to_df_uses_display_labels() -> None:
    df_records = records_to_df()

    assert df_records.height == 8
    assert df_records.columns == ["metric", "region", "value", "unit"]
    assert df_records.row(0) == ("GDP", "U.S.", 25.0, "Trillions USD")
