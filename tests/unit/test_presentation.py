"""Unit tests for presentation helpers."""

import math

import pandas as pd
import pytest

from profitability.services.presentation import (
    TABLE_COLUMNS,
    build_profitability_table,
    format_currency,
    format_percentage,
    format_profitability_table,
    threshold_message,
    viability_summary,
)


class TestFormatCurrency:
    """Tests for Spanish currency formatting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "0€"),
            (605, "605,00€"),
            (1234.5, "1.234,50€"),
            (121343.17, "121.343,17€"),
            (3141558.07, "3.141.558,07€"),
            (-160.42, "-160,42€"),
            (0.999, "1,00€"),
        ],
    )
    def test_format(self, value, expected):
        assert format_currency(value) == expected

    def test_missing(self):
        assert format_currency(None) == "-"
        assert format_currency(math.nan) == "-"


class TestFormatPercentage:
    """Tests for Spanish percentage formatting."""

    def test_format(self):
        assert format_percentage(5.4) == "5,40%"
        assert format_percentage(8.1349) == "8,13%"
        assert format_percentage(-1.5) == "-1,50%"

    def test_missing(self):
        assert format_percentage(None) == "0,00%"
        assert format_percentage(math.nan) == "0,00%"


class TestProfitabilityTable:
    """Tests for build_profitability_table."""

    def test_shape(self, reference_estimate):
        table = build_profitability_table(reference_estimate)
        assert list(table.columns) == TABLE_COLUMNS
        assert len(table) == 26

    def test_scenario_values(self, reference_estimate):
        table = build_profitability_table(reference_estimate).set_index("item")
        assert table.loc["Sale Price", "favorable"] == pytest.approx(105_000)
        assert table.loc["Gross Yield", "conservative"] == pytest.approx(5.4)

    def test_shared_values_repeat(self, reference_estimate):
        table = build_profitability_table(reference_estimate).set_index("item")
        row = table.loc["Loan Interest (Annual)"]
        assert row["conservative"] == row["favorable"] == pytest.approx(1_925)

    def test_no_financing_hides_levered_rows(self, reference_estimate):
        table = build_profitability_table(reference_estimate, has_financing=False).set_index("item")
        assert pd.isna(table.loc["Deposit", "conservative"])
        assert pd.isna(table.loc["Net Yield (Financing) - ROCE", "favorable"])
        assert table.loc["Net Yield (No Financing)", "favorable"] == pytest.approx(4.603, abs=0.01)

    def test_formatted(self, reference_estimate):
        raw = build_profitability_table(reference_estimate, has_financing=False)
        table = format_profitability_table(raw).set_index("item")
        assert table.loc["Tenant Searching Fee", "conservative"] == "605,00€"
        assert table.loc["Gross Yield", "favorable"] == "5,70%"
        assert table.loc["Deposit", "favorable"] == "-"
        assert table.loc["Net Yield (Financing) - ROCE", "conservative"] == "-"


class TestThresholdMessages:
    """Tests for badge texts."""

    def test_ok(self, reference_estimate):
        assert threshold_message(reference_estimate) == (
            "OK - The property reaches a profitability threshold of 5.5%"
        )
        assert viability_summary(reference_estimate).startswith("At least one scenario is viable")

    def test_not_ok(self, reference_estimate):
        failing = reference_estimate.model_copy(update={"meets_threshold": False, "yield_threshold": 12.0})
        assert threshold_message(failing) == (
            "Not OK - The property does not reach the profitability threshold of 12%"
        )
        assert viability_summary(failing).startswith("Both scenarios are not viable")
