"""End-to-end tests: inputs -> estimate -> table -> export -> snapshot."""

import json

import pandas as pd
import pytest

from profitability.application.services.estimator import EstimateEngine, estimate_profitability
from profitability.application.services.versioning import create_snapshot, current_snapshot
from profitability.core.exceptions import InvalidParameterError
from profitability.domain.models.inputs import (
    AcquisitionParameters,
    FinancingParameters,
    FinancingType,
    PropertyContext,
    ScenarioDrivers,
)
from profitability.services.exporter import EstimateExporter
from profitability.services.presentation import build_profitability_table, format_profitability_table


class TestReferenceWalkthrough:
    """The 100k reference property, all figures rounded to cents."""

    @pytest.mark.parametrize(
        "group, field, expected",
        [
            ("acquisition_costs", "taxes", 8_000.00),
            ("acquisition_costs", "deposit", 45_000.00),
            ("investment_totals", "loan_amount", 55_000.00),
            ("fees_and_capex", "furnishing_cost", 3_738.17),
            ("fees_and_capex", "tenant_searching_fee", 605.00),
            ("fees_and_capex", "real_estate_agent_fee", 2_500.00),
            ("fees_and_capex", "property_management_fee", 5_000.00),
            ("investment_totals", "total_investment_unlevered", 121_343.17),
            ("investment_totals", "total_investment_levered", 176_343.17),
            ("income", "gross_yield_conservative", 5.40),
            ("income", "gross_yield_favorable", 5.70),
            ("returns_and_yields", "net_yield_unlevered_conservative", 4.15),
            ("returns_and_yields", "net_yield_unlevered_favorable", 4.60),
            ("returns_and_yields", "net_yield_levered_conservative", 6.90),
            ("returns_and_yields", "net_yield_levered_favorable", 8.14),
        ],
    )
    def test_figure(self, reference_estimate, group, field, expected):
        value = getattr(getattr(reference_estimate.results, group), field)
        assert round(value, 2) == pytest.approx(expected, abs=0.011)

    def test_verdict(self, reference_estimate):
        """Only the levered yields clear 5.50%, which is enough."""
        ry = reference_estimate.results.returns_and_yields
        assert ry.net_yield_unlevered_favorable < 5.50
        assert ry.net_yield_levered_conservative > 5.50
        assert reference_estimate.meets_threshold is True
        assert reference_estimate.yield_threshold == 5.50

    def test_default_tax_rate_applied(self, reference_estimate):
        assert reference_estimate.results.acquisition_costs.tax_rate == 0.08

    def test_scenario_view(self, reference_estimate):
        view = reference_estimate.results.scenario_view("favorable")
        assert view.sale_price == pytest.approx(105_000)
        assert view.gross_monthly_rent == pytest.approx(498.75)
        assert view.net_yield_levered == reference_estimate.results.returns_and_yields.net_yield_levered_favorable

    def test_financing_summary(self, reference_estimate):
        summary = reference_estimate.results.financing_summary
        assert summary.loan_amount == pytest.approx(55_000)
        assert summary.loan_term_years == 15
        assert 390 < summary.monthly_payment < 396

    def test_higher_threshold_fails(self, engine, reference_acquisition, reference_financing,
                                    reference_drivers, reference_context):
        estimate = engine.estimate(reference_acquisition, reference_financing, reference_drivers,
                                   reference_context, yield_threshold=9.0)
        assert estimate.meets_threshold is False
        assert estimate.yield_threshold == 9.0


class TestBoundaryEntryPoint:
    """Tests for estimate_profitability."""

    def test_rejects_missing_price(self, reference_financing, reference_drivers):
        with pytest.raises(InvalidParameterError) as exc_info:
            estimate_profitability(AcquisitionParameters(), reference_financing, reference_drivers)
        assert exc_info.value.param_name == "purchase_price"

    def test_guard_can_be_disabled(self, reference_financing, reference_drivers):
        estimate = estimate_profitability(
            AcquisitionParameters(), reference_financing, reference_drivers,
            require_purchase_price=False,
        )
        assert estimate.results.returns_and_yields.net_yield_levered_conservative == 0.0

    def test_default_threshold_from_settings(self, reference_acquisition, reference_financing,
                                             reference_drivers):
        estimate = estimate_profitability(reference_acquisition, reference_financing, reference_drivers)
        assert estimate.yield_threshold == 5.50


class TestPropertyRecordFlow:
    """Defaults pulled from a property record, Madrid address."""

    def test_record_to_estimate(self, engine, sample_property_record):
        acquisition = AcquisitionParameters.from_property_record(sample_property_record)
        context = PropertyContext.from_property_record(sample_property_record)
        financing = FinancingParameters.for_type(FinancingType.SECOND_HOME)

        estimate = engine.estimate(acquisition, financing, ScenarioDrivers(), context)
        res = estimate.results

        assert res.acquisition_costs.tax_rate == 0.06
        assert res.acquisition_costs.taxes == pytest.approx(10_800)
        assert res.acquisition_costs.deposit == pytest.approx(63_000)
        assert res.fees_and_capex.renovation_cost == 12_000
        assert res.operating_expenses.ibi_monthly == pytest.approx(35)
        assert res.operating_expenses.community_fees_monthly == 60

    def test_region_identifier_wins_over_address(self, engine, reference_acquisition,
                                                 reference_financing, reference_drivers):
        context = PropertyContext(region_identifier="Vizcaya", full_address="Calle Mayor 1, Madrid")
        res = engine.compute(reference_acquisition, reference_financing, reference_drivers, context)
        assert res.acquisition_costs.tax_rate == 0.04


class TestExportAndSnapshot:
    """Export and versioning of a computed estimate."""

    def test_save_estimate(self, tmp_path, reference_estimate):
        exporter = EstimateExporter(output_dir=str(tmp_path / "exports"))
        path = exporter.save_estimate(reference_estimate, metadata={"property_id": "P1"})

        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

        assert payload["metadata"]["property_id"] == "P1"
        assert payload["estimate"]["meets_threshold"] is True
        assert payload["estimate"]["results"]["financing_summary"]["financing_type"] == "Inversión"

    def test_save_table_csv(self, tmp_path, reference_estimate):
        exporter = EstimateExporter(output_dir=str(tmp_path))
        path = exporter.save_table_csv(reference_estimate)
        table = pd.read_csv(path)
        assert len(table) == len(build_profitability_table(reference_estimate))

    def test_formatted_table_and_snapshot(self, reference_estimate, reference_acquisition,
                                          reference_financing, reference_drivers):
        table = format_profitability_table(build_profitability_table(reference_estimate))
        assert table.set_index("item").loc["Total Investment (No Financing)", "favorable"] == "121.343,17€"

        snapshots = create_snapshot([], "P1", reference_acquisition, reference_financing,
                                    reference_drivers, reference_estimate)
        assert current_snapshot(snapshots, "P1").meets_threshold is True


def test_engine_is_reusable(reference_acquisition, reference_financing, reference_drivers):
    engine = EstimateEngine(default_yield_threshold=4.0)
    estimate = engine.estimate(reference_acquisition, reference_financing, reference_drivers)
    assert estimate.yield_threshold == 4.0
