"""Pytest fixtures for profitability engine tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from profitability.application.services.estimator import EstimateEngine  # noqa: E402
from profitability.domain.models.inputs import (  # noqa: E402
    AcquisitionParameters,
    FinancingParameters,
    ManagementPlan,
    PropertyContext,
    ScenarioDrivers,
)


@pytest.fixture
def reference_acquisition():
    """Acquisition terms of the reference walkthrough."""
    return AcquisitionParameters(
        purchase_price=100_000,
        closing_costs=1_500,
        monthly_rent=500,
        management_plan=ManagementPlan.BASIC,
    )


@pytest.fixture
def reference_financing():
    return FinancingParameters(loan_to_value_pct=55, loan_term_years=15, interest_rate_pct=3.5)


@pytest.fixture
def reference_drivers():
    return ScenarioDrivers(
        rental_variation_conservative_pct=0,
        rental_variation_favorable_pct=5,
        occupancy_rate_conservative_pct=90,
        occupancy_rate_favorable_pct=95,
    )


@pytest.fixture
def reference_context():
    """No community fees, no IBI, unknown bedrooms, unresolvable region."""
    return PropertyContext(
        community_fees_monthly=0,
        annual_property_tax=0,
        region_identifier="Atlantis",
        renovation_cost=0,
    )


@pytest.fixture
def engine():
    return EstimateEngine()


@pytest.fixture
def reference_estimate(engine, reference_acquisition, reference_financing,
                       reference_drivers, reference_context):
    return engine.estimate(
        reference_acquisition,
        reference_financing,
        reference_drivers,
        reference_context,
        yield_threshold=5.50,
    )


@pytest.fixture
def sample_property_record():
    """Payload as sent by the property record provider."""
    return {
        "precio_venta": 180_000,
        "importe_alquiler": 950,
        "gastos_comunidad": 60,
        "ibi_anual": 420,
        "provincia": None,
        "full_address": "Calle Gran Vía 12, 28013 Madrid",
        "habitaciones": 1,
        "renovation_cost": 12_000,
    }
