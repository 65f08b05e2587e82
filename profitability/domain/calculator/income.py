"""Income projection stage."""

from __future__ import annotations

from profitability.core.financial import MONTHS_PER_YEAR, ratio_pct
from profitability.domain.models.inputs import AcquisitionParameters, Scenario, ScenarioDrivers
from profitability.domain.models.results import FinancedAcquisition, Income


def project_gross_monthly_rent(
    monthly_rent: float,
    rental_variation_pct: float,
    occupancy_rate_pct: float,
) -> float:
    """Rent adjusted by the scenario variation and occupancy."""
    return monthly_rent * (1 + rental_variation_pct / 100.0) * (occupancy_rate_pct / 100.0)


def project_income(
    acquisition: AcquisitionParameters,
    drivers: ScenarioDrivers,
    costs: FinancedAcquisition,
) -> Income:
    """Gross rent and gross yield (on the scenario sale price) per scenario."""
    values: dict[str, float] = {}
    for scenario in Scenario:
        monthly = project_gross_monthly_rent(
            acquisition.monthly_rent,
            drivers.rental_variation(scenario),
            drivers.occupancy_rate(scenario),
        )
        annual = monthly * MONTHS_PER_YEAR
        values[f"gross_monthly_rent_{scenario.value}"] = monthly
        values[f"gross_annual_rent_{scenario.value}"] = annual
        values[f"gross_yield_{scenario.value}"] = ratio_pct(annual, costs.sale_price(scenario))

    return Income(**values)
