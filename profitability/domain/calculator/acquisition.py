"""Acquisition cost stage.

Runs in two steps: ``calculate_acquisition_costs`` knows nothing about the
loan and leaves a provisional deposit; ``apply_financing_deposit`` derives the
real deposit from the LTV and is the only way to obtain the
``FinancedAcquisition`` every later stage asks for.
"""

from __future__ import annotations

from profitability.domain.models.inputs import (
    AcquisitionParameters,
    FinancingParameters,
    Scenario,
    ScenarioDrivers,
)
from profitability.domain.models.results import AcquisitionCosts, FinancedAcquisition

PROVISIONAL_DEPOSIT_RATE = 0.20


def scenario_sale_price(purchase_price: float, rental_variation_pct: float) -> float:
    """Sale price for a scenario, driven by the rental variation."""
    return purchase_price * (1 + rental_variation_pct / 100.0)


def calculate_acquisition_costs(
    acquisition: AcquisitionParameters,
    drivers: ScenarioDrivers,
    tax_rate: float,
) -> AcquisitionCosts:
    """Purchase-side costs before financing is known.

    Args:
        acquisition: Purchase terms
        drivers: Scenario drivers (rental variation sets the sale prices)
        tax_rate: Resolved transfer tax rate as a fraction

    Returns:
        Costs with a provisional 20% deposit
    """
    price = acquisition.purchase_price
    return AcquisitionCosts(
        sale_price_conservative=scenario_sale_price(
            price, drivers.rental_variation(Scenario.CONSERVATIVE)
        ),
        sale_price_favorable=scenario_sale_price(
            price, drivers.rental_variation(Scenario.FAVORABLE)
        ),
        purchase_price=price,
        deposit=price * PROVISIONAL_DEPOSIT_RATE,
        tax_rate=tax_rate,
        taxes=price * tax_rate,
        closing_costs=acquisition.closing_costs,
    )


def apply_financing_deposit(
    costs: AcquisitionCosts,
    financing: FinancingParameters,
) -> FinancedAcquisition:
    """Replace the provisional deposit with ``price x (1 - LTV/100)``."""
    ltv = financing.loan_to_value_pct
    deposit = costs.purchase_price * (1 - ltv / 100.0)
    return FinancedAcquisition(
        **costs.model_dump(exclude={"deposit"}),
        deposit=deposit,
        loan_to_value_pct=ltv,
    )
