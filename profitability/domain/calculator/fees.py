"""Fees and capital expenditure stage."""

from __future__ import annotations

from profitability.core.logging import get_logger
from profitability.domain.models.inputs import AcquisitionParameters, PropertyContext
from profitability.domain.models.results import FinancedAcquisition, FeesAndCapex

log = get_logger(__name__)

# Furnishing budget for a one-bedroom unit
FURNISHING_COST_SINGLE_BEDROOM = 3738.17
# Applied per bedroom above one. Reproduced as observed; see DESIGN.md.
FURNISHING_MULTI_BEDROOM_FACTOR = 420.2

TENANT_SEARCH_RENT_MULTIPLIER = 1.21  # one month of rent + 21% VAT
REAL_ESTATE_AGENT_RATE = 0.025


def calculate_furnishing_cost(bedroom_count: int | None) -> float:
    """Furnishing budget by bedroom count.

    One bedroom, unknown, or non-positive counts use the single-bedroom
    constant.
    """
    if bedroom_count is not None and bedroom_count > 1:
        cost = FURNISHING_COST_SINGLE_BEDROOM * FURNISHING_MULTI_BEDROOM_FACTOR * bedroom_count
        log.warning(
            "furnishing_multi_bedroom_factor_applied",
            bedroom_count=bedroom_count,
            furnishing_cost=cost,
        )
        return cost
    return FURNISHING_COST_SINGLE_BEDROOM


def calculate_fees_and_capex(
    acquisition: AcquisitionParameters,
    costs: FinancedAcquisition,
    context: PropertyContext,
) -> FeesAndCapex:
    """One-off fees and CAPEX.

    Args:
        acquisition: Purchase terms (rent and management plan)
        costs: Financed acquisition costs
        context: Property facts (bedrooms, renovation budget)

    Returns:
        Fees and CAPEX breakdown
    """
    return FeesAndCapex(
        renovation_cost=context.renovation_cost or 0.0,
        furnishing_cost=calculate_furnishing_cost(context.bedroom_count),
        tenant_searching_fee=acquisition.monthly_rent * TENANT_SEARCH_RENT_MULTIPLIER,
        real_estate_agent_fee=costs.purchase_price * REAL_ESTATE_AGENT_RATE,
        property_management_fee=costs.purchase_price * acquisition.management_rate,
    )
