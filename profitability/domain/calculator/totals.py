"""Investment totals stage."""

from __future__ import annotations

from profitability.core.financial import pct_of
from profitability.domain.models.inputs import FinancingParameters
from profitability.domain.models.results import (
    FeesAndCapex,
    FinancedAcquisition,
    InvestmentTotals,
)


def calculate_loan_amount(purchase_price: float, loan_to_value_pct: float) -> float:
    return pct_of(purchase_price, loan_to_value_pct)


def calculate_investment_totals(
    costs: FinancedAcquisition,
    fees: FeesAndCapex,
    financing: FinancingParameters,
) -> InvestmentTotals:
    """Unlevered total capital and the levered "capital moved" figure."""
    unlevered = (
        costs.purchase_price
        + costs.closing_costs
        + costs.taxes
        + fees.renovation_cost
        + fees.furnishing_cost
        + fees.tenant_searching_fee
        + fees.real_estate_agent_fee
        + fees.property_management_fee
    )
    loan_amount = calculate_loan_amount(costs.purchase_price, financing.loan_to_value_pct)

    return InvestmentTotals(
        total_investment_unlevered=unlevered,
        loan_amount=loan_amount,
        total_investment_levered=unlevered + loan_amount,
    )
