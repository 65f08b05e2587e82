"""Returns and yields stage.

Unlevered yields divide by the total unlevered investment; levered yields
(ROCE) divide by the cash deposit. Both ratios are 0 when the denominator
is not positive.
"""

from __future__ import annotations

from profitability.core.financial import MONTHS_PER_YEAR, ratio_pct
from profitability.domain.models.inputs import Scenario
from profitability.domain.models.results import (
    FinancedAcquisition,
    Income,
    InvestmentTotals,
    OperatingExpenses,
    ReturnsAndYields,
)


def calculate_returns_and_yields(
    income: Income,
    expenses: OperatingExpenses,
    totals: InvestmentTotals,
    costs: FinancedAcquisition,
) -> ReturnsAndYields:
    """Net rents and net yields for both scenarios.

    Args:
        income: Gross rent projection
        expenses: Operating expenses and loan interest
        totals: Investment totals (unlevered denominator)
        costs: Financed acquisition costs (deposit is the levered denominator)

    Returns:
        Net rents and yields, unlevered and levered
    """
    monthly_interest = expenses.loan_interest_annual / MONTHS_PER_YEAR
    values: dict[str, float] = {}

    for scenario in Scenario:
        side = scenario.value

        net_monthly = (
            income.gross_monthly_rent(scenario)
            - expenses.fixed_monthly()
            - expenses.property_management_monthly(scenario)
        )
        net_annual = net_monthly * MONTHS_PER_YEAR
        values[f"net_monthly_rent_unlevered_{side}"] = net_monthly
        values[f"net_annual_rent_unlevered_{side}"] = net_annual
        values[f"net_yield_unlevered_{side}"] = ratio_pct(
            net_annual, totals.total_investment_unlevered
        )

        levered_monthly = net_monthly - monthly_interest
        levered_annual = levered_monthly * MONTHS_PER_YEAR
        values[f"net_monthly_rent_levered_{side}"] = levered_monthly
        values[f"net_annual_rent_levered_{side}"] = levered_annual
        values[f"net_yield_levered_{side}"] = ratio_pct(levered_annual, costs.deposit)

    return ReturnsAndYields(**values)
