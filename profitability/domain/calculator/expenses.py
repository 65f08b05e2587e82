"""Operating expense stage."""

from __future__ import annotations

from profitability.core.financial import MONTHS_PER_YEAR, pct_of
from profitability.domain.models.inputs import (
    AcquisitionParameters,
    FinancingParameters,
    PropertyContext,
    Scenario,
)
from profitability.domain.models.results import (
    FinancedAcquisition,
    Income,
    InvestmentTotals,
    OperatingExpenses,
)

# Annual home insurance premium as a fraction of purchase price
HOME_INSURANCE_RATE = 0.001


def calculate_operating_expenses(
    acquisition: AcquisitionParameters,
    context: PropertyContext,
    income: Income,
    financing: FinancingParameters,
    costs: FinancedAcquisition,
    totals: InvestmentTotals,
) -> OperatingExpenses:
    """Recurring monthly costs and the annual loan interest.

    Loan interest is computed once from the loan amount; the rental
    scenario does not change the loan.
    """
    management_rate = acquisition.management_rate

    return OperatingExpenses(
        community_fees_monthly=context.community_fees_monthly,
        home_insurance_monthly=costs.purchase_price * HOME_INSURANCE_RATE / MONTHS_PER_YEAR,
        ibi_monthly=context.annual_property_tax / MONTHS_PER_YEAR,
        property_management_monthly_conservative=(
            income.gross_monthly_rent(Scenario.CONSERVATIVE) * management_rate
        ),
        property_management_monthly_favorable=(
            income.gross_monthly_rent(Scenario.FAVORABLE) * management_rate
        ),
        loan_interest_annual=pct_of(totals.loan_amount, financing.interest_rate_pct),
    )
