"""Profitability estimate pipeline.

Chains the stage calculators in a fixed order:
resolver -> acquisition -> deposit correction -> fees -> totals -> income
-> expenses -> returns -> decision. Each run is a pure computation from
inputs to a fresh ``FinancialEstimate``.
"""

from __future__ import annotations

from dataclasses import dataclass

from profitability.core.exceptions import InvalidParameterError
from profitability.core.financial import MONTHS_PER_YEAR, calculate_monthly_payment
from profitability.core.logging import get_logger
from profitability.core.settings import get_settings
from profitability.domain.calculator import (
    apply_financing_deposit,
    calculate_acquisition_costs,
    calculate_fees_and_capex,
    calculate_investment_totals,
    calculate_operating_expenses,
    calculate_returns_and_yields,
    extract_region_from_address,
    meets_yield_threshold,
    project_income,
    resolve_tax_rate,
)
from profitability.domain.calculator.tax_rates import DEFAULT_TAX_RATE
from profitability.domain.models.inputs import (
    AcquisitionParameters,
    FinancingParameters,
    PropertyContext,
    ScenarioDrivers,
)
from profitability.domain.models.results import (
    FinancialEstimate,
    FinancialResult,
    FinancingSummary,
    InvestmentTotals,
)

log = get_logger(__name__)

DEFAULT_YIELD_THRESHOLD = 5.50


def region_for(context: PropertyContext) -> str | None:
    """Region used for the tax rate: explicit identifier, else the address."""
    if context.region_identifier and context.region_identifier.strip():
        return context.region_identifier
    return extract_region_from_address(context.full_address)


def summarize_financing(
    financing: FinancingParameters,
    totals: InvestmentTotals,
) -> FinancingSummary:
    """Loan facts for display, including the annuity payment."""
    return FinancingSummary(
        financing_type=financing.financing_type,
        loan_amount=totals.loan_amount,
        loan_term_years=financing.loan_term_years,
        interest_rate_pct=financing.interest_rate_pct,
        monthly_payment=calculate_monthly_payment(
            totals.loan_amount,
            financing.interest_rate_pct,
            financing.loan_term_years * MONTHS_PER_YEAR,
        ),
    )


@dataclass(frozen=True)
class EstimateEngine:
    """Runs the estimate pipeline with fixed reference defaults."""

    default_tax_rate: float = DEFAULT_TAX_RATE
    default_yield_threshold: float = DEFAULT_YIELD_THRESHOLD

    @classmethod
    def from_settings(cls) -> EstimateEngine:
        settings = get_settings()
        return cls(
            default_tax_rate=settings.default_tax_rate,
            default_yield_threshold=settings.default_yield_threshold,
        )

    def compute(
        self,
        acquisition: AcquisitionParameters,
        financing: FinancingParameters,
        drivers: ScenarioDrivers,
        context: PropertyContext,
    ) -> FinancialResult:
        """Run every stage and return the nested result."""
        tax_rate = resolve_tax_rate(region_for(context), default=self.default_tax_rate)

        provisional = calculate_acquisition_costs(acquisition, drivers, tax_rate)
        costs = apply_financing_deposit(provisional, financing)

        fees = calculate_fees_and_capex(acquisition, costs, context)
        totals = calculate_investment_totals(costs, fees, financing)
        income = project_income(acquisition, drivers, costs)
        expenses = calculate_operating_expenses(
            acquisition, context, income, financing, costs, totals
        )
        returns = calculate_returns_and_yields(income, expenses, totals, costs)

        return FinancialResult(
            acquisition_costs=costs,
            fees_and_capex=fees,
            investment_totals=totals,
            income=income,
            operating_expenses=expenses,
            returns_and_yields=returns,
            financing_summary=summarize_financing(financing, totals),
        )

    def estimate(
        self,
        acquisition: AcquisitionParameters,
        financing: FinancingParameters,
        drivers: ScenarioDrivers,
        context: PropertyContext | None = None,
        yield_threshold: float | None = None,
    ) -> FinancialEstimate:
        """Compute the result and the viability verdict.

        Args:
            acquisition: Purchase terms
            financing: Mortgage terms
            drivers: Scenario drivers
            context: Property facts; an empty context when omitted
            yield_threshold: Viability threshold %; engine default when omitted

        Returns:
            Result snapshot with ``meets_threshold`` and the threshold applied
        """
        context = context or PropertyContext()
        threshold = self.default_yield_threshold if yield_threshold is None else yield_threshold

        results = self.compute(acquisition, financing, drivers, context)
        meets = meets_yield_threshold(results.returns_and_yields, threshold)

        log.debug(
            "estimate_computed",
            purchase_price=acquisition.purchase_price,
            tax_rate=results.acquisition_costs.tax_rate,
            yield_threshold=threshold,
            meets_threshold=meets,
        )

        return FinancialEstimate(
            results=results,
            meets_threshold=meets,
            yield_threshold=threshold,
        )


def estimate_profitability(
    acquisition: AcquisitionParameters,
    financing: FinancingParameters,
    drivers: ScenarioDrivers,
    context: PropertyContext | None = None,
    yield_threshold: float | None = None,
    *,
    require_purchase_price: bool = True,
) -> FinancialEstimate:
    """Boundary entry point: check the caller precondition, then estimate.

    Raises:
        InvalidParameterError: If ``require_purchase_price`` and the
            purchase price is not positive
    """
    if require_purchase_price and acquisition.purchase_price <= 0:
        raise InvalidParameterError(
            "purchase_price", acquisition.purchase_price, "must be greater than 0"
        )

    return EstimateEngine.from_settings().estimate(
        acquisition, financing, drivers, context, yield_threshold
    )
