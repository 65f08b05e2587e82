"""Estimate result models.

One group per pipeline stage. Per-scenario figures are stored as
``<name>_conservative`` / ``<name>_favorable`` pairs; ``ScenarioView`` gathers
one side of every pair for display.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from .inputs import FinancingType, Scenario


def _side(model: BaseModel, name: str, scenario: Scenario) -> float:
    return getattr(model, f"{name}_{Scenario(scenario).value}")


class AcquisitionCosts(BaseModel):
    """Acquisition stage output with the provisional 20% deposit."""

    sale_price_conservative: float
    sale_price_favorable: float
    purchase_price: float
    deposit: float
    tax_rate: float = Field(..., description="Resolved transfer tax rate (fraction)")
    taxes: float
    closing_costs: float

    model_config = {"frozen": True}

    def sale_price(self, scenario: Scenario) -> float:
        return _side(self, "sale_price", scenario)


class FinancedAcquisition(AcquisitionCosts):
    """Acquisition costs whose deposit has been derived from the LTV.

    Only ``apply_financing_deposit`` builds these; every stage after the
    acquisition stage requires this type.
    """

    loan_to_value_pct: float


class FeesAndCapex(BaseModel):
    """One-off fees and capital expenditure."""

    renovation_cost: float
    furnishing_cost: float
    tenant_searching_fee: float
    real_estate_agent_fee: float
    property_management_fee: float

    model_config = {"frozen": True}

    @computed_field
    @property
    def total(self) -> float:
        return (
            self.renovation_cost
            + self.furnishing_cost
            + self.tenant_searching_fee
            + self.real_estate_agent_fee
            + self.property_management_fee
        )


class InvestmentTotals(BaseModel):
    """Capital totals.

    ``total_investment_levered`` adds the loan to the unlevered total; it is
    a "total capital moved" figure, not the equity invested.
    """

    total_investment_unlevered: float
    loan_amount: float
    total_investment_levered: float

    model_config = {"frozen": True}


class Income(BaseModel):
    gross_monthly_rent_conservative: float
    gross_monthly_rent_favorable: float
    gross_annual_rent_conservative: float
    gross_annual_rent_favorable: float
    gross_yield_conservative: float
    gross_yield_favorable: float

    model_config = {"frozen": True}

    def gross_monthly_rent(self, scenario: Scenario) -> float:
        return _side(self, "gross_monthly_rent", scenario)


class OperatingExpenses(BaseModel):
    """Recurring costs. Loan interest is shared by both scenarios."""

    community_fees_monthly: float
    home_insurance_monthly: float
    ibi_monthly: float
    property_management_monthly_conservative: float
    property_management_monthly_favorable: float
    loan_interest_annual: float

    model_config = {"frozen": True}

    def property_management_monthly(self, scenario: Scenario) -> float:
        return _side(self, "property_management_monthly", scenario)

    def fixed_monthly(self) -> float:
        """Monthly costs that do not depend on the scenario or the loan."""
        return self.community_fees_monthly + self.home_insurance_monthly + self.ibi_monthly


class ReturnsAndYields(BaseModel):
    """Net rents and yields, unlevered and levered (ROCE)."""

    net_monthly_rent_unlevered_conservative: float
    net_monthly_rent_unlevered_favorable: float
    net_annual_rent_unlevered_conservative: float
    net_annual_rent_unlevered_favorable: float
    net_yield_unlevered_conservative: float
    net_yield_unlevered_favorable: float
    net_monthly_rent_levered_conservative: float
    net_monthly_rent_levered_favorable: float
    net_annual_rent_levered_conservative: float
    net_annual_rent_levered_favorable: float
    net_yield_levered_conservative: float
    net_yield_levered_favorable: float

    model_config = {"frozen": True}

    def net_yields(self) -> dict[str, float]:
        """The four yields the viability decision looks at."""
        return {
            "unlevered_conservative": self.net_yield_unlevered_conservative,
            "unlevered_favorable": self.net_yield_unlevered_favorable,
            "levered_conservative": self.net_yield_levered_conservative,
            "levered_favorable": self.net_yield_levered_favorable,
        }


class FinancingSummary(BaseModel):
    """Loan facts for display. No yield formula reads these."""

    financing_type: FinancingType
    loan_amount: float
    loan_term_years: int
    interest_rate_pct: float
    monthly_payment: float

    model_config = {"frozen": True}


class ScenarioView(BaseModel):
    """Every per-scenario figure of a result for one scenario."""

    scenario: Scenario
    sale_price: float
    gross_monthly_rent: float
    gross_annual_rent: float
    gross_yield: float
    property_management_monthly: float
    net_monthly_rent_unlevered: float
    net_annual_rent_unlevered: float
    net_yield_unlevered: float
    net_monthly_rent_levered: float
    net_annual_rent_levered: float
    net_yield_levered: float

    model_config = {"frozen": True}


class FinancialResult(BaseModel):
    """Full nested output of the estimate pipeline."""

    acquisition_costs: FinancedAcquisition
    fees_and_capex: FeesAndCapex
    investment_totals: InvestmentTotals
    income: Income
    operating_expenses: OperatingExpenses
    returns_and_yields: ReturnsAndYields
    financing_summary: FinancingSummary

    model_config = {"frozen": True}

    def scenario_view(self, scenario: Scenario) -> ScenarioView:
        """Trace one scenario through every stage."""
        ry = self.returns_and_yields
        return ScenarioView(
            scenario=scenario,
            sale_price=self.acquisition_costs.sale_price(scenario),
            gross_monthly_rent=_side(self.income, "gross_monthly_rent", scenario),
            gross_annual_rent=_side(self.income, "gross_annual_rent", scenario),
            gross_yield=_side(self.income, "gross_yield", scenario),
            property_management_monthly=self.operating_expenses.property_management_monthly(scenario),
            net_monthly_rent_unlevered=_side(ry, "net_monthly_rent_unlevered", scenario),
            net_annual_rent_unlevered=_side(ry, "net_annual_rent_unlevered", scenario),
            net_yield_unlevered=_side(ry, "net_yield_unlevered", scenario),
            net_monthly_rent_levered=_side(ry, "net_monthly_rent_levered", scenario),
            net_annual_rent_levered=_side(ry, "net_annual_rent_levered", scenario),
            net_yield_levered=_side(ry, "net_yield_levered", scenario),
        )


class FinancialEstimate(BaseModel):
    """Result snapshot plus the viability verdict and the threshold applied."""

    results: FinancialResult
    meets_threshold: bool
    yield_threshold: float

    model_config = {"frozen": True}

    @computed_field
    @property
    def best_net_yield(self) -> float:
        """Highest of the four net yields."""
        return max(self.results.returns_and_yields.net_yields().values())
