"""Presentation helpers for the profitability table and viability badge.

Numbers are formatted the Spanish way: "." for thousands, "," for decimals,
euro sign without a space.
"""

from __future__ import annotations

import math

import pandas as pd

from profitability.domain.models.inputs import Scenario
from profitability.domain.models.results import FinancialEstimate

CURRENCY = "currency"
PERCENT = "percent"

TABLE_COLUMNS = ["section", "item", "unit", "conservative", "favorable"]

# (section, item, unit, attribute path, per-scenario, levered-only)
_TABLE_LAYOUT: list[tuple[str, str, str, str, bool, bool]] = [
    ("Acquisition Costs", "Sale Price", CURRENCY, "acquisition_costs.sale_price", True, False),
    ("Acquisition Costs", "Purchase Price", CURRENCY, "acquisition_costs.purchase_price", False, False),
    ("Acquisition Costs", "Deposit", CURRENCY, "acquisition_costs.deposit", False, True),
    ("Acquisition Costs", "Taxes", CURRENCY, "acquisition_costs.taxes", False, False),
    ("Acquisition Costs", "Closing Costs", CURRENCY, "acquisition_costs.closing_costs", False, False),
    ("Fees & CAPEX", "Renovation Cost", CURRENCY, "fees_and_capex.renovation_cost", False, False),
    ("Fees & CAPEX", "Furnishing Cost", CURRENCY, "fees_and_capex.furnishing_cost", False, False),
    ("Fees & CAPEX", "Tenant Searching Fee", CURRENCY, "fees_and_capex.tenant_searching_fee", False, False),
    ("Fees & CAPEX", "RE Agent Fee", CURRENCY, "fees_and_capex.real_estate_agent_fee", False, False),
    ("Fees & CAPEX", "Property Management Fee", CURRENCY, "fees_and_capex.property_management_fee", False, False),
    ("Investment Totals", "Total Investment (No Financing)", CURRENCY, "investment_totals.total_investment_unlevered", False, False),
    ("Investment Totals", "Total Investment (Financing)", CURRENCY, "investment_totals.total_investment_levered", False, True),
    ("Income", "Gross Monthly Rent", CURRENCY, "income.gross_monthly_rent", True, False),
    ("Income", "Gross Annual Rent", CURRENCY, "income.gross_annual_rent", True, False),
    ("Income", "Gross Yield", PERCENT, "income.gross_yield", True, False),
    ("Operating Expenses", "Community Fees (Monthly)", CURRENCY, "operating_expenses.community_fees_monthly", False, False),
    ("Operating Expenses", "Home Insurance (Monthly)", CURRENCY, "operating_expenses.home_insurance_monthly", False, False),
    ("Operating Expenses", "IBI (Monthly)", CURRENCY, "operating_expenses.ibi_monthly", False, False),
    ("Operating Expenses", "Property Management (Monthly)", CURRENCY, "operating_expenses.property_management_monthly", True, False),
    ("Operating Expenses", "Loan Interest (Annual)", CURRENCY, "operating_expenses.loan_interest_annual", False, True),
    ("Returns & Yields", "Net Monthly Rent (No Financing)", CURRENCY, "returns_and_yields.net_monthly_rent_unlevered", True, False),
    ("Returns & Yields", "Net Annual Rent (No Financing)", CURRENCY, "returns_and_yields.net_annual_rent_unlevered", True, False),
    ("Returns & Yields", "Net Yield (No Financing)", PERCENT, "returns_and_yields.net_yield_unlevered", True, False),
    ("Returns & Yields", "Net Monthly Rent (Financing)", CURRENCY, "returns_and_yields.net_monthly_rent_levered", True, True),
    ("Returns & Yields", "Net Annual Rent (Financing)", CURRENCY, "returns_and_yields.net_annual_rent_levered", True, True),
    ("Returns & Yields", "Net Yield (Financing) - ROCE", PERCENT, "returns_and_yields.net_yield_levered", True, True),
]


def _group_thousands(integer_part: int) -> str:
    return f"{integer_part:,}".replace(",", ".")


def format_currency(value: float | None) -> str:
    """Format an amount as "1.234,50€"; zero is "0€", missing is "-"."""
    if value is None or math.isnan(value):
        return "-"
    cents = round(abs(value) * 100)
    if cents == 0:
        return "0€"
    sign = "-" if value < 0 else ""
    return f"{sign}{_group_thousands(cents // 100)},{cents % 100:02d}€"


def format_percentage(value: float | None) -> str:
    """Format a percent figure as "5,40%"; missing or NaN is "0,00%"."""
    if value is None or math.isnan(value):
        return "0,00%"
    return f"{value:.2f}".replace(".", ",") + "%"


def _lookup(estimate: FinancialEstimate, path: str, scenario: Scenario | None) -> float:
    group_name, attr = path.split(".")
    group = getattr(estimate.results, group_name)
    if scenario is None:
        return getattr(group, attr)
    return getattr(group, f"{attr}_{scenario.value}")


def build_profitability_table(
    estimate: FinancialEstimate,
    has_financing: bool | None = None,
) -> pd.DataFrame:
    """One row per line item, raw numbers in the scenario columns.

    Scenario-independent items repeat their value in both columns. Levered
    items are None when there is no financing.

    Args:
        estimate: Estimate to render
        has_financing: Override; defaults to LTV > 0

    Returns:
        DataFrame with TABLE_COLUMNS
    """
    if has_financing is None:
        has_financing = estimate.results.acquisition_costs.loan_to_value_pct > 0

    rows = []
    for section, item, unit, path, per_scenario, levered_only in _TABLE_LAYOUT:
        if levered_only and not has_financing:
            conservative = favorable = None
        elif per_scenario:
            conservative = _lookup(estimate, path, Scenario.CONSERVATIVE)
            favorable = _lookup(estimate, path, Scenario.FAVORABLE)
        else:
            conservative = favorable = _lookup(estimate, path, None)
        rows.append((section, item, unit, conservative, favorable))

    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def format_profitability_table(table: pd.DataFrame) -> pd.DataFrame:
    """Copy of a profitability table with display strings in the value columns."""
    formatted = table.copy()
    for column in ("conservative", "favorable"):
        formatted[column] = [
            format_percentage(value) if unit == PERCENT else format_currency(value)
            for value, unit in zip(table[column], table["unit"])
        ]
    # Levered rows without financing read "-" in both unit kinds
    missing = table["conservative"].isna()
    formatted.loc[missing, ["conservative", "favorable"]] = "-"
    return formatted


def threshold_message(estimate: FinancialEstimate) -> str:
    """Viability badge text."""
    threshold = f"{estimate.yield_threshold:g}"
    if estimate.meets_threshold:
        return f"OK - The property reaches a profitability threshold of {threshold}%"
    return f"Not OK - The property does not reach the profitability threshold of {threshold}%"


def viability_summary(estimate: FinancialEstimate) -> str:
    """Explanatory line shown under the badge."""
    if estimate.meets_threshold:
        return (
            "At least one scenario is viable. The financial indicators validate "
            "the feasibility of the operation under the current terms."
        )
    return (
        "Both scenarios are not viable. Consider reviewing the financial "
        "parameters or discarding the property."
    )
