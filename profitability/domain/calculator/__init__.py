"""Stage calculators, in pipeline order."""

from .acquisition import apply_financing_deposit, calculate_acquisition_costs
from .expenses import calculate_operating_expenses
from .fees import calculate_fees_and_capex, calculate_furnishing_cost
from .income import project_income
from .returns import calculate_returns_and_yields
from .tax_rates import (
    DEFAULT_TAX_RATE,
    TAX_RATES_BY_REGION,
    TaxRateEntry,
    extract_region_from_address,
    resolve_tax_rate,
    resolve_tax_rate_entry,
)
from .totals import calculate_investment_totals
from .viability import meets_yield_threshold

__all__ = [
    "DEFAULT_TAX_RATE",
    "TAX_RATES_BY_REGION",
    "TaxRateEntry",
    "resolve_tax_rate",
    "resolve_tax_rate_entry",
    "extract_region_from_address",
    "calculate_acquisition_costs",
    "apply_financing_deposit",
    "calculate_furnishing_cost",
    "calculate_fees_and_capex",
    "calculate_investment_totals",
    "project_income",
    "calculate_operating_expenses",
    "calculate_returns_and_yields",
    "meets_yield_threshold",
]
