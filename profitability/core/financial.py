"""Shared financial helpers.

Loan payment and guarded ratio helpers used by the stage calculators.
"""

from __future__ import annotations

import numpy_financial as npf

MONTHS_PER_YEAR = 12


def pct_of(amount: float, pct: float) -> float:
    """Apply a percentage expressed in percent units (3.5 means 3.5%)."""
    return amount * (pct / 100.0)


def ratio_pct(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator`` as a percentage.

    A non-positive denominator yields 0.0 instead of an infinite or
    undefined ratio.
    """
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100.0


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    duration_months: int,
) -> float:
    """Calculate the monthly annuity payment (principal + interest).

    Args:
        principal: Loan amount
        annual_rate_pct: Annual interest rate as percentage (e.g., 3.5 for 3.5%)
        duration_months: Loan term in months

    Returns:
        Monthly payment amount, 0.0 when there is no loan or no term
    """
    if principal <= 0 or duration_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / MONTHS_PER_YEAR

    if monthly_rate <= 0:
        return principal / duration_months

    return float(-npf.pmt(monthly_rate, duration_months, principal))
