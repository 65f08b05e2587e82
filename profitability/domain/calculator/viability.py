"""Viability decision."""

from __future__ import annotations

from profitability.domain.models.results import ReturnsAndYields


def meets_yield_threshold(returns: ReturnsAndYields, threshold_pct: float) -> bool:
    """True when any of the four net yields reaches the threshold.

    Unlevered and levered, conservative and favorable are OR-ed together.
    """
    return any(y >= threshold_pct for y in returns.net_yields().values())
