"""Data models for the profitability engine."""

from .inputs import (
    FINANCING_PRESETS,
    MANAGEMENT_FEE_RATES,
    AcquisitionParameters,
    FinancingParameters,
    FinancingType,
    ManagementPlan,
    PropertyContext,
    Scenario,
    ScenarioDrivers,
)
from .results import (
    AcquisitionCosts,
    FeesAndCapex,
    FinancedAcquisition,
    FinancialEstimate,
    FinancialResult,
    FinancingSummary,
    Income,
    InvestmentTotals,
    OperatingExpenses,
    ReturnsAndYields,
    ScenarioView,
)
from .snapshot import EstimateSnapshot

__all__ = [
    "FINANCING_PRESETS",
    "MANAGEMENT_FEE_RATES",
    "AcquisitionParameters",
    "FinancingParameters",
    "FinancingType",
    "ManagementPlan",
    "PropertyContext",
    "Scenario",
    "ScenarioDrivers",
    "AcquisitionCosts",
    "FinancedAcquisition",
    "FeesAndCapex",
    "InvestmentTotals",
    "Income",
    "OperatingExpenses",
    "ReturnsAndYields",
    "FinancingSummary",
    "ScenarioView",
    "FinancialResult",
    "FinancialEstimate",
    "EstimateSnapshot",
]
