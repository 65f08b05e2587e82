"""Core settings, logging, exceptions and financial helpers."""

from .exceptions import (
    ExportError,
    InvalidParameterError,
    ProfitabilityError,
    SnapshotError,
    SnapshotNotFoundError,
)
from .financial import calculate_monthly_payment, pct_of, ratio_pct
from .settings import EngineSettings, get_settings

__all__ = [
    "calculate_monthly_payment",
    "pct_of",
    "ratio_pct",
    "EngineSettings",
    "get_settings",
    # Exceptions
    "ProfitabilityError",
    "InvalidParameterError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "ExportError",
]
