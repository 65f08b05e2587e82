"""Presentation and export services."""

from .exporter import EstimateExporter
from .presentation import (
    build_profitability_table,
    format_currency,
    format_percentage,
    format_profitability_table,
    threshold_message,
    viability_summary,
)

__all__ = [
    "EstimateExporter",
    "build_profitability_table",
    "format_profitability_table",
    "format_currency",
    "format_percentage",
    "threshold_message",
    "viability_summary",
]
