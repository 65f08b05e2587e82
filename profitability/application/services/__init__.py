"""Application services."""

from .estimator import EstimateEngine, estimate_profitability
from .versioning import (
    create_snapshot,
    current_snapshot,
    next_version,
    promote_snapshot,
    update_snapshot,
)

__all__ = [
    "EstimateEngine",
    "estimate_profitability",
    "create_snapshot",
    "current_snapshot",
    "next_version",
    "promote_snapshot",
    "update_snapshot",
]
