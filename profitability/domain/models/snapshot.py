"""Stored estimate snapshot model.

A snapshot is what the persistence collaborator keeps for a property: the
inputs of one run, its result, and its version bookkeeping.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field

from .inputs import AcquisitionParameters, FinancingParameters, ScenarioDrivers
from .results import FinancialResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EstimateSnapshot(BaseModel):
    """Numbered, supersedable version of an estimate for one property."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    property_id: str
    version: int = Field(..., ge=1)
    is_current: bool = True

    acquisition: AcquisitionParameters
    financing: FinancingParameters
    scenario_drivers: ScenarioDrivers
    results: FinancialResult
    yield_threshold: float
    meets_threshold: bool

    created_by: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
