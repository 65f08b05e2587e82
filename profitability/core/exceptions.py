"""Custom exceptions for the profitability engine.

The calculators never raise on business input; these are reserved for the
boundary (caller preconditions) and the services around the engine.
"""

from __future__ import annotations

from typing import Any


class ProfitabilityError(Exception):
    """Base exception for all profitability engine errors."""
    pass


# --- Input Errors ---

class InvalidParameterError(ProfitabilityError):
    """Invalid parameter value provided at the engine boundary."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Snapshot Errors ---

class SnapshotError(ProfitabilityError):
    """General snapshot/versioning error."""
    pass


class SnapshotNotFoundError(SnapshotError):
    """No snapshot with the requested id exists for the property."""

    def __init__(self, property_id: str | None, snapshot_id: str):
        self.property_id = property_id
        self.snapshot_id = snapshot_id
        where = f" for property '{property_id}'" if property_id is not None else ""
        super().__init__(f"Snapshot '{snapshot_id}' not found{where}")


# --- Export Errors ---

class ExportError(ProfitabilityError):
    """Failed to write an estimate export."""
    pass
