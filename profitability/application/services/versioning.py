"""Snapshot versioning helpers.

Pure functions over a list of ``EstimateSnapshot`` records: each helper
returns new records and never mutates its input. Storage is left to the
persistence collaborator; these helpers only enforce the numbering and the
"exactly one current snapshot per property" rule.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from profitability.core.exceptions import SnapshotNotFoundError
from profitability.core.logging import get_logger
from profitability.domain.models.inputs import (
    AcquisitionParameters,
    FinancingParameters,
    ScenarioDrivers,
)
from profitability.domain.models.results import FinancialEstimate
from profitability.domain.models.snapshot import EstimateSnapshot

log = get_logger(__name__)


def _for_property(snapshots: Iterable[EstimateSnapshot], property_id: str) -> list[EstimateSnapshot]:
    return [s for s in snapshots if s.property_id == property_id]


def next_version(snapshots: Iterable[EstimateSnapshot], property_id: str) -> int:
    """Next version number for a property (1 for the first snapshot)."""
    versions = [s.version for s in _for_property(snapshots, property_id)]
    return max(versions) + 1 if versions else 1


def current_snapshot(
    snapshots: Iterable[EstimateSnapshot], property_id: str
) -> EstimateSnapshot | None:
    """The current snapshot of a property, highest version first if several."""
    current = [s for s in _for_property(snapshots, property_id) if s.is_current]
    if not current:
        return None
    return max(current, key=lambda s: s.version)


def _set_current(snapshot: EstimateSnapshot, is_current: bool) -> EstimateSnapshot:
    if snapshot.is_current == is_current:
        return snapshot
    return snapshot.model_copy(
        update={"is_current": is_current, "updated_at": datetime.now(timezone.utc)}
    )


def create_snapshot(
    snapshots: list[EstimateSnapshot],
    property_id: str,
    acquisition: AcquisitionParameters,
    financing: FinancingParameters,
    drivers: ScenarioDrivers,
    estimate: FinancialEstimate,
    created_by: str | None = None,
) -> list[EstimateSnapshot]:
    """Append a new current version; earlier versions of the property are demoted.

    Returns:
        The updated snapshot list, new snapshot last
    """
    snapshot = EstimateSnapshot(
        property_id=property_id,
        version=next_version(snapshots, property_id),
        is_current=True,
        acquisition=acquisition,
        financing=financing,
        scenario_drivers=drivers,
        results=estimate.results,
        yield_threshold=estimate.yield_threshold,
        meets_threshold=estimate.meets_threshold,
        created_by=created_by,
    )
    updated = [
        _set_current(s, False) if s.property_id == property_id else s
        for s in snapshots
    ]
    log.info(
        "estimate_snapshot_created",
        property_id=property_id,
        version=snapshot.version,
        meets_threshold=snapshot.meets_threshold,
    )
    return [*updated, snapshot]


def promote_snapshot(
    snapshots: list[EstimateSnapshot],
    property_id: str,
    snapshot_id: str,
) -> list[EstimateSnapshot]:
    """Make a prior snapshot the current one for its property.

    Raises:
        SnapshotNotFoundError: If the id does not belong to the property
    """
    if not any(s.id == snapshot_id for s in _for_property(snapshots, property_id)):
        raise SnapshotNotFoundError(property_id, snapshot_id)

    log.info("estimate_snapshot_promoted", property_id=property_id, snapshot_id=snapshot_id)
    return [
        _set_current(s, s.id == snapshot_id) if s.property_id == property_id else s
        for s in snapshots
    ]


def update_snapshot(
    snapshots: list[EstimateSnapshot],
    snapshot_id: str,
    acquisition: AcquisitionParameters | None = None,
    financing: FinancingParameters | None = None,
    drivers: ScenarioDrivers | None = None,
    estimate: FinancialEstimate | None = None,
) -> list[EstimateSnapshot]:
    """Overwrite a snapshot in place, keeping its version and current flag.

    Arguments left as None keep the stored value. Passing ``estimate``
    replaces the results together with the threshold and verdict.

    Raises:
        SnapshotNotFoundError: If no snapshot has the id
    """
    target = next((s for s in snapshots if s.id == snapshot_id), None)
    if target is None:
        raise SnapshotNotFoundError(None, snapshot_id)

    changes: dict = {"updated_at": datetime.now(timezone.utc)}
    if acquisition is not None:
        changes["acquisition"] = acquisition
    if financing is not None:
        changes["financing"] = financing
    if drivers is not None:
        changes["scenario_drivers"] = drivers
    if estimate is not None:
        changes["results"] = estimate.results
        changes["yield_threshold"] = estimate.yield_threshold
        changes["meets_threshold"] = estimate.meets_threshold

    updated = target.model_copy(update=changes)
    log.info(
        "estimate_snapshot_updated",
        property_id=target.property_id,
        version=target.version,
        meets_threshold=updated.meets_threshold,
    )
    return [updated if s.id == snapshot_id else s for s in snapshots]
