"""Export services for estimates.

Saves estimates to JSON, and profitability tables to CSV, for sharing and
offline analysis.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any

from profitability.core.exceptions import ExportError
from profitability.core.logging import get_logger
from profitability.core.settings import get_settings
from profitability.domain.models.results import FinancialEstimate
from profitability.services.presentation import build_profitability_table

log = get_logger(__name__)


class EstimateExporter:
    """Handles exporting of estimate results."""

    def __init__(self, output_dir: str | None = None):
        """Initialize exporter.

        Args:
            output_dir: Directory where exports are written. Defaults to settings.
        """
        self.output_dir = output_dir or get_settings().export_dir
        self._ensure_dir()

    def _ensure_dir(self) -> None:
        if not os.path.exists(self.output_dir):
            try:
                os.makedirs(self.output_dir)
                log.info("created_output_directory", path=self.output_dir)
            except OSError as e:
                log.error("output_directory_creation_failed", path=self.output_dir, error=str(e))
                raise ExportError(f"Cannot create export directory {self.output_dir}") from e

    def _path(self, prefix: str, extension: str) -> str:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        return os.path.join(self.output_dir, f"{prefix}_{timestamp}.{extension}")

    def save_estimate(
        self,
        estimate: FinancialEstimate,
        prefix: str = "estimate",
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Save an estimate to a JSON file.

        Args:
            estimate: Estimate to export
            prefix: Filename prefix
            metadata: Extra metadata stored alongside (e.g. property id)

        Returns:
            Path to the saved file.
        """
        filepath = self._path(prefix, "json")
        payload = {
            "metadata": {
                "timestamp": datetime.now().isoformat(),
                **(metadata or {}),
            },
            "estimate": estimate.model_dump(mode="json"),
        }

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("estimate_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}") from e

        log.info("estimate_saved", path=filepath, meets_threshold=estimate.meets_threshold)
        return filepath

    def save_table_csv(self, estimate: FinancialEstimate, prefix: str = "profitability") -> str:
        """Save the raw profitability table to CSV.

        Returns:
            Path to the saved file.
        """
        filepath = self._path(prefix, "csv")
        try:
            build_profitability_table(estimate).to_csv(filepath, index=False)
        except OSError as e:
            log.error("table_save_failed", path=filepath, error=str(e))
            raise ExportError(f"Cannot write {filepath}") from e

        log.info("table_saved", path=filepath)
        return filepath
