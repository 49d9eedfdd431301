"""
Module: export

Purpose: Serialize a dashboard result into the JSON payload the renderer loads.
"""

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from salary_dashboard.exceptions import ReportGenerationError
from salary_dashboard.pipeline import DashboardResult

logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy scalar types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        return super().default(obj)


def dashboard_to_dict(result: DashboardResult) -> dict[str, Any]:
    """
    Convert a dashboard result to a JSON-ready dictionary.

    Args:
        result: Pipeline output

    Returns:
        Dictionary with bar, pie and sankey data plus chart specs and summary
    """
    return {
        "summary": result.get_summary(),
        "bar": [row.model_dump() for row in result.bar_data],
        "pie": [row.model_dump() for row in result.pie_data],
        "sankey": result.layout.to_dict(),
        "charts": {chart_id: spec.to_dict() for chart_id, spec in result.charts.items()},
    }


def export_dashboard_to_json(
    result: DashboardResult,
    filepath: str | Path | None = None,
    *,
    indent: int = 2,
) -> str:
    """
    Export dashboard data to JSON.

    Args:
        result: Pipeline output
        filepath: Optional filepath to write to
        indent: JSON indentation level

    Returns:
        JSON string

    Raises:
        ReportGenerationError: If export fails
    """
    try:
        json_str = json.dumps(dashboard_to_dict(result), indent=indent, cls=NumpyEncoder)

        if filepath:
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json_str, encoding="utf-8")
            logger.info(f"Wrote dashboard data to {path}")

        return json_str

    except (TypeError, ValueError, OSError) as e:
        raise ReportGenerationError(
            f"Failed to export dashboard to JSON: {e}",
            report_type="json",
        ) from e


def load_dashboard_from_json(filepath: str | Path) -> dict[str, Any]:
    """
    Load dashboard data from a JSON file.

    Raises:
        ReportGenerationError: If the file is missing or not valid JSON
    """
    try:
        return json.loads(Path(filepath).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ReportGenerationError(
            f"Failed to load dashboard JSON: {e}",
            report_type="json",
        ) from e
