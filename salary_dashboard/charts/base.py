"""
Base dataclass for dashboard chart specifications.

A ChartSpec holds the data and layout parameters a renderer needs for one
chart. Drawing is done elsewhere; this is the hand-off format.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ChartSpec:
    """Specification for a single dashboard chart."""

    chart_id: str
    chart_type: str  # "bar", "pie", "sankey"

    # Data for the chart (will be JSON-serialized)
    data: dict[str, Any] = field(default_factory=dict)

    # Chart configuration
    config: dict[str, Any] = field(default_factory=dict)

    # Titles and other fixed labels
    annotations: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "chart_id": self.chart_id,
            "chart_type": self.chart_type,
            "data": self.data,
            "config": self.config,
            "annotations": self.annotations,
        }
