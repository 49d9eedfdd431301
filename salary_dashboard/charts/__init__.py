"""
Chart specifications handed to the dashboard renderer.
"""

from salary_dashboard.charts.base import ChartSpec
from salary_dashboard.charts.specs import (
    create_salary_bar_spec,
    create_salary_pie_spec,
    create_sankey_spec,
    format_salary,
)

__all__ = [
    "ChartSpec",
    "create_salary_bar_spec",
    "create_salary_pie_spec",
    "create_sankey_spec",
    "format_salary",
]
