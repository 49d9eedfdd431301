"""
Reporting module for the salary dashboard.

Contains JSON export and static preview figures.
"""

from salary_dashboard.reporting.export import (
    NumpyEncoder,
    dashboard_to_dict,
    export_dashboard_to_json,
    load_dashboard_from_json,
)
from salary_dashboard.reporting.visuals import (
    close_figure,
    plot_flow_layout,
    plot_salary_bars,
    plot_salary_pie,
    save_figure,
    set_style,
)

__all__ = [
    # Export functions
    "NumpyEncoder",
    "dashboard_to_dict",
    "export_dashboard_to_json",
    "load_dashboard_from_json",
    # Visualization functions
    "close_figure",
    "plot_flow_layout",
    "plot_salary_bars",
    "plot_salary_pie",
    "save_figure",
    "set_style",
]
