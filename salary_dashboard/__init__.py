"""
Salary dashboard core: rollups, job-title groups and Sankey flow layout
over data-science salary records.
"""

__version__ = "0.1.0"
