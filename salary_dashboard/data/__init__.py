"""
Data module for the salary dashboard.

Contains record schemas, CSV loading, and synthetic record generation.
"""

from salary_dashboard.data.loader import (
    REQUIRED_COLUMNS,
    LoadResult,
    SalaryDataLoader,
    load_records,
    records_from_rows,
)
from salary_dashboard.data.schemas import (
    EXPERIENCE_DESCRIPTIONS,
    AggregateBucket,
    CategoryMean,
    EmploymentRecord,
    ExperienceLevel,
    FlowTier,
)
from salary_dashboard.data.synthetic_generator import (
    SyntheticRecordGenerator,
    generate_records,
)

__all__ = [
    # Schemas
    "EXPERIENCE_DESCRIPTIONS",
    "AggregateBucket",
    "CategoryMean",
    "EmploymentRecord",
    "ExperienceLevel",
    "FlowTier",
    # Loading
    "REQUIRED_COLUMNS",
    "LoadResult",
    "SalaryDataLoader",
    "load_records",
    "records_from_rows",
    # Synthetic data
    "SyntheticRecordGenerator",
    "generate_records",
]
