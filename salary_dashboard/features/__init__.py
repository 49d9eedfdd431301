"""
Features module for the salary dashboard.

Contains the categorical rollup engine and the job-title classifier.
"""

from salary_dashboard.features.job_groups import (
    DEFAULT_JOB_GROUP,
    JOB_GROUP_LABELS,
    JOB_TITLE_GROUPS,
    classify_job_title,
    titles_in_group,
)
from salary_dashboard.features.rollup import (
    by_company_size,
    by_experience_level,
    by_job_group,
    count,
    group_records,
    mean_salary,
    rollup,
    rollup_buckets,
    rollup_pairs,
    salary_by_company_size,
    salary_by_experience,
    with_percentages,
)

__all__ = [
    # Job title groups
    "DEFAULT_JOB_GROUP",
    "JOB_GROUP_LABELS",
    "JOB_TITLE_GROUPS",
    "classify_job_title",
    "titles_in_group",
    # Key extractors and reducers
    "by_company_size",
    "by_experience_level",
    "by_job_group",
    "count",
    "mean_salary",
    # Rollups
    "group_records",
    "rollup",
    "rollup_buckets",
    "rollup_pairs",
    # Chart data
    "salary_by_company_size",
    "salary_by_experience",
    "with_percentages",
]
