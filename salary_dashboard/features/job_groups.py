"""
Module: job_groups

Purpose: Map free-text job titles to a small fixed set of title groups.

The dataset has dozens of near-duplicate titles, so the flow diagram shows
groups instead. Matching is an exact, case-sensitive lookup; anything not
listed falls into "Other".
"""

from types import MappingProxyType
from typing import Mapping

DEFAULT_JOB_GROUP = "Other"

JOB_TITLE_GROUPS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Engineer": (
        "Data Engineer",
        "Machine Learning Engineer",
        "Software Engineer",
        "ML Engineer",
        "Platform Engineer",
        "Backend Engineer",
        "Frontend Engineer",
    ),
    "Analyst": (
        "Data Analyst",
        "Business Analyst",
        "Research Analyst",
        "Marketing Analyst",
    ),
    "Scientist": (
        "Data Scientist",
        "ML Scientist",
        "Research Scientist",
        "AI Scientist",
    ),
    "Manager": (
        "Engineering Manager",
        "Product Manager",
        "Project Manager",
        "Data Manager",
        "Analytics Manager",
    ),
    "Consultant": (
        "Data Consultant",
        "Analytics Consultant",
        "Business Consultant",
    ),
    "Other": (
        "Data Architect",
        "Statistician",
        "Quantitative Researcher",
        "BI Developer",
        "Data Specialist",
    ),
})

JOB_GROUP_LABELS: tuple[str, ...] = tuple(JOB_TITLE_GROUPS)

# Reverse index; the first group listing a title wins
_TITLE_TO_GROUP: dict[str, str] = {}
for _group, _titles in JOB_TITLE_GROUPS.items():
    for _title in _titles:
        _TITLE_TO_GROUP.setdefault(_title, _group)


def classify_job_title(title: str) -> str:
    """
    Return the group label for a job title.

    Args:
        title: Job title exactly as it appears in the data

    Returns:
        One of JOB_GROUP_LABELS; "Other" for unlisted titles
    """
    return _TITLE_TO_GROUP.get(title, DEFAULT_JOB_GROUP)


def titles_in_group(group: str) -> tuple[str, ...]:
    """Known titles listed under ``group`` (empty for unknown groups)."""
    return JOB_TITLE_GROUPS.get(group, ())
