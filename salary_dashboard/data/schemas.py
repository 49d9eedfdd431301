"""
Module: schemas

Purpose: Pydantic models for records and aggregate rows in the salary dashboard.

All models use Pydantic v2 for validation with strict type hints.
"""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class ExperienceLevel(str, Enum):
    """Experience level codes used in the salaries dataset."""

    SE = "SE"
    EX = "EX"
    MI = "MI"
    EN = "EN"

    @property
    def description(self) -> str:
        return EXPERIENCE_DESCRIPTIONS[self.value]


EXPERIENCE_DESCRIPTIONS: dict[str, str] = {
    "SE": "Senior Level",
    "EX": "Executive Level",
    "MI": "Mid Level",
    "EN": "Entry Level",
}


class FlowTier(int, Enum):
    """The three fixed stages of the flow diagram, left to right."""

    EXPERIENCE = 0
    JOB_GROUP = 1
    COMPANY_SIZE = 2


# =============================================================================
# BASE MODELS
# =============================================================================


class BaseSchema(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


# =============================================================================
# RECORD SCHEMAS
# =============================================================================


class EmploymentRecord(BaseSchema):
    """One employment observation from the salaries dataset."""

    experience_level: ExperienceLevel
    company_size: str = Field(min_length=1)
    job_title: str
    salary_in_usd: float = Field(ge=0)

    @field_validator("salary_in_usd")
    @classmethod
    def salary_must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("salary_in_usd must be a finite number")
        return v

    def __repr__(self) -> str:
        return (
            f"EmploymentRecord(level={self.experience_level.value!r}, "
            f"size={self.company_size!r}, title={self.job_title!r}, "
            f"salary={self.salary_in_usd:,.0f})"
        )


# =============================================================================
# AGGREGATE SCHEMAS
# =============================================================================


class AggregateBucket(BaseSchema):
    """Result of reducing the records that share one grouping key."""

    key: Any
    value: float
    count: int = Field(ge=1)


class CategoryMean(BaseSchema):
    """Average salary for one category, as fed to the bar and pie charts."""

    category: str
    mean_value: float
    count: int = Field(ge=1)

    def percentage_of(self, total: float) -> float:
        """Share of ``total`` taken by this category, in percent."""
        if total <= 0:
            return 0.0
        return self.mean_value / total * 100

    @property
    def description(self) -> str:
        return EXPERIENCE_DESCRIPTIONS.get(self.category, self.category)
