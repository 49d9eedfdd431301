"""
Module: synthetic_generator

Purpose: Generate salaries-dataset-compatible synthetic records for testing.

Generates realistic synthetic data with:
- Deterministic generation with seed for reproducibility
- Salary distributions that rise with experience level
- Job titles both inside and outside the known title groups
"""

import numpy as np

from salary_dashboard.data.schemas import EmploymentRecord, ExperienceLevel


# =============================================================================
# CONSTANTS
# =============================================================================

EXPERIENCE_WEIGHTS: dict[ExperienceLevel, float] = {
    ExperienceLevel.SE: 0.45,
    ExperienceLevel.MI: 0.30,
    ExperienceLevel.EN: 0.20,
    ExperienceLevel.EX: 0.05,
}

# Log-normal centre (in log dollars) per experience level
SALARY_LOG_MEANS: dict[ExperienceLevel, float] = {
    ExperienceLevel.EN: 11.1,
    ExperienceLevel.MI: 11.5,
    ExperienceLevel.SE: 11.9,
    ExperienceLevel.EX: 12.1,
}

COMPANY_SIZES = ["S", "M", "L"]
COMPANY_SIZE_WEIGHTS = [0.15, 0.60, 0.25]

JOB_TITLES = [
    "Data Engineer",
    "Data Scientist",
    "Data Analyst",
    "Machine Learning Engineer",
    "Analytics Engineer",
    "Research Scientist",
    "Data Architect",
    "Business Analyst",
    "Applied Scientist",
    "Data Science Manager",
    "ML Engineer",
    "Product Manager",
    "Data Consultant",
    "Head of Data",
]


# =============================================================================
# SYNTHETIC DATA GENERATOR
# =============================================================================


class SyntheticRecordGenerator:
    """
    Generate employment records that look like the public salaries dataset.

    Usage:
        generator = SyntheticRecordGenerator(seed=42)
        records = generator.generate(500)
    """

    def __init__(self, seed: int = 42):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def generate(self, n_records: int) -> list[EmploymentRecord]:
        """
        Generate a list of synthetic employment records.

        Args:
            n_records: Number of records to generate

        Returns:
            List of EmploymentRecord objects
        """
        if n_records <= 0:
            return []

        levels = list(EXPERIENCE_WEIGHTS)
        level_idx = self.rng.choice(
            len(levels), size=n_records, p=list(EXPERIENCE_WEIGHTS.values())
        )
        size_idx = self.rng.choice(
            len(COMPANY_SIZES), size=n_records, p=COMPANY_SIZE_WEIGHTS
        )
        title_idx = self.rng.integers(0, len(JOB_TITLES), size=n_records)
        noise = self.rng.normal(0.0, 0.35, size=n_records)

        records: list[EmploymentRecord] = []
        for i in range(n_records):
            level = levels[level_idx[i]]
            salary = float(np.exp(SALARY_LOG_MEANS[level] + noise[i]))
            records.append(
                EmploymentRecord(
                    experience_level=level,
                    company_size=COMPANY_SIZES[size_idx[i]],
                    job_title=JOB_TITLES[title_idx[i]],
                    salary_in_usd=round(salary),
                )
            )
        return records


def generate_records(n_records: int = 500, seed: int = 42) -> list[EmploymentRecord]:
    """Generate a reproducible synthetic record set."""
    return SyntheticRecordGenerator(seed=seed).generate(n_records)
