"""
Tests for synthetic record generation.
"""

from salary_dashboard.data.schemas import EmploymentRecord, ExperienceLevel
from salary_dashboard.data.synthetic_generator import (
    COMPANY_SIZES,
    JOB_TITLES,
    SyntheticRecordGenerator,
    generate_records,
)
from salary_dashboard.features.job_groups import DEFAULT_JOB_GROUP, classify_job_title


class TestSyntheticRecordGenerator:
    """Tests for SyntheticRecordGenerator."""

    def test_count(self) -> None:
        records = SyntheticRecordGenerator(seed=1).generate(120)
        assert len(records) == 120
        assert all(isinstance(r, EmploymentRecord) for r in records)

    def test_deterministic(self) -> None:
        assert generate_records(100, seed=5) == generate_records(100, seed=5)

    def test_seed_changes_output(self) -> None:
        assert generate_records(100, seed=5) != generate_records(100, seed=6)

    def test_non_positive_count(self) -> None:
        assert SyntheticRecordGenerator().generate(0) == []
        assert SyntheticRecordGenerator().generate(-3) == []

    def test_values_in_domain(self) -> None:
        records = generate_records(300)

        assert all(r.salary_in_usd >= 0 for r in records)
        assert {r.company_size for r in records} <= set(COMPANY_SIZES)
        assert {r.job_title for r in records} <= set(JOB_TITLES)
        assert {r.experience_level for r in records} <= set(ExperienceLevel)

    def test_includes_unknown_titles(self) -> None:
        groups = {classify_job_title(r.job_title) for r in generate_records(300)}
        assert DEFAULT_JOB_GROUP in groups
        assert len(groups) > 1

    def test_senior_earns_more_on_average(self) -> None:
        records = generate_records(2000, seed=3)

        def mean_for(level: ExperienceLevel) -> float:
            values = [r.salary_in_usd for r in records if r.experience_level == level]
            return sum(values) / len(values)

        assert mean_for(ExperienceLevel.SE) > mean_for(ExperienceLevel.EN)
