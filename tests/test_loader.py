"""
Tests for salary_dashboard/data/loader.py
"""

from pathlib import Path

import pandas as pd
import pytest

from salary_dashboard.data.loader import (
    REQUIRED_COLUMNS,
    LoadResult,
    SalaryDataLoader,
    load_records,
    records_from_rows,
)
from salary_dashboard.data.schemas import ExperienceLevel
from salary_dashboard.exceptions import DataValidationError


# =============================================================================
# FIXTURES
# =============================================================================


CSV_HEADER = "work_year,experience_level,employment_type,job_title,salary,salary_currency,salary_in_usd,company_size\n"


@pytest.fixture
def salaries_csv(tmp_path: Path) -> Path:
    """A small salaries file with a mix of good and bad rows."""
    path = tmp_path / "ds_salaries.csv"
    path.write_text(
        CSV_HEADER
        + "2023,SE,FT,Data Scientist,80000,EUR,85847,L\n"
        + "2023,MI,CT,ML Engineer,30000,USD,30000,S\n"
        + "2023,EN,FT,Data Analyst,25500,USD,not-a-number,M\n"
        + "2023,XX,FT,Data Analyst,25500,USD,25500,M\n"
        + "2023,EX,FT,Head of Data,230000,USD,230000,\n"
        + "2023,EN,FT,Data Analyst,25500,USD,-10,M\n"
        + "2023,EN,FT,Data Analyst,25500,USD,25500,M\n"
    )
    return path


# =============================================================================
# LOADER TESTS
# =============================================================================


class TestSalaryDataLoader:
    """Tests for SalaryDataLoader."""

    def test_loads_valid_rows(self, salaries_csv: Path) -> None:
        result = SalaryDataLoader(salaries_csv).load()

        assert isinstance(result, LoadResult)
        assert result.total_rows == 7
        assert result.loaded_rows == 3
        assert result.source == str(salaries_csv)
        assert [r.experience_level for r in result.records] == [
            ExperienceLevel.SE,
            ExperienceLevel.MI,
            ExperienceLevel.EN,
        ]

    def test_records_typed(self, salaries_csv: Path) -> None:
        first = SalaryDataLoader(salaries_csv).load().records[0]
        assert first.salary_in_usd == 85847.0
        assert first.company_size == "L"
        assert first.job_title == "Data Scientist"

    def test_skip_reasons(self, salaries_csv: Path) -> None:
        result = SalaryDataLoader(salaries_csv).load()

        assert result.skipped_rows == 4
        assert result.skip_reasons == {
            "invalid_salary": 1,
            "unknown_experience_level": 1,
            "blank_field": 1,
            "invalid_field": 1,
        }

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataValidationError) as exc_info:
            SalaryDataLoader(tmp_path / "nope.csv").load()
        assert exc_info.value.field == "path"

    def test_no_path(self) -> None:
        with pytest.raises(DataValidationError):
            SalaryDataLoader().load()

    def test_missing_column(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("experience_level,job_title,salary_in_usd\nSE,Data Scientist,1\n")

        with pytest.raises(DataValidationError) as exc_info:
            SalaryDataLoader(path).load()

        assert exc_info.value.value == ["company_size"]
        assert "company_size" in exc_info.value.message

    def test_custom_separator(self, tmp_path: Path) -> None:
        path = tmp_path / "semi.csv"
        path.write_text(
            "experience_level;company_size;job_title;salary_in_usd\nSE;M;Data Engineer;120000\n"
        )
        records = SalaryDataLoader(path, sep=";").load().records
        assert len(records) == 1
        assert records[0].job_title == "Data Engineer"

    def test_load_frame(self) -> None:
        df = pd.DataFrame({
            "experience_level": ["SE", "EN"],
            "company_size": ["M", "S"],
            "job_title": ["Data Scientist", "Data Analyst"],
            "salary_in_usd": [150000, 60000],
            "remote_ratio": [100, 0],
        })
        result = SalaryDataLoader().load_frame(df)
        assert result.loaded_rows == 2
        assert result.skipped_rows == 0

    def test_empty_frame(self) -> None:
        df = pd.DataFrame(columns=list(REQUIRED_COLUMNS))
        result = SalaryDataLoader().load_frame(df)
        assert result.records == []
        assert result.total_rows == 0

    def test_missing_cells_are_skipped(self) -> None:
        df = pd.DataFrame({
            "experience_level": ["SE", "SE", "MI"],
            "company_size": ["L", None, "M"],
            "job_title": ["Data Engineer", "Data Engineer", float("nan")],
            "salary_in_usd": [100, 200, 300],
        })
        result = SalaryDataLoader().load_frame(df)

        assert [r.company_size for r in result.records] == ["L"]
        assert result.skip_reasons == {"blank_field": 2}

    def test_blank_job_title_in_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "blank_title.csv"
        path.write_text(
            "experience_level,company_size,job_title,salary_in_usd\n"
            "SE,L,,100\n"
            "SE,L,   ,100\n"
            "SE,L,Data Analyst,100\n"
        )
        result = SalaryDataLoader(path).load()

        assert result.loaded_rows == 1
        assert result.skip_reasons == {"blank_field": 2}
        assert result.records[0].job_title == "Data Analyst"


# =============================================================================
# CONVENIENCE FUNCTION TESTS
# =============================================================================


class TestConvenienceFunctions:
    """Tests for load_records and records_from_rows."""

    def test_load_records(self, salaries_csv: Path) -> None:
        assert len(load_records(salaries_csv)) == 3

    def test_records_from_rows(self) -> None:
        records = records_from_rows([
            {"experience_level": "EN", "company_size": "S", "job_title": "Data Analyst", "salary_in_usd": 100},
            {"experience_level": "SE", "company_size": "M", "job_title": "Data Scientist", "salary_in_usd": "n/a"},
        ])
        assert len(records) == 1
        assert records[0].salary_in_usd == 100.0

    def test_records_from_rows_missing_key(self) -> None:
        records = records_from_rows([
            {"experience_level": "SE", "job_title": "Data Analyst", "salary_in_usd": 1},
            {"experience_level": "SE", "company_size": "M", "job_title": "Data Analyst", "salary_in_usd": 2},
        ])
        assert [r.company_size for r in records] == ["M"]

    def test_records_from_no_rows(self) -> None:
        assert records_from_rows([]) == []
