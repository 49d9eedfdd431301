"""
CSV loader for the data-science salaries dataset.

Reads a delimited file (or an already-loaded DataFrame) into immutable
EmploymentRecord objects. Rows with a non-numeric or negative salary, an
unknown experience code, or a blank categorical field are skipped and
counted rather than raised.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from salary_dashboard.data.schemas import EmploymentRecord, ExperienceLevel
from salary_dashboard.exceptions import DataValidationError

logger = logging.getLogger(__name__)


REQUIRED_COLUMNS: tuple[str, ...] = (
    "experience_level",
    "company_size",
    "job_title",
    "salary_in_usd",
)


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass
class LoadResult:
    """Result of loading a salaries table."""

    records: list[EmploymentRecord] = field(default_factory=list)

    # Statistics
    total_rows: int = 0
    skipped_rows: int = 0
    skip_reasons: dict[str, int] = field(default_factory=dict)
    load_duration_ms: float = 0.0
    source: str | None = None

    @property
    def loaded_rows(self) -> int:
        return len(self.records)


# =============================================================================
# CSV LOADER
# =============================================================================


class SalaryDataLoader:
    """
    Load employment records from a CSV file or DataFrame.

    Usage:
        loader = SalaryDataLoader("ds_salaries.csv")
        result = loader.load()

        # Use with pipeline
        from salary_dashboard.pipeline import run_pipeline
        dashboard = run_pipeline(records=result.records)
    """

    def __init__(self, path: str | Path | None = None, *, sep: str = ","):
        """
        Initialize loader.

        Args:
            path: CSV file to read. Optional when only ``load_frame`` is used.
            sep: Field delimiter
        """
        self.path = Path(path) if path is not None else None
        self.sep = sep

    def load(self) -> LoadResult:
        """
        Read the configured CSV file.

        Returns:
            LoadResult with records and skip statistics

        Raises:
            DataValidationError: If the file is missing, unreadable, or lacks
                a required column
        """
        if self.path is None:
            raise DataValidationError("No data path configured", field="path")
        if not self.path.exists():
            raise DataValidationError(
                f"Data file not found: {self.path}",
                field="path",
                value=str(self.path),
            )

        try:
            df = pd.read_csv(self.path, sep=self.sep, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise DataValidationError(
                f"Could not read {self.path}: {e}",
                field="path",
                value=str(self.path),
            ) from e

        result = self.load_frame(df)
        result.source = str(self.path)
        return result

    def load_frame(self, df: pd.DataFrame) -> LoadResult:
        """
        Convert DataFrame rows to EmploymentRecord objects.

        Args:
            df: Table with at least the required salary columns

        Returns:
            LoadResult with records and skip statistics
        """
        start_time = time.perf_counter()

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise DataValidationError(
                f"Missing required columns: {', '.join(missing)}",
                field="columns",
                value=missing,
                context={"available": list(df.columns)},
            )

        result = LoadResult(total_rows=len(df))
        frame = df.loc[:, list(REQUIRED_COLUMNS)].copy()
        frame["salary_in_usd"] = pd.to_numeric(frame["salary_in_usd"], errors="coerce")

        for row in frame.itertuples(index=False):
            record, reason = self._row_to_record(row._asdict())
            if record is None:
                result.skipped_rows += 1
                result.skip_reasons[reason] = result.skip_reasons.get(reason, 0) + 1
                continue
            result.records.append(record)

        result.load_duration_ms = (time.perf_counter() - start_time) * 1000

        if result.skipped_rows:
            logger.warning(
                f"Skipped {result.skipped_rows} of {result.total_rows} rows: {result.skip_reasons}"
            )
        logger.info(
            f"Loaded {result.loaded_rows} records in {result.load_duration_ms:.1f}ms"
        )
        return result

    def _row_to_record(self, row: dict[str, Any]) -> tuple[EmploymentRecord | None, str]:
        """Convert a single row, returning the skip reason on failure."""
        salary = row.get("salary_in_usd")
        if salary is None or pd.isna(salary):
            logger.debug(f"Non-numeric salary in row: {row}")
            return None, "invalid_salary"

        level = _cell_text(row.get("experience_level"))
        if level not in ExperienceLevel._value2member_map_:
            logger.debug(f"Unknown experience level {level!r}")
            return None, "unknown_experience_level"

        company_size = _cell_text(row.get("company_size"))
        job_title = _cell_text(row.get("job_title"))
        if not company_size or not job_title:
            logger.debug(f"Blank categorical field in row: {row}")
            return None, "blank_field"

        try:
            record = EmploymentRecord(
                experience_level=ExperienceLevel(level),
                company_size=company_size,
                job_title=job_title,
                salary_in_usd=float(salary),
            )
        except ValidationError as e:
            logger.debug(f"Invalid row {row}: {e}")
            return None, "invalid_field"

        return record, ""


def _cell_text(value: Any) -> str:
    """Stripped cell text; None and NaN cells read as blank."""
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def load_records(path: str | Path, *, sep: str = ",") -> list[EmploymentRecord]:
    """
    Load records from a CSV file, discarding load statistics.

    Args:
        path: CSV file path
        sep: Field delimiter

    Returns:
        List of EmploymentRecord objects
    """
    return SalaryDataLoader(path, sep=sep).load().records


def records_from_rows(rows: list[dict[str, Any]]) -> list[EmploymentRecord]:
    """Build records from plain dict rows, skipping invalid ones."""
    return SalaryDataLoader().load_frame(pd.DataFrame(rows, columns=list(REQUIRED_COLUMNS))).records
