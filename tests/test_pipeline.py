"""
Tests for the end-to-end dashboard pipeline.
"""

from pathlib import Path

import pytest

from salary_dashboard.data.schemas import EmploymentRecord
from salary_dashboard.exceptions import PipelineError
from salary_dashboard.pipeline import (
    DashboardResult,
    PipelineConfig,
    PipelineStageResult,
    format_pipeline_summary,
    run_pipeline,
)
from salary_dashboard.settings import Settings


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def scenario_records() -> list[EmploymentRecord]:
    return [
        EmploymentRecord(experience_level="EN", company_size="S", job_title="Data Analyst", salary_in_usd=100),
        EmploymentRecord(experience_level="EN", company_size="S", job_title="Data Analyst", salary_in_usd=200),
        EmploymentRecord(experience_level="SE", company_size="M", job_title="Data Scientist", salary_in_usd=300),
    ]


@pytest.fixture
def small_config() -> PipelineConfig:
    """Small synthetic run for fast tests."""
    return PipelineConfig(n_synthetic_records=200, data_seed=7)


@pytest.fixture
def salaries_csv(tmp_path: Path) -> Path:
    path = tmp_path / "ds_salaries.csv"
    path.write_text(
        "work_year,experience_level,job_title,salary_in_usd,company_size\n"
        "2023,EN,Data Analyst,100,S\n"
        "2023,EN,Data Analyst,200,S\n"
        "2023,SE,Data Scientist,300,M\n"
        "2023,SE,Data Scientist,,M\n",
        encoding="utf-8",
    )
    return path


# =============================================================================
# CONFIG TESTS
# =============================================================================


class TestPipelineConfig:
    """Tests for PipelineConfig."""

    def test_defaults(self) -> None:
        config = PipelineConfig()
        assert config.sankey_width == 620.0
        assert config.sankey_height == 250.0
        assert config.node_width == 15.0
        assert config.node_padding == 10.0
        assert not config.strict_node_names

    def test_from_settings(self) -> None:
        settings = Settings(sankey_width=800, node_padding=4, strict_node_names=True)
        config = PipelineConfig.from_settings(settings, data_seed=3)

        assert config.sankey_width == 800
        assert config.node_padding == 4
        assert config.strict_node_names
        assert config.data_seed == 3


# =============================================================================
# PIPELINE TESTS
# =============================================================================


class TestRunPipeline:
    """Tests for run_pipeline."""

    def test_scenario(self, scenario_records: list[EmploymentRecord]) -> None:
        config = PipelineConfig(sankey_width=100, sankey_height=100, node_width=10, node_padding=10)
        result = run_pipeline(config, records=scenario_records)

        assert isinstance(result, DashboardResult)
        assert result.source == "records"
        assert [(r.category, r.mean_value) for r in result.bar_data] == [("EN", 150.0), ("SE", 300.0)]
        assert [(r.category, r.mean_value) for r in result.pie_data] == [("S", 150.0), ("M", 300.0)]
        assert len(result.graph.nodes) == 6
        assert len(result.graph.edges) == 4
        assert result.layout.scale == pytest.approx(30.0)

    def test_charts(self, scenario_records: list[EmploymentRecord]) -> None:
        result = run_pipeline(records=scenario_records)
        assert set(result.charts) == {
            "salary_by_experience",
            "salary_by_company_size",
            "experience_job_company_flow",
        }
        assert result.charts["experience_job_company_flow"].chart_type == "sankey"

    def test_skip_charts(self, scenario_records: list[EmploymentRecord]) -> None:
        result = run_pipeline(PipelineConfig(build_charts=False), records=scenario_records)
        assert result.charts == {}
        assert "Chart Specs" not in [s.stage_name for s in result.stage_results]

    def test_synthetic_default(self, small_config: PipelineConfig) -> None:
        result = run_pipeline(small_config)

        assert len(result.records) == 200
        assert result.source == "synthetic(seed=7)"
        assert sum(e.value for e in result.graph.edges_between_tiers(0)) == 200

    def test_stage_results(self, small_config: PipelineConfig) -> None:
        result = run_pipeline(small_config)

        assert [s.stage_name for s in result.stage_results] == [
            "Data Acquisition",
            "Rollups",
            "Flow Graph",
            "Flow Layout",
            "Chart Specs",
        ]
        assert all(isinstance(s, PipelineStageResult) and s.success for s in result.stage_results)
        assert result.stage_results[0].metrics["n_records"] == 200
        assert result.total_duration_ms > 0

    def test_csv_path(self, salaries_csv: Path) -> None:
        result = run_pipeline(csv_path=salaries_csv)

        assert len(result.records) == 3
        assert result.skipped_rows == 1
        assert result.source == str(salaries_csv)

    def test_idempotent(self, small_config: PipelineConfig) -> None:
        first = run_pipeline(small_config)
        second = run_pipeline(small_config)

        assert first.bar_data == second.bar_data
        assert first.graph == second.graph
        assert first.layout.to_dict() == second.layout.to_dict()

    def test_missing_csv_wrapped(self, tmp_path: Path) -> None:
        with pytest.raises(PipelineError) as exc_info:
            run_pipeline(csv_path=tmp_path / "missing.csv")
        assert exc_info.value.stage == "Data Acquisition"

    def test_strict_collision_wrapped(self) -> None:
        records = [
            EmploymentRecord(experience_level="SE", company_size="Other", job_title="Head of Data", salary_in_usd=1),
        ]
        with pytest.raises(PipelineError) as exc_info:
            run_pipeline(PipelineConfig(strict_node_names=True), records=records)

        assert exc_info.value.stage == "Flow Graph"
        assert exc_info.value.context["names"] == ["Other"]

    def test_collision_tolerated_by_default(self) -> None:
        records = [
            EmploymentRecord(experience_level="SE", company_size="Other", job_title="Head of Data", salary_in_usd=1),
        ]
        result = run_pipeline(records=records)
        assert result.get_summary()["name_collisions"] == ["Other"]

    def test_bad_canvas_wrapped(self, scenario_records: list[EmploymentRecord]) -> None:
        with pytest.raises(PipelineError) as exc_info:
            run_pipeline(PipelineConfig(sankey_width=0), records=scenario_records)
        assert exc_info.value.stage == "Flow Layout"

    def test_empty_records(self) -> None:
        result = run_pipeline(records=[])

        assert result.bar_data == []
        assert result.graph.nodes == []
        assert result.layout.nodes == []


# =============================================================================
# SUMMARY TESTS
# =============================================================================


class TestSummary:
    """Tests for summaries."""

    def test_get_summary(self, scenario_records: list[EmploymentRecord]) -> None:
        summary = run_pipeline(records=scenario_records).get_summary()

        assert summary["total_records"] == 3
        assert summary["experience_levels"] == 2
        assert summary["flow_nodes"] == 6
        assert summary["flow_edges"] == 4
        assert len(summary["stages"]) == 5

    def test_format_summary(self, scenario_records: list[EmploymentRecord]) -> None:
        text = format_pipeline_summary(run_pipeline(records=scenario_records))

        assert "SALARY DASHBOARD SUMMARY" in text
        assert "EN (Entry Level): $150.00 [n=2]" in text
        assert "EN -> Analyst: 2" in text
        assert "Flow graph: 6 nodes, 4 edges" in text
