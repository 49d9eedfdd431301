"""
Module: pipeline

Purpose: Orchestrator from raw salary records to dashboard-ready chart data.

Key Functions:
- run_pipeline: Execute the complete pipeline from records to chart specs
- PipelineConfig: Configuration for pipeline execution
- DashboardResult: Container for pipeline outputs

Architecture Notes:
- Every run recomputes everything from the records; nothing is cached
- Supports CSV input, in-memory records, or seeded synthetic records
- Stages are timed and recorded for the summary
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from salary_dashboard.charts.base import ChartSpec
from salary_dashboard.charts.specs import (
    create_salary_bar_spec,
    create_salary_pie_spec,
    create_sankey_spec,
    format_salary,
)
from salary_dashboard.data.loader import SalaryDataLoader
from salary_dashboard.data.schemas import CategoryMean, EmploymentRecord
from salary_dashboard.data.synthetic_generator import SyntheticRecordGenerator
from salary_dashboard.exceptions import DashboardError, PipelineError
from salary_dashboard.features.rollup import salary_by_company_size, salary_by_experience
from salary_dashboard.flow.graph import FlowGraph, build_flow_graph
from salary_dashboard.flow.layout import FlowLayout, layout_flow_graph
from salary_dashboard.settings import Settings

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class PipelineConfig:
    """Configuration for pipeline execution."""

    # Synthetic data (used when no records or path are given)
    n_synthetic_records: int = 500
    data_seed: int = 42

    # Sankey canvas
    sankey_width: float = 620.0
    sankey_height: float = 250.0
    node_width: float = 15.0
    node_padding: float = 10.0
    min_node_height: float = 1.0

    # Graph building
    strict_node_names: bool = False

    # Output options
    build_charts: bool = True
    verbose: bool = False

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "PipelineConfig":
        """Build a config from environment-backed settings."""
        values: dict[str, Any] = {
            "sankey_width": settings.sankey_width,
            "sankey_height": settings.sankey_height,
            "node_width": settings.node_width,
            "node_padding": settings.node_padding,
            "min_node_height": settings.min_node_height,
            "strict_node_names": settings.strict_node_names,
        }
        values.update(overrides)
        return cls(**values)


@dataclass
class PipelineStageResult:
    """Result from a single pipeline stage."""

    stage_name: str
    success: bool
    duration_ms: float
    metrics: dict[str, Any] = field(default_factory=dict)
    error_message: str | None = None


@dataclass
class DashboardResult:
    """Complete pipeline output for one load of the data."""

    records: list[EmploymentRecord]
    bar_data: list[CategoryMean]
    pie_data: list[CategoryMean]
    graph: FlowGraph
    layout: FlowLayout
    charts: dict[str, ChartSpec]

    # Metadata
    config: PipelineConfig
    stage_results: list[PipelineStageResult] = field(default_factory=list)
    total_duration_ms: float = 0.0
    skipped_rows: int = 0
    source: str | None = None

    def get_summary(self) -> dict[str, Any]:
        """Get summary of pipeline results."""
        return {
            "total_records": len(self.records),
            "skipped_rows": self.skipped_rows,
            "experience_levels": len(self.bar_data),
            "company_sizes": len(self.pie_data),
            "flow_nodes": len(self.graph.nodes),
            "flow_edges": len(self.graph.edges),
            "name_collisions": list(self.graph.name_collisions),
            "total_duration_ms": self.total_duration_ms,
            "stages": [
                {
                    "name": s.stage_name,
                    "success": s.success,
                    "duration_ms": s.duration_ms,
                }
                for s in self.stage_results
            ],
        }


# =============================================================================
# PIPELINE EXECUTION
# =============================================================================


def _time_stage(
    stage_name: str,
    func: Callable[[], Any],
    stage_results: list[PipelineStageResult],
    verbose: bool = False,
) -> tuple[Any, PipelineStageResult]:
    """Execute a stage, time it, and record the outcome."""
    if verbose:
        logger.info(f"[Pipeline] Starting: {stage_name}")

    start = time.perf_counter()
    try:
        result = func()
    except Exception as e:
        duration = (time.perf_counter() - start) * 1000
        stage_results.append(
            PipelineStageResult(
                stage_name=stage_name,
                success=False,
                duration_ms=duration,
                error_message=str(e),
            )
        )
        logger.error(f"[Pipeline] Failed: {stage_name} - {e}")
        raise

    duration = (time.perf_counter() - start) * 1000
    stage_result = PipelineStageResult(
        stage_name=stage_name,
        success=True,
        duration_ms=duration,
    )
    stage_results.append(stage_result)

    if verbose:
        logger.info(f"[Pipeline] Completed: {stage_name} ({duration:.1f}ms)")

    return result, stage_result


def run_pipeline(
    config: PipelineConfig | None = None,
    *,
    records: list[EmploymentRecord] | None = None,
    csv_path: str | Path | None = None,
) -> DashboardResult:
    """
    Execute the complete dashboard pipeline.

    Can accept data in three ways:
    1. records: Already-loaded employment records
    2. csv_path: A salaries CSV file
    3. Neither: Generate synthetic records based on config

    Args:
        config: Pipeline configuration
        records: Optional list of employment records
        csv_path: Optional path to a salaries CSV

    Returns:
        DashboardResult with chart data, flow graph and layout

    Raises:
        PipelineError: If a stage fails
    """
    config = config or PipelineConfig()
    start_time = time.perf_counter()
    stage_results: list[PipelineStageResult] = []
    skipped_rows = 0
    source: str | None = None

    try:
        # Stage 1: Data Acquisition
        def acquire_data() -> list[EmploymentRecord]:
            nonlocal skipped_rows, source
            if records is not None:
                source = "records"
                return list(records)
            if csv_path is not None:
                loaded = SalaryDataLoader(csv_path).load()
                skipped_rows = loaded.skipped_rows
                source = loaded.source
                return loaded.records
            source = f"synthetic(seed={config.data_seed})"
            generator = SyntheticRecordGenerator(seed=config.data_seed)
            return generator.generate(config.n_synthetic_records)

        data, stage = _time_stage("Data Acquisition", acquire_data, stage_results, config.verbose)
        stage.metrics = {"n_records": len(data), "skipped_rows": skipped_rows}

        # Stage 2: Rollups
        def compute_rollups() -> tuple[list[CategoryMean], list[CategoryMean]]:
            return salary_by_experience(data), salary_by_company_size(data)

        (bar_data, pie_data), stage = _time_stage("Rollups", compute_rollups, stage_results, config.verbose)
        stage.metrics = {"n_bars": len(bar_data), "n_slices": len(pie_data)}

        # Stage 3: Flow Graph
        def build_graph() -> FlowGraph:
            return build_flow_graph(data, strict_names=config.strict_node_names)

        graph, stage = _time_stage("Flow Graph", build_graph, stage_results, config.verbose)
        stage.metrics = {"n_nodes": len(graph.nodes), "n_edges": len(graph.edges)}

        # Stage 4: Flow Layout
        def compute_layout() -> FlowLayout:
            return layout_flow_graph(
                graph,
                width=config.sankey_width,
                height=config.sankey_height,
                node_width=config.node_width,
                node_padding=config.node_padding,
                min_node_height=config.min_node_height,
            )

        layout, stage = _time_stage("Flow Layout", compute_layout, stage_results, config.verbose)
        stage.metrics = {"scale": layout.scale}

        # Stage 5: Chart Specs
        charts: dict[str, ChartSpec] = {}
        if config.build_charts:
            def build_charts() -> dict[str, ChartSpec]:
                return {
                    "salary_by_experience": create_salary_bar_spec("salary_by_experience", bar_data),
                    "salary_by_company_size": create_salary_pie_spec("salary_by_company_size", pie_data),
                    "experience_job_company_flow": create_sankey_spec(
                        "experience_job_company_flow", graph, layout
                    ),
                }

            charts, stage = _time_stage("Chart Specs", build_charts, stage_results, config.verbose)
            stage.metrics = {"n_charts": len(charts)}

    except DashboardError as e:
        failed = next((s.stage_name for s in stage_results if not s.success), None)
        raise PipelineError(f"Pipeline failed: {e.message}", stage=failed, context=e.context) from e

    total_duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(f"Dashboard pipeline finished in {total_duration_ms:.1f}ms")

    return DashboardResult(
        records=data,
        bar_data=bar_data,
        pie_data=pie_data,
        graph=graph,
        layout=layout,
        charts=charts,
        config=config,
        stage_results=stage_results,
        total_duration_ms=total_duration_ms,
        skipped_rows=skipped_rows,
        source=source,
    )


def format_pipeline_summary(result: DashboardResult) -> str:
    """Format a pipeline result as a readable text block."""
    lines = [
        "=" * 60,
        "SALARY DASHBOARD SUMMARY",
        "=" * 60,
        f"Source: {result.source}",
        f"Records: {len(result.records):,} (skipped {result.skipped_rows:,})",
        "",
        "Average salary by experience level:",
    ]
    for row in result.bar_data:
        lines.append(f"  {row.category} ({row.description}): {format_salary(row.mean_value)} [n={row.count}]")

    lines.append("")
    lines.append("Average salary by company size:")
    for row in result.pie_data:
        lines.append(f"  {row.category}: {format_salary(row.mean_value)} [n={row.count}]")

    lines.append("")
    lines.append(f"Flow graph: {len(result.graph.nodes)} nodes, {len(result.graph.edges)} edges")
    for edge in result.graph.edges:
        source = result.graph.nodes[edge.source].name
        target = result.graph.nodes[edge.target].name
        lines.append(f"  {source} -> {target}: {edge.value}")
    if result.graph.name_collisions:
        lines.append(f"  Warning: names shared across tiers: {', '.join(result.graph.name_collisions)}")

    lines.append("")
    lines.append("Stages:")
    for stage in result.stage_results:
        status = "ok" if stage.success else "FAILED"
        lines.append(f"  {stage.stage_name}: {status} ({stage.duration_ms:.1f}ms)")
    lines.append(f"Total: {result.total_duration_ms:.1f}ms")

    return "\n".join(lines)
