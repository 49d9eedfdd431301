#!/usr/bin/env python3
"""
Build the salary dashboard data from a CSV file or synthetic records.

Usage:
    python scripts/build_dashboard.py [--data PATH | --synthetic N] [--output FILE] [--preview DIR] [--verbose]

Example:
    python scripts/build_dashboard.py --data ds_salaries.csv --output build/dashboard.json --preview build/
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from salary_dashboard.exceptions import DashboardError
from salary_dashboard.pipeline import PipelineConfig, format_pipeline_summary, run_pipeline
from salary_dashboard.settings import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Aggregate salary records and lay out the dashboard charts"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data",
        type=str,
        help=f"Salaries CSV file (default: {settings.data_path})",
    )
    source.add_argument(
        "--synthetic",
        type=int,
        metavar="N",
        help="Use N synthetic records instead of a CSV file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Seed for synthetic records (default: 42)",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=settings.sankey_width,
        help=f"Sankey canvas width (default: {settings.sankey_width:g})",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=settings.sankey_height,
        help=f"Sankey canvas height (default: {settings.sankey_height:g})",
    )
    parser.add_argument(
        "--strict-names",
        action="store_true",
        help="Fail when two Sankey tiers share a category name",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file for dashboard JSON (optional)",
    )
    parser.add_argument(
        "--preview",
        type=str,
        help="Directory for PNG previews of the three charts (optional)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print verbose output",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = PipelineConfig.from_settings(
        settings,
        sankey_width=args.width,
        sankey_height=args.height,
        strict_node_names=args.strict_names or settings.strict_node_names,
        data_seed=args.seed,
        verbose=args.verbose,
    )

    csv_path = None
    if args.synthetic is not None:
        config.n_synthetic_records = args.synthetic
    else:
        csv_path = Path(args.data) if args.data else settings.data_path
        if not csv_path.exists():
            print(f"Error: Data file not found: {csv_path}")
            print("Pass --data PATH or use --synthetic N")
            sys.exit(1)

    try:
        result = run_pipeline(config, csv_path=csv_path)
    except DashboardError as e:
        print(f"Error: {e.message}")
        sys.exit(1)

    print(format_pipeline_summary(result))

    if args.output:
        from salary_dashboard.reporting.export import export_dashboard_to_json

        export_dashboard_to_json(result, args.output)
        print(f"\nDashboard data saved to: {args.output}")

    if args.preview:
        import matplotlib

        matplotlib.use("Agg")
        from salary_dashboard.reporting.visuals import (
            close_figure,
            plot_flow_layout,
            plot_salary_bars,
            plot_salary_pie,
            save_figure,
            set_style,
        )

        set_style()
        preview_dir = Path(args.preview)
        for name, fig in (
            ("salary_by_experience.png", plot_salary_bars(result.bar_data)),
            ("salary_by_company_size.png", plot_salary_pie(result.pie_data)),
            ("experience_job_company_flow.png", plot_flow_layout(result.layout)),
        ):
            path = save_figure(fig, preview_dir / name)
            close_figure(fig)
            print(f"  Created: {path}")


if __name__ == "__main__":
    main()
