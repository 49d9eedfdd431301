"""
Module: visuals

Purpose: Static previews of the dashboard data for notebooks and debugging.

Key Functions:
- plot_salary_bars: Bar data as a matplotlib bar chart
- plot_salary_pie: Pie data as a donut chart
- plot_flow_layout: Laid-out Sankey bands and ribbons

Architecture Notes:
- Uses matplotlib and seaborn
- Returns figure objects for notebook integration
- Draws straight from the computed coordinates; no layout happens here
"""

from pathlib import Path

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.figure import Figure
from matplotlib.path import Path as MPath
from matplotlib.ticker import FuncFormatter

from salary_dashboard.data.schemas import CategoryMean
from salary_dashboard.exceptions import ReportGenerationError
from salary_dashboard.flow.layout import FlowLayout
from salary_dashboard.flow.selection import SelectionState, is_edge_faded, is_faded


# =============================================================================
# CONFIGURATION
# =============================================================================


def set_style(style: str = "whitegrid") -> None:
    """Set the default plotting style."""
    sns.set_style(style)
    plt.rcParams["figure.figsize"] = (10, 6)
    plt.rcParams["font.size"] = 10


# =============================================================================
# BAR AND PIE
# =============================================================================


def plot_salary_bars(
    rows: list[CategoryMean],
    *,
    title: str = "Average Salary by Experience Level",
    figsize: tuple[int, int] = (8, 5),
    selection: SelectionState | None = None,
) -> Figure:
    """
    Plot average salary per category as vertical bars.

    Args:
        rows: Bar data, already in display order
        title: Figure title
        figsize: Figure size
        selection: Optional state; selected categories are highlighted

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    base, highlight = sns.color_palette("deep", 2)
    keys = selection.keys if selection else frozenset()
    colors = [highlight if row.category in keys else base for row in rows]

    ax.bar([row.category for row in rows], [row.mean_value for row in rows], color=colors)
    ax.set_xlabel("Experience Level")
    ax.set_ylabel("Average Salary (USD)")
    ax.set_title(title)
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:,.0f}"))

    plt.tight_layout()
    return fig


def plot_salary_pie(
    rows: list[CategoryMean],
    *,
    title: str = "Average Salary by Company Size",
    figsize: tuple[int, int] = (6, 6),
) -> Figure:
    """Plot average salary per company size as a donut chart."""
    fig, ax = plt.subplots(figsize=figsize)

    if rows:
        ax.pie(
            [row.mean_value for row in rows],
            labels=[row.category for row in rows],
            autopct="%1.1f%%",
            colors=sns.color_palette("Set2", len(rows)),
            wedgeprops={"width": 0.6},
            startangle=90,
            counterclock=False,
        )
    ax.set_title(title)
    ax.axis("equal")

    plt.tight_layout()
    return fig


# =============================================================================
# SANKEY
# =============================================================================


def plot_flow_layout(
    layout: FlowLayout,
    *,
    title: str = "Experience Level --> Job Title Group --> Company Size",
    selection: SelectionState | None = None,
    figsize: tuple[int, int] = (12, 6),
) -> Figure:
    """
    Draw a laid-out flow graph: node bands plus one ribbon per edge.

    Args:
        layout: Output of layout_flow_graph
        title: Figure title
        selection: Optional state; faded nodes and ribbons are dimmed
        figsize: Figure size

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=figsize)
    state = selection or SelectionState()
    tier_colors = sns.color_palette("deep", 3)

    for edge in layout.edges:
        # Ribbon outline: top curve forward, bottom curve back
        xm = (edge.x0 + edge.x1) / 2
        verts = [
            (edge.x0, edge.sy0),
            (xm, edge.sy0), (xm, edge.ty0), (edge.x1, edge.ty0),
            (edge.x1, edge.ty1),
            (xm, edge.ty1), (xm, edge.sy1), (edge.x0, edge.sy1),
            (edge.x0, edge.sy0),
        ]
        codes = [
            MPath.MOVETO,
            MPath.CURVE4, MPath.CURVE4, MPath.CURVE4,
            MPath.LINETO,
            MPath.CURVE4, MPath.CURVE4, MPath.CURVE4,
            MPath.CLOSEPOLY,
        ]
        alpha = 0.1 if is_edge_faded(state, edge) else 0.45
        ax.add_patch(
            mpatches.PathPatch(MPath(verts, codes), facecolor="#7f8fa6", edgecolor="none", alpha=alpha)
        )

    for node in layout.nodes:
        alpha = 0.3 if is_faded(state, node.index) else 1.0
        ax.add_patch(
            mpatches.Rectangle(
                (node.x0, node.y0),
                node.x1 - node.x0,
                node.height,
                facecolor=tier_colors[node.tier % 3],
                edgecolor="black",
                alpha=alpha,
            )
        )
        on_left = node.x0 < layout.width / 2
        ax.text(
            node.x1 + 6 if on_left else node.x0 - 6,
            (node.y0 + node.y1) / 2,
            node.name,
            ha="left" if on_left else "right",
            va="center",
            fontsize=9,
        )

    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)  # canvas y grows downwards
    ax.axis("off")
    ax.set_title(title)

    plt.tight_layout()
    return fig


# =============================================================================
# FIGURE HELPERS
# =============================================================================


def save_figure(fig: Figure, filepath: str | Path, *, dpi: int = 150) -> Path:
    """
    Save a figure to disk, creating parent directories.

    Raises:
        ReportGenerationError: If the figure cannot be written
    """
    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
    except (OSError, ValueError) as e:
        raise ReportGenerationError(
            f"Failed to save figure to {path}: {e}",
            report_type="figure",
        ) from e
    return path


def close_figure(fig: Figure) -> None:
    """Close a figure to free memory."""
    plt.close(fig)
