"""
Chart specifications for the three dashboard views.

- Bar: average salary by experience level, ascending
- Pie: average salary by company size, with share of total per slice
- Sankey: experience level -> job group -> company size, fully laid out
"""

from salary_dashboard.charts.base import ChartSpec
from salary_dashboard.data.schemas import CategoryMean
from salary_dashboard.features.rollup import with_percentages
from salary_dashboard.flow.graph import FlowGraph
from salary_dashboard.flow.layout import FlowLayout


def format_salary(value: float) -> str:
    """Dollar amount with thousands separators and cents, e.g. $1,234.50."""
    return f"${value:,.2f}"


def create_salary_bar_spec(
    chart_id: str,
    rows: list[CategoryMean],
    *,
    title: str = "Average Salary by Experience Level",
) -> ChartSpec:
    """Create a bar chart spec from bar data (already sorted ascending).

    Args:
        chart_id: Unique identifier for the chart
        rows: Output of salary_by_experience
        title: Chart title

    Returns:
        ChartSpec for a bar chart with hover labels
    """
    bars = [
        {
            "category": row.category,
            "value": row.mean_value,
            "count": row.count,
            "description": row.description,
            "tooltip": f"{row.description}\nAverage Salary: {format_salary(row.mean_value)}",
        }
        for row in rows
    ]

    return ChartSpec(
        chart_id=chart_id,
        chart_type="bar",
        data={"bars": bars},
        config={
            "xLabel": "Experience Level",
            "yLabel": "Average Salary (USD)",
            "yMax": max((row.mean_value for row in rows), default=0.0),
            "selectable": True,
        },
        annotations=[{"type": "title", "text": title}],
    )


def create_salary_pie_spec(
    chart_id: str,
    rows: list[CategoryMean],
    *,
    title: str = "Average Salary by Company Size",
) -> ChartSpec:
    """Create a donut chart spec from pie data.

    Args:
        chart_id: Unique identifier
        rows: Output of salary_by_company_size
        title: Chart title

    Returns:
        ChartSpec for a donut chart; each slice carries its percentage
    """
    slices = []
    for row, percentage in with_percentages(rows):
        slices.append({
            "category": row.category,
            "value": row.mean_value,
            "count": row.count,
            "percentage": round(percentage, 2),
            "info": (
                f"{row.category} ({percentage:.2f}%)\n"
                f"Average Salary:\n{format_salary(row.mean_value)}"
            ),
        })

    return ChartSpec(
        chart_id=chart_id,
        chart_type="pie",
        data={"slices": slices},
        config={
            "innerRadius": 50,
            "outerRadius": 120,
            "focusInnerRadius": 40,
            "focusOuterRadius": 150,
            "sort": None,
        },
        annotations=[{"type": "title", "text": title}],
    )


def create_sankey_spec(
    chart_id: str,
    graph: FlowGraph,
    layout: FlowLayout,
    *,
    title: str = "Experience Level --> Job Title Group --> Company Size",
) -> ChartSpec:
    """Create a Sankey spec from a laid-out flow graph.

    Args:
        chart_id: Unique identifier
        graph: Graph the layout was computed from
        layout: Output of layout_flow_graph
        title: Chart title

    Returns:
        ChartSpec whose nodes and links already carry coordinates
    """
    max_value = layout.max_edge_value()

    nodes = []
    for node in layout.nodes:
        nodes.append({
            "index": node.index,
            "id": graph.nodes[node.index].node_id,
            "name": node.name,
            "label": graph.node_label(node.index),
            "group": node.tier,
            "value": node.throughput,
            "x0": node.x0,
            "x1": node.x1,
            "y0": node.y0,
            "y1": node.y1,
            # Labels sit outside the diagram on the left half, inside on the right
            "labelAnchor": "start" if node.x0 < layout.width / 2 else "end",
        })

    links = []
    for edge in layout.edges:
        source_name = layout.nodes[edge.source].name
        target_name = layout.nodes[edge.target].name
        links.append({
            "index": edge.index,
            "source": edge.source,
            "target": edge.target,
            "value": edge.value,
            "width": edge.width,
            "y0": edge.y0,
            "y1": edge.y1,
            "path": edge.ribbon_path(),
            "intensity": edge.value / max_value if max_value else 0.0,
            "tooltip": f"Link: {source_name} → {target_name}\nCount: {edge.value}",
        })

    return ChartSpec(
        chart_id=chart_id,
        chart_type="sankey",
        data={"nodes": nodes, "links": links},
        config={
            "width": layout.width,
            "height": layout.height,
            "nodeWidth": layout.node_width,
            "nodePadding": layout.node_padding,
            "minLinkWidth": 1,
            "brushExtent": [[0, 0], [layout.width, layout.height]],
        },
        annotations=[{"type": "title", "text": f"Sankey Diagram: {title}"}],
    )
