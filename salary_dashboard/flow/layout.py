"""
Module: layout

Purpose: Assign Sankey coordinates to a FlowGraph.

Key Functions:
- layout_flow_graph: FlowGraph + canvas -> FlowLayout

Architecture Notes:
- Horizontal position depends only on the node's tier
- Vertical sizing is two passes: a per-tier proportional scale, then one
  global scale (the smallest) applied to every tier so node heights stay
  comparable across tiers; the tier that sets the scale fills the canvas
- Nodes keep arena order within a tier; they are never sorted by size
- Edge bands stack at each endpoint in edge-list order
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from salary_dashboard.exceptions import LayoutError
from salary_dashboard.flow.graph import FlowGraph

logger = logging.getLogger(__name__)

Point = tuple[float, float]
# ((x0, y0), (x1, y1)), top-left and bottom-right corners
Rect = tuple[Point, Point]


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class LaidOutNode:
    """A flow node with its band on the canvas."""

    index: int
    name: str
    tier: int
    throughput: int
    x0: float
    x1: float
    y0: float
    y1: float

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def contains(self, x: float, y: float) -> bool:
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def intersects(self, rect: Rect) -> bool:
        """True if this band overlaps the open rectangle ``rect``."""
        (rx0, ry0), (rx1, ry1) = _normalize_rect(rect)
        return self.x0 < rx1 and self.x1 > rx0 and self.y0 < ry1 and self.y1 > ry0


@dataclass(frozen=True)
class LaidOutEdge:
    """A flow edge with its sub-band at both endpoints."""

    index: int
    source: int
    target: int
    value: int
    x0: float  # right side of the source node
    x1: float  # left side of the target node
    sy0: float
    sy1: float
    ty0: float
    ty1: float

    @property
    def width(self) -> float:
        """Ribbon thickness, equal to the source-side band height."""
        return self.sy1 - self.sy0

    @property
    def y0(self) -> float:
        """Ribbon centre at the source node."""
        return (self.sy0 + self.sy1) / 2

    @property
    def y1(self) -> float:
        """Ribbon centre at the target node."""
        return (self.ty0 + self.ty1) / 2

    def ribbon_points(self) -> list[Point]:
        """Cubic Bezier control points of the ribbon's centre line."""
        xm = (self.x0 + self.x1) / 2
        return [(self.x0, self.y0), (xm, self.y0), (xm, self.y1), (self.x1, self.y1)]

    def ribbon_path(self) -> str:
        """SVG path data for the ribbon's centre line."""
        (ax, ay), (bx, by), (cx, cy), (dx, dy) = self.ribbon_points()
        return f"M{ax:g},{ay:g}C{bx:g},{by:g} {cx:g},{cy:g} {dx:g},{dy:g}"


@dataclass
class FlowLayout:
    """Laid-out nodes and edges for one canvas."""

    width: float
    height: float
    node_width: float
    node_padding: float
    scale: float = 0.0  # canvas units per record
    nodes: list[LaidOutNode] = field(default_factory=list)
    edges: list[LaidOutEdge] = field(default_factory=list)

    def node_at(self, x: float, y: float) -> LaidOutNode | None:
        """First node whose band contains the point, if any."""
        return next((n for n in self.nodes if n.contains(x, y)), None)

    def nodes_intersecting(self, rect: Rect) -> list[LaidOutNode]:
        return [n for n in self.nodes if n.intersects(rect)]

    def max_edge_value(self) -> int:
        return max((e.value for e in self.edges), default=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "nodeWidth": self.node_width,
            "nodePadding": self.node_padding,
            "scale": self.scale,
            "nodes": [
                {
                    "index": n.index,
                    "name": n.name,
                    "tier": n.tier,
                    "value": n.throughput,
                    "x0": n.x0,
                    "x1": n.x1,
                    "y0": n.y0,
                    "y1": n.y1,
                }
                for n in self.nodes
            ],
            "links": [
                {
                    "index": e.index,
                    "source": e.source,
                    "target": e.target,
                    "value": e.value,
                    "width": e.width,
                    "y0": e.y0,
                    "y1": e.y1,
                    "sourceBand": [e.sy0, e.sy1],
                    "targetBand": [e.ty0, e.ty1],
                    "path": e.ribbon_path(),
                }
                for e in self.edges
            ],
        }


# =============================================================================
# LAYOUT
# =============================================================================


def _normalize_rect(rect: Rect) -> Rect:
    (ax, ay), (bx, by) = rect
    return (min(ax, bx), min(ay, by)), (max(ax, bx), max(ay, by))


def _validate(width: float, height: float, node_width: float, node_padding: float, min_node_height: float) -> None:
    if width <= 0:
        raise LayoutError("Canvas width must be positive", parameter="width", value=width)
    if height <= 0:
        raise LayoutError("Canvas height must be positive", parameter="height", value=height)
    if node_width <= 0 or node_width > width:
        raise LayoutError(
            "Node width must be positive and fit the canvas",
            parameter="node_width",
            value=node_width,
            context={"width": width},
        )
    if node_padding < 0:
        raise LayoutError("Node padding cannot be negative", parameter="node_padding", value=node_padding)
    if min_node_height < 0:
        raise LayoutError(
            "Minimum node height cannot be negative",
            parameter="min_node_height",
            value=min_node_height,
        )


def layout_flow_graph(
    graph: FlowGraph,
    *,
    width: float,
    height: float,
    node_width: float = 15.0,
    node_padding: float = 10.0,
    min_node_height: float = 1.0,
) -> FlowLayout:
    """
    Compute node bands and edge bands for a flow graph.

    Args:
        graph: Graph from build_flow_graph
        width: Canvas width
        height: Canvas height
        node_width: Horizontal size of every node band
        node_padding: Vertical gap between nodes of a tier; reduced for a
            crowded tier so nodes keep a non-zero height while
            min_node_height is positive
        min_node_height: Height given to nodes with zero throughput

    Returns:
        FlowLayout with one LaidOutNode per node and one LaidOutEdge per
        edge, both in the graph's index order

    Raises:
        LayoutError: If the canvas or a parameter is unusable
    """
    _validate(width, height, node_width, node_padding, min_node_height)

    layout = FlowLayout(
        width=width,
        height=height,
        node_width=node_width,
        node_padding=node_padding,
    )
    if not graph.nodes:
        return layout

    n_tiers = graph.n_tiers
    columns = [c for c in (graph.nodes_in_tier(t) for t in range(n_tiers)) if c]

    # Horizontal bands by tier
    kx = (width - node_width) / (n_tiers - 1) if n_tiers > 1 else 0.0

    # Padding shrinks if the longest column could not otherwise fit; each of
    # its nodes keeps at least min_node_height of the canvas
    largest = max(len(c) for c in columns)
    if largest > 1:
        room = max(height - largest * min_node_height, 0.0)
        padding = min(node_padding, room / (largest - 1))
    else:
        padding = node_padding

    # Pass 1: proportional scale per column
    candidates: list[float] = []
    for column in columns:
        total = sum(n.throughput for n in column)
        if total <= 0:
            continue
        zero_nodes = sum(1 for n in column if n.throughput <= 0)
        available = height - (len(column) - 1) * padding - zero_nodes * min_node_height
        candidates.append(max(available, 0.0) / total)

    # Pass 2: one global scale for every column
    ky = min(candidates) if candidates else 0.0
    layout.scale = ky

    positions: dict[int, tuple[float, float, float, float]] = {}
    for column in columns:
        heights = [n.throughput * ky if n.throughput > 0 else min_node_height for n in column]

        y = 0.0
        bands: list[tuple[float, float]] = []
        for h in heights:
            bands.append((y, y + h))
            y += h + padding

        # Spread leftover space evenly; the scale-setting column has none
        slack = (height - y + padding) / (len(column) + 1)
        if slack < 0:
            slack = 0.0

        for i, (node, (y0, y1)) in enumerate(zip(column, bands)):
            shift = slack * (i + 1)
            x0 = node.tier * kx
            positions[node.index] = (x0, x0 + node_width, y0 + shift, y1 + shift)

    for node in graph.nodes:
        x0, x1, y0, y1 = positions[node.index]
        layout.nodes.append(
            LaidOutNode(
                index=node.index,
                name=node.name,
                tier=node.tier,
                throughput=node.throughput,
                x0=x0,
                x1=x1,
                y0=y0,
                y1=y1,
            )
        )

    # Edge bands, stacked in edge-list order at each endpoint
    out_offset = [0.0] * len(graph.nodes)
    in_offset = [0.0] * len(graph.nodes)
    for edge in graph.edges:
        source = layout.nodes[edge.source]
        target = layout.nodes[edge.target]
        thickness = edge.value * ky

        sy0 = source.y0 + out_offset[edge.source]
        ty0 = target.y0 + in_offset[edge.target]
        out_offset[edge.source] += thickness
        in_offset[edge.target] += thickness

        layout.edges.append(
            LaidOutEdge(
                index=edge.index,
                source=edge.source,
                target=edge.target,
                value=edge.value,
                x0=source.x1,
                x1=target.x0,
                sy0=sy0,
                sy1=sy0 + thickness,
                ty0=ty0,
                ty1=ty0 + thickness,
            )
        )

    logger.debug(f"Laid out {len(layout.nodes)} nodes with scale {ky:.4f}")
    return layout
