"""
Flow module for the salary dashboard.

Contains the Sankey flow graph builder, layout engine, and selection state.
"""

from salary_dashboard.flow.graph import (
    FlowEdge,
    FlowGraph,
    FlowNode,
    build_flow_graph,
)
from salary_dashboard.flow.layout import (
    FlowLayout,
    LaidOutEdge,
    LaidOutNode,
    layout_flow_graph,
)
from salary_dashboard.flow.selection import (
    SelectionState,
    brush,
    clear_selection,
    focus_slice,
    is_edge_faded,
    is_faded,
    is_key_selected,
    is_selected,
    node_at,
    toggle_key,
    toggle_node,
)

__all__ = [
    # Graph
    "FlowEdge",
    "FlowGraph",
    "FlowNode",
    "build_flow_graph",
    # Layout
    "FlowLayout",
    "LaidOutEdge",
    "LaidOutNode",
    "layout_flow_graph",
    # Selection
    "SelectionState",
    "brush",
    "clear_selection",
    "focus_slice",
    "is_edge_faded",
    "is_faded",
    "is_key_selected",
    "is_selected",
    "node_at",
    "toggle_key",
    "toggle_node",
]
