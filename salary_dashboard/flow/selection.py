"""
Module: selection

Purpose: Highlight state for the dashboard's click and brush interactions.

SelectionState is immutable; every transition returns a new state. The
renderer calls the predicates (is_selected, is_faded, is_edge_faded) to
style nodes and ribbons, and node_at for hit-testing.
"""

from dataclasses import dataclass, replace
from typing import Hashable

from salary_dashboard.exceptions import SelectionError
from salary_dashboard.flow.graph import FlowEdge
from salary_dashboard.flow.layout import FlowLayout, LaidOutEdge, LaidOutNode, Point, Rect


@dataclass(frozen=True)
class SelectionState:
    """Current selection across the three charts."""

    # Sankey nodes selected by brush or click
    nodes: frozenset[int] = frozenset()
    # An active brush fades everything unselected, even when it selects nothing
    active: bool = False
    # Bar chart categories toggled on by click
    keys: frozenset[Hashable] = frozenset()
    # Pie slice currently zoomed, if any
    focused_slice: Hashable | None = None


# =============================================================================
# TRANSITIONS
# =============================================================================


def toggle_key(state: SelectionState, key: Hashable) -> SelectionState:
    """Add ``key`` to the highlighted categories, or remove it if present."""
    return replace(state, keys=state.keys ^ {key})


def focus_slice(state: SelectionState, key: Hashable) -> SelectionState:
    """Zoom a pie slice; zooming the focused slice again releases it."""
    return replace(state, focused_slice=None if state.focused_slice == key else key)


def toggle_node(state: SelectionState, index: int, *, node_count: int) -> SelectionState:
    """Add or remove one Sankey node; ``node_count`` is the size of the arena."""
    if not 0 <= index < node_count:
        raise SelectionError(
            f"Node index {index} out of range",
            index=index,
            node_count=node_count,
        )
    nodes = state.nodes ^ {index}
    return replace(state, nodes=nodes, active=bool(nodes))


def brush(state: SelectionState, layout: FlowLayout, rect: Rect) -> SelectionState:
    """Select exactly the nodes whose band intersects ``rect``."""
    selected = frozenset(n.index for n in layout.nodes_intersecting(rect))
    return replace(state, nodes=selected, active=True)


def clear_selection(state: SelectionState) -> SelectionState:
    """Drop the node selection (brush removed); bar and pie state survive."""
    return replace(state, nodes=frozenset(), active=False)


# =============================================================================
# PREDICATES
# =============================================================================


def is_selected(state: SelectionState, index: int) -> bool:
    return index in state.nodes


def is_faded(state: SelectionState, index: int) -> bool:
    return state.active and index not in state.nodes


def is_edge_faded(state: SelectionState, edge: FlowEdge | LaidOutEdge) -> bool:
    """Faded while a selection is active and neither endpoint is selected."""
    return state.active and edge.source not in state.nodes and edge.target not in state.nodes


def is_key_selected(state: SelectionState, key: Hashable) -> bool:
    return key in state.keys


def node_at(layout: FlowLayout, point: Point) -> LaidOutNode | None:
    """Node under ``point``, for hover and click handling."""
    x, y = point
    return layout.node_at(x, y)
