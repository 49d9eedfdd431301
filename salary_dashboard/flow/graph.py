"""
Module: graph

Purpose: Build the three-tier flow graph behind the Sankey diagram.

Key Functions:
- build_flow_graph: Records -> FlowGraph (node arena + weighted edges)

Architecture Notes:
- Nodes live in a single arena list; a node's identity is its index
- Edges reference nodes by index only
- Name lookup is scoped by tier, so equal names in two tiers never
  mis-route an edge; such collisions are still reported
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from salary_dashboard.data.schemas import EXPERIENCE_DESCRIPTIONS, EmploymentRecord, FlowTier
from salary_dashboard.exceptions import NodeNameCollisionError
from salary_dashboard.features.rollup import (
    by_company_size,
    by_experience_level,
    by_job_group,
    rollup_pairs,
)

logger = logging.getLogger(__name__)

TIER_KEYS = (by_experience_level, by_job_group, by_company_size)


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True)
class FlowNode:
    """A category value in one tier of the flow graph."""

    index: int
    name: str
    tier: int
    throughput: int = 0

    @property
    def node_id(self) -> str:
        """Tier-qualified identifier, unique even when names collide."""
        return f"{self.tier}:{self.name}"


@dataclass(frozen=True)
class FlowEdge:
    """A weighted connection from a tier-N node to a tier-(N+1) node."""

    index: int
    source: int
    target: int
    value: int


@dataclass
class FlowGraph:
    """Node arena and edges for the Sankey diagram."""

    nodes: list[FlowNode] = field(default_factory=list)
    edges: list[FlowEdge] = field(default_factory=list)
    name_collisions: list[str] = field(default_factory=list)

    @property
    def n_tiers(self) -> int:
        return max((n.tier for n in self.nodes), default=-1) + 1

    def nodes_in_tier(self, tier: int) -> list[FlowNode]:
        return [n for n in self.nodes if n.tier == tier]

    def outgoing(self, index: int) -> list[FlowEdge]:
        return [e for e in self.edges if e.source == index]

    def incoming(self, index: int) -> list[FlowEdge]:
        return [e for e in self.edges if e.target == index]

    def edges_between_tiers(self, source_tier: int) -> list[FlowEdge]:
        """Edges leaving ``source_tier``."""
        return [e for e in self.edges if self.nodes[e.source].tier == source_tier]

    def find_node(self, tier: int, name: str) -> FlowNode | None:
        return next((n for n in self.nodes if n.tier == tier and n.name == name), None)

    def node_label(self, index: int) -> str:
        """Human-readable node label; experience codes are spelled out."""
        node = self.nodes[index]
        if node.tier == FlowTier.EXPERIENCE:
            return EXPERIENCE_DESCRIPTIONS.get(node.name, node.name)
        return node.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [
                {"index": n.index, "id": n.node_id, "name": n.name, "tier": n.tier, "value": n.throughput}
                for n in self.nodes
            ],
            "links": [
                {"index": e.index, "source": e.source, "target": e.target, "value": e.value}
                for e in self.edges
            ],
        }


# =============================================================================
# GRAPH BUILDING
# =============================================================================


def _distinct(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _find_collisions(tier_names: list[list[str]]) -> list[str]:
    seen: dict[str, int] = {}
    collisions: list[str] = []
    for tier, names in enumerate(tier_names):
        for name in names:
            if name in seen and seen[name] != tier and name not in collisions:
                collisions.append(name)
            seen.setdefault(name, tier)
    return collisions


def _compute_throughput(tier: int, n_tiers: int, outgoing: int, incoming: int) -> int:
    if tier == 0:
        return outgoing
    if tier == n_tiers - 1:
        return incoming
    return max(outgoing, incoming)


def build_flow_graph(
    records: Iterable[EmploymentRecord],
    *,
    strict_names: bool = False,
) -> FlowGraph:
    """
    Build experience -> job group -> company size flow graph.

    Args:
        records: Employment records
        strict_names: Raise instead of warning when two tiers share a name

    Returns:
        FlowGraph with nodes in tier order and edges in rollup order

    Raises:
        NodeNameCollisionError: If strict_names and a collision is found
    """
    records = list(records)
    if not records:
        return FlowGraph()

    # Step 1: distinct values per tier, first-encountered order
    tier_names = [_distinct(key(r) for r in records) for key in TIER_KEYS]

    collisions = _find_collisions(tier_names)
    if collisions:
        if strict_names:
            raise NodeNameCollisionError(
                f"Category names appear in more than one tier: {', '.join(collisions)}",
                names=collisions,
            )
        logger.warning(
            f"Category names shared across tiers: {collisions}; lookups are tier-scoped"
        )

    # Step 2: node arena, index = position in the tier-ordered concatenation
    arena: list[tuple[int, str]] = [
        (tier, name) for tier, names in enumerate(tier_names) for name in names
    ]
    index_of = {key: i for i, key in enumerate(arena)}

    # Step 3: edges between adjacent tiers
    edges: list[FlowEdge] = []
    for source_tier in range(len(TIER_KEYS) - 1):
        cells = rollup_pairs(records, TIER_KEYS[source_tier], TIER_KEYS[source_tier + 1])
        for source_name, targets in cells.items():
            for target_name, value in targets.items():
                edges.append(
                    FlowEdge(
                        index=len(edges),
                        source=index_of[(source_tier, source_name)],
                        target=index_of[(source_tier + 1, target_name)],
                        value=value,
                    )
                )

    # Step 4: throughput
    out_sum = [0] * len(arena)
    in_sum = [0] * len(arena)
    for edge in edges:
        out_sum[edge.source] += edge.value
        in_sum[edge.target] += edge.value

    n_tiers = len(TIER_KEYS)
    nodes = [
        FlowNode(
            index=i,
            name=name,
            tier=tier,
            throughput=_compute_throughput(tier, n_tiers, out_sum[i], in_sum[i]),
        )
        for i, (tier, name) in enumerate(arena)
    ]

    logger.info(f"Built flow graph with {len(nodes)} nodes and {len(edges)} edges")
    return FlowGraph(nodes=nodes, edges=edges, name_collisions=collisions)
