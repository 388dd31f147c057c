"""Opt-in structural validation for caller-supplied graphs.

The algorithms tolerate duplicate node ids (first one wins) and edges
with unknown endpoints. Callers that would rather fail fast run
``validate_graph`` before tracing.

Public API:
    GraphDiagnostics: Findings for one node/edge snapshot.
    diagnose_graph(nodes, edges) -> GraphDiagnostics
    validate_graph(nodes, edges) -> None
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from .cycles import has_cycle
from .exceptions import DanglingEdgeError, DuplicateNodeError
from .types import EdgeLike, GraphNode, NodeLike, coerce_edge_pairs

logger = logging.getLogger(__name__)


@dataclass
class GraphDiagnostics:
    """Structural findings for a graph.

    Attributes:
        node_count: Number of node entries supplied (duplicates included).
        edge_count: Number of edge entries supplied.
        duplicate_ids: Node ids that occur more than once, sorted.
        dangling_edges: Edges with a source or target that is not a node.
        duplicate_edges: (source, target) pairs supplied more than once.
        self_loops: Edges whose source equals their target.
        cyclic: True if the graph contains a cycle.
    """

    node_count: int = 0
    edge_count: int = 0
    duplicate_ids: list[str] = field(default_factory=list)
    dangling_edges: list[tuple[str, str]] = field(default_factory=list)
    duplicate_edges: list[tuple[str, str]] = field(default_factory=list)
    self_loops: list[tuple[str, str]] = field(default_factory=list)
    cyclic: bool = False

    @property
    def ok(self) -> bool:
        """True when there are no duplicate ids and no dangling edges."""
        return not self.duplicate_ids and not self.dangling_edges

    @property
    def is_dag(self) -> bool:
        return self.ok and not self.cyclic


def _raw_ids(nodes: Iterable[NodeLike]) -> list[str]:
    ids: list[str] = []
    for node in nodes:
        if isinstance(node, GraphNode):
            ids.append(node.node_id)
        elif isinstance(node, str):
            ids.append(node)
    return ids


def diagnose_graph(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> GraphDiagnostics:
    """Collect structural findings without raising.

    Entries that are neither a ``GraphNode`` nor a string id are skipped
    and not counted in ``node_count``.
    """
    ids = _raw_ids(nodes)
    pairs = coerce_edge_pairs(edges)
    known = set(ids)

    id_counts = Counter(ids)
    pair_counts = Counter(pairs)

    return GraphDiagnostics(
        node_count=len(ids),
        edge_count=len(pairs),
        duplicate_ids=sorted(node_id for node_id, n in id_counts.items() if n > 1),
        dangling_edges=[
            pair for pair in pairs if pair[0] not in known or pair[1] not in known
        ],
        duplicate_edges=[pair for pair, n in pair_counts.items() if n > 1],
        self_loops=[pair for pair in pairs if pair[0] == pair[1]],
        cyclic=has_cycle(ids, pairs),
    )


def validate_graph(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> None:
    """Reject graphs with duplicate node ids or dangling edges.

    Cycles are not an error here; check ``has_cycle`` separately.

    Raises:
        DuplicateNodeError: If any node id occurs more than once.
        DanglingEdgeError: If an edge references an unknown node id.
    """
    diagnostics = diagnose_graph(nodes, edges)

    if diagnostics.duplicate_ids:
        logger.debug("Duplicate node ids: %s", diagnostics.duplicate_ids)
        raise DuplicateNodeError(
            f"Duplicate node ids: {', '.join(diagnostics.duplicate_ids)}"
        )
    if diagnostics.dangling_edges:
        logger.debug("Dangling edges: %s", diagnostics.dangling_edges)
        described = ", ".join(f"{s}->{t}" for s, t in diagnostics.dangling_edges)
        raise DanglingEdgeError(f"Edges reference unknown nodes: {described}")


__all__ = ["GraphDiagnostics", "diagnose_graph", "validate_graph"]
