"""Graph and trace data structures.

Public API:
    Position: 2-D layout coordinate attached to a node.
    GraphNode: Immutable node with an id and display label.
    GraphEdge: Immutable directed edge between two node ids.
    DFSPhase: Which of the three per-node DFS emission points a record is.
    TopologicalStep: One Kahn's-algorithm removal snapshot.
    TopologicalTrace: Tagged result wrapping all topological steps.
    TopologicalRemoval: Removed node plus the ids still remaining.
    DFSStep: One depth-first traversal snapshot.
    BFSStep: One breadth-first traversal snapshot.
    coerce_node_ids: Normalize nodes or bare ids into a unique id list.
    coerce_edge_pairs: Normalize edges or tuples into (source, target) pairs.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Position:
    """Layout coordinate. Not used by any algorithm."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class GraphNode:
    """An immutable node in a directed graph.

    Attributes:
        node_id: Unique identifier for the node.
        label: Display label (defaults to the node id).
        position: Optional layout position for the rendering layer.
    """

    node_id: str
    label: str = ""
    position: Position | None = None

    def __post_init__(self):
        if not isinstance(self.node_id, str) or not self.node_id:
            raise ValueError("node_id must be a non-empty string")
        if not self.label:
            object.__setattr__(self, "label", self.node_id)


@dataclass(frozen=True)
class GraphEdge:
    """An immutable directed edge.

    Attributes:
        source_id: Node ID of the source (tail) node.
        target_id: Node ID of the target (head) node.
        edge_id: Identifier for the edge (defaults to ``source->target``).
    """

    source_id: str
    target_id: str
    edge_id: str = ""

    def __post_init__(self):
        if not self.edge_id:
            object.__setattr__(self, "edge_id", f"{self.source_id}->{self.target_id}")

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source_id, self.target_id)


NodeLike = Union[GraphNode, str]
EdgeLike = Union[GraphEdge, tuple[str, str]]


def coerce_node_ids(nodes: Iterable[NodeLike]) -> list[str]:
    """Return node ids in input order, keeping the first of any duplicates."""
    ids: dict[str, None] = {}
    for node in nodes:
        if isinstance(node, GraphNode):
            ids.setdefault(node.node_id, None)
        elif isinstance(node, str):
            ids.setdefault(node, None)
        else:
            raise TypeError(f"Expected GraphNode or str, got {type(node).__name__}")
    return list(ids)


def coerce_edge_pairs(edges: Iterable[EdgeLike]) -> list[tuple[str, str]]:
    """Return (source, target) pairs in input order."""
    pairs: list[tuple[str, str]] = []
    for edge in edges:
        if isinstance(edge, GraphEdge):
            pairs.append(edge.pair)
        else:
            source, target = edge
            pairs.append((source, target))
    return pairs


class DFSPhase(Enum):
    """Emission point of a DFS trace record."""

    PUSH = "push"
    VISIT = "visit"
    POP = "pop"


@dataclass(frozen=True)
class TopologicalStep:
    """State after removing one zero in-degree node.

    Attributes:
        removed_node: Node removed at this step.
        queue: Nodes ready for the *next* step, in node order.
        visited: Full id -> 0/1 map owned by this record.
    """

    removed_node: str
    queue: tuple[str, ...] = ()
    visited: dict[str, int] = field(default_factory=dict, hash=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "removedNode": self.removed_node,
            "queue": list(self.queue),
            "visited": dict(self.visited),
        }


@dataclass(frozen=True)
class TopologicalTrace:
    """Result of Kahn's algorithm distinguishing complete from partial orders.

    Behaves as a read-only sequence of ``TopologicalStep``.

    Attributes:
        steps: One record per removed node.
        unordered: Node ids that were never removed (non-empty iff the
            graph has a cycle, or a predecessor outside the node list),
            in node order.
    """

    steps: tuple[TopologicalStep, ...] = ()
    unordered: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.unordered

    @property
    def order(self) -> list[str]:
        return [step.removed_node for step in self.steps]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[TopologicalStep]:
        return iter(self.steps)

    def __getitem__(self, index):
        return self.steps[index]

    def to_dict(self) -> dict[str, Any]:
        return {
            "complete": self.complete,
            "unordered": list(self.unordered),
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass(frozen=True)
class TopologicalRemoval:
    """Removed node and the ids still waiting, without visited state."""

    removed_node: str
    remaining_nodes: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "removedNode": self.removed_node,
            "remainingNodes": list(self.remaining_nodes),
        }


@dataclass(frozen=True)
class DFSStep:
    """Depth-first snapshot.

    Attributes:
        current_node: Node being pushed, visited or popped.
        stack: Active path, root first.
        visited: Full id -> 0/1 map owned by this record.
        phase: Emission point that produced this record.
    """

    current_node: str
    stack: tuple[str, ...] = ()
    visited: dict[str, int] = field(default_factory=dict, hash=False)
    phase: DFSPhase = DFSPhase.VISIT

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentNode": self.current_node,
            "stack": list(self.stack),
            "visited": dict(self.visited),
            "phase": self.phase.value,
        }


@dataclass(frozen=True)
class BFSStep:
    """Breadth-first snapshot.

    Attributes:
        current_node: Node being processed.
        queue: Queue contents, front first.
        visited: Full id -> 0/1 map owned by this record.
    """

    current_node: str
    queue: tuple[str, ...] = ()
    visited: dict[str, int] = field(default_factory=dict, hash=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentNode": self.current_node,
            "queue": list(self.queue),
            "visited": dict(self.visited),
        }


__all__ = [
    "Position",
    "GraphNode",
    "GraphEdge",
    "NodeLike",
    "EdgeLike",
    "coerce_node_ids",
    "coerce_edge_pairs",
    "DFSPhase",
    "TopologicalStep",
    "TopologicalTrace",
    "TopologicalRemoval",
    "DFSStep",
    "BFSStep",
]
