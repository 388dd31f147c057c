"""Random DAG synthesis and the built-in sample graph.

Philosophy:
- Acyclic by construction: an edge is only accepted when its source index
  is lower than its target index, which fixes a topological order up front
- ``would_create_cycle`` is checked for every candidate edge as a second guard
- Best effort: the attempt budget can run out before the requested edge
  count is reached, and whatever was produced is returned

Public API:
    generate_random_dag(num_nodes, num_edges, ...) -> (nodes, edges)
    create_sample_dag() -> (nodes, edges)
    clamp_node_count(value) -> int
    clamp_edge_count(value) -> int
"""

from __future__ import annotations

import logging
import random
import string

from .cycles import would_create_cycle
from .types import GraphEdge, GraphNode, Position

logger = logging.getLogger(__name__)

MIN_NODES = 3
MAX_NODES = 20
MIN_EDGES = 1
MAX_EDGES = 30

# Rejection sampling tries this many candidates per requested edge
ATTEMPTS_PER_EDGE = 10

CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 600.0


def clamp_node_count(value: int) -> int:
    """Clamp a requested node count into [MIN_NODES, MAX_NODES]."""
    return max(MIN_NODES, min(MAX_NODES, int(value)))


def clamp_edge_count(value: int) -> int:
    """Clamp a requested edge count into [MIN_EDGES, MAX_EDGES]."""
    return max(MIN_EDGES, min(MAX_EDGES, int(value)))


def _node_label(index: int) -> str:
    letters = string.ascii_uppercase
    if index < len(letters):
        return letters[index]
    return f"{letters[index % len(letters)]}{index // len(letters)}"


def generate_random_dag(
    num_nodes: int,
    num_edges: int,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Generate a random acyclic graph.

    Args:
        num_nodes: Number of nodes to create (callers usually clamp to
            [MIN_NODES, MAX_NODES]).
        num_edges: Target edge count (callers usually clamp to
            [MIN_EDGES, MAX_EDGES]).
        rng: Random source; takes precedence over *seed*.
        seed: Seed for a private ``random.Random`` when *rng* is None.
        width: Canvas width for random node positions.
        height: Canvas height for random node positions.

    Returns:
        (nodes, edges). Node ids are ``node-<i>`` with letter labels. The
        edge list may be shorter than *num_edges* if the attempt budget
        (ATTEMPTS_PER_EDGE * num_edges) runs out; it never holds duplicate
        pairs and never forms a cycle.
    """
    rng = rng if rng is not None else random.Random(seed)

    nodes = [
        GraphNode(
            node_id=f"node-{index}",
            label=_node_label(index),
            position=Position(rng.random() * width, rng.random() * height),
        )
        for index in range(max(0, num_nodes))
    ]
    edges: list[GraphEdge] = []
    if len(nodes) < 2 or num_edges <= 0:
        return nodes, edges

    seen_pairs: set[tuple[str, str]] = set()
    max_attempts = num_edges * ATTEMPTS_PER_EDGE
    attempts = 0

    while attempts < max_attempts and len(edges) < num_edges:
        attempts += 1
        source_index = rng.randrange(len(nodes))
        target_index = rng.randrange(len(nodes))
        if source_index >= target_index:
            continue

        pair = (nodes[source_index].node_id, nodes[target_index].node_id)
        if pair in seen_pairs:
            continue

        if would_create_cycle(nodes, edges, *pair):
            continue

        edges.append(GraphEdge(pair[0], pair[1], edge_id=f"edge-{len(edges)}"))
        seen_pairs.add(pair)

    if len(edges) < num_edges:
        logger.debug(
            "Random DAG budget exhausted after %d attempts: %d of %d edges",
            attempts,
            len(edges),
            num_edges,
        )
    return nodes, edges


def create_sample_dag() -> tuple[list[GraphNode], list[GraphEdge]]:
    """The five-node preload graph: A->B, A->C, B->D, C->D, D->E."""
    nodes = [
        GraphNode("A", position=Position(100, 100)),
        GraphNode("B", position=Position(300, 100)),
        GraphNode("C", position=Position(100, 300)),
        GraphNode("D", position=Position(300, 300)),
        GraphNode("E", position=Position(500, 200)),
    ]
    edges = [
        GraphEdge("A", "B", edge_id="e1"),
        GraphEdge("A", "C", edge_id="e2"),
        GraphEdge("B", "D", edge_id="e3"),
        GraphEdge("C", "D", edge_id="e4"),
        GraphEdge("D", "E", edge_id="e5"),
    ]
    return nodes, edges


__all__ = [
    "MIN_NODES",
    "MAX_NODES",
    "MIN_EDGES",
    "MAX_EDGES",
    "ATTEMPTS_PER_EDGE",
    "clamp_node_count",
    "clamp_edge_count",
    "generate_random_dag",
    "create_sample_dag",
]
