"""Acyclicity checks.

Public API:
    has_cycle(nodes, edges) -> bool
    would_create_cycle(nodes, edges, source, target) -> bool
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .representation import build_adjacency
from .types import EdgeLike, NodeLike, coerce_edge_pairs, coerce_node_ids


def has_cycle(nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]) -> bool:
    """Return True if the directed graph contains a cycle.

    Three-colour depth-first search: a neighbour that is already visited
    *and* still on the current path is a back edge. A neighbour that is
    visited but finished (e.g. the shared sink of a diamond) is not.
    Self loops are reported as one-node cycles. Stops at the first back
    edge found.

    The walk keeps its own stack of (node, successor iterator) frames, so
    deep graphs do not hit the interpreter recursion limit.
    """
    node_ids = coerce_node_ids(nodes)
    adjacency = build_adjacency(node_ids, edges)
    visited: set[str] = set()
    on_path: set[str] = set()

    for root in node_ids:
        if root in visited:
            continue
        visited.add(root)
        on_path.add(root)
        frames: list[tuple[str, Iterator[str]]] = [
            (root, iter(adjacency.get(root, ())))
        ]

        while frames:
            node_id, successors = frames[-1]
            for neighbor in successors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_path.add(neighbor)
                    frames.append((neighbor, iter(adjacency.get(neighbor, ()))))
                    break
                if neighbor in on_path:
                    return True
            else:
                # successors exhausted
                on_path.discard(node_id)
                frames.pop()

    return False


def would_create_cycle(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    source: str,
    target: str,
) -> bool:
    """Return True if adding ``source -> target`` to *edges* makes a cycle."""
    candidate = coerce_edge_pairs(edges)
    candidate.append((source, target))
    return has_cycle(nodes, candidate)


__all__ = ["has_cycle", "would_create_cycle"]
