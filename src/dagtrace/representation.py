"""Structural views of a directed graph.

Every function builds fresh structures from the node/edge snapshot it is
given; nothing is cached between calls.

Public API:
    build_adjacency(nodes, edges) -> dict[str, list[str]]
    build_reverse_adjacency(edges) -> dict[str, list[str]]
    compute_in_degrees(nodes, edges) -> dict[str, int]
    build_adjacency_matrix(nodes, edges) -> dict[tuple[str, str], int]
    matrix_key(row, col) -> tuple[str, str]
    adjacency_matrix_rows(nodes, edges) -> (list[str], list[list[int]])

Edges whose endpoints are not in the node list are kept as-is: they show
up in the adjacency list and matrix under their unknown ids. Use
``dagtrace.validation`` to reject them up front.
"""

from __future__ import annotations

from collections.abc import Iterable

from .types import EdgeLike, NodeLike, coerce_edge_pairs, coerce_node_ids


def matrix_key(row: str, col: str) -> tuple[str, str]:
    """Pair key used by the adjacency matrix map.

    A tuple rather than a joined string, so ids containing "-" cannot
    collide.
    """
    return (row, col)


def build_adjacency(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> dict[str, list[str]]:
    """Forward adjacency list: node id -> successors in edge order.

    Nodes without outgoing edges get an empty list.
    """
    adjacency: dict[str, list[str]] = {}
    for source, target in coerce_edge_pairs(edges):
        adjacency.setdefault(source, []).append(target)

    for node_id in coerce_node_ids(nodes):
        adjacency.setdefault(node_id, [])
    return adjacency


def build_reverse_adjacency(edges: Iterable[EdgeLike]) -> dict[str, list[str]]:
    """Reverse adjacency list: node id -> predecessors in edge order.

    Only nodes with at least one incoming edge have an entry.
    """
    reverse: dict[str, list[str]] = {}
    for source, target in coerce_edge_pairs(edges):
        reverse.setdefault(target, []).append(source)
    return reverse


def compute_in_degrees(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> dict[str, int]:
    """Count incoming edges per node, starting every node at 0."""
    in_degrees = {node_id: 0 for node_id in coerce_node_ids(nodes)}
    for _, target in coerce_edge_pairs(edges):
        in_degrees[target] = in_degrees.get(target, 0) + 1
    return in_degrees


def build_adjacency_matrix(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> dict[tuple[str, str], int]:
    """Pair-keyed adjacency matrix.

    All V*V pairs are present with 0, edges are set to 1. Quadratic in the
    node count, meant for small teaching graphs.
    """
    node_ids = coerce_node_ids(nodes)
    matrix = {matrix_key(row, col): 0 for row in node_ids for col in node_ids}
    for source, target in coerce_edge_pairs(edges):
        matrix[matrix_key(source, target)] = 1
    return matrix


def adjacency_matrix_rows(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> tuple[list[str], list[list[int]]]:
    """Dense 2-D view of the matrix, rows and columns in sorted id order.

    Returns:
        (sorted_ids, rows) where ``rows[i][j]`` is 1 if there is an edge
        from ``sorted_ids[i]`` to ``sorted_ids[j]``.
    """
    node_ids = coerce_node_ids(nodes)
    matrix = build_adjacency_matrix(node_ids, edges)
    sorted_ids = sorted(node_ids)
    rows = [
        [matrix.get(matrix_key(row, col), 0) for col in sorted_ids]
        for row in sorted_ids
    ]
    return sorted_ids, rows


__all__ = [
    "matrix_key",
    "build_adjacency",
    "build_reverse_adjacency",
    "compute_in_degrees",
    "build_adjacency_matrix",
    "adjacency_matrix_rows",
]
