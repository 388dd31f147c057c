"""Step-by-step traces of Kahn's algorithm, DFS and BFS.

Each trace is a list of self-contained snapshots: every record owns its
own copy of the visited map and an immutable tuple for its queue or
stack, so a consumer can jump to any step without replaying earlier ones.

Public API:
    topological_trace(nodes, edges) -> TopologicalTrace
    topological_removals(nodes, edges) -> list[TopologicalRemoval]
    dfs_trace(nodes, edges, start=None) -> list[DFSStep]
    dfs_order(nodes, edges, start=None) -> list[str]
    bfs_trace(nodes, edges, start=None) -> list[BFSStep]
    bfs_order(nodes, edges, start=None) -> list[str]

None of these check for cycles first. Run ``has_cycle`` beforehand, or
inspect ``TopologicalTrace.complete``.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from .exceptions import UnknownStartNodeError
from .representation import build_adjacency, compute_in_degrees
from .types import (
    BFSStep,
    DFSPhase,
    DFSStep,
    EdgeLike,
    NodeLike,
    TopologicalRemoval,
    TopologicalStep,
    TopologicalTrace,
    coerce_edge_pairs,
    coerce_node_ids,
)

logger = logging.getLogger(__name__)


def _resolve_start(node_ids: list[str], start: str | None) -> str:
    if not start:
        return node_ids[0]
    if start not in node_ids:
        raise UnknownStartNodeError(f"Start node {start!r} is not in the graph")
    return start


def _ready_nodes(remaining: dict[str, None], in_degrees: dict[str, int]) -> list[str]:
    return [node_id for node_id in remaining if in_degrees.get(node_id, 0) == 0]


# ── Kahn's algorithm ──────────────────────────────────────────


def topological_trace(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> TopologicalTrace:
    """Trace Kahn's topological sort, one record per removed node.

    At every step the first zero in-degree node in original node order is
    removed, its successors' in-degrees are decremented, and the record's
    ``queue`` holds the nodes ready for the *following* step.

    If the graph has a cycle the walk stops when no node is ready; the
    nodes left over are reported in ``TopologicalTrace.unordered``. An edge
    whose source is not in the node list is never removed either, so its
    target ends up there too even though the graph is acyclic.
    """
    node_ids = coerce_node_ids(nodes)
    pairs = coerce_edge_pairs(edges)
    adjacency = build_adjacency(node_ids, pairs)
    in_degrees = compute_in_degrees(node_ids, pairs)

    visited = {node_id: 0 for node_id in node_ids}
    remaining: dict[str, None] = dict.fromkeys(node_ids)
    steps: list[TopologicalStep] = []

    ready = _ready_nodes(remaining, in_degrees)
    while ready:
        removed = ready[0]
        del remaining[removed]
        visited[removed] = 1

        for successor in adjacency.get(removed, ()):
            in_degrees[successor] = in_degrees.get(successor, 0) - 1

        ready = _ready_nodes(remaining, in_degrees)
        steps.append(
            TopologicalStep(
                removed_node=removed,
                queue=tuple(ready),
                visited=dict(visited),
            )
        )

    if remaining:
        logger.debug(
            "Topological order incomplete: %d of %d nodes unordered",
            len(remaining),
            len(node_ids),
        )
    return TopologicalTrace(steps=tuple(steps), unordered=tuple(remaining))


def topological_removals(
    nodes: Iterable[NodeLike], edges: Iterable[EdgeLike]
) -> list[TopologicalRemoval]:
    """Removed node and still-remaining ids per Kahn step, without visited maps."""
    trace = topological_trace(nodes, edges)
    removals: list[TopologicalRemoval] = []
    for step in trace:
        remaining = tuple(
            node_id for node_id, mark in step.visited.items() if mark == 0
        )
        removals.append(TopologicalRemoval(step.removed_node, remaining))
    return removals


# ── depth-first ───────────────────────────────────────────────


def dfs_trace(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    start: str | None = None,
) -> list[DFSStep]:
    """Trace a depth-first walk from *start* (default: first node).

    Every reached node produces three records in order: PUSH (on the stack,
    not yet visited), VISIT (marked visited) and POP (after all unvisited
    successors are finished; the stack no longer holds it). Successors are
    explored in edge order. Nodes unreachable from *start* never appear.

    Raises:
        UnknownStartNodeError: If *start* is non-empty but not a node id.
    """
    node_ids = coerce_node_ids(nodes)
    if not node_ids:
        return []
    root = _resolve_start(node_ids, start)
    adjacency = build_adjacency(node_ids, edges)

    visited = {node_id: 0 for node_id in node_ids}
    stack: list[str] = []
    # (node, index of next successor to inspect)
    frames: list[tuple[str, int]] = []
    steps: list[DFSStep] = []

    def snapshot(node_id: str, phase: DFSPhase) -> None:
        steps.append(DFSStep(node_id, tuple(stack), dict(visited), phase))

    def enter(node_id: str) -> None:
        stack.append(node_id)
        snapshot(node_id, DFSPhase.PUSH)
        visited[node_id] = 1
        snapshot(node_id, DFSPhase.VISIT)
        frames.append((node_id, 0))

    enter(root)
    while frames:
        node_id, position = frames[-1]
        successors = adjacency.get(node_id, [])
        while position < len(successors) and visited.get(successors[position]) != 0:
            position += 1

        if position < len(successors):
            frames[-1] = (node_id, position + 1)
            enter(successors[position])
        else:
            frames.pop()
            stack.pop()
            snapshot(node_id, DFSPhase.POP)

    return steps


def dfs_order(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    start: str | None = None,
) -> list[str]:
    """Node ids in the order the depth-first walk visits them."""
    return [
        step.current_node
        for step in dfs_trace(nodes, edges, start)
        if step.phase is DFSPhase.VISIT
    ]


# ── breadth-first ─────────────────────────────────────────────


def bfs_trace(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    start: str | None = None,
) -> list[BFSStep]:
    """Trace a breadth-first walk from *start* (default: first node).

    The first record shows the start node already visited and queued.
    Each dequeue emits a record with the remaining queue, then each newly
    discovered successor (edge order) is marked visited, enqueued and
    recorded individually.

    Raises:
        UnknownStartNodeError: If *start* is non-empty but not a node id.
    """
    node_ids = coerce_node_ids(nodes)
    if not node_ids:
        return []
    root = _resolve_start(node_ids, start)
    adjacency = build_adjacency(node_ids, edges)

    visited = {node_id: 0 for node_id in node_ids}
    visited[root] = 1
    queue: deque[str] = deque([root])
    steps = [BFSStep(root, tuple(queue), dict(visited))]

    while queue:
        current = queue.popleft()
        steps.append(BFSStep(current, tuple(queue), dict(visited)))

        for neighbor in adjacency.get(current, ()):
            if visited.get(neighbor) == 0:
                visited[neighbor] = 1
                queue.append(neighbor)
                steps.append(BFSStep(current, tuple(queue), dict(visited)))

    return steps


def bfs_order(
    nodes: Iterable[NodeLike],
    edges: Iterable[EdgeLike],
    start: str | None = None,
) -> list[str]:
    """Node ids in the order the breadth-first walk discovers them."""
    order: list[str] = []
    seen: set[str] = set()
    for step in bfs_trace(nodes, edges, start):
        for node_id in step.queue:
            if node_id not in seen:
                seen.add(node_id)
                order.append(node_id)
    return order


__all__ = [
    "topological_trace",
    "topological_removals",
    "dfs_trace",
    "dfs_order",
    "bfs_trace",
    "bfs_order",
]
