"""Tests for the topological, DFS and BFS trace generators.

Test categories:
- TestTopologicalTrace: Kahn's look-ahead queue, tie-breaks, cycles
- TestTopologicalRemovals: removed/remaining view
- TestDFSTrace: push/visit/pop records, stack snapshots, reachability
- TestBFSTrace: dequeue/enqueue records, distance order
- TestSnapshotIsolation: records never share mutable state
"""

from __future__ import annotations

import pytest

from dagtrace import (
    DFSPhase,
    UnknownStartNodeError,
    bfs_order,
    bfs_trace,
    dfs_order,
    dfs_trace,
    has_cycle,
    topological_removals,
    topological_trace,
)


def _visited_ids(visited):
    return {node_id for node_id, mark in visited.items() if mark == 1}


# ── TestTopologicalTrace ──────────────────────────────────────


class TestTopologicalTrace:
    def test_sample_graph_order(self, sample_graph):
        nodes, edges = sample_graph
        trace = topological_trace(nodes, edges)
        assert trace.complete
        assert trace.order == ["A", "B", "C", "D", "E"]

    def test_first_removal_previews_next_ready_set(self, sample_graph):
        nodes, edges = sample_graph
        first = topological_trace(nodes, edges)[0]
        assert first.removed_node == "A"
        assert first.queue == ("B", "C")
        assert first.visited == {"A": 1, "B": 0, "C": 0, "D": 0, "E": 0}

    def test_queues_per_step(self, sample_graph):
        nodes, edges = sample_graph
        queues = [step.queue for step in topological_trace(nodes, edges)]
        assert queues == [("B", "C"), ("C",), ("D",), ("E",), ()]

    def test_visited_grows_by_one_per_step(self, sample_graph):
        nodes, edges = sample_graph
        trace = topological_trace(nodes, edges)
        for index, step in enumerate(trace, start=1):
            assert sum(step.visited.values()) == index

    def test_tie_break_uses_node_order(self):
        trace = topological_trace(["C", "B", "A"], [])
        assert trace.order == ["C", "B", "A"]
        assert trace[0].queue == ("B", "A")

    def test_cycle_yields_empty_partial_trace(self, triangle_cycle):
        nodes, edges = triangle_cycle
        trace = topological_trace(nodes, edges)
        assert len(trace) == 0
        assert not trace.complete
        assert trace.unordered == ("A", "B", "C")

    def test_cycle_after_acyclic_prefix(self):
        nodes = ["S", "A", "B"]
        edges = [("S", "A"), ("A", "B"), ("B", "A")]
        trace = topological_trace(nodes, edges)
        assert trace.order == ["S"]
        assert trace[0].queue == ()
        assert trace.unordered == ("A", "B")

    def test_self_loop_never_ready(self):
        trace = topological_trace(["A", "B"], [("A", "A")])
        assert trace.order == ["B"]
        assert trace.unordered == ("A",)

    def test_parallel_edges(self):
        trace = topological_trace(["A", "B"], [("A", "B"), ("A", "B")])
        assert trace.order == ["A", "B"]

    def test_dangling_source_leaves_target_unordered(self):
        # Z is not a node, so the Z->B edge is never removed
        nodes, edges = ["A", "B"], [("Z", "B")]
        trace = topological_trace(nodes, edges)
        assert has_cycle(nodes, edges) is False
        assert trace.order == ["A"]
        assert trace.unordered == ("B",)
        assert not trace.complete

    def test_empty_graph(self):
        trace = topological_trace([], [])
        assert len(trace) == 0
        assert trace.complete


class TestTopologicalRemovals:
    def test_remaining_shrinks(self, sample_graph):
        nodes, edges = sample_graph
        removals = topological_removals(nodes, edges)
        assert [r.removed_node for r in removals] == ["A", "B", "C", "D", "E"]
        assert removals[0].remaining_nodes == ("B", "C", "D", "E")
        assert removals[-1].remaining_nodes == ()

    def test_cycle(self, triangle_cycle):
        nodes, edges = triangle_cycle
        assert topological_removals(nodes, edges) == []


# ── TestDFSTrace ──────────────────────────────────────────────


class TestDFSTrace:
    def test_visit_order(self, sample_graph):
        nodes, edges = sample_graph
        assert dfs_order(nodes, edges, "A") == ["A", "B", "D", "E", "C"]

    def test_full_record_sequence(self, sample_graph):
        nodes, edges = sample_graph
        trace = dfs_trace(nodes, edges, "A")
        observed = [(s.phase, s.current_node, s.stack) for s in trace]
        push, visit, pop = DFSPhase.PUSH, DFSPhase.VISIT, DFSPhase.POP
        assert observed == [
            (push, "A", ("A",)),
            (visit, "A", ("A",)),
            (push, "B", ("A", "B")),
            (visit, "B", ("A", "B")),
            (push, "D", ("A", "B", "D")),
            (visit, "D", ("A", "B", "D")),
            (push, "E", ("A", "B", "D", "E")),
            (visit, "E", ("A", "B", "D", "E")),
            (pop, "E", ("A", "B", "D")),
            (pop, "D", ("A", "B")),
            (pop, "B", ("A",)),
            (push, "C", ("A", "C")),
            (visit, "C", ("A", "C")),
            (pop, "C", ("A",)),
            (pop, "A", ()),
        ]

    def test_push_record_precedes_visited_mark(self, sample_graph):
        nodes, edges = sample_graph
        trace = dfs_trace(nodes, edges, "A")
        for step in trace:
            mark = step.visited[step.current_node]
            assert mark == (0 if step.phase is DFSPhase.PUSH else 1)

    def test_defaults_to_first_node(self, sample_graph):
        nodes, edges = sample_graph
        assert dfs_trace(nodes, edges) == dfs_trace(nodes, edges, "A")

    def test_empty_start_defaults_to_first_node(self, sample_graph):
        nodes, edges = sample_graph
        assert dfs_order(nodes, edges, "") == ["A", "B", "D", "E", "C"]

    def test_start_without_successors(self):
        trace = dfs_trace(["X", "Y"], [], "X")
        assert [s.phase for s in trace] == [DFSPhase.PUSH, DFSPhase.VISIT, DFSPhase.POP]
        assert trace[-1].stack == ()
        assert trace[-1].visited == {"X": 1, "Y": 0}

    def test_unreachable_nodes_stay_unvisited(self, disconnected_graph):
        nodes, edges = disconnected_graph
        trace = dfs_trace(nodes, edges, "A")
        assert _visited_ids(trace[-1].visited) == {"A", "B"}
        assert {s.current_node for s in trace} == {"A", "B"}

    def test_start_mid_graph(self, sample_graph):
        nodes, edges = sample_graph
        assert dfs_order(nodes, edges, "C") == ["C", "D", "E"]

    def test_each_reached_node_recorded_three_times(self, sample_graph):
        nodes, edges = sample_graph
        trace = dfs_trace(nodes, edges, "A")
        assert len(trace) == 15
        for node_id in "ABCDE":
            assert sum(1 for s in trace if s.current_node == node_id) == 3

    def test_empty_graph(self):
        assert dfs_trace([], []) == []

    def test_unknown_start(self, sample_graph):
        nodes, edges = sample_graph
        with pytest.raises(UnknownStartNodeError):
            dfs_trace(nodes, edges, "Z")

    def test_unknown_start_is_key_error(self, sample_graph):
        nodes, edges = sample_graph
        with pytest.raises(KeyError):
            dfs_order(nodes, edges, "Z")

    def test_dangling_successor_skipped(self):
        assert dfs_order(["A", "B"], [("A", "Z"), ("A", "B")], "A") == ["A", "B"]

    def test_deep_chain(self):
        # deeper than the default recursion limit
        size = 1100
        nodes = [f"n{i}" for i in range(size)]
        edges = [(nodes[i], nodes[i + 1]) for i in range(size - 1)]
        trace = dfs_trace(nodes, edges)
        assert len(trace) == 3 * size
        assert max(len(s.stack) for s in trace) == size


# ── TestBFSTrace ──────────────────────────────────────────────


class TestBFSTrace:
    def test_visit_order(self, sample_graph):
        nodes, edges = sample_graph
        assert bfs_order(nodes, edges, "A") == ["A", "B", "C", "D", "E"]

    def test_full_record_sequence(self, sample_graph):
        nodes, edges = sample_graph
        trace = bfs_trace(nodes, edges, "A")
        observed = [(s.current_node, s.queue) for s in trace]
        assert observed == [
            ("A", ("A",)),
            ("A", ()),
            ("A", ("B",)),
            ("A", ("B", "C")),
            ("B", ("C",)),
            ("B", ("C", "D")),
            ("C", ("D",)),
            ("D", ()),
            ("D", ("E",)),
            ("E", ()),
        ]

    def test_initial_record(self, sample_graph):
        nodes, edges = sample_graph
        first = bfs_trace(nodes, edges, "A")[0]
        assert first.visited == {"A": 1, "B": 0, "C": 0, "D": 0, "E": 0}

    def test_dequeue_does_not_change_visited(self, sample_graph):
        nodes, edges = sample_graph
        trace = bfs_trace(nodes, edges, "A")
        assert trace[0].visited == trace[1].visited

    def test_enqueue_marks_visited(self, sample_graph):
        nodes, edges = sample_graph
        trace = bfs_trace(nodes, edges, "A")
        assert trace[2].visited["B"] == 1
        assert trace[2].visited["C"] == 0
        assert trace[3].visited["C"] == 1

    def test_start_without_successors(self):
        trace = bfs_trace(["X", "Y"], [], "X")
        assert [(s.current_node, s.queue) for s in trace] == [("X", ("X",)), ("X", ())]

    def test_unreachable_nodes_stay_unvisited(self, disconnected_graph):
        nodes, edges = disconnected_graph
        trace = bfs_trace(nodes, edges, "X")
        assert _visited_ids(trace[-1].visited) == {"X", "Y"}

    def test_defaults_to_first_node(self, sample_graph):
        nodes, edges = sample_graph
        assert bfs_order(nodes, edges) == ["A", "B", "C", "D", "E"]

    def test_empty_start_defaults_to_first_node(self, sample_graph):
        nodes, edges = sample_graph
        assert bfs_trace(nodes, edges, "") == bfs_trace(nodes, edges)

    def test_empty_graph(self):
        assert bfs_trace([], []) == []
        assert bfs_order([], []) == []

    def test_unknown_start(self, sample_graph):
        nodes, edges = sample_graph
        with pytest.raises(UnknownStartNodeError):
            bfs_trace(nodes, edges, "Z")

    def test_cycle_terminates(self, triangle_cycle):
        nodes, edges = triangle_cycle
        assert bfs_order(nodes, edges, "B") == ["B", "C", "A"]


# ── TestSnapshotIsolation ─────────────────────────────────────


class TestSnapshotIsolation:
    def test_visited_maps_are_distinct_objects(self, sample_graph):
        nodes, edges = sample_graph
        for trace in (
            list(topological_trace(nodes, edges)),
            dfs_trace(nodes, edges),
            bfs_trace(nodes, edges),
        ):
            ids = {id(step.visited) for step in trace}
            assert len(ids) == len(trace)

    def test_mutating_one_record_leaves_others(self, sample_graph):
        nodes, edges = sample_graph
        trace = dfs_trace(nodes, edges)
        trace[0].visited["A"] = 1
        assert trace[0].visited is not trace[2].visited
        assert dfs_trace(nodes, edges)[0].visited["A"] == 0

    def test_repeated_calls_are_identical(self, sample_graph):
        nodes, edges = sample_graph
        assert bfs_trace(nodes, edges) == bfs_trace(nodes, edges)
        assert topological_trace(nodes, edges) == topological_trace(nodes, edges)

    def test_inputs_not_mutated(self, sample_graph):
        nodes, edges = sample_graph
        nodes_before, edges_before = list(nodes), list(edges)
        topological_trace(nodes, edges)
        dfs_trace(nodes, edges)
        bfs_trace(nodes, edges)
        assert nodes == nodes_before
        assert edges == edges_before
