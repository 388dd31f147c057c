"""Walk through every trace dagtrace produces for the sample graph."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from dagtrace import (
    adjacency_matrix_rows,
    bfs_trace,
    build_adjacency,
    compute_in_degrees,
    create_sample_dag,
    dfs_trace,
    generate_random_dag,
    has_cycle,
    topological_trace,
)


def _marks(visited):
    return "".join(str(mark) for mark in visited.values())


def main():
    print("=" * 60)
    print("dagtrace - Trace Walkthrough")
    print("=" * 60)

    nodes, edges = create_sample_dag()

    # 1. Structural views
    print("\n1. Adjacency list:")
    for node_id, successors in build_adjacency(nodes, edges).items():
        print(f"   {node_id} -> {successors}")

    print("\n   In-degrees:", compute_in_degrees(nodes, edges))

    ids, rows = adjacency_matrix_rows(nodes, edges)
    print("\n   Adjacency matrix:")
    print("     " + " ".join(ids))
    for node_id, row in zip(ids, rows):
        print(f"   {node_id} " + " ".join(str(cell) for cell in row))

    # 2. Acyclicity
    print(f"\n2. Has cycle: {has_cycle(nodes, edges)}")

    # 3. Kahn's algorithm
    print("\n3. Topological sort (Kahn):")
    trace = topological_trace(nodes, edges)
    for step in trace:
        print(f"   remove {step.removed_node}  next={list(step.queue)}  visited={_marks(step.visited)}")
    print(f"   complete={trace.complete} order={trace.order}")

    # 4. DFS
    print("\n4. Depth-first from A:")
    for step in dfs_trace(nodes, edges, "A"):
        print(f"   {step.phase.value:<5} {step.current_node}  stack={list(step.stack)}")

    # 5. BFS
    print("\n5. Breadth-first from A:")
    for step in bfs_trace(nodes, edges, "A"):
        print(f"   {step.current_node}  queue={list(step.queue)}  visited={_marks(step.visited)}")

    # 6. Random DAG
    print("\n6. Random DAG (8 nodes, 10 edges, seed=7):")
    rand_nodes, rand_edges = generate_random_dag(8, 10, seed=7)
    labels = {node.node_id: node.label for node in rand_nodes}
    print("   Edges:", [f"{labels[e.source_id]}->{labels[e.target_id]}" for e in rand_edges])
    print("   Order:", [labels[n] for n in topological_trace(rand_nodes, rand_edges).order])

    print("\n" + "=" * 60)
    print("Done")
    print("=" * 60)


if __name__ == "__main__":
    main()
