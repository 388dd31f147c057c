"""dagtrace: step-by-step traces of classic directed-graph algorithms."""

__version__ = "0.1.0"

from .cycles import has_cycle, would_create_cycle
from .exceptions import (
    DagTraceError,
    DanglingEdgeError,
    DuplicateNodeError,
    InvalidGraphError,
    UnknownStartNodeError,
)
from .generator import (
    MAX_EDGES,
    MAX_NODES,
    MIN_EDGES,
    MIN_NODES,
    clamp_edge_count,
    clamp_node_count,
    create_sample_dag,
    generate_random_dag,
)
from .representation import (
    adjacency_matrix_rows,
    build_adjacency,
    build_adjacency_matrix,
    build_reverse_adjacency,
    compute_in_degrees,
    matrix_key,
)
from .traces import (
    bfs_order,
    bfs_trace,
    dfs_order,
    dfs_trace,
    topological_removals,
    topological_trace,
)
from .types import (
    BFSStep,
    DFSPhase,
    DFSStep,
    GraphEdge,
    GraphNode,
    Position,
    TopologicalRemoval,
    TopologicalStep,
    TopologicalTrace,
)
from .validation import GraphDiagnostics, diagnose_graph, validate_graph

__all__ = [
    # Data model
    "Position",
    "GraphNode",
    "GraphEdge",
    "DFSPhase",
    "TopologicalStep",
    "TopologicalTrace",
    "TopologicalRemoval",
    "DFSStep",
    "BFSStep",
    # Representations
    "build_adjacency",
    "build_reverse_adjacency",
    "compute_in_degrees",
    "build_adjacency_matrix",
    "matrix_key",
    "adjacency_matrix_rows",
    # Cycle detection
    "has_cycle",
    "would_create_cycle",
    # Traces
    "topological_trace",
    "topological_removals",
    "dfs_trace",
    "dfs_order",
    "bfs_trace",
    "bfs_order",
    # Generation
    "generate_random_dag",
    "create_sample_dag",
    "clamp_node_count",
    "clamp_edge_count",
    "MIN_NODES",
    "MAX_NODES",
    "MIN_EDGES",
    "MAX_EDGES",
    # Validation
    "GraphDiagnostics",
    "diagnose_graph",
    "validate_graph",
    # Exceptions
    "DagTraceError",
    "InvalidGraphError",
    "DuplicateNodeError",
    "DanglingEdgeError",
    "UnknownStartNodeError",
]
