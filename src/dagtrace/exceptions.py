"""Custom exceptions for dagtrace."""


class DagTraceError(Exception):
    """Base exception for graph trace operations."""


class InvalidGraphError(DagTraceError):
    """Raised when a graph fails explicit structural validation."""


class DuplicateNodeError(InvalidGraphError):
    """Raised when two nodes share the same identifier."""


class DanglingEdgeError(InvalidGraphError):
    """Raised when an edge references a node id that does not exist."""


class UnknownStartNodeError(DagTraceError, KeyError):
    """Raised when a traversal is asked to start from a missing node."""
