"""Pytest configuration and fixtures for dagtrace tests."""

import pytest

from dagtrace import GraphEdge, GraphNode, create_sample_dag


@pytest.fixture
def sample_graph():
    """The five-node diamond-with-tail graph.

    Graph structure:
        A --> B --> D --> E
        A --> C --> D
    """
    return create_sample_dag()


@pytest.fixture
def triangle_cycle():
    """Three-node cycle A -> B -> C -> A."""
    nodes = [GraphNode("A"), GraphNode("B"), GraphNode("C")]
    edges = [GraphEdge("A", "B"), GraphEdge("B", "C"), GraphEdge("C", "A")]
    return nodes, edges


@pytest.fixture
def disconnected_graph():
    """Two components: A -> B and X -> Y."""
    nodes = ["A", "B", "X", "Y"]
    edges = [("A", "B"), ("X", "Y")]
    return nodes, edges
