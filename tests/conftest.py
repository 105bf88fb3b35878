"""Shared fixtures for logictree tests."""

import pytest

from logictree.graph import LogicTree, NodeMetadata, NodeType


@pytest.fixture
def empty_tree():
    """A tree with no nodes."""
    return LogicTree()


@pytest.fixture
def conversion_tree():
    """Problem -> two causes -> one solution each.

    node_1 problem "Low conversion rate"
    node_2   cause "Slow page load"
    node_3     solution "Reduce load time to 2s within 2 weeks" (p5, f4)
    node_4   cause "Weak call to action"
    node_5     solution "Optimize the homepage" (p2, f2)
    """
    tree = LogicTree()
    problem = tree.add_node("Low conversion rate", NodeType.PROBLEM)
    slow = tree.add_node("Slow page load", NodeType.CAUSE, parent_id=problem.id)
    tree.add_node(
        "Reduce load time to 2s within 2 weeks",
        NodeType.SOLUTION,
        parent_id=slow.id,
        metadata=NodeMetadata(priority=5, feasibility=4),
    )
    weak = tree.add_node("Weak call to action", NodeType.CAUSE, parent_id=problem.id)
    tree.add_node(
        "Optimize the homepage",
        NodeType.SOLUTION,
        parent_id=weak.id,
        metadata=NodeMetadata(priority=2, feasibility=2),
    )
    return tree
