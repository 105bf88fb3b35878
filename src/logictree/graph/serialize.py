"""Graph Serialization - Export LogicTree to JSON-compatible dicts.

Keys use the camelCase wire names that callers of the logictree tool see
(parentId, createdAt, ...).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logictree.graph.LogicNode import LogicNode
    from logictree.graph.mutations import MutationEntry
    from logictree.graph.tree import LogicTree


def serialize_node(node: LogicNode) -> dict[str, Any]:
    """Serialize a LogicNode to a JSON-compatible dict.

    Args:
        node: The node to serialize.

    Returns:
        Dict suitable for JSON serialization.
    """
    return {
        "id": node.id,
        "content": node.content,
        "type": node.type.value,
        "parentId": node.parent_id,
        "children": list(node.children),
        "level": node.level,
        "expanded": node.expanded,
        "confidence": node.confidence,
        "priority": node.priority,
        "feasibility": node.feasibility,
        "evidence": list(node.evidence) if node.evidence is not None else None,
        "assumptions": list(node.assumptions) if node.assumptions is not None else None,
        "tags": list(node.tags) if node.tags is not None else None,
        "createdAt": node.created_at.isoformat(),
        "updatedAt": node.updated_at.isoformat(),
    }


def serialize_optional_node(node: LogicNode | None) -> dict[str, Any] | None:
    """Serialize a node, passing None through."""
    return serialize_node(node) if node is not None else None


def serialize_tree_structure(tree: LogicTree) -> dict[str, dict[str, Any]]:
    """Serialize every node (unreachable ones included) keyed by id."""
    return {node.id: serialize_node(node) for node in tree.all_nodes()}


def serialize_tree_info(tree: LogicTree) -> dict[str, Any]:
    """Basic tree counters included in every response envelope."""
    return {
        "totalNodes": tree.node_count(),
        "rootNodeId": tree.root_id,
        "hasRoot": tree.has_root,
    }


def serialize_mutation_entry(entry: MutationEntry) -> dict[str, Any]:
    """Serialize a MutationEntry for audit output."""
    return {
        "id": entry.id,
        "operation": entry.operation,
        "target_id": entry.target_id,
        "before_state": entry.before_state,
        "after_state": entry.after_state,
        "timestamp": entry.timestamp.isoformat(),
    }


__all__ = [
    "serialize_node",
    "serialize_optional_node",
    "serialize_tree_structure",
    "serialize_tree_info",
    "serialize_mutation_entry",
]
