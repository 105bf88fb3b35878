"""
logictree.mcp.requests - Request validation for the logictree tool.

Validation runs before any handler touches the tree, so a rejected
request never leaves a partial change behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from logictree.graph import NodeMetadata, NodeType

OPERATIONS = (
    "add_node",
    "remove_node",
    "move_node",
    "update_node",
    "visualize_tree",
    "analyze_tree",
    "generate_hypotheses",
    "suggest_actions",
    "get_status",
    "next_steps",
    "quick_analysis",
)

# operation -> request fields that must be present and non-empty
REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "add_node": ("content", "nodeType"),
    "remove_node": ("nodeId",),
    "move_node": ("nodeId",),
    "update_node": ("nodeId", "content"),
    "generate_hypotheses": ("nodeId",),
}

SCORE_FIELDS = ("confidence", "priority", "feasibility")
LIST_FIELDS = ("evidence", "assumptions", "tags")

_FIELD_ATTRS = {
    "nodeId": "node_id",
    "content": "content",
    "nodeType": "node_type",
}


class RequestValidationError(ValueError):
    """Raised when a request is malformed or misses a required field."""


@dataclass
class LogicTreeRequest:
    """A validated logictree request.

    Attributes:
        operation: One of OPERATIONS.
        node_id: Target node (remove/move/update/generate_hypotheses).
        content: Node text (add/update).
        node_type: Node category (add).
        parent_id: Parent for add_node; None creates a root.
        new_parent_id: Destination for move_node; None makes the node root.
        metadata: Parsed metadata object, None when not supplied.
    """

    operation: str
    node_id: str | None = None
    content: str | None = None
    node_type: NodeType | None = None
    parent_id: str | None = None
    new_parent_id: str | None = None
    metadata: NodeMetadata | None = None


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RequestValidationError(f"Invalid {key}: must be a string")
    return value


def _check_metadata_types(raw: dict[str, Any]) -> None:
    """Reject metadata values of the wrong type. Ranges are not checked."""
    for key in SCORE_FIELDS:
        value = raw.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise RequestValidationError(f"Invalid metadata.{key}: must be a number")
    for key in LIST_FIELDS:
        value = raw.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise RequestValidationError(f"Invalid metadata.{key}: must be a list of strings")


def validate_request(data: Any) -> LogicTreeRequest:
    """Validate raw tool arguments.

    Args:
        data: Arguments as received from the caller.

    Returns:
        LogicTreeRequest with typed fields.

    Raises:
        RequestValidationError: Unknown operation, wrong field types, or a
            required field missing for the chosen operation.
    """
    if not isinstance(data, dict):
        raise RequestValidationError("Invalid request: arguments must be an object")

    operation = data.get("operation")
    if not operation or not isinstance(operation, str):
        raise RequestValidationError("Invalid operation: must be a string")
    if operation not in OPERATIONS:
        raise RequestValidationError(f"Invalid operation: must be one of {', '.join(OPERATIONS)}")

    # nodeType is only read by add_node
    node_type = None
    raw_type = data.get("nodeType")
    if operation == "add_node" and raw_type:
        try:
            node_type = NodeType(raw_type)
        except ValueError:
            raise RequestValidationError(
                f"Invalid nodeType: must be one of {', '.join(NodeType.values())}"
            ) from None

    metadata = None
    raw_metadata = data.get("metadata")
    if raw_metadata is not None:
        if not isinstance(raw_metadata, dict):
            raise RequestValidationError("Invalid metadata: must be an object")
        _check_metadata_types(raw_metadata)
        metadata = NodeMetadata.from_dict(raw_metadata)

    request = LogicTreeRequest(
        operation=operation,
        node_id=_optional_str(data, "nodeId"),
        content=_optional_str(data, "content"),
        node_type=node_type,
        parent_id=_optional_str(data, "parentId"),
        new_parent_id=_optional_str(data, "newParentId"),
        metadata=metadata,
    )

    required = REQUIRED_FIELDS.get(operation, ())
    if any(not getattr(request, _FIELD_ATTRS[name]) for name in required):
        raise RequestValidationError(f"{operation} requires {' and '.join(required)}")

    return request


__all__ = [
    "OPERATIONS",
    "LogicTreeRequest",
    "RequestValidationError",
    "validate_request",
]
