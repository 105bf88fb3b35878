"""logictree.mcp.server - MCP server implementation.

Creates and runs the MCP server exposing the logic tree as a single
``logictree`` tool. Each call names one operation; the handler for that
operation reads or writes the session's LogicTree and returns a JSON
payload wrapped in a common envelope.

Not-found conditions are soft (``success: False``); request validation
failures and handler failures produce the error envelope.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

try:
    from mcp.server.fastmcp import FastMCP

    MCP_AVAILABLE = True
except ImportError:
    MCP_AVAILABLE = False
    FastMCP = None

from logictree.analysis import (
    analyze_tree,
    assess_feasibility,
    generate_hypotheses,
    generate_recommendations,
)
from logictree.config import LogicTreeConfig, get_config
from logictree.graph import LogicTree
from logictree.graph.serialize import (
    serialize_mutation_entry,
    serialize_optional_node,
    serialize_tree_info,
    serialize_tree_structure,
)
from logictree.guidance import get_next_steps, get_tree_status, quick_analysis
from logictree.mcp.requests import (
    LogicTreeRequest,
    RequestValidationError,
    validate_request,
)
from logictree.render import render_tree

# ─────────────────────────────────────────────────────────────────────────────
# Mutation Handlers
# ─────────────────────────────────────────────────────────────────────────────


def _last_mutation(tree: LogicTree) -> dict[str, Any] | None:
    entry = tree.mutation_log.last()
    return serialize_mutation_entry(entry) if entry else None


def _add_node(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    """Create a node; an unknown parentId is recorded, not rejected."""
    node = tree.add_node(
        request.content,
        request.node_type,
        parent_id=request.parent_id,
        metadata=request.metadata,
    )
    parent = tree.find_by_id(request.parent_id) if request.parent_id else None
    return {
        "success": True,
        "nodeId": node.id,
        "nodeDetails": serialize_optional_node(node),
        "parentNode": serialize_optional_node(parent),
        "mutation": _last_mutation(tree),
    }


def _remove_node(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    """Remove a node and its subtree."""
    removed_node = serialize_optional_node(tree.find_by_id(request.node_id))
    removed = tree.remove_node(request.node_id)
    result: dict[str, Any] = {
        "success": removed,
        "nodeId": request.node_id,
        "removedNode": removed_node,
    }
    if removed:
        result["mutation"] = _last_mutation(tree)
    return result


def _move_node(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    """Move a node; refused moves leave the tree untouched."""
    node = tree.find_by_id(request.node_id)
    old_parent = tree.find_by_id(node.parent_id) if node and node.parent_id else None
    old_parent_data = serialize_optional_node(old_parent)

    moved = tree.move_node(request.node_id, request.new_parent_id)
    new_parent = tree.find_by_id(request.new_parent_id) if request.new_parent_id else None

    result: dict[str, Any] = {
        "success": moved,
        "nodeId": request.node_id,
        "movedNode": serialize_optional_node(tree.find_by_id(request.node_id)),
        "oldParent": old_parent_data,
        "newParent": serialize_optional_node(new_parent),
    }
    if moved:
        result["mutation"] = _last_mutation(tree)
    elif (
        node is not None
        and new_parent is not None
        and tree.would_create_cycle(request.node_id, request.new_parent_id)
    ):
        result["error"] = (
            f"Moving {request.node_id} under {request.new_parent_id} would create a cycle"
        )
    return result


def _update_node(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    """Replace content and, when supplied, all metadata fields."""
    updated = tree.update_node(request.node_id, request.content, request.metadata)
    result: dict[str, Any] = {
        "success": updated,
        "nodeId": request.node_id,
        "updatedNode": serialize_optional_node(tree.find_by_id(request.node_id)),
    }
    if updated:
        result["mutation"] = _last_mutation(tree)
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Read-only Handlers
# ─────────────────────────────────────────────────────────────────────────────


def _visualize_tree(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {
        "tree": render_tree(tree),
        "treeStructure": serialize_tree_structure(tree),
    }


def _analyze_tree(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {
        "analysis": analyze_tree(tree),
        "treeStructure": serialize_tree_structure(tree),
    }


def _generate_hypotheses(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {
        "success": True,
        "nodeId": request.node_id,
        "hypotheses": generate_hypotheses(tree, request.node_id).to_dict(),
    }


def _suggest_actions(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {
        "success": True,
        "suggestions": generate_recommendations(tree),
        "feasibilityAnalysis": assess_feasibility(tree).to_dict(),
    }


def _get_status(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {"success": True, "status": get_tree_status(tree)}


def _next_steps(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {"success": True, "nextSteps": get_next_steps(tree)}


def _quick_analysis(tree: LogicTree, request: LogicTreeRequest) -> dict[str, Any]:
    return {"success": True, "analysis": quick_analysis(tree)}


HANDLERS: dict[str, Callable[[LogicTree, LogicTreeRequest], dict[str, Any]]] = {
    "add_node": _add_node,
    "remove_node": _remove_node,
    "move_node": _move_node,
    "update_node": _update_node,
    "visualize_tree": _visualize_tree,
    "analyze_tree": _analyze_tree,
    "generate_hypotheses": _generate_hypotheses,
    "suggest_actions": _suggest_actions,
    "get_status": _get_status,
    "next_steps": _next_steps,
    "quick_analysis": _quick_analysis,
}


# ─────────────────────────────────────────────────────────────────────────────
# Dispatch
# ─────────────────────────────────────────────────────────────────────────────


def _echo_visualization(tree_text: str, config: LogicTreeConfig) -> None:
    """Print the rendered tree to stderr (stdout carries the protocol)."""
    header = "🌳 Logic Tree Visualization:"
    if config.use_color(sys.stderr.isatty()):
        header = f"\033[36m{header}\033[0m"
    print(header, file=sys.stderr)
    print(tree_text, file=sys.stderr)


def _error_response(tree: LogicTree, message: str) -> dict[str, Any]:
    return {
        "operation": "error",
        "timestamp": datetime.now().isoformat(),
        "error": message,
        "status": "failed",
        "isError": True,
        "treeInfo": serialize_tree_info(tree),
    }


def process_logic_tree(
    tree: LogicTree,
    arguments: Any,
    config: LogicTreeConfig | None = None,
) -> dict[str, Any]:
    """Validate and execute one logictree request.

    Args:
        tree: The session's tree.
        arguments: Raw tool arguments.
        config: Resolved configuration (defaults when None).

    Returns:
        Response envelope: operation, timestamp, treeInfo plus the
        operation's payload, or the error envelope for invalid requests
        and for handlers that fail on the current tree.
    """
    config = config or LogicTreeConfig()
    try:
        request = validate_request(arguments)
    except RequestValidationError as e:
        return _error_response(tree, str(e))

    result: dict[str, Any] = {
        "operation": request.operation,
        "timestamp": datetime.now().isoformat(),
        "treeInfo": serialize_tree_info(tree),
    }
    try:
        result.update(HANDLERS[request.operation](tree, request))
    except (ValueError, TypeError, KeyError) as e:
        return _error_response(tree, f"{request.operation} failed: {e}")

    if request.operation == "visualize_tree" and not config.disable_tree_logging:
        _echo_visualization(
            render_tree(tree, use_color=config.use_color(sys.stderr.isatty())), config
        )

    return result


# ─────────────────────────────────────────────────────────────────────────────
# MCP Server Factory
# ─────────────────────────────────────────────────────────────────────────────

MCP_SERVER_INSTRUCTIONS = """\
# Logic Tree Analyst

Hierarchical problem analysis: break a problem into causes and solutions,
check the decomposition (MECE), find gaps and prioritize actions. The tree
lives in memory for the lifetime of this server.

## Start here
- `{"operation": "get_status"}` - current state, guidance, suggested next operations
- `{"operation": "next_steps"}` - one concrete action with a parameter template
- `{"operation": "quick_analysis"}` - condensed findings after each major change

## Building the tree
- `add_node` (content, nodeType, parentId?, metadata?) - omit parentId for the root
- `update_node` (nodeId, content, metadata?) - metadata replaces all six fields
- `move_node` (nodeId, newParentId?) - omit newParentId to make the node the root
- `remove_node` (nodeId) - removes the whole subtree
- `visualize_tree` - text drawing of the tree

## Analysis
- `analyze_tree` - MECE, gaps, feasibility, actionability, recommendations
- `generate_hypotheses` (nodeId) - templated hypotheses and testing methods
- `suggest_actions` - prioritized recommendations with feasibility

Node types: problem, cause, effect, solution, decision, option.
Metadata: confidence (0-1), priority (1-5), feasibility (1-5), evidence,
assumptions, tags.

Example:
`{"operation": "add_node", "content": "Low website conversion", "nodeType": "problem"}`
"""


def create_server(
    tree: LogicTree | None = None,
    config: LogicTreeConfig | None = None,
    working_dir: Path | None = None,
) -> FastMCP:
    """Create the MCP server with the logictree tool registered.

    Args:
        tree: Optional pre-built tree (for testing).
        config: Optional resolved configuration.
        working_dir: Directory to load configuration from.

    Returns:
        FastMCP server instance.
    """
    if not MCP_AVAILABLE:
        raise ImportError("MCP dependencies not installed. Install with: pip install logictree[mcp]")

    if config is None:
        config = get_config(start_path=working_dir)

    mcp = FastMCP(config.server_name, instructions=MCP_SERVER_INSTRUCTIONS)

    # One tree per server session, captured by the tool closure
    _state: dict[str, Any] = {
        "tree": tree if tree is not None else LogicTree(),
        "config": config,
    }

    @mcp.tool()
    def logictree(
        operation: str,
        nodeId: str | None = None,  # noqa: N803
        content: str | None = None,
        nodeType: str | None = None,  # noqa: N803
        parentId: str | None = None,  # noqa: N803
        newParentId: str | None = None,  # noqa: N803
        metadata: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Operate on the logic tree. Start with operation='get_status'.

        Args:
            operation: One of add_node, remove_node, move_node, update_node,
                visualize_tree, analyze_tree, generate_hypotheses,
                suggest_actions, get_status, next_steps, quick_analysis.
            nodeId: Target node (remove/move/update/generate_hypotheses).
            content: Node text (add_node, update_node).
            nodeType: problem, cause, effect, solution, decision or option.
            parentId: Parent node for add_node (omit for the root).
            newParentId: Destination for move_node (omit to make root).
            metadata: confidence, priority, feasibility, evidence,
                assumptions, tags.
        """
        arguments = {
            "operation": operation,
            "nodeId": nodeId,
            "content": content,
            "nodeType": nodeType,
            "parentId": parentId,
            "newParentId": newParentId,
            "metadata": metadata,
        }
        arguments = {k: v for k, v in arguments.items() if v is not None}
        return process_logic_tree(_state["tree"], arguments, _state["config"])

    return mcp


def run_server(
    working_dir: Path | None = None,
    transport: str | None = None,
) -> None:
    """Run the MCP server.

    Args:
        working_dir: Directory to load configuration from.
        transport: Transport type ('stdio' or 'sse'); config default when None.
    """
    config = get_config(start_path=working_dir)
    mcp = create_server(config=config)
    print(f"Logic Tree MCP Server running on {transport or config.transport}", file=sys.stderr)
    mcp.run(transport=transport or config.transport)
