"""
logictree.render - Text rendering of a logic tree.

Produces one line per node with box-drawing connectors, a type symbol,
the upper-cased type and the content. Collapsed nodes show a child count
instead of their subtree.
"""

from __future__ import annotations

from logictree.graph import LogicNode, LogicTree, NodeType

EMPTY_TREE = "Empty tree"

TYPE_SYMBOLS = {
    NodeType.PROBLEM: "❗",
    NodeType.CAUSE: "⚠️",
    NodeType.EFFECT: "📊",
    NodeType.SOLUTION: "✅",
    NodeType.DECISION: "🤔",
    NodeType.OPTION: "🔗",
}

# ANSI color codes
RESET = "\033[0m"
GRAY = "\033[90m"
TYPE_COLORS = {
    NodeType.PROBLEM: "\033[31m",
    NodeType.CAUSE: "\033[33m",
    NodeType.EFFECT: "\033[35m",
    NodeType.SOLUTION: "\033[32m",
    NodeType.DECISION: "\033[34m",
    NodeType.OPTION: "\033[36m",
}

LAST_CONNECTOR = "└── "
MID_CONNECTOR = "├── "
LAST_INDENT = "    "
MID_INDENT = "│   "


def format_node_label(node: LogicNode) -> str:
    """Return ``<symbol> [<TYPE>] <content>`` for a node."""
    return f"{TYPE_SYMBOLS[node.type]} [{node.type.value.upper()}] {node.content}"


def render_tree(tree: LogicTree, use_color: bool = False) -> str:
    """Render the tree reachable from the root.

    Args:
        tree: The tree to render.
        use_color: Wrap lines in ANSI colors per node type.

    Returns:
        Multi-line string, or "Empty tree" when there is no root.
    """
    root = tree.root
    if root is None:
        return EMPTY_TREE

    lines: list[str] = []
    _render_node(tree, root, "", True, lines, use_color)
    return "\n".join(lines)


def _render_node(
    tree: LogicTree,
    node: LogicNode,
    prefix: str,
    is_last: bool,
    lines: list[str],
    use_color: bool,
) -> None:
    connector = LAST_CONNECTOR if is_last else MID_CONNECTOR
    label = format_node_label(node)
    if use_color:
        label = f"{TYPE_COLORS[node.type]}{label}{RESET}"
    lines.append(prefix + connector + label)
    if node.is_leaf:
        return

    children = list(tree.iter_children(node))

    child_prefix = prefix + (LAST_INDENT if is_last else MID_INDENT)
    if not node.expanded:
        marker = f"... ({len(children)} collapsed children)"
        if use_color:
            marker = f"{GRAY}{marker}{RESET}"
        lines.append(child_prefix + marker)
        return

    for index, child in enumerate(children):
        _render_node(tree, child, child_prefix, index == len(children) - 1, lines, use_color)


__all__ = ["render_tree", "format_node_label", "EMPTY_TREE", "TYPE_SYMBOLS"]
