"""Gap analysis - missing causes and solutions in the decomposition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from logictree.graph.LogicNode import LogicNode, NodeType

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree


@dataclass
class GapResult:
    """Detected gaps.

    ``missing_effects`` is part of the result shape but no rule fills it.
    """

    missing_causes: list[str] = field(default_factory=list)
    missing_effects: list[str] = field(default_factory=list)
    missing_solutions: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "missingCauses": list(self.missing_causes),
            "missingEffects": list(self.missing_effects),
            "missingSolutions": list(self.missing_solutions),
            "recommendations": list(self.recommendations),
        }


def _has_child_of_type(tree: LogicTree, node: LogicNode, node_type: NodeType) -> bool:
    return any(child.type == node_type for child in tree.iter_children(node))


def find_gaps(tree: LogicTree) -> GapResult:
    """Report problems without causes or solutions and causes without solutions.

    Only direct children are considered.
    """
    gaps = GapResult()

    for node in tree.all_nodes():
        if node.type == NodeType.PROBLEM:
            if not _has_child_of_type(tree, node, NodeType.CAUSE):
                gaps.missing_causes.append(f'Problem "{node.content}" lacks cause analysis')
            if not _has_child_of_type(tree, node, NodeType.SOLUTION):
                gaps.missing_solutions.append(f'Problem "{node.content}" lacks solutions')
        elif node.type == NodeType.CAUSE:
            if not _has_child_of_type(tree, node, NodeType.SOLUTION):
                gaps.recommendations.append(
                    f'Consider specific countermeasures for cause "{node.content}"'
                )

    return gaps


__all__ = ["GapResult", "find_gaps"]
