"""Analysis module - Pure analytical functions over a LogicTree.

None of these functions mutate the tree.

Exports:
- validate_mece: Sibling overlap and decomposition breadth
- find_gaps: Missing causes / solutions
- assess_feasibility: Solution feasibility and priority
- generate_hypotheses: Templated hypotheses for a node
- assess_actionability: Concreteness score of a solution
- generate_recommendations: Cross-cutting recommendations
- analyze_tree: All of the above combined into one report
"""

from __future__ import annotations

from typing import Any

from logictree.analysis.actionability import ActionabilityResult, assess_actionability
from logictree.analysis.feasibility import FeasibilityResult, assess_feasibility
from logictree.analysis.gaps import GapResult, find_gaps
from logictree.analysis.hypotheses import HypothesisResult, generate_hypotheses
from logictree.analysis.mece import MeceResult, calculate_similarity, validate_mece
from logictree.analysis.recommendations import generate_recommendations
from logictree.graph.LogicNode import NodeType
from logictree.graph.tree import LogicTree


def analyze_tree(tree: LogicTree) -> dict[str, Any]:
    """Run every analyzer and combine the results.

    ``maxDepth`` counts levels (deepest cached level + 1), 0 for an empty
    tree.
    """
    stats = tree.statistics()
    return {
        "totalNodes": stats.total_nodes,
        "maxDepth": stats.max_depth + 1 if stats.total_nodes else 0,
        "nodesByType": dict(stats.nodes_by_type),
        "nodesByLevel": dict(stats.nodes_by_level),
        "hasRoot": tree.has_root,
        "rootNodeId": tree.root_id,
        "meceAnalysis": validate_mece(tree).to_dict(),
        "gapAnalysis": find_gaps(tree).to_dict(),
        "feasibilityAnalysis": assess_feasibility(tree).to_dict(),
        "actionability": {
            node.id: assess_actionability(tree, node.id).to_dict()
            for node in tree.nodes_by_type(NodeType.SOLUTION)
        },
        "orphanedNodes": [node.id for node in tree.orphaned_nodes()],
        "recommendations": generate_recommendations(tree),
    }


__all__ = [
    "ActionabilityResult",
    "FeasibilityResult",
    "GapResult",
    "HypothesisResult",
    "MeceResult",
    "analyze_tree",
    "assess_actionability",
    "assess_feasibility",
    "calculate_similarity",
    "find_gaps",
    "generate_hypotheses",
    "generate_recommendations",
    "validate_mece",
]
