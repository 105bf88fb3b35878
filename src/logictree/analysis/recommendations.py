"""Recommendation synthesis across problems and solutions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from logictree.graph.LogicNode import NodeType

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree


def generate_recommendations(tree: LogicTree) -> list[str]:
    """Return coverage, feasibility and "start here" recommendations.

    A solution with no feasibility score (or a score of 0) counts as low
    feasibility.
    """
    recommendations: list[str] = []
    problems = list(tree.nodes_by_type(NodeType.PROBLEM))
    solutions = list(tree.nodes_by_type(NodeType.SOLUTION))

    if len(problems) > len(solutions):
        recommendations.append(
            "Solutions are insufficient for the problems. "
            "Consider specific countermeasures for each problem."
        )

    if any(not n.feasibility or n.feasibility < 3 for n in solutions):
        recommendations.append(
            "There are solutions with low feasibility. Consider more realistic alternatives."
        )

    high_priority = [n for n in solutions if (n.priority or 0) >= 4]
    if high_priority:
        recommendations.append(
            "Recommend starting with high-priority items: "
            + ", ".join(n.content for n in high_priority)
        )

    return recommendations


__all__ = ["generate_recommendations"]
