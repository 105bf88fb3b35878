"""Feasibility assessment over solution nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from logictree.graph.LogicNode import LogicNode, NodeType
from logictree.graph.serialize import serialize_node

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree

HIGH_PRIORITY_MIN = 4
FEASIBLE_MIN = 3
LOW_FEASIBILITY_MAX = 2


@dataclass
class FeasibilityResult:
    """Feasibility summary of all solutions.

    Attributes:
        average_feasibility: Mean of defined feasibility scores (0 if none).
        high_priority_items: Solutions with priority >= 4 and feasibility >= 3.
        low_feasibility_items: Solutions with feasibility <= 2 (undefined counts).
        recommendations: Warnings derived from the above.
    """

    average_feasibility: float = 0.0
    high_priority_items: list[LogicNode] = field(default_factory=list)
    low_feasibility_items: list[LogicNode] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "averageFeasibility": self.average_feasibility,
            "highPriorityItems": [serialize_node(n) for n in self.high_priority_items],
            "lowFeasibilityItems": [serialize_node(n) for n in self.low_feasibility_items],
            "recommendations": list(self.recommendations),
        }


def assess_feasibility(tree: LogicTree) -> FeasibilityResult:
    """Score the tree's solutions by feasibility and priority.

    Missing priority or feasibility values are treated as 0 for the
    high-priority and low-feasibility classifications.
    """
    solutions = list(tree.nodes_by_type(NodeType.SOLUTION))
    scores = [n.feasibility for n in solutions if n.feasibility is not None]

    result = FeasibilityResult(
        average_feasibility=sum(scores) / len(scores) if scores else 0,
        high_priority_items=[
            n
            for n in solutions
            if (n.priority or 0) >= HIGH_PRIORITY_MIN and (n.feasibility or 0) >= FEASIBLE_MIN
        ],
        low_feasibility_items=[n for n in solutions if (n.feasibility or 0) <= LOW_FEASIBILITY_MAX],
    )

    if result.average_feasibility < FEASIBLE_MIN:
        result.recommendations.append(
            "Overall feasibility is low. Consider more realistic solutions."
        )
    if not result.high_priority_items:
        result.recommendations.append(
            "No high-priority feasible items found. Reconsider priorities."
        )
    return result


__all__ = ["FeasibilityResult", "assess_feasibility"]
