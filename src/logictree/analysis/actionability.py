"""Actionability scoring for solution nodes.

A solution starts at 5 and loses points for abstract verbs, missing
measurable targets and missing deadline wording. The floor is 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from logictree.graph.LogicNode import NodeType

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree

MAX_SCORE = 5
MIN_SCORE = 1

ABSTRACT_WORDS = ("improve", "enhance", "optimize", "strengthen", "consider", "review")
METRIC_PATTERN = re.compile(r"\d+|%|\$|time|day|hour|week|month")
DEADLINE_MARKERS = ("by", "within", "deadline")

# (points, issue, suggestion)
ABSTRACT_DEDUCTION = (2, "Contains abstract expressions", "Define more concrete actions (who, when, how)")
METRIC_DEDUCTION = (1, "No measurable goals set", "Set quantitative target values")
DEADLINE_DEDUCTION = (1, "Deadline is not clear", "Clarify execution deadline")


@dataclass
class ActionabilityResult:
    score: int = 0
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "actionabilityScore": self.score,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


def score_content(content: str) -> ActionabilityResult:
    """Score a solution description."""
    text = content.lower()
    result = ActionabilityResult(score=MAX_SCORE)

    deductions = []
    if any(word in text for word in ABSTRACT_WORDS):
        deductions.append(ABSTRACT_DEDUCTION)
    if not METRIC_PATTERN.search(text):
        deductions.append(METRIC_DEDUCTION)
    # Plain substring match, so "by" also hits words like "maybe".
    if not any(marker in text for marker in DEADLINE_MARKERS):
        deductions.append(DEADLINE_DEDUCTION)

    for points, issue, suggestion in deductions:
        result.score -= points
        result.issues.append(issue)
        result.suggestions.append(suggestion)

    result.score = max(MIN_SCORE, result.score)
    return result


def assess_actionability(tree: LogicTree, node_id: str) -> ActionabilityResult:
    """Score a solution node; other or missing nodes score 0."""
    node = tree.find_by_id(node_id)
    if node is None or node.type != NodeType.SOLUTION:
        return ActionabilityResult(score=0, issues=["Target node is not a solution"])
    return score_content(node.content)


__all__ = ["ActionabilityResult", "assess_actionability", "score_content"]
