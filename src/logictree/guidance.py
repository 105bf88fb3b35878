"""
logictree.guidance - Workflow state machine and next-step guidance.

The workflow state is derived from node counts on every call; nothing is
persisted between calls.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from logictree.analysis import (
    assess_feasibility,
    find_gaps,
    generate_recommendations,
    validate_mece,
)
from logictree.graph import LogicTree, NodeType
from logictree.graph.metrics import TreeStatistics

VISUALIZE_THRESHOLD = 5
MAX_TOP_RECOMMENDATIONS = 3

WORKFLOW = [
    "1. Define the main problem (add_node with nodeType='problem')",
    "2. Identify causes (add_node with nodeType='cause', parentId=problem_node)",
    "3. Develop solutions (add_node with nodeType='solution', parentId=cause_node)",
    "4. Validate with MECE analysis (analyze_tree or quick_analysis)",
    "5. Prioritize actions (suggest_actions)",
]


class TreeState(Enum):
    """Workflow stages, checked in declaration order."""

    EMPTY = "empty"
    PROBLEM_DEFINED = "problem_defined"
    CAUSES_IDENTIFIED = "causes_identified"
    SOLUTIONS_DEVELOPED = "solutions_developed"


@dataclass
class SuggestedStep:
    operation: str
    description: str
    priority: int


STATE_GUIDANCE: dict[TreeState, tuple[str, list[SuggestedStep]]] = {
    TreeState.EMPTY: (
        "Start by defining the main problem you want to analyze.",
        [SuggestedStep("add_node", "Create root problem node", 5)],
    ),
    TreeState.PROBLEM_DEFINED: (
        "Good! You have defined the problem. Now identify potential causes.",
        [SuggestedStep("add_node", "Add cause nodes to analyze root causes", 5)],
    ),
    TreeState.CAUSES_IDENTIFIED: (
        "Excellent! You have identified causes. Now develop solutions.",
        [
            SuggestedStep("add_node", "Add solution nodes for each cause", 5),
            SuggestedStep("analyze_tree", "Run MECE validation on current analysis", 3),
        ],
    ),
    TreeState.SOLUTIONS_DEVELOPED: (
        "Great! You have developed solutions. Consider analysis and prioritization.",
        [
            SuggestedStep("quick_analysis", "Get quick analysis and recommendations", 4),
            SuggestedStep("suggest_actions", "Get prioritized action recommendations", 5),
        ],
    ),
}


def classify_state(stats: TreeStatistics) -> TreeState | None:
    """Map node counts to a workflow state.

    Returns None when no state matches, e.g. a tree holding only effect,
    decision or option nodes.
    """
    problems = stats.count(NodeType.PROBLEM.value)
    causes = stats.count(NodeType.CAUSE.value)
    solutions = stats.count(NodeType.SOLUTION.value)

    if stats.total_nodes == 0:
        return TreeState.EMPTY
    if problems > 0 and causes == 0:
        return TreeState.PROBLEM_DEFINED
    if causes > 0 and solutions == 0:
        return TreeState.CAUSES_IDENTIFIED
    if solutions > 0:
        return TreeState.SOLUTIONS_DEVELOPED
    return None


def get_tree_status(tree: LogicTree) -> dict[str, Any]:
    """Current state, guidance and suggested next operations.

    An unclassified tree reports ``empty`` as its state but carries no
    guidance and no state-specific suggestions.
    """
    stats = tree.statistics()
    state = classify_state(stats)

    guidance: list[str] = []
    steps: list[SuggestedStep] = []
    if state is not None:
        text, state_steps = STATE_GUIDANCE[state]
        guidance.append(text)
        steps.extend(state_steps)

    if stats.total_nodes > VISUALIZE_THRESHOLD:
        steps.append(SuggestedStep("visualize_tree", "Visualize the complete tree structure", 2))

    # sorted() is stable, so equal priorities keep insertion order
    steps = sorted(steps, key=lambda s: s.priority, reverse=True)

    return {
        "summary": stats.summary(),
        "statistics": dict(stats.nodes_by_type),
        "currentState": (state or TreeState.EMPTY).value,
        "aiGuidance": guidance,
        "suggestedNextSteps": [asdict(s) for s in steps],
    }


def get_next_steps(tree: LogicTree) -> dict[str, Any]:
    """One concrete recommended operation plus the fixed workflow."""
    state = get_tree_status(tree)["currentState"]
    actions: list[dict[str, Any]] = []

    if state == TreeState.EMPTY.value:
        actions.append(
            {
                "operation": "add_node",
                "parameters": {"content": "[Your problem description]", "nodeType": "problem"},
                "description": "Create the root problem node",
                "reasoning": "Start analysis by clearly defining the main problem",
            }
        )
    elif state == TreeState.PROBLEM_DEFINED.value:
        problem = next(tree.nodes_by_type(NodeType.PROBLEM), None)
        if problem is not None:
            actions.append(
                {
                    "operation": "add_node",
                    "parameters": {
                        "content": "[Cause description]",
                        "nodeType": "cause",
                        "parentId": problem.id,
                    },
                    "description": "Add first cause to the problem",
                    "reasoning": "Identify root causes to understand why the problem occurs",
                }
            )
    elif state == TreeState.CAUSES_IDENTIFIED.value:
        cause = next(tree.nodes_by_type(NodeType.CAUSE), None)
        if cause is not None:
            actions.append(
                {
                    "operation": "add_node",
                    "parameters": {
                        "content": "[Solution description]",
                        "nodeType": "solution",
                        "parentId": cause.id,
                        "metadata": {"priority": 3, "feasibility": 3},
                    },
                    "description": "Add solution for the first cause",
                    "reasoning": "Develop actionable solutions to address identified causes",
                }
            )
    elif state == TreeState.SOLUTIONS_DEVELOPED.value:
        actions.append(
            {
                "operation": "quick_analysis",
                "parameters": {},
                "description": "Run quick analysis for insights",
                "reasoning": "Validate your logic tree and get recommendations",
            }
        )

    return {"recommendedActions": actions, "workflow": list(WORKFLOW)}


def quick_analysis(tree: LogicTree) -> dict[str, Any]:
    """Condensed findings, top recommendations and one guidance sentence."""
    mece = validate_mece(tree)
    gaps = find_gaps(tree)
    feasibility = assess_feasibility(tree)
    status = get_tree_status(tree)

    findings: list[str] = []
    if not mece.is_complete:
        findings.append(f"MECE issues found: {len(mece.issues)} overlaps/gaps detected")
    if gaps.missing_causes:
        findings.append(f"{len(gaps.missing_causes)} problems lack cause analysis")
    if gaps.missing_solutions:
        findings.append(f"{len(gaps.missing_solutions)} problems lack solutions")

    next_actions: list[str] = []
    if feasibility.high_priority_items:
        next_actions.append(
            f"Focus on {len(feasibility.high_priority_items)} high-priority feasible items"
        )
    if feasibility.low_feasibility_items:
        next_actions.append(
            f"Revise {len(feasibility.low_feasibility_items)} low-feasibility solutions"
        )

    guidance = (status["aiGuidance"] or ["Continue developing your logic tree."])[0]
    if status["suggestedNextSteps"]:
        guidance += f" Suggested next step: {status['suggestedNextSteps'][0]['description']}"

    return {
        "summary": status["summary"],
        "keyFindings": findings,
        "topRecommendations": generate_recommendations(tree)[:MAX_TOP_RECOMMENDATIONS],
        "nextActions": next_actions,
        "aiGuidance": guidance,
    }


__all__ = [
    "TreeState",
    "SuggestedStep",
    "classify_state",
    "get_tree_status",
    "get_next_steps",
    "quick_analysis",
    "WORKFLOW",
]
