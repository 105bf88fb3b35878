"""Hypothesis generation.

Templated prompts keyed on node type. The output is a starting point for
exploration, not an inference about the node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from logictree.graph.LogicNode import NodeType

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree

# type -> (hypothesis templates, testing methods)
HYPOTHESIS_TEMPLATES: dict[NodeType, tuple[tuple[str, ...], tuple[str, ...]]] = {
    NodeType.PROBLEM: (
        (
            "The main cause of {content} is a combination of multiple factors",
            "{content} occurs only under specific environmental conditions",
        ),
        (
            "Data analysis to investigate correlations",
            "Experimental condition changes for verification",
        ),
    ),
    NodeType.CAUSE: (
        (
            "Removing {content} will improve the problem",
            "{content} interacts with other factors",
        ),
        (
            "A/B testing to verify causal relationships",
            "Gradual improvement implementation and effect measurement",
        ),
    ),
    NodeType.SOLUTION: (
        (
            "Implementing {content} will achieve the expected results",
            "{content} may have unexpected side effects",
        ),
        (
            "Pilot test for effect verification",
            "Risk analysis and mitigation strategy consideration",
        ),
    ),
}

GENERIC_ASSUMPTIONS = (
    "Current situation continues",
    "Available resources are limited",
    "Stakeholder cooperation is obtained",
)


@dataclass
class HypothesisResult:
    hypotheses: list[str] = field(default_factory=list)
    testing_methods: list[str] = field(default_factory=list)
    assumptions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "hypotheses": list(self.hypotheses),
            "testingMethods": list(self.testing_methods),
            "assumptions": list(self.assumptions),
        }


def generate_hypotheses(tree: LogicTree, node_id: str) -> HypothesisResult:
    """Build hypotheses, testing methods and assumptions for a node.

    Returns an all-empty result for an unknown node. Types without a
    template (effect, decision, option) only get the generic assumptions.
    """
    node = tree.find_by_id(node_id)
    if node is None:
        return HypothesisResult()

    hypotheses: list[str] = []
    methods: list[str] = []
    templates = HYPOTHESIS_TEMPLATES.get(node.type)
    if templates is not None:
        hypothesis_templates, methods_templates = templates
        hypotheses = [t.format(content=node.content) for t in hypothesis_templates]
        methods = list(methods_templates)

    return HypothesisResult(
        hypotheses=hypotheses,
        testing_methods=methods,
        assumptions=list(GENERIC_ASSUMPTIONS),
    )


__all__ = ["HypothesisResult", "generate_hypotheses", "HYPOTHESIS_TEMPLATES"]
