"""Tests for feasibility, actionability, hypotheses and recommendations."""

import pytest

from logictree.analysis import (
    analyze_tree,
    assess_actionability,
    assess_feasibility,
    generate_hypotheses,
    generate_recommendations,
)
from logictree.analysis.actionability import score_content
from logictree.graph import LogicTree, NodeMetadata, NodeType


@pytest.fixture
def scored_solutions():
    """A problem with three solutions of feasibility 4, 2 and 5."""
    tree = LogicTree()
    root = tree.add_node("Churn is rising", NodeType.PROBLEM)
    for content, feasibility in [("Onboarding emails", 4), ("Rebuild app", 2), ("Fix billing bug", 5)]:
        tree.add_node(
            content,
            NodeType.SOLUTION,
            parent_id=root.id,
            metadata=NodeMetadata(priority=3, feasibility=feasibility),
        )
    return tree


# ─────────────────────────────────────────────────────────────────────────────
# Feasibility
# ─────────────────────────────────────────────────────────────────────────────


class TestAssessFeasibility:
    def test_average_and_low_items(self, scored_solutions):
        result = assess_feasibility(scored_solutions)

        assert result.average_feasibility == pytest.approx(11 / 3)
        assert [n.content for n in result.low_feasibility_items] == ["Rebuild app"]

    def test_no_high_priority_warning(self, scored_solutions):
        result = assess_feasibility(scored_solutions)

        assert result.high_priority_items == []
        assert result.recommendations == [
            "No high-priority feasible items found. Reconsider priorities."
        ]

    def test_high_priority_requires_feasibility(self, conversion_tree):
        result = assess_feasibility(conversion_tree)

        assert [n.id for n in result.high_priority_items] == ["node_3"]
        assert [n.id for n in result.low_feasibility_items] == ["node_5"]
        assert result.average_feasibility == pytest.approx(3.0)
        assert result.recommendations == []

    def test_no_solutions(self, empty_tree):
        """An empty tree averages 0 and gets both warnings."""
        result = assess_feasibility(empty_tree)

        assert result.average_feasibility == 0
        assert result.recommendations == [
            "Overall feasibility is low. Consider more realistic solutions.",
            "No high-priority feasible items found. Reconsider priorities.",
        ]

    def test_unscored_solution_counts_as_low(self, empty_tree):
        empty_tree.add_node("Something", NodeType.SOLUTION)
        result = assess_feasibility(empty_tree)

        assert result.average_feasibility == 0
        assert len(result.low_feasibility_items) == 1

    def test_to_dict_serializes_nodes(self, conversion_tree):
        data = assess_feasibility(conversion_tree).to_dict()

        assert data["highPriorityItems"][0]["id"] == "node_3"
        assert data["lowFeasibilityItems"][0]["feasibility"] == 2


# ─────────────────────────────────────────────────────────────────────────────
# Actionability
# ─────────────────────────────────────────────────────────────────────────────


class TestActionability:
    def test_vague_solution_scores_low(self):
        result = score_content("Optimize the homepage")

        assert result.score == 1
        assert result.issues == [
            "Contains abstract expressions",
            "No measurable goals set",
            "Deadline is not clear",
        ]
        assert result.suggestions[0] == "Define more concrete actions (who, when, how)"

    def test_concrete_solution_scores_full(self):
        result = score_content("Reduce load time to 2s within 2 weeks")

        assert result.score == 5
        assert result.issues == []

    def test_metric_without_deadline(self):
        result = score_content("Cut bounce rate by 10%")
        assert result.score == 5

        result = score_content("Cut bounce rate 10%")
        assert result.score == 4
        assert result.issues == ["Deadline is not clear"]

    def test_score_never_below_one(self):
        assert score_content("Improve and enhance everything").score == 1

    def test_non_solution_node(self, conversion_tree):
        result = assess_actionability(conversion_tree, "node_2")

        assert result.score == 0
        assert result.issues == ["Target node is not a solution"]

    def test_missing_node(self, conversion_tree):
        assert assess_actionability(conversion_tree, "node_99").score == 0

    def test_solution_node(self, conversion_tree):
        data = assess_actionability(conversion_tree, "node_3").to_dict()
        assert data["actionabilityScore"] == 5


# ─────────────────────────────────────────────────────────────────────────────
# Hypotheses
# ─────────────────────────────────────────────────────────────────────────────


class TestGenerateHypotheses:
    def test_problem_templates(self, conversion_tree):
        result = generate_hypotheses(conversion_tree, "node_1")

        assert result.hypotheses == [
            "The main cause of Low conversion rate is a combination of multiple factors",
            "Low conversion rate occurs only under specific environmental conditions",
        ]
        assert len(result.testing_methods) == 2
        assert len(result.assumptions) == 3

    def test_cause_templates(self, conversion_tree):
        result = generate_hypotheses(conversion_tree, "node_2")
        assert result.hypotheses[0] == "Removing Slow page load will improve the problem"
        assert result.testing_methods[0] == "A/B testing to verify causal relationships"

    def test_solution_templates(self, conversion_tree):
        result = generate_hypotheses(conversion_tree, "node_5")
        assert result.hypotheses[1] == "Optimize the homepage may have unexpected side effects"

    def test_untemplated_type_gets_assumptions_only(self, empty_tree):
        node = empty_tree.add_node("Choose a vendor", NodeType.DECISION)
        result = generate_hypotheses(empty_tree, node.id)

        assert result.hypotheses == []
        assert result.testing_methods == []
        assert result.assumptions == [
            "Current situation continues",
            "Available resources are limited",
            "Stakeholder cooperation is obtained",
        ]

    def test_missing_node_is_empty(self, empty_tree):
        assert generate_hypotheses(empty_tree, "node_1").to_dict() == {
            "hypotheses": [],
            "testingMethods": [],
            "assumptions": [],
        }


# ─────────────────────────────────────────────────────────────────────────────
# Recommendations and full analysis
# ─────────────────────────────────────────────────────────────────────────────


class TestGenerateRecommendations:
    def test_conversion_tree(self, conversion_tree):
        assert generate_recommendations(conversion_tree) == [
            "There are solutions with low feasibility. Consider more realistic alternatives.",
            "Recommend starting with high-priority items: Reduce load time to 2s within 2 weeks",
        ]

    def test_more_problems_than_solutions(self, empty_tree):
        empty_tree.add_node("Problem", NodeType.PROBLEM)
        recs = generate_recommendations(empty_tree)
        assert recs == [
            "Solutions are insufficient for the problems. "
            "Consider specific countermeasures for each problem."
        ]

    def test_empty_tree(self, empty_tree):
        assert generate_recommendations(empty_tree) == []


class TestAnalyzeTree:
    def test_report_shape(self, conversion_tree):
        report = analyze_tree(conversion_tree)

        assert report["totalNodes"] == 5
        assert report["maxDepth"] == 3
        assert report["nodesByType"] == {"problem": 1, "cause": 2, "solution": 2}
        assert report["nodesByLevel"] == {0: 1, 1: 2, 2: 2}
        assert report["hasRoot"] is True
        assert report["rootNodeId"] == "node_1"
        assert report["orphanedNodes"] == []
        assert report["actionability"]["node_3"]["actionabilityScore"] == 5
        assert report["actionability"]["node_5"]["actionabilityScore"] == 1
        assert report["meceAnalysis"]["isComplete"] is True

    def test_empty_tree(self, empty_tree):
        report = analyze_tree(empty_tree)

        assert report["totalNodes"] == 0
        assert report["maxDepth"] == 0
        assert report["hasRoot"] is False
        assert report["actionability"] == {}

    def test_orphans_reported(self, conversion_tree):
        conversion_tree.add_node("Stray", NodeType.CAUSE, parent_id="node_77")
        assert analyze_tree(conversion_tree)["orphanedNodes"] == ["node_6"]
