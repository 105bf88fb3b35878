"""Tests for MECE validation and gap analysis."""

import pytest

from logictree.analysis import calculate_similarity, find_gaps, validate_mece
from logictree.analysis.mece import is_overlap
from logictree.graph import LogicTree, NodeType

# ─────────────────────────────────────────────────────────────────────────────
# Similarity
# ─────────────────────────────────────────────────────────────────────────────


class TestCalculateSimilarity:
    def test_identical_texts(self):
        assert calculate_similarity("slow page load", "slow page load") == 1.0

    def test_case_insensitive(self):
        assert calculate_similarity("Slow Page", "slow page") == 1.0

    def test_disjoint_texts(self):
        assert calculate_similarity("slow page load", "weak call to action") == 0.0

    def test_reordered_words(self):
        """Word order does not matter, extra words dilute the score."""
        assert calculate_similarity("slow page load", "page load is slow") == pytest.approx(0.75)

    def test_repeated_words_make_it_asymmetric(self):
        assert calculate_similarity("a a b", "a c") == pytest.approx(2 / 3)
        assert calculate_similarity("a c", "a a b") == pytest.approx(1 / 3)

    def test_overlap_takes_larger_direction(self):
        assert is_overlap("a a b", "a c", threshold=0.5) is True
        assert is_overlap("a c", "a a b", threshold=0.5) is True

    def test_threshold_is_exclusive(self):
        assert is_overlap("a b c d", "a b c x e", threshold=0.6) is False


# ─────────────────────────────────────────────────────────────────────────────
# validate_mece
# ─────────────────────────────────────────────────────────────────────────────


class TestValidateMece:
    def test_overlapping_siblings_flagged(self, empty_tree):
        root = empty_tree.add_node("Low conversion rate", NodeType.PROBLEM)
        empty_tree.add_node("slow page load", NodeType.CAUSE, parent_id=root.id)
        empty_tree.add_node("page load is slow", NodeType.CAUSE, parent_id=root.id)
        empty_tree.add_node("weak call to action", NodeType.CAUSE, parent_id=root.id)

        result = validate_mece(empty_tree)

        assert result.has_overlaps is True
        assert result.is_complete is False
        assert result.issues == ['Potential overlap: "slow page load" and "page load is slow"']
        assert result.suggestions == []

    def test_distinct_siblings_pass(self, conversion_tree):
        result = validate_mece(conversion_tree)

        assert result.is_complete is True
        assert result.has_overlaps is False
        assert result.issues == []

    def test_two_branch_problem_gets_breadth_suggestion(self, conversion_tree):
        result = validate_mece(conversion_tree)
        assert result.suggestions == [
            'Problem "Low conversion rate" decomposition may need more detail'
        ]

    def test_single_child_not_checked(self, empty_tree):
        """Only nodes with more than one child are inspected."""
        root = empty_tree.add_node("Problem", NodeType.PROBLEM)
        empty_tree.add_node("Cause", NodeType.CAUSE, parent_id=root.id)

        result = validate_mece(empty_tree)
        assert result.suggestions == []
        assert result.is_complete is True

    def test_breadth_suggestion_only_for_problems(self, empty_tree):
        cause = empty_tree.add_node("Cause", NodeType.CAUSE)
        empty_tree.add_node("Fix server", NodeType.SOLUTION, parent_id=cause.id)
        empty_tree.add_node("Add caching", NodeType.SOLUTION, parent_id=cause.id)

        assert validate_mece(empty_tree).suggestions == []

    def test_to_dict_keys(self, conversion_tree):
        data = validate_mece(conversion_tree).to_dict()
        assert set(data) == {"isComplete", "hasOverlaps", "issues", "suggestions"}

    def test_does_not_mutate(self, conversion_tree):
        log_size = len(conversion_tree.mutation_log)
        validate_mece(conversion_tree)
        assert len(conversion_tree.mutation_log) == log_size


# ─────────────────────────────────────────────────────────────────────────────
# find_gaps
# ─────────────────────────────────────────────────────────────────────────────


class TestFindGaps:
    def test_childless_problem_lacks_causes_and_solutions(self, empty_tree):
        empty_tree.add_node("Low conversion rate", NodeType.PROBLEM)

        gaps = find_gaps(empty_tree)

        assert gaps.missing_causes == ['Problem "Low conversion rate" lacks cause analysis']
        assert gaps.missing_solutions == ['Problem "Low conversion rate" lacks solutions']
        assert gaps.missing_effects == []

    def test_only_direct_children_count(self, conversion_tree):
        """Solutions under causes do not count as problem solutions."""
        gaps = find_gaps(conversion_tree)

        assert gaps.missing_causes == []
        assert gaps.missing_solutions == ['Problem "Low conversion rate" lacks solutions']

    def test_cause_without_solution_gets_recommendation(self, empty_tree):
        root = empty_tree.add_node("Problem", NodeType.PROBLEM)
        empty_tree.add_node("Slow page load", NodeType.CAUSE, parent_id=root.id)

        gaps = find_gaps(empty_tree)
        assert gaps.recommendations == [
            'Consider specific countermeasures for cause "Slow page load"'
        ]

    def test_empty_tree_has_no_gaps(self):
        data = find_gaps(LogicTree()).to_dict()
        assert data == {
            "missingCauses": [],
            "missingEffects": [],
            "missingSolutions": [],
            "recommendations": [],
        }
