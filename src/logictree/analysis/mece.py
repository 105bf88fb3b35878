"""MECE validation - sibling overlap and decomposition breadth checks.

Similarity is a shallow lexical heuristic: the share of one sibling's
lower-cased, whitespace-separated words that also occur in the other.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from logictree.graph.LogicNode import NodeType

if TYPE_CHECKING:
    from logictree.graph.tree import LogicTree

OVERLAP_THRESHOLD = 0.7
MIN_PROBLEM_BRANCHES = 3

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class MeceResult:
    """Outcome of a MECE check.

    Attributes:
        is_complete: True when no overlap issues were found.
        has_overlaps: True when at least one sibling pair overlaps.
        issues: One message per overlapping sibling pair.
        suggestions: Breadth suggestions for thin problem decompositions.
    """

    is_complete: bool = True
    has_overlaps: bool = False
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isComplete": self.is_complete,
            "hasOverlaps": self.has_overlaps,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


def _tokenize(text: str) -> list[str]:
    # Leading/trailing whitespace yields empty tokens, so the list is never empty.
    return _WHITESPACE_RE.split(text.lower())


def calculate_similarity(text1: str, text2: str) -> float:
    """Return ``|words of text1 found in text2| / max(|text1|, |text2|)``.

    Asymmetric when a text repeats words.
    """
    words1 = _tokenize(text1)
    words2 = set(_tokenize(text2))
    common = [w for w in words1 if w in words2]
    return len(common) / max(len(words1), len(_tokenize(text2)))


def is_overlap(text1: str, text2: str, threshold: float = OVERLAP_THRESHOLD) -> bool:
    """True if either direction of the similarity exceeds ``threshold``."""
    return max(calculate_similarity(text1, text2), calculate_similarity(text2, text1)) > threshold


def validate_mece(tree: LogicTree) -> MeceResult:
    """Check every multi-child node for sibling overlap and breadth.

    Args:
        tree: The tree to inspect (not modified).

    Returns:
        MeceResult with issues and suggestions.
    """
    result = MeceResult()

    for parent in tree.all_nodes():
        if parent.child_count() <= 1:
            continue
        children = list(tree.iter_children(parent))

        for i, first in enumerate(children):
            for second in children[i + 1 :]:
                if is_overlap(first.content, second.content):
                    result.has_overlaps = True
                    result.issues.append(
                        f'Potential overlap: "{first.content}" and "{second.content}"'
                    )

        if len(children) < MIN_PROBLEM_BRANCHES and parent.type == NodeType.PROBLEM:
            result.suggestions.append(
                f'Problem "{parent.content}" decomposition may need more detail'
            )

    result.is_complete = not result.issues
    return result


__all__ = [
    "MeceResult",
    "calculate_similarity",
    "is_overlap",
    "validate_mece",
    "OVERLAP_THRESHOLD",
]
