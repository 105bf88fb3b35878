"""LogicNode - Node representation for the logic tree.

This module provides the core data structures of the tree model:
- NodeType: Enum of node categories
- NodeMetadata: Optional scoring/evidence fields supplied by callers
- LogicNode: A single node with parent back-reference and ordered children
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NodeType(Enum):
    """Categories of nodes in a logic tree."""

    PROBLEM = "problem"
    CAUSE = "cause"
    EFFECT = "effect"
    SOLUTION = "solution"
    DECISION = "decision"
    OPTION = "option"

    @classmethod
    def values(cls) -> list[str]:
        """Return all type names in declaration order."""
        return [t.value for t in cls]


@dataclass
class NodeMetadata:
    """Optional scoring and evidence fields for a node.

    A field left as ``None`` means "absent". An empty list is a present,
    empty value. update_node() relies on this distinction to clear fields
    that the caller omitted.
    """

    confidence: float | None = None
    priority: int | None = None
    feasibility: int | None = None
    evidence: list[str] | None = None
    assumptions: list[str] | None = None
    tags: list[str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NodeMetadata:
        """Create metadata from a request ``metadata`` object.

        Unknown keys are ignored. Values are not range-checked.
        """
        return cls(
            confidence=data.get("confidence"),
            priority=data.get("priority"),
            feasibility=data.get("feasibility"),
            evidence=data.get("evidence"),
            assumptions=data.get("assumptions"),
            tags=data.get("tags"),
        )


@dataclass
class LogicNode:
    """A node in the logic tree.

    The owning relation is the parent's ``children`` list; ``parent_id`` is
    only a back-reference and may dangle (see LogicTree.add_node).

    Attributes:
        id: Unique identifier ("node_<n>"), never reused.
        content: Free-form description.
        type: Node category, fixed at creation.
        parent_id: Parent identifier, None for a root.
        children: Ordered child identifiers.
        level: Cached depth (0 for the root).
        expanded: Display-only toggle.
    """

    id: str
    content: str
    type: NodeType
    parent_id: str | None = None
    children: list[str] = field(default_factory=list)
    level: int = 0
    expanded: bool = True

    confidence: float | None = None
    priority: int | None = None
    feasibility: int | None = None
    evidence: list[str] | None = field(default_factory=list)
    assumptions: list[str] | None = field(default_factory=list)
    tags: list[str] | None = field(default_factory=list)

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    # Count and membership checks
    def child_count(self) -> int:
        """Return number of children."""
        return len(self.children)

    def has_child(self, node_id: str) -> bool:
        """Check if a node id is a direct child."""
        return node_id in self.children

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def apply_metadata(self, metadata: NodeMetadata) -> None:
        """Replace all six metadata fields, absent ones included."""
        self.confidence = metadata.confidence
        self.priority = metadata.priority
        self.feasibility = metadata.feasibility
        self.evidence = metadata.evidence
        self.assumptions = metadata.assumptions
        self.tags = metadata.tags

    def metadata_state(self) -> dict[str, Any]:
        """Snapshot of the metadata fields (for mutation records)."""
        return {
            "confidence": self.confidence,
            "priority": self.priority,
            "feasibility": self.feasibility,
            "evidence": list(self.evidence) if self.evidence is not None else None,
            "assumptions": list(self.assumptions) if self.assumptions is not None else None,
            "tags": list(self.tags) if self.tags is not None else None,
        }

    def __str__(self) -> str:
        """Return string representation for display."""
        return f"{self.id} [{self.type.value}] {self.content}"


__all__ = ["NodeType", "NodeMetadata", "LogicNode"]
