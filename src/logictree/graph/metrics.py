"""Tree statistics data structures.

TreeStatistics is computed on demand from a LogicTree and shared by the
analysis and guidance layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeStatistics:
    """Aggregated counts over every node in a tree.

    Attributes:
        total_nodes: Number of nodes, unreachable ones included.
        nodes_by_type: Count per type name, keyed in first-seen order.
        nodes_by_level: Count per cached level.
        max_depth: Largest cached level (0 for an empty tree).
    """

    total_nodes: int = 0
    nodes_by_type: dict[str, int] = field(default_factory=dict)
    nodes_by_level: dict[int, int] = field(default_factory=dict)
    max_depth: int = 0

    def count(self, type_name: str) -> int:
        """Return the node count for a type name (0 when absent)."""
        return self.nodes_by_type.get(type_name, 0)

    def summary(self) -> str:
        """One-line summary, e.g. ``Tree contains 3 nodes: 1 problem, 2 cause``."""
        parts = ", ".join(f"{count} {name}" for name, count in self.nodes_by_type.items())
        return f"Tree contains {self.total_nodes} nodes: {parts}"


__all__ = ["TreeStatistics"]
