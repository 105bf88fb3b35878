"""Graph module - Core logic tree data structures.

Exports:
- NodeType: Enum of node categories
- NodeMetadata: Optional scoring/evidence fields
- LogicNode: Single tree node
- LogicTree: Node container with mutation API
- MutationEntry / MutationLog: Audit trail of mutations
- TreeStatistics: Aggregated node counts
"""

from logictree.graph.LogicNode import LogicNode, NodeMetadata, NodeType
from logictree.graph.metrics import TreeStatistics
from logictree.graph.mutations import MutationEntry, MutationLog
from logictree.graph.tree import LogicTree

__all__ = [
    "NodeType",
    "NodeMetadata",
    "LogicNode",
    "LogicTree",
    "MutationEntry",
    "MutationLog",
    "TreeStatistics",
]
