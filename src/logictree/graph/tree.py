"""LogicTree - In-memory container for a problem-decomposition tree.

LogicTree owns the node index, the tracked root pointer and identifier
allocation, and provides the mutation API (add, remove, move, update).
Every successful mutation is recorded in the tree's MutationLog.

Two lenient behaviours:
- add_node() with an unknown parent records the dangling parent_id but
  links the node nowhere, leaving it unreachable from the root.
- A parentless add_node() (or move_node() without a new parent) replaces the
  tracked root pointer; the previous root's subtree stays in the index.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator

from logictree.graph.LogicNode import LogicNode, NodeMetadata, NodeType
from logictree.graph.metrics import TreeStatistics
from logictree.graph.mutations import MutationEntry, MutationLog


@dataclass
class LogicTree:
    """Container for one logic tree.

    Provides indexed access to all nodes, traversal from the root and the
    mutation API. A tree is owned by exactly one session; there is no
    locking.
    """

    # Internal storage (prefixed) - excluded from constructor
    _index: dict[str, LogicNode] = field(default_factory=dict, init=False, repr=False)
    _root_id: str | None = field(default=None, init=False)
    _next_id: int = field(default=1, init=False)
    _mutation_log: MutationLog = field(default_factory=MutationLog, init=False, repr=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Lookup and traversal
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def root_id(self) -> str | None:
        """Identifier of the tracked root, if any."""
        return self._root_id

    @property
    def has_root(self) -> bool:
        """True if a root is tracked."""
        return self._root_id is not None

    @property
    def root(self) -> LogicNode | None:
        """The tracked root node, if any."""
        if self._root_id is None:
            return None
        return self._index.get(self._root_id)

    def find_by_id(self, node_id: str) -> LogicNode | None:
        """Find node by ID.

        Args:
            node_id: The node ID to find.

        Returns:
            The matching LogicNode, or None if not found.
        """
        return self._index.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def all_nodes(self) -> Iterator[LogicNode]:
        """Iterate ALL nodes in creation order, unreachable ones included."""
        yield from self._index.values()

    def nodes_by_type(self, node_type: NodeType) -> Iterator[LogicNode]:
        """Get all nodes of a specific type.

        Args:
            node_type: The NodeType to filter by.

        Yields:
            LogicNode instances of the specified type.
        """
        for node in self._index.values():
            if node.type == node_type:
                yield node

    def node_count(self) -> int:
        """Return total number of nodes in the tree."""
        return len(self._index)

    def iter_children(self, node: LogicNode) -> Iterator[LogicNode]:
        """Iterate over the resolved children of a node, in order."""
        for child_id in node.children:
            child = self._index.get(child_id)
            if child is not None:
                yield child

    def walk(self, order: str = "pre") -> Iterator[LogicNode]:
        """Iterate nodes reachable from the root.

        Args:
            order: Traversal order:
                - "pre": Parent first (depth-first, pre-order)
                - "level": Breadth-first (level order)

        Yields:
            LogicNode instances reachable from the root.
        """
        root = self.root
        if root is None:
            return
        if order == "pre":
            yield from self._walk_preorder(root)
        elif order == "level":
            yield from self._walk_level(root)
        else:
            raise ValueError(f"Unknown traversal order: {order}")

    def _walk_preorder(self, node: LogicNode) -> Iterator[LogicNode]:
        """Pre-order traversal (parent before children)."""
        yield node
        for child in self.iter_children(node):
            yield from self._walk_preorder(child)

    def _walk_level(self, node: LogicNode) -> Iterator[LogicNode]:
        """Level-order (breadth-first) traversal."""
        queue: deque[LogicNode] = deque([node])
        while queue:
            current = queue.popleft()
            yield current
            queue.extend(self.iter_children(current))

    def descendants(self, node: LogicNode) -> Iterator[LogicNode]:
        """Iterate every descendant of a node (pre-order, node excluded)."""
        for child in self.iter_children(node):
            yield from self._walk_preorder(child)

    def ancestors(self, node: LogicNode) -> Iterator[LogicNode]:
        """Iterate the resolved ancestor chain, nearest first."""
        visited: set[str] = {node.id}
        parent_id = node.parent_id
        while parent_id is not None and parent_id not in visited:
            parent = self._index.get(parent_id)
            if parent is None:
                return
            visited.add(parent_id)
            yield parent
            parent_id = parent.parent_id

    def orphaned_nodes(self) -> Iterator[LogicNode]:
        """Iterate nodes that exist but are not reachable from the root."""
        reachable = {n.id for n in self.walk()}
        for node in self._index.values():
            if node.id not in reachable:
                yield node

    def statistics(self) -> TreeStatistics:
        """Compute node counts by type and level over every node."""
        stats = TreeStatistics(total_nodes=len(self._index))
        for node in self._index.values():
            type_name = node.type.value
            stats.nodes_by_type[type_name] = stats.nodes_by_type.get(type_name, 0) + 1
            stats.nodes_by_level[node.level] = stats.nodes_by_level.get(node.level, 0) + 1
            stats.max_depth = max(stats.max_depth, node.level)
        return stats

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation Infrastructure
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def mutation_log(self) -> MutationLog:
        """Access the mutation log for this tree."""
        return self._mutation_log

    def _generate_id(self) -> str:
        node_id = f"node_{self._next_id}"
        self._next_id += 1
        return node_id

    def _propagate_levels(self, node: LogicNode) -> None:
        """Recompute cached levels of every descendant, top-down."""
        for child in self.iter_children(node):
            child.level = node.level + 1
            self._propagate_levels(child)

    def _unlink_from_parent(self, node: LogicNode) -> None:
        if node.parent_id is None:
            return
        parent = self._index.get(node.parent_id)
        if parent is not None and parent.has_child(node.id):
            parent.children = [cid for cid in parent.children if cid != node.id]

    def would_create_cycle(self, node_id: str, new_parent_id: str) -> bool:
        """Check whether placing node_id under new_parent_id forms a cycle.

        True when the new parent is the node itself or one of its
        descendants.
        """
        if node_id == new_parent_id:
            return True
        new_parent = self._index.get(new_parent_id)
        if new_parent is None:
            return False
        return any(a.id == node_id for a in self.ancestors(new_parent))

    # ─────────────────────────────────────────────────────────────────────────
    # Mutation API
    # ─────────────────────────────────────────────────────────────────────────

    def add_node(
        self,
        content: str,
        node_type: NodeType,
        parent_id: str | None = None,
        metadata: NodeMetadata | None = None,
    ) -> LogicNode:
        """Create a node and link it under its parent.

        Args:
            content: Node description.
            node_type: Node category.
            parent_id: Optional parent. An unknown parent is recorded but
                not linked, leaving the node unreachable from the root.
                Omitted, the node becomes the tracked root.
            metadata: Optional scoring/evidence fields.

        Returns:
            The created LogicNode.
        """
        node_id = self._generate_id()
        parent = self._index.get(parent_id) if parent_id else None
        if parent_id:
            level = (parent.level if parent is not None else 0) + 1
        else:
            level = 0
        now = datetime.now()
        metadata = metadata or NodeMetadata()

        node = LogicNode(
            id=node_id,
            content=content,
            type=node_type,
            parent_id=parent_id or None,
            level=level,
            confidence=metadata.confidence,
            priority=metadata.priority,
            feasibility=metadata.feasibility,
            evidence=metadata.evidence or [],
            assumptions=metadata.assumptions or [],
            tags=metadata.tags or [],
            created_at=now,
            updated_at=now,
        )
        self._index[node_id] = node

        if parent_id:
            if parent is not None:
                parent.children.append(node_id)
        else:
            self._root_id = node_id

        self._mutation_log.append(
            MutationEntry(
                operation="add_node",
                target_id=node_id,
                before_state={},
                after_state={
                    "id": node_id,
                    "content": content,
                    "type": node_type.value,
                    "parent_id": node.parent_id,
                    "level": level,
                },
            )
        )
        return node

    def remove_node(self, node_id: str) -> bool:
        """Remove a node and its entire subtree.

        Returns:
            False if node_id does not exist, True otherwise.
        """
        node = self._index.get(node_id)
        if node is None:
            return False

        entry = MutationEntry(
            operation="remove_node",
            target_id=node_id,
            before_state={
                "id": node_id,
                "content": node.content,
                "type": node.type.value,
                "parent_id": node.parent_id,
                "was_root": self._root_id == node_id,
                "removed_ids": [node_id] + [d.id for d in self.descendants(node)],
            },
            after_state={},
        )
        self._unlink_from_parent(node)
        self._remove_subtree(node)
        self._mutation_log.append(entry)
        return True

    def _remove_subtree(self, node: LogicNode) -> None:
        """Drop descendants first, then the node's own entry."""
        for child in list(self.iter_children(node)):
            self._remove_subtree(child)
        self._index.pop(node.id, None)
        if self._root_id == node.id:
            self._root_id = None

    def move_node(self, node_id: str, new_parent_id: str | None = None) -> bool:
        """Move a node (with its subtree) under a new parent.

        Args:
            node_id: The node to move.
            new_parent_id: Destination parent. Omitted, the node becomes the
                tracked root.

        Returns:
            False if the node or new parent does not exist, or if the move
            would create a cycle. The tree is unchanged in those cases.
        """
        node = self._index.get(node_id)
        if node is None:
            return False

        new_parent = None
        if new_parent_id:
            new_parent = self._index.get(new_parent_id)
            if new_parent is None or self.would_create_cycle(node_id, new_parent_id):
                return False

        before = {"parent_id": node.parent_id, "level": node.level}
        self._unlink_from_parent(node)

        if new_parent is not None:
            new_parent.children.append(node_id)
            node.parent_id = new_parent.id
            node.level = new_parent.level + 1
        else:
            node.parent_id = None
            node.level = 0
            self._root_id = node_id

        self._propagate_levels(node)
        self._mutation_log.append(
            MutationEntry(
                operation="move_node",
                target_id=node_id,
                before_state=before,
                after_state={"parent_id": node.parent_id, "level": node.level},
            )
        )
        return True

    def update_node(
        self,
        node_id: str,
        content: str,
        metadata: NodeMetadata | None = None,
    ) -> bool:
        """Replace a node's content and, if given, all of its metadata.

        Metadata is a full replace: any field left as None in ``metadata``
        clears the node's value.

        Returns:
            False if node_id does not exist, True otherwise.
        """
        node = self._index.get(node_id)
        if node is None:
            return False

        before = {"content": node.content, **node.metadata_state()}
        node.content = content
        node.updated_at = datetime.now()
        if metadata is not None:
            node.apply_metadata(metadata)

        self._mutation_log.append(
            MutationEntry(
                operation="update_node",
                target_id=node_id,
                before_state=before,
                after_state={"content": node.content, **node.metadata_state()},
            )
        )
        return True

    def toggle_expansion(self, node_id: str) -> bool:
        """Flip a node's display expansion flag.

        Returns:
            False if node_id does not exist, True otherwise.
        """
        node = self._index.get(node_id)
        if node is None:
            return False
        node.expanded = not node.expanded
        node.updated_at = datetime.now()
        self._mutation_log.append(
            MutationEntry(
                operation="toggle_expansion",
                target_id=node_id,
                before_state={"expanded": not node.expanded},
                after_state={"expanded": node.expanded},
            )
        )
        return True


__all__ = ["LogicTree"]
