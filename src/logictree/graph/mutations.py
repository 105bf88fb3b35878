"""Mutation records for LogicTree operations.

Every successful structural or content change to a LogicTree is recorded
as a MutationEntry in the tree's append-only MutationLog.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4


@dataclass
class MutationEntry:
    """Single mutation operation record.

    Attributes:
        operation: Operation type ("add_node", "remove_node", ...).
        target_id: Primary target of the mutation.
        before_state: State before the mutation.
        after_state: State after the mutation.
        id: Unique mutation ID (UUID4 hex).
        timestamp: When the mutation occurred.
    """

    operation: str
    target_id: str
    before_state: dict[str, Any]
    after_state: dict[str, Any]
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"[{self.id[:8]}] {self.operation}({self.target_id})"


class MutationLog:
    """Append-only mutation history.

    Example:
        >>> log = MutationLog()
        >>> log.append(MutationEntry("add_node", "node_1", {}, {"id": "node_1"}))
        >>> len(log)
        1
    """

    def __init__(self) -> None:
        """Initialize an empty mutation log."""
        self._entries: list[MutationEntry] = []

    def append(self, entry: MutationEntry) -> None:
        """Append a mutation entry to the log."""
        self._entries.append(entry)

    def iter_entries(self) -> Iterator[MutationEntry]:
        """Iterate over all entries in chronological order."""
        yield from self._entries

    def __len__(self) -> int:
        """Return the number of entries in the log."""
        return len(self._entries)

    def last(self) -> MutationEntry | None:
        """Return the most recent entry, or None if empty."""
        return self._entries[-1] if self._entries else None

    def find_by_id(self, mutation_id: str) -> MutationEntry | None:
        """Find an entry by its mutation ID.

        Args:
            mutation_id: The UUID of the mutation to find.

        Returns:
            The matching MutationEntry, or None if not found.
        """
        for entry in self._entries:
            if entry.id == mutation_id:
                return entry
        return None

    def entries_for(self, target_id: str) -> list[MutationEntry]:
        """Return every entry that targeted a node, oldest first."""
        return [e for e in self._entries if e.target_id == target_id]


__all__ = ["MutationEntry", "MutationLog"]
