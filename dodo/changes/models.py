"""Value types for working-tree changes."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class FileState(str, Enum):
    """How a file differs in the index or the working tree."""

    UNMODIFIED = "unmodified"
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    UNTRACKED = "untracked"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FileChangeRecord:
    """One entry of a working-tree status report."""

    path: str
    index_state: FileState = FileState.UNMODIFIED
    worktree_state: FileState = FileState.UNMODIFIED


@dataclass(frozen=True)
class ChangeSet:
    """Pending changes split into disjoint added/modified/deleted paths."""

    added: tuple[str, ...] = field(default_factory=tuple)
    modified: tuple[str, ...] = field(default_factory=tuple)
    deleted: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        """Number of classified paths."""
        return len(self.added) + len(self.modified) + len(self.deleted)

    @property
    def is_empty(self) -> bool:
        """Whether no path was classified."""
        return self.total == 0

    def paths(self) -> Iterator[str]:
        """Iterate over every path: added, then modified, then deleted."""
        yield from self.added
        yield from self.modified
        yield from self.deleted
