"""Sort a working-tree status report into added, modified and deleted paths."""

import logging
from collections.abc import Iterable

from ..exceptions import InvalidRecordError
from .models import ChangeSet, FileChangeRecord, FileState

logger = logging.getLogger(__name__)

# Staged state decides first; the working tree is only consulted when the
# index has nothing to say.
_STATE_RULES: tuple[tuple[FileState, str], ...] = (
    (FileState.ADDED, "added"),
    (FileState.MODIFIED, "modified"),
    (FileState.DELETED, "deleted"),
)


def _bucket_for(record: FileChangeRecord) -> str | None:
    for state, bucket in _STATE_RULES:
        if record.index_state == state:
            return bucket

    for state, bucket in _STATE_RULES:
        if record.worktree_state == state and record.index_state != state:
            return bucket

    # Untracked files show up as "??" in both columns.
    if record.worktree_state == FileState.UNTRACKED:
        return "added"

    return None


def classify(records: Iterable[FileChangeRecord]) -> ChangeSet:
    """
    Classify a status report into a ChangeSet.

    Each path lands in exactly one of added, modified or deleted, in the
    order the report lists them. Records whose states are only renamed,
    copied or unknown are left out.

    Args:
        records: Status report entries, one per touched path.

    Returns:
        ChangeSet with disjoint path sequences.

    Raises:
        InvalidRecordError: If a record has an empty path.
    """
    buckets: dict[str, list[str]] = {"added": [], "modified": [], "deleted": []}
    seen: set[str] = set()

    for record in records:
        if not record.path:
            raise InvalidRecordError(record)

        if record.path in seen:
            continue
        seen.add(record.path)

        bucket = _bucket_for(record)
        if bucket is None:
            logger.debug(
                "Skipping %s (index=%s, worktree=%s)",
                record.path,
                record.index_state.value,
                record.worktree_state.value,
            )
            continue

        buckets[bucket].append(record.path)

    return ChangeSet(
        added=tuple(buckets["added"]),
        modified=tuple(buckets["modified"]),
        deleted=tuple(buckets["deleted"]),
    )
