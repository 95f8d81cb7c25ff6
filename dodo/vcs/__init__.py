"""Git operations module."""

from .operations import (
    Author,
    create_commit,
    get_author,
    get_current_branch,
    get_repo,
    get_working_tree_status,
    ensure_no_merge_in_progress,
    stage_all,
)
from .remote import PushTarget, pull, push, resolve_push_target

__all__ = [
    "Author",
    "create_commit",
    "get_author",
    "get_current_branch",
    "get_repo",
    "get_working_tree_status",
    "ensure_no_merge_in_progress",
    "stage_all",
    "PushTarget",
    "pull",
    "push",
    "resolve_push_target",
]
