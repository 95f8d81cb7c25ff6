"""Custom exceptions for dodo."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .changes.models import FileChangeRecord


class DodoError(Exception):
    """Base exception for dodo."""

    pass


class InvalidRecordError(DodoError, ValueError):
    """Raised when a status record cannot be classified."""

    def __init__(self, record: "FileChangeRecord", reason: str = "empty path") -> None:
        self.record = record
        self.message = f"Invalid status record ({reason}): {record!r}"
        super().__init__(self.message)


class GitError(DodoError):
    """Raised when there's a git-related error."""

    pass


class NotAGitRepositoryError(GitError):
    """Raised when the current directory is not a git repository."""

    def __init__(self, path: str | None = None) -> None:
        if path:
            self.message = f"Not a git repository: {path}"
        else:
            self.message = "Not a git repository"
        super().__init__(self.message)


class AuthorNotConfiguredError(GitError):
    """Raised when no commit author identity can be found."""

    def __init__(self, missing: str) -> None:
        self.missing = missing
        self.message = (
            f"Commit author {missing} not configured. "
            f"Set it with: git config user.{missing} '...'"
        )
        super().__init__(self.message)


class MergeInProgressError(GitError):
    """Raised when a merge is unfinished or has unresolved conflicts."""

    def __init__(self, conflicts: list[str] | None = None) -> None:
        self.conflicts = conflicts or []
        if self.conflicts:
            self.message = (
                f"Unresolved conflicts in: {', '.join(self.conflicts)}. "
                "Resolve them and finish the merge with git."
            )
        else:
            self.message = "A merge is in progress. Finish it with git before committing."
        super().__init__(self.message)


class RemoteNotFoundError(GitError):
    """Raised when a named remote does not exist."""

    def __init__(self, remote: str) -> None:
        self.remote = remote
        self.message = f"Remote '{remote}' not found"
        super().__init__(self.message)


class PushError(GitError):
    """Raised when the remote rejects a push."""

    def __init__(self, remote: str, reason: str | None = None) -> None:
        self.remote = remote
        if reason:
            self.message = f"Failed to push to {remote}: {reason}"
        else:
            self.message = f"Failed to push to {remote}"
        super().__init__(self.message)
