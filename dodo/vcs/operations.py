"""Git operations using GitPython."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from git import Actor, Repo

from ..changes.models import FileChangeRecord, FileState
from ..config import Settings, get_settings
from ..exceptions import AuthorNotConfiguredError, MergeInProgressError

logger = logging.getLogger(__name__)

# Porcelain v1 status letters.
STATUS_CODES: dict[str, FileState] = {
    " ": FileState.UNMODIFIED,
    "M": FileState.MODIFIED,
    "T": FileState.MODIFIED,  # type change (file <-> symlink)
    "A": FileState.ADDED,
    "D": FileState.DELETED,
    "R": FileState.RENAMED,
    "C": FileState.COPIED,
    "?": FileState.UNTRACKED,
}


@dataclass
class Author:
    """Identity and time recorded on a commit."""

    name: str
    email: str
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @property
    def actor(self) -> Actor:
        return Actor(self.name, self.email)

    @property
    def git_date(self) -> str:
        """Timestamp in git's internal "<epoch> <+hhmm>" format."""
        timestamp = self.timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.astimezone()
        return f"{int(timestamp.timestamp())} {timestamp.strftime('%z')}"


def get_repo(path: str | Path | None = None) -> Repo:
    """
    Get a Git repository object.

    Args:
        path: Path to the repository. If None, uses current directory.

    Returns:
        GitPython Repo object.

    Raises:
        InvalidGitRepositoryError: If the path is not a valid git repository.
    """
    repo_path = Path(path) if path else Path.cwd()
    return Repo(repo_path, search_parent_directories=True)


def parse_porcelain_status(output: str) -> list[FileChangeRecord]:
    """
    Parse `git status --porcelain=v1 -z` output into status records.

    Renamed and copied entries carry their original path as an extra
    NUL-separated field; only the new path is kept.
    """
    records = []
    entries = iter(output.split("\0"))

    for entry in entries:
        if len(entry) < 4:
            continue

        x, y, path = entry[0], entry[1], entry[3:]
        if x == "!" and y == "!":
            continue
        if x in ("R", "C"):
            next(entries, None)

        records.append(
            FileChangeRecord(
                path=path,
                index_state=STATUS_CODES.get(x, FileState.UNKNOWN),
                worktree_state=STATUS_CODES.get(y, FileState.UNKNOWN),
            )
        )

    return records


def get_working_tree_status(repo: Repo) -> list[FileChangeRecord]:
    """
    Get every changed path in the working tree.

    Args:
        repo: GitPython Repo object.

    Returns:
        List of FileChangeRecord in git's order; empty when the tree is clean.
    """
    output = repo.git.status("--porcelain=v1", "-z", "--untracked-files=all")
    records = parse_porcelain_status(output)
    logger.debug("Working tree status: %d changed paths", len(records))
    return records


def stage_all(repo: Repo) -> None:
    """Stage every change, including deletions and untracked files."""
    repo.git.add(all=True)


def ensure_no_merge_in_progress(repo: Repo) -> None:
    """
    Refuse to continue while a merge is unfinished.

    A commit made from the index here would record a single parent and drop
    the merge, so conflicted or pending merges are left for git to finish.

    Raises:
        MergeInProgressError: If the index holds unmerged entries or
            MERGE_HEAD is present.
    """
    conflicts = sorted(str(path) for path in repo.index.unmerged_blobs())
    if conflicts or (Path(repo.git_dir) / "MERGE_HEAD").exists():
        logger.debug("Merge in progress, conflicts: %s", conflicts)
        raise MergeInProgressError(conflicts)


def get_author(repo: Repo, settings: Settings | None = None) -> Author:
    """
    Resolve the commit author.

    Environment overrides win; otherwise git's user.name and user.email.

    Raises:
        AuthorNotConfiguredError: If the name or email is missing.
    """
    settings = settings or get_settings()
    reader = repo.config_reader()

    name = settings.author_name or reader.get_value("user", "name", default="")
    email = settings.author_email or reader.get_value("user", "email", default="")

    if not name:
        raise AuthorNotConfiguredError("name")
    if not email:
        raise AuthorNotConfiguredError("email")

    return Author(name=str(name), email=str(email))


def create_commit(repo: Repo, message: str, author: Author) -> str:
    """
    Commit the current index.

    Args:
        repo: GitPython Repo object.
        message: Commit message.
        author: Author and committer of the commit.

    Returns:
        Hex SHA of the new commit.
    """
    commit = repo.index.commit(
        message,
        author=author.actor,
        committer=author.actor,
        author_date=author.git_date,
        commit_date=author.git_date,
    )
    logger.debug("Created commit %s", commit.hexsha)
    return commit.hexsha


def get_current_branch(repo: Repo) -> str:
    """Get the name of the current branch."""
    try:
        return repo.active_branch.name
    except TypeError:
        # Detached HEAD state
        return repo.head.commit.hexsha[:7]
