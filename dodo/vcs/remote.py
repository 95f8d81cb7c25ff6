"""Push and pull against configured remotes."""

import logging
from dataclasses import dataclass

from git import PushInfo, Remote, Repo

from ..config import get_settings
from ..exceptions import PushError, RemoteNotFoundError
from .operations import get_current_branch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PushTarget:
    """Where the current branch is pushed to."""

    remote: str
    local_branch: str
    remote_branch: str
    from_upstream: bool = False

    @property
    def refspec(self) -> str:
        return f"refs/heads/{self.local_branch}:refs/heads/{self.remote_branch}"


def get_remote(repo: Repo, name: str) -> Remote:
    """
    Look up a remote by name.

    Raises:
        RemoteNotFoundError: If the repository has no such remote.
    """
    try:
        return repo.remote(name)
    except ValueError:
        raise RemoteNotFoundError(name) from None


def resolve_push_target(
    repo: Repo,
    remote: str | None = None,
    branch: str | None = None,
    default_remote: str | None = None,
) -> PushTarget:
    """
    Work out the remote and remote branch for a push.

    Explicit arguments win. With no remote given, the current branch's
    upstream is used when one is configured, otherwise the default remote
    and a branch of the same name.

    Args:
        repo: GitPython Repo object.
        remote: Remote name from the command line.
        branch: Remote branch name from the command line.
        default_remote: Fallback remote; defaults to settings.

    Returns:
        PushTarget for the current branch.
    """
    local_branch = get_current_branch(repo)

    if remote:
        return PushTarget(remote, local_branch, branch or local_branch)

    tracking = None
    if not repo.head.is_detached:
        tracking = repo.active_branch.tracking_branch()

    if tracking is not None:
        logger.debug("Using upstream %s", tracking.name)
        return PushTarget(
            tracking.remote_name,
            local_branch,
            tracking.remote_head,
            from_upstream=True,
        )

    return PushTarget(default_remote or get_settings().default_remote, local_branch, local_branch)


def push(repo: Repo, target: PushTarget, force: bool = False) -> bool:
    """
    Push the current branch to its target.

    Returns:
        True if the remote was updated, False if it was already up to date.

    Raises:
        RemoteNotFoundError: If the target remote does not exist.
        PushError: If the remote rejected the push.
    """
    remote = get_remote(repo, target.remote)
    logger.debug("Pushing %s to %s", target.refspec, target.remote)

    results = remote.push(refspec=target.refspec, force=force)
    if not results:
        raise PushError(target.remote, "no refs were pushed")

    for info in results:
        if info.flags & (PushInfo.ERROR | PushInfo.REJECTED | PushInfo.REMOTE_REJECTED):
            raise PushError(target.remote, info.summary.strip() or None)

    return not all(info.flags & PushInfo.UP_TO_DATE for info in results)


def pull(
    repo: Repo,
    remote: str | None = None,
    branch: str | None = None,
    force: bool = False,
    default_remote: str | None = None,
) -> bool:
    """
    Fetch and merge from a remote into the current branch.

    Args:
        repo: GitPython Repo object.
        remote: Remote name; defaults to settings.
        branch: Remote branch; defaults to git's configured merge target.
        force: Pass --force to git.

    Returns:
        True if HEAD moved, False if already up to date.

    Raises:
        RemoteNotFoundError: If the remote does not exist.
    """
    name = remote or default_remote or get_settings().default_remote
    target = get_remote(repo, name)

    before = repo.head.commit.hexsha if repo.head.is_valid() else None
    logger.debug("Pulling %s from %s", branch or "(upstream)", name)

    if branch:
        target.pull(branch, force=force)
    else:
        target.pull(force=force)

    after = repo.head.commit.hexsha if repo.head.is_valid() else None
    return before != after
