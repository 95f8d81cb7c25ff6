"""Pytest fixtures for dodo tests."""

import tempfile
from pathlib import Path

import pytest
from git import Repo
from git.exc import GitCommandError

from dodo.changes.models import FileChangeRecord, FileState
from dodo.config import get_settings, reload_settings


def _configure_user(repo: Repo) -> None:
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("pull", "rebase", "false")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings."""
    for name in ("DODO_DEFAULT_REMOTE", "DODO_AUTHOR_NAME", "DODO_AUTHOR_EMAIL", "DODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    get_settings.cache_clear()


@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with one commit."""
    with tempfile.TemporaryDirectory() as tmpdir:
        repo = Repo.init(tmpdir)
        _configure_user(repo)

        # Create initial commit
        app_file = Path(tmpdir) / "app.py"
        app_file.write_text("# Initial file\n")
        repo.index.add(["app.py"])
        repo.index.commit("Initial commit")

        yield repo


@pytest.fixture
def bare_remote(tmp_path):
    """Create an empty bare repository to push to."""
    return Repo.init(tmp_path / "remote.git", bare=True)


@pytest.fixture
def repo_with_origin(temp_git_repo, bare_remote):
    """A repository whose 'origin' is an empty bare repository."""
    temp_git_repo.create_remote("origin", bare_remote.git_dir)
    return temp_git_repo


@pytest.fixture
def conflicted_repo(temp_git_repo):
    """A repository stopped in the middle of a conflicted merge."""
    base = temp_git_repo.active_branch.name
    app_file = Path(temp_git_repo.working_tree_dir) / "app.py"

    temp_git_repo.git.checkout("-b", "other")
    app_file.write_text("other\n")
    temp_git_repo.git.commit("-am", "other change")

    temp_git_repo.git.checkout(base)
    app_file.write_text("mine\n")
    temp_git_repo.git.commit("-am", "my change")

    with pytest.raises(GitCommandError):
        temp_git_repo.git.merge("other")

    return temp_git_repo


@pytest.fixture
def second_clone(repo_with_origin, bare_remote, tmp_path):
    """Push the first repository, then clone the remote somewhere else."""
    branch = repo_with_origin.active_branch.name
    repo_with_origin.remote("origin").push(f"refs/heads/{branch}:refs/heads/{branch}")

    clone = Repo.clone_from(bare_remote.git_dir, tmp_path / "clone", branch=branch)
    _configure_user(clone)
    return clone


@pytest.fixture
def sample_records():
    """A status report covering every classification branch."""
    return [
        FileChangeRecord("src/new.go", FileState.ADDED, FileState.UNMODIFIED),
        FileChangeRecord("src/edit.go", FileState.MODIFIED, FileState.MODIFIED),
        FileChangeRecord("src/gone.go", FileState.DELETED, FileState.UNMODIFIED),
        FileChangeRecord("README.md", FileState.UNMODIFIED, FileState.MODIFIED),
        FileChangeRecord("old.txt", FileState.UNMODIFIED, FileState.DELETED),
        FileChangeRecord("notes/todo.txt", FileState.UNTRACKED, FileState.UNTRACKED),
        FileChangeRecord("moved.py", FileState.RENAMED, FileState.UNMODIFIED),
    ]
