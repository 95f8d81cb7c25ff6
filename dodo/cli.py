"""dodo CLI using Typer."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from pydantic import ValidationError
from rich.console import Console

from .changes import classify, synthesize
from .config import get_settings
from .exceptions import DodoError, NotAGitRepositoryError
from .log import configure_logging
from .output.formatter import OutputFormatter
from .vcs.operations import (
    create_commit,
    ensure_no_merge_in_progress,
    get_author,
    get_current_branch,
    get_repo,
    get_working_tree_status,
    stage_all,
)
from .vcs.remote import pull as pull_remote
from .vcs.remote import push as push_remote
from .vcs.remote import resolve_push_target

app = typer.Typer(
    name="dodo",
    help="A safer, friendlier git: auto-generated commit messages, push and pull.",
)

console = Console()
formatter = OutputFormatter(console)
logger = logging.getLogger(__name__)


def open_repo() -> Repo:
    """Open the repository around the current directory."""
    try:
        return get_repo()
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise NotAGitRepositoryError(str(Path.cwd())) from None


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
) -> None:
    """A safer, friendlier git."""
    try:
        settings = get_settings()
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        formatter.print_error(f"Invalid configuration: {errors}")
        raise typer.Exit(1) from None

    configure_logging("DEBUG" if verbose else settings.log_level)

    if ctx.invoked_subcommand is None:
        formatter.print_banner()


@app.command()
def commit(
    message: Annotated[
        str | None,
        typer.Option("--message", "-m", help="Use this message instead of generating one"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show the message without staging or committing"),
    ] = False,
) -> None:
    """Stage all changes and commit with a generated message."""
    try:
        repo = open_repo()

        records = get_working_tree_status(repo)
        if not records:
            formatter.print_nothing_to_commit()
            return

        ensure_no_merge_in_progress(repo)

        changes = classify(records)
        formatter.print_change_set(changes)

        final_message = synthesize(changes.added, changes.modified, changes.deleted, message)
        formatter.print_message(final_message, generated=not message)

        if dry_run:
            formatter.print_dry_run()
            return

        author = get_author(repo)
        stage_all(repo)
        hexsha = create_commit(repo, final_message, author)
        formatter.print_committed(hexsha, final_message)

    except DodoError as e:
        formatter.print_error(str(e))
        raise typer.Exit(1) from None
    except GitCommandError as e:
        formatter.print_error(f"Git error: {e}")
        raise typer.Exit(1) from None
    except typer.Exit:
        # Let typer.Exit through untouched
        raise
    except Exception as e:
        logger.debug("commit failed", exc_info=True)
        formatter.print_error(f"Unexpected error: {e}")
        raise typer.Exit(1) from None


@app.command()
def status() -> None:
    """Show classified changes and the message that would be generated."""
    try:
        repo = open_repo()
        formatter.print_branch(get_current_branch(repo))

        records = get_working_tree_status(repo)
        if not records:
            formatter.print_nothing_to_commit()
            return

        changes = classify(records)
        formatter.print_change_set(changes)
        formatter.print_message(synthesize(changes.added, changes.modified, changes.deleted))

    except DodoError as e:
        formatter.print_error(str(e))
        raise typer.Exit(1) from None
    except GitCommandError as e:
        formatter.print_error(f"Git error: {e}")
        raise typer.Exit(1) from None


@app.command()
def push(
    remote: Annotated[
        str | None,
        typer.Argument(help="Remote to push to (default: upstream or origin)"),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Argument(help="Remote branch name (default: current branch)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Force push (use with caution)"),
    ] = False,
) -> None:
    """Push the current branch to a remote."""
    try:
        repo = open_repo()
        target = resolve_push_target(repo, remote, branch)
        formatter.print_branch(target.local_branch)
        formatter.print_pushing(target)

        if push_remote(repo, target, force=force):
            formatter.print_success(f"Pushed {target.local_branch} to {target.remote}")
        else:
            formatter.print_info("Everything up-to-date")

    except DodoError as e:
        formatter.print_error(str(e))
        raise typer.Exit(1) from None
    except GitCommandError as e:
        formatter.print_error(f"Git error: {e}")
        raise typer.Exit(1) from None


@app.command()
def pull(
    remote: Annotated[
        str | None,
        typer.Argument(help="Remote to pull from (default: origin)"),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Argument(help="Remote branch to merge (default: upstream)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Force pull (use with caution)"),
    ] = False,
) -> None:
    """Pull changes from a remote into the current branch."""
    try:
        repo = open_repo()
        name = remote or get_settings().default_remote
        current = get_current_branch(repo)
        formatter.print_branch(current)
        formatter.print_pulling(name)

        if pull_remote(repo, name, branch, force=force):
            formatter.print_success(f"Pulled from {name} into {current}")
        else:
            formatter.print_info("Already up to date")

    except DodoError as e:
        formatter.print_error(str(e))
        raise typer.Exit(1) from None
    except GitCommandError as e:
        formatter.print_error(f"Git error: {e}")
        raise typer.Exit(1) from None


@app.command()
def config() -> None:
    """Show configuration."""
    formatter.print_settings(get_settings())
    console.print()
    console.print(
        "[dim]Set via: DODO_DEFAULT_REMOTE, DODO_AUTHOR_NAME, "
        "DODO_AUTHOR_EMAIL, DODO_LOG_LEVEL[/dim]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"dodo v{__version__}")


if __name__ == "__main__":
    app()
