"""Rich terminal output formatting."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..changes.models import ChangeSet
from ..config import Settings
from ..vcs.remote import PushTarget

BANNER = r"""
      $$\                 $$\
      $$ |                $$ |
 $$$$$$$ | $$$$$$\   $$$$$$$ | $$$$$$\
$$  __$$ |$$  __$$\ $$  __$$ |$$  __$$\
$$ /  $$ |$$ /  $$ |$$ /  $$ |$$ /  $$ |
$$ |  $$ |$$ |  $$ |$$ |  $$ |$$ |  $$ |
\$$$$$$$ |\$$$$$$  |\$$$$$$$ |\$$$$$$  |
 \_______| \______/  \_______| \______/
"""

MAX_LISTED_FILES = 5


class OutputFormatter:
    """Format output using Rich for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_banner(self) -> None:
        """Print the dodo banner and a usage hint."""
        self.console.print(BANNER, style="bold cyan", highlight=False)
        self.console.print("Welcome to dodo! Use 'dodo --help' to see available commands.")

    def print_branch(self, branch: str) -> None:
        """Print the branch a command works on."""
        self.console.print(f"[dim]Current branch:[/dim] {branch}")

    def print_change_set(self, changes: ChangeSet) -> None:
        """Print the classified changes, a few files per group."""
        self.console.print()
        self.console.print(f"[bold]📝 {changes.total} files changed[/bold]")

        groups = (
            ("added", "green", "+", changes.added),
            ("modified", "yellow", "~", changes.modified),
            ("deleted", "red", "-", changes.deleted),
        )
        for label, color, marker, paths in groups:
            if not paths:
                continue
            self.console.print(f"   [{color}]{len(paths)} {label}[/{color}]")
            for path in paths[:MAX_LISTED_FILES]:
                self.console.print(f"     [{color}]{marker}[/{color}] {escape(path)}")
            if len(paths) > MAX_LISTED_FILES:
                self.console.print(
                    f"     [dim]... and {len(paths) - MAX_LISTED_FILES} more[/dim]"
                )

    def print_message(self, message: str, generated: bool = True) -> None:
        """Print the commit message in a panel."""
        title = "💡 Generated commit message" if generated else "Commit message"
        self.console.print()
        self.console.print(
            Panel(
                Text(message),
                title=title,
                title_align="left",
                box=box.ROUNDED,
                border_style="green",
                padding=(0, 1),
            )
        )

    def print_committed(self, hexsha: str, message: str) -> None:
        """Print the short sha and subject of a new commit."""
        summary = message.split("\n")[0]
        self.print_success(f"Committed [cyan]{hexsha[:7]}[/cyan]: {escape(summary)}")

    def print_dry_run(self) -> None:
        """Print a note that nothing was changed."""
        self.console.print("[dim]Dry run: nothing was staged or committed.[/dim]")

    def print_nothing_to_commit(self) -> None:
        """Print message when the working tree is clean."""
        self.console.print()
        self.console.print(
            Panel(
                "[yellow]Nothing to commit, working tree clean.[/yellow]",
                title="⚠️  Nothing to commit",
                box=box.ROUNDED,
            )
        )

    def print_pushing(self, target: PushTarget) -> None:
        """Print where a push is going."""
        if target.from_upstream:
            self.console.print(
                f"[dim]Using upstream:[/dim] {target.remote}/{target.remote_branch}"
            )
        self.console.print(f"[dim]Pushing to remote[/dim] '{target.remote}'...")

    def print_pulling(self, remote: str) -> None:
        """Print which remote a pull reads from."""
        self.console.print(f"[dim]Pulling from remote[/dim] '{remote}'...")

    def print_settings(self, settings: Settings) -> None:
        """Print the active configuration."""
        self.console.print()
        self.console.print("[bold]dodo Configuration[/bold]")
        self.console.print()

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Setting", style="dim")
        table.add_column("Value", style="cyan")

        table.add_row("Default remote", settings.default_remote)
        table.add_row("Author name", settings.author_name or "[dim](git config)[/dim]")
        table.add_row("Author email", settings.author_email or "[dim](git config)[/dim]")
        table.add_row("Log level", settings.log_level)

        self.console.print(table)

    def print_info(self, message: str) -> None:
        """Print a plain message."""
        self.console.print(message)

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]✓[/bold green] {message}")
