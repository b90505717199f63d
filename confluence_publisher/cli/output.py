"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output
and ConsolePublisherListener, which reports publish events through it.
Supports verbosity levels and the --no-color flag.
"""

from rich.console import Console
from rich.markup import escape

from ..confluence_client.models import RemotePageSnapshot
from .models import PublishSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Publish completed")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print_summary(self, summary: PublishSummary, root_url: str = "") -> None:
        """Display publish summary with color coding.

        Args:
            summary: Event counts collected during the publish
            root_url: Confluence root URL that was published to
        """
        self.console.print("\n[bold]Publish Summary:[/bold]")

        if summary.added_count > 0:
            self.console.print(f"  [green]+[/green] Added: {summary.added_count} page(s)")

        if summary.updated_count > 0:
            self.console.print(f"  [blue]↑[/blue] Updated: {summary.updated_count} page(s)")

        if summary.deleted_count > 0:
            self.console.print(f"  [red]✗[/red] Deleted: {summary.deleted_count} page(s)")

        if summary.unchanged_count > 0:
            self.console.print(f"  [dim]─[/dim] Unchanged: {summary.unchanged_count} page(s)")

        changes = summary.added_count + summary.updated_count + summary.deleted_count
        if changes == 0 and summary.unchanged_count == 0:
            self.console.print("\n[yellow]No pages to publish[/yellow]")
        elif changes == 0:
            self.console.print("\n[green]Already up to date. No changes published.[/green]")
        else:
            target = f" to {escape(root_url)}" if root_url else ""
            self.console.print(f"\n[green]Publish completed successfully{target}[/green]")


class ConsolePublisherListener:
    """PublisherListener that reports page events on the console.

    Keeps a PublishSummary of everything it was told about.

    Example:
        >>> listener = ConsolePublisherListener(OutputHandler(verbosity=1))
        >>> publish(metadata, strategy, store, listener=listener)
        >>> listener.summary.added_count
        2
    """

    def __init__(self, output: OutputHandler):
        self.output = output
        self.summary = PublishSummary()
        self.completed = False

    def page_added(self, added_page: RemotePageSnapshot) -> None:
        self.summary.added_count += 1
        self.output.info(f"Added page '{added_page.title}' ({added_page.page_id})")

    def page_updated(self, existing_page: RemotePageSnapshot, updated_page: RemotePageSnapshot) -> None:
        self.summary.updated_count += 1
        if existing_page.title != updated_page.title:
            self.output.info(
                f"Updated page '{existing_page.title}' -> '{updated_page.title}' "
                f"({updated_page.page_id}, version {updated_page.version})"
            )
        else:
            self.output.info(
                f"Updated page '{updated_page.title}' "
                f"({updated_page.page_id}, version {updated_page.version})"
            )

    def page_deleted(self, deleted_page: RemotePageSnapshot) -> None:
        self.summary.deleted_count += 1
        self.output.info(f"Deleted page '{deleted_page.title}' ({deleted_page.page_id})")

    def publish_completed(self) -> None:
        self.completed = True
        self.output.debug("Publish completed")
