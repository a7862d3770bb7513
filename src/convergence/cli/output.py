"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
status messages, a spinner around remote calls, and tables for spaces and
pages. Supports verbosity levels and a --no-color flag.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from convergence.models import Page, Space


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> with handler.spinner("Fetching spaces..."):
        ...     spaces = cache.get_spaces()
        >>> handler.print_spaces(spaces)
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    # Messages carry titles and error text from Confluence, so they are
    # escaped before being combined with markup.

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(message, markup=False)

    def print(self, message: str) -> None:
        """Display message without markup processing."""
        self.console.print(message, markup=False, soft_wrap=True)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner while a remote call runs.

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     page = cache.get_page_by_id("DEV", "123")
        """
        spinner = Spinner("dots", text=Text(message))
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_spaces(self, spaces: Iterable[Space]) -> None:
        """Display spaces as a table."""
        table = Table(title="Spaces")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Type")
        table.add_column("Homepage", justify="right")

        for space in spaces:
            table.add_row(
                escape(space.key),
                escape(space.name),
                escape(space.type),
                escape(space.homepage_id),
            )

        self.console.print(table)

    def print_page(self, page: Page, show_body: bool = True) -> None:
        """Display page metadata, followed by the rewritten body."""
        table = Table(show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        table.add_row("ID", escape(page.id))
        table.add_row("Title", escape(page.title))
        table.add_row("Status", escape(page.status))
        table.add_row("Type", escape(page.type))
        table.add_row("Link", escape(page.link))
        self.console.print(table)

        if show_body:
            self.console.rule()
            self.print(page.body_html)
