"""Console UI wrapper using Rich library."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Every user-facing message of a job (progress, soft failures,
    simulation notices) goes through this class, on standard output.
    Messages are escaped: release names often contain square brackets.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console (a new one writing to stdout by default)."""
        self.console = console or Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling."""
        self.console.print(f"[blue]ℹ️  {escape(message)}[/blue]")

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]❌ {escape(message)}[/red]")

    def print_success(self, message: str) -> None:
        """Print a success message with green styling."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def print_simulation(self, message: str) -> None:
        """Print a simulation message with dim styling."""
        self.console.print(f"[dim]🔍 SIMULATION - {escape(message)}[/dim]")

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        panel = Panel(content, title=title, border_style=border_style)
        self.console.print(panel)
