"""Rich console helpers for terminal output."""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.status import Status


class Console:
    """Wrapper around rich.Console with convenience methods."""

    def __init__(self) -> None:
        self._console = RichConsole(highlight=False)

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        """Print a success message in green."""
        self._console.print(f"[green]✓[/green] {escape(message)}")

    def print_error(self, message: str) -> None:
        """Print an error message in red."""
        self._console.print(f"[red]✗[/red] {escape(message)}")

    def print_info(self, message: str) -> None:
        """Print an info message in blue."""
        self._console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def status(self, message: str) -> Status:
        """Create a status spinner context manager."""
        return self._console.status(message)


# Global console instance
console = Console()
