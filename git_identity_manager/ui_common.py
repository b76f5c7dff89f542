"""Common UI utilities shared across modules."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

# Create a custom theme for consistent styling
theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "title": "bold cyan",
        "highlight": "bold yellow",
        "path": "blue",
        "command": "green",
    }
)

console = Console(theme=theme)
error_console = Console(theme=theme, stderr=True)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr."""
    error_console.print(f"[error]Error:[/error] {escape(message)}")
    if details:
        error_console.print(f"[dim]{escape(details)}[/dim]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Warning:[/warning] {escape(message)}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]Success:[/success] {escape(message)}")
