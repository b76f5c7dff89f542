"""UI module for the Git identity manager."""

from collections.abc import Callable
from typing import Any

from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from .exceptions import IdentityManagerError
from .registry import IdentityRegistry
from .ui_common import console

PLACEHOLDER = "N/A"

Asker = Callable[[str], str]


def ask(question: str) -> str:
    """Ask the user for one line of input, trimmed."""
    try:
        return Prompt.ask(question, console=console).strip()
    except (KeyboardInterrupt, EOFError):
        raise IdentityManagerError("Operation cancelled by user") from None


def _display_field(record: Any, field_name: str) -> str:
    """Get a field of a stored record for display."""
    value = record.get(field_name) if isinstance(record, dict) else None
    return value if isinstance(value, str) else PLACEHOLDER


def print_identity_table(registry: IdentityRegistry) -> None:
    """Print the stored identities as a numbered list sorted by key."""
    if not len(registry):
        console.print("No identities found.")
        return

    console.print("Available identities:")
    table = Table(box=None, show_header=False, padding=(0, 1, 0, 2))
    table.add_column("Number", justify="right", style="highlight")
    table.add_column("Name", style="info")
    table.add_column("Email", style="success")

    for i, (_, record) in enumerate(registry.list_sorted(), start=1):
        table.add_row(
            f"{i}.",
            escape(_display_field(record, "name")),
            escape(f"<{_display_field(record, 'email')}>"),
        )

    console.print(table)


def print_menu(registry: IdentityRegistry) -> None:
    """Print the full menu: title, identities and options."""
    console.print("\n[title]=== Git Identity Manager ===[/title]\n")
    print_identity_table(registry)

    options = Table(box=None, show_header=False, padding=(0, 1, 0, 2))
    options.add_column("Key", style="command")
    options.add_column("Action")
    options.add_row(escape("[number]"), "Select and set that identity")
    options.add_row("a", "Add a new identity")
    options.add_row("q", "Quit")

    console.print("\nOptions:")
    console.print(options)
    console.print()


def prompt_choice(asker: Asker = ask) -> str:
    """Prompt for a menu choice."""
    return asker("Enter your choice")


def prompt_new_identity(asker: Asker = ask) -> tuple[str, str]:
    """Prompt for the name and email of a new identity."""
    console.print("\n[title]Adding new identity:[/title]")
    name = asker("Enter the Git name for this identity").strip()
    email = asker("Enter your Git email").strip()
    return name, email
