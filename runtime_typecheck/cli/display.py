"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Success/failure indicators
- Syntax-highlighted JSON values
- Expected-fragment tables
- The condition catalog
"""

import json
from typing import Any, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from runtime_typecheck.conditions.types import Fragment
from runtime_typecheck.errors import TypeCheckError


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{escape(title)}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print a JSON value with syntax highlighting.

    Args:
        data: JSON-serializable data
        title: Optional title for the panel
    """
    syntax = Syntax(json.dumps(data, indent=2), "json", theme="monokai", line_numbers=False)

    if title:
        console.print(Panel(syntax, title=f"[bold]{escape(title)}[/bold]", border_style="cyan"))
    else:
        console.print(syntax)


def print_type_check_error(error: TypeCheckError) -> None:
    """Print a failed check with its expected and actual descriptions."""
    print_error(str(error))
    console.print(f"   [dim]Expected:[/dim] {escape(error.expected)}")
    console.print(f"   [dim]Got:[/dim] {escape(error.actual)}")


def print_fragments(fragments: List[Fragment], rendered: List[str]) -> None:
    """
    Print merged expected fragments in a table.

    Args:
        fragments: Fragments from merge_expected
        rendered: The rendered phrase for each fragment
    """
    table = Table(title="Expected Alternatives", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Before", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("After", style="cyan")
    table.add_column("Rendered", style="green")

    for i, (fragment, text) in enumerate(zip(fragments, rendered), 1):
        table.add_row(
            str(i),
            escape(", ".join(fragment.before)),
            escape(fragment.type or "-"),
            escape("; ".join(fragment.after)),
            escape(text),
        )

    console.print()
    console.print(table)
    console.print()


def print_catalog(rows: List[Tuple[str, str]]) -> None:
    """Print catalog condition names with their expected message."""
    table = Table(title="Condition Catalog", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan", width=14)
    table.add_column("Expects", style="white")

    for name, expected in rows:
        table.add_row(name, escape(expected))

    console.print()
    console.print(table)
    console.print()
