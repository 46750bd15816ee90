"""Console helpers shared by the CLI entry points."""

import functools
import sys
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Results go to stdout, status messages to stderr
console = Console()
err_console = Console(stderr=True)


def info(message: str) -> None:
    """Print an informational message."""
    err_console.print(f"[blue]ℹ[/blue] {escape(message)}")


def success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[green]✓[/green] {escape(message)}")


def warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]⚠[/yellow] {escape(message)}")


def error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]✗[/bold red] {escape(message)}")


def create_table(title: Optional[str] = None) -> Table:
    """Create a table with the common style."""
    return Table(title=title, show_header=True, header_style="bold magenta")


def print_table(table: Table) -> None:
    """Print a table to stdout."""
    console.print(table)


def handle_errors(func: Callable) -> Callable:
    """
    Turn unexpected exceptions into an error message and exit code.

    Click exceptions and explicit exits are left to click.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)
        except Exception as e:
            error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper
