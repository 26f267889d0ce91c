"""Output formatting utilities using Rich."""

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_error(msg: str) -> None:
    """Print an error message to stderr.

    Args:
        msg: The error message to display.
    """
    err_console.print(f"[bold red]Error:[/bold red] {msg}")


def print_success(msg: str) -> None:
    """Print a success message to the console.

    Args:
        msg: The success message to display.
    """
    console.print(f"[bold green]✓[/bold green] {msg}")


def print_warning(msg: str) -> None:
    """Print a warning message to the console.

    Args:
        msg: The warning message to display.
    """
    console.print(f"[bold yellow]Warning:[/bold yellow] {msg}")


def print_info(msg: str) -> None:
    """Print an info message to the console.

    Args:
        msg: The info message to display.
    """
    console.print(f"[cyan]{msg}[/cyan]")


def create_table(
    title: str | None = None,
    columns: list[tuple[str, str]] | None = None,
) -> Table:
    """Create a Rich table with a styled header.

    Args:
        title: Optional table title.
        columns: List of (column_name, column_style) tuples.

    Returns:
        A configured Rich Table instance.
    """
    table = Table(title=title, header_style="bold cyan")

    if columns:
        for col_name, col_style in columns:
            table.add_column(col_name, style=col_style)

    return table


def get_availability_color(availability: str) -> str:
    """Get the Rich color name for a host availability label.

    Args:
        availability: 'Available', 'Unavailable' or 'Unknown'.

    Returns:
        Rich color name ('green', 'red' or 'yellow').
    """
    if availability == "Available":
        return "green"
    elif availability == "Unavailable":
        return "red"
    else:
        return "yellow"


def format_host_status(status: str) -> str:
    """Format a raw host status code.

    Args:
        status: '0' (monitored) or '1' (not monitored).

    Returns:
        Human-readable status, or the raw code if unrecognized.
    """
    return {"0": "monitored", "1": "not monitored"}.get(status, status)
