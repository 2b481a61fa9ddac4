"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from rich.console import Console as RichConsole
from rich.table import Table

from featurehouse.domain.warehouse.model.table import TableDefinition


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def info(self, message: str) -> None:
        self._console.print(f"[dim]{message}[/dim]")

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def table_definition(self, table: TableDefinition) -> None:
        """Print the columns and partitioning of a destination table."""
        partitioning = table.time_partitioning
        out = Table(
            title=f"[bold]{table.ref}[/bold]",
            caption=f"partitioned by {partitioning.type} on {partitioning.field}",
            show_header=True,
            header_style="bold",
        )
        out.add_column("#", style="dim", width=3)
        out.add_column("Column", style="cyan")
        out.add_column("Type")
        out.add_column("Description")

        for i, column in enumerate(table.columns, 1):
            out.add_row(str(i), column.name, column.type.value, column.description)

        self._console.print(out)


_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
