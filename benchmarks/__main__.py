"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, select_benchmarks, to_table
from ._registery import CONSOLE

app = typer.Typer(help="Benchmarks for collext developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """Show all registered benchmarks."""
    table = Table(title="Registered benchmarks")
    table.add_column("Category")
    table.add_column("Name")
    table.add_column("Sizes")
    select_benchmarks(None).for_each(
        lambda b: table.add_row(b.category, b.name, ", ".join(map(str, b.sizes)))
    )
    CONSOLE.print(table)


@app.command()
def run(
    *,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only run benchmarks of this category."),
    ] = None,
) -> None:
    """Run benchmarks and print the median time per call."""
    selected = select_benchmarks(category)
    if selected.is_empty():
        CONSOLE.print(f"✗ No benchmark found for category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(run_pipeline(selected).pipe(to_table))
    CONSOLE.print("✓ Done", style="bold green")


if __name__ == "__main__":
    app()
