"""Data export CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.utils import get_components

console = Console()


@click.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option(
    "-f",
    "--format",
    "fmt",
    default="json",
    type=click.Choice(["json", "csv"]),
    help="Export format",
)
def export(output: str, fmt: str):
    """Export all check-ins to a file."""
    c = get_components()
    store = c["store"]
    output_path = Path(output)

    if fmt == "csv":
        count = store.export_csv(output_path)
    else:
        count = store.export_json(output_path)

    console.print(f"[green]Exported[/] {count} check-in(s) to {output_path}")
