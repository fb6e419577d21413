"""Wellness recommendations CLI command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, icon_glyph

console = Console()

PRIORITY_STYLES = {"high": "red", "medium": "yellow", "low": "dim"}


@click.command()
@click.option(
    "--current",
    type=click.IntRange(1, 5),
    help="Mood to tailor for (defaults to today's check-in, then the latest one)",
)
def recommend(current: Optional[int]):
    """Suggest activities for your current mood."""
    from mood.recommendations import get_recommendations
    from mood.stats import get_todays_entry

    c = get_components()
    entries = c["entries"]

    if current is None:
        today = get_todays_entry(entries)
        current = today.mood if today else None

    table = Table(show_header=True, title="Personalized Recommendations")
    table.add_column("", width=2)
    table.add_column("Activity")
    table.add_column("Priority")
    table.add_column("Duration", justify="right")
    table.add_column("Action", style="dim")

    for rec in get_recommendations(entries, current):
        style = PRIORITY_STYLES.get(rec.priority, "dim")
        table.add_row(
            icon_glyph(rec.icon),
            f"[bold]{rec.title}[/]\n{rec.description}",
            f"[{style}]{rec.priority}[/]",
            rec.duration or "",
            rec.action or "",
        )

    console.print(table)
