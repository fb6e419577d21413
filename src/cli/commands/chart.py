"""Mood trend chart CLI command."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components

console = Console()

MOOD_BAR = {
    1: "[red]█[/]",
    2: "[red]██[/]",
    3: "[yellow]███[/]",
    4: "[green]████[/]",
    5: "[green]█████[/]",
}


@click.command()
@click.option("-d", "--days", type=click.IntRange(1, 365), help="Lookback days")
def chart(days: Optional[int]):
    """Show mood per day over the last N days."""
    from mood import mood_label
    from mood.chart import daily_series, render_sparkline
    from mood.stats import get_average_mood, get_trend

    c = get_components()
    days = days or c["config_model"].chart.days
    entries = c["entries"]

    series = daily_series(entries, days=days)
    if not any(p["mood"] for p in series):
        console.print(f"[yellow]No check-ins in the last {days} days.[/]")
        return

    table = Table(show_header=True, title=f"Mood - last {days} days")
    table.add_column("Day", style="dim")
    table.add_column("Mood")
    for point in series:
        if point["mood"] is None:
            continue
        table.add_row(point["label"], f"{MOOD_BAR[point['mood']]} {mood_label(point['mood'])}")
    console.print(table)

    trend = get_trend(entries)
    trend_style = "green" if trend >= 0 else "red"
    console.print(f"\n{render_sparkline(series)}")
    console.print(
        f"[bold]Average:[/] {get_average_mood(entries):.1f}/5  |  "
        f"[bold]Trend:[/] [{trend_style}]{trend:+d}[/]"
    )
