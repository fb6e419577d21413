"""Daily check-in CLI command."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from cli.utils import get_components

console = Console()


@click.command()
@click.argument("level", type=click.IntRange(1, 5))
@click.argument("notes", required=False, default="")
def checkin(level: int, notes: str):
    """Record how you feel today (1=terrible, 5=excellent)."""
    from mood import mood_label
    from mood.stats import get_streak

    c = get_components()

    try:
        entry = c["store"].check_in(level, notes)
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    streak = get_streak(c["store"].entries, entry.timestamp)
    console.print(f"[green]Mood recorded:[/] {mood_label(entry.mood)} ({entry.mood}/5)")
    console.print(f"[dim]Check-in streak: {streak} day(s). Keep taking care of yourself.[/]")
