"""Dashboard and history CLI commands."""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components

console = Console()


@click.command()
def dashboard():
    """Show today's mood, streak, and average."""
    from mood import mood_label
    from mood.stats import summarize

    c = get_components()
    stats = summarize(c["entries"])

    today = stats["today"]
    today_str = mood_label(today.mood) if today else "[dim]Not checked[/]"

    table = Table(show_header=False, title="Mood Dashboard")
    table.add_column("Stat", style="dim")
    table.add_column("Value")
    table.add_row("Today's Mood", today_str)
    table.add_row("Check-in Streak", f"{stats['streak']} days")
    table.add_row("Average Mood", f"{stats['average']:.1f}/5")
    table.add_row("Trend", f"{stats['trend']:+d}")
    table.add_row("Consistency", f"{stats['consistency']:.0f}%")
    table.add_row("Entries", str(stats["count"]))
    console.print(table)

    if not today:
        console.print(
            "\n[bold]Ready for your daily check-in?[/] Run [bold]mood checkin <1-5> \\[notes][/]"
        )


@click.command()
@click.option("-n", "--limit", default=10, type=click.IntRange(min=1), help="Max entries to show")
def history(limit: int):
    """List the most recent check-ins."""
    from mood import mood_label

    c = get_components()
    entries = c["entries"]

    if not entries:
        console.print("[yellow]No check-ins yet. Run `mood checkin` to start tracking.[/]")
        return

    table = Table(show_header=True, title=f"Last {min(limit, len(entries))} check-ins")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Notes")

    for entry in reversed(entries[-limit:]):
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d %H:%M"),
            f"{entry.mood} {mood_label(entry.mood)}",
            escape(entry.notes[:60]),
        )

    console.print(table)
