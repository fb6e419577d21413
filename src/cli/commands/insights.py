"""Sentiment insights CLI command."""

import click
from rich.console import Console
from rich.table import Table

from cli.utils import KIND_STYLES, get_components

console = Console()


@click.command()
def insights():
    """Show rule-based insights from mood levels and notes."""
    from mood.sentiment import derive_insights

    c = get_components()
    cfg = c["config_model"].insights
    results = derive_insights(
        c["entries"],
        max_insights=cfg.max_insights,
        recent_window=cfg.recent_window,
    )

    if not results:
        console.print("[dim]More insights will appear as you track your mood regularly.[/]")
        return

    table = Table(show_header=True, title="Insights")
    table.add_column("Kind")
    table.add_column("Insight")
    table.add_column("Confidence", justify="right")

    for insight in results:
        style = KIND_STYLES.get(insight.kind, "dim")
        table.add_row(
            f"[{style}]{insight.kind}[/]",
            f"[bold]{insight.title}[/]\n{insight.description}",
            f"{round(insight.confidence)}%",
        )

    console.print(table)
