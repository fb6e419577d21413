"""CLI entry point for the mood tracker."""

import sys

import click
from rich.console import Console
from rich.markup import escape

from cli.commands import chart, checkin, dashboard, export, history, insights, recommend
from cli.config import load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(verbose: bool, json_logs: bool):
    """Mood tracker - daily check-ins, trends, and insights."""
    try:
        log_cfg = load_config_model().logging
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    setup_logging(
        json_mode=json_logs or log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
    )


cli.add_command(checkin)
cli.add_command(dashboard)
cli.add_command(history)
cli.add_command(chart)
cli.add_command(insights)
cli.add_command(recommend)
cli.add_command(export)


if __name__ == "__main__":
    cli()
