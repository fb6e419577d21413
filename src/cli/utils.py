"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console
from rich.markup import escape

console = Console()
logger = structlog.get_logger()

ICON_GLYPHS = {
    "brain": "🧠",
    "heart": "❤",
    "zap": "⚡",
    "users": "👥",
}

KIND_STYLES = {
    "positive": "green",
    "neutral": "dim",
    "negative": "red",
    "warning": "yellow",
}


def get_components():
    """Load config and open the mood store.

    Exits with status 1 on invalid config or a corrupt data file.
    """
    from cli.config import load_config_model
    from mood import MoodStore

    try:
        config_model = load_config_model()
        store = MoodStore(config_model.paths.data_file)
        entries = store.entries
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    logger.debug("components_loaded", data_file=str(store.path), entries=len(entries))
    return {
        "config_model": config_model,
        "store": store,
        "entries": entries,
    }


def icon_glyph(icon: str) -> str:
    """Terminal glyph for a recommendation icon id."""
    return ICON_GLYPHS.get(str(icon), "•")
