"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

# Event keys carrying the user's own note text
_PRIVATE_KEYS = frozenset({"notes"})


def _mask_private(_, __, event_dict: dict) -> dict:
    """Structlog processor replacing note text with its length.

    `MoodStore.check_in` logs the note it recorded; only "<N chars>" is rendered.
    """
    for key in _PRIVATE_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = f"<{len(value)} chars>"
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors run for both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        _mask_private,
    ]


def _stderr_handler(renderer) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def setup_logging(json_mode: bool = False, level: str = "WARNING") -> None:
    """Route structlog events through stdlib logging to stderr.

    Args:
        json_mode: One JSON object per line instead of the console renderer.
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to WARNING so normal CLI output stays clean.
    """
    renderer = (
        structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_stderr_handler(renderer))
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
