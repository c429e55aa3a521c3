"""Structlog setup: one event per line on stderr, console or JSON."""

import logging
import sys

import structlog

from gitcard.config import GitCardConfig, LogFormat

SHARED_PROCESSORS = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _stderr_logger(*args) -> structlog.PrintLogger:
    # sys.stderr is read per logger: CliRunner and capsys swap it.
    return structlog.PrintLogger(file=sys.stderr)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _render_processors(log_format: LogFormat) -> list:
    if log_format == LogFormat.JSON:
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(config: GitCardConfig | None = None) -> int:
    """
    Route structlog events to stderr, keeping stdout free for command output.

    Args:
        config: GitCardConfig instance, uses defaults if None

    Returns:
        The numeric level below which events are dropped
    """
    config = config or GitCardConfig()
    level = _resolve_level(config.log_level)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, *_render_processors(config.log_format)],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
    return level


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Structlog logger, tagged with ``logger_name`` when a name is given."""
    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
