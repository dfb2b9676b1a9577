"""Structured logging configuration."""

import logging
import sys

import structlog

# Map log level string to logging constant
_LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger, not once at configure time
    return structlog.PrintLogger(sys.stderr)


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog for the process.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR)
        log_format: "json" for machine-readable lines, "text" for console output
    """
    level = _LOG_LEVEL_MAP.get(log_level.lower(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if log_format == "json"
            else structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
