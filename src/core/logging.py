"""Structured logging configuration."""

import logging
import sys

import structlog


def setup_logging(level: str, log_format: str) -> None:
    """
    Configure structlog and the standard library root logger.

    JSON output is used unless the format is set to ``console``.
    """
    level_name = level.upper()
    log_level = getattr(logging, level_name, logging.INFO)
    use_json = log_format.lower() != "console"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
