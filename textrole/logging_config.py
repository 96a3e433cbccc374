"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from textrole import config


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure structlog on top of the standard logging module.

    Applied once when the package is imported, with the configured level;
    applications may call it again to change level or rendering. Handlers
    are left to the host application.

    Args:
        level: Log level name, defaults to the configured one
        json: Render JSON lines rather than console output
    """
    level = (level or config.settings.log_level).upper()
    json = config.settings.log_json if json is None else json

    logging.getLogger("textrole").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Loggers must pick up a later reconfiguration
        cache_logger_on_first_use=False,
    )
