"""Logging setup."""

import logging
import sys

import structlog

from .config import settings


def configure_logging(level=None, fmt=None):
    """Route structlog through the standard library logger.

    Args:
        level: Log level name, defaults to settings.log_level.
        fmt: "json" or "console", defaults to settings.log_format.
    """
    level = (level or settings.log_level).upper()
    fmt = fmt or settings.log_format

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("delaunay_voronoi").setLevel(level)

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
