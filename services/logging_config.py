import logging
from typing import Optional

import structlog

from .settings import get_log_level, use_json_logs


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """Filter structlog output at ``level``; console rendering unless JSON is asked for."""
    level = (level or get_log_level()).upper()
    json_logs = use_json_logs() if json_logs is None else json_logs

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
