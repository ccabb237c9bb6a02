import logging

import structlog

from slack_notify.config import settings


def configure_logging(level: str | None = None, json_logs: bool | None = None):
    """Install the structlog processor chain used by the notifier.

    The notifier never calls this itself; the host tool calls it once at
    startup. Console output in development, one JSON object per line
    everywhere else.
    """
    if json_logs is None:
        json_logs = settings.APP_ENV != "development"
    level_name = (level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level_name)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
