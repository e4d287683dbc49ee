"""
JSON logging for the service.

structlog events and plain stdlib records (uvicorn startup and access lines)
go through the same ``ProcessorFormatter``, so stdout carries one JSON object
per line with ``level``, ``logger`` and ``timestamp`` keys.
"""

import logging
import sys

import structlog

# uvicorn loggers that should emit through the root JSON handler
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering both structlog events and foreign stdlib records as JSON."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure structlog and the root logger; safe to call more than once."""

    if isinstance(level, str):
        level = level.upper()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(json_formatter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
