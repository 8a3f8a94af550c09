"""Structured logging for the CLI: console events on stderr, optional JSON log file.

stdout is reserved for command results, so nothing here ever writes to it.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _json_file_handler(log_dir: str, log_name: str) -> logging.Handler:
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path / f"{log_name}.log",
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=structlog.processors.JSONRenderer()))
    return handler


def setup_logging(
    log_dir: str | None,
    log_name: str = "deferred-link",
    *,
    verbose: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Route structlog through stdlib logging and return a logger named *log_name*.

    Console output goes to stderr at INFO (DEBUG with *verbose*). When *log_dir*
    is set, every event is also written there as JSON lines.
    """
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    stderr_handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=structlog.dev.ConsoleRenderer(colors=False)))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Repeated calls must not stack handlers
    root_logger.handlers.clear()
    root_logger.addHandler(stderr_handler)
    if log_dir:
        root_logger.addHandler(_json_file_handler(log_dir, log_name))

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger(log_name)
