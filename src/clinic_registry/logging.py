"""Logging configuration for the clinic registry."""

import logging
import sys

from loguru import logger

# Standard-library loggers routed into loguru at the application level
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "strawberry", "asyncio")


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru."""

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the record, skipping logging internals
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str):
    """Configure loguru for the whole process.

    Args:
        log_level: Log level name (already resolved from settings and CLI overrides).
    """
    log_level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=log_level, colorize=True)

    logger.info(f"Log level set to: {log_level}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers = [InterceptHandler()]
        routed.propagate = False
        routed.setLevel(log_level)
