################################################################################
# File Name: logging_config.py
# Purpose/Description: Structured logging configuration and utilities
# Author: bato developers
# Creation Date: 2026-10-12
# Copyright: (c) 2026 bato Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author         | Description
# ================================================================================
# 2026-10-12    | bato developers | Initial implementation
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console (stderr) and optional file output
- Consistent formatting with key=value context

Usage:
    from bato.common.logging_config import setupLogging, getLogger

    setupLogging(level='INFO')
    logger = getLogger(__name__)
    logWithContext(logger, 'info', "State changed", state='low')
"""

import logging
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# LogRecord attribute holding the context passed to logWithContext()
CONTEXT_ATTRIBUTE = 'context'


class StructuredFormatter(logging.Formatter):
    """
    Formatter appending the key=value context attached by logWithContext().

    Records logged without context are formatted as by logging.Formatter.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        context = getattr(record, CONTEXT_ATTRIBUTE, None)
        if isinstance(context, dict) and context:
            message += formatContext(context)

        return message


def formatContext(context: dict[str, Any]) -> str:
    """
    Render context fields as a log message suffix.

    Args:
        context: Field names and values

    Returns:
        String such as " | state=low percent=25"
    """
    return " | " + " ".join(f"{key}={value}" for key, value in context.items())


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None,
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers
    rootLogger.handlers.clear()

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    consoleHandler = logging.StreamHandler(sys.stderr)
    consoleHandler.setFormatter(formatter)
    rootLogger.addHandler(consoleHandler)

    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.FileHandler(logFile, encoding='utf-8')
        fileHandler.setFormatter(formatter)
        rootLogger.addHandler(fileHandler)

    rootLogger.info(f"Logging configured | level={level}")

    return rootLogger


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    logLevel: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    The context travels on the record and is rendered by
    StructuredFormatter, so handlers without it still get the plain message.

    Args:
        logger: Logger instance
        logLevel: Log level name (debug, info, warning, error)
        message: Log message
        **context: Fields appended as key=value pairs
    """
    logFunc = getattr(logger, logLevel.lower(), logger.info)
    logFunc(message, extra={CONTEXT_ATTRIBUTE: dict(context)})
