################################################################################
# File Name: error_handler.py
# Purpose/Description: Error classification and reporting for bato
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
Error handling module.

Provides centralized error handling with:
- A base exception carrying a message and structured details
- Error classification (configuration, data, system)
- Structured error reporting

Every subsystem (config, power, notify, fsm) derives its exceptions from
one of the classes below so the command line entry point can decide the
exit code from the category alone.

Usage:
    from bato.common.error_handler import ConfigurationError, handleError

    try:
        result = operation()
    except Exception as e:
        handleError(e, reraise=False)
"""

import logging
import traceback
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification."""
    CONFIGURATION = 'config'      # Config errors, fail fast
    DATA = 'data'                 # Malformed input from the system
    SYSTEM = 'system'             # Unexpected or environment errors


# ================================================================================
# Custom Exception Classes
# ================================================================================

class BatoError(Exception):
    """Base exception for all bato errors."""

    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | details={self.details}"
        return self.message

    def toDict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'type': self.__class__.__name__,
            'category': self.category.value,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(BatoError):
    """Configuration validation failure."""
    category = ErrorCategory.CONFIGURATION


class DataError(BatoError):
    """Data read from the system could not be interpreted."""
    category = ErrorCategory.DATA


class SystemFailureError(BatoError):
    """Environment or native library failure."""
    category = ErrorCategory.SYSTEM


# ================================================================================
# Error Classification
# ================================================================================

def classifyError(error: Exception) -> ErrorCategory:
    """
    Classify an error into a category.

    Args:
        error: Exception to classify

    Returns:
        ErrorCategory for the error
    """
    if isinstance(error, BatoError):
        return error.category

    if isinstance(error, (ValueError, TypeError, KeyError)):
        return ErrorCategory.DATA

    return ErrorCategory.SYSTEM


# ================================================================================
# Error Handling
# ================================================================================

def handleError(
    error: Exception,
    context: dict[str, Any] | None = None,
    reraise: bool = True
) -> dict[str, Any]:
    """
    Handle an error with logging and classification.

    Args:
        error: Exception that occurred
        context: Additional context information
        reraise: Whether to re-raise the exception

    Returns:
        Error details dictionary

    Raises:
        The original exception if reraise is True
    """
    category = classifyError(error)
    context = context or {}

    errorDetails = {
        'type': type(error).__name__,
        'category': category.value,
        'message': str(error),
        'context': context,
        'traceback': ''.join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    }

    if category == ErrorCategory.CONFIGURATION:
        logger.error(f"Configuration error: {error}")
    elif category == ErrorCategory.DATA:
        logger.error(f"Data error: {error}")
    else:
        logger.error(f"Error: {error}", exc_info=error)

    if reraise:
        raise error

    return errorDetails


def formatError(error: Exception) -> str:
    """
    Format an error for display/logging.

    Args:
        error: Exception to format

    Returns:
        Formatted error string
    """
    category = classifyError(error)

    if isinstance(error, BatoError):
        details = f" | details={error.details}" if error.details else ""
        return f"[{category.value.upper()}] {error.message}{details}"

    return f"[{category.value.upper()}] {type(error).__name__}: {error}"
