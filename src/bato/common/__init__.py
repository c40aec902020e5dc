################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
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
Common utilities package.

This package provides shared functionality used across the application:
- Configuration validation (required keys, defaults)
- Logging configuration
- Error classification and handling

Usage:
    from bato.common import ConfigValidator, getLogger, ConfigurationError
"""

from .config_validator import ConfigValidationError, ConfigValidator
from .error_handler import (
    BatoError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    SystemFailureError,
    classifyError,
    formatError,
    handleError,
)
from .logging_config import getLogger, logWithContext, setupLogging

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'getLogger',
    'setupLogging',
    'logWithContext',
    'BatoError',
    'ConfigurationError',
    'DataError',
    'SystemFailureError',
    'ErrorCategory',
    'classifyError',
    'formatError',
    'handleError',
]
