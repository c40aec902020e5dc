################################################################################
# File Name: exceptions.py
# Purpose/Description: Configuration exception classes
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
Configuration exception classes.

Usage:
    from bato.config.exceptions import BatoConfigError

    try:
        config = loadBatoConfig()
    except BatoConfigError as e:
        print(f"Config error: {e}")
        print(f"Missing fields: {e.missingFields}")
        print(f"Invalid fields: {e.invalidFields}")
"""

from ..common.error_handler import ConfigurationError


class BatoConfigError(ConfigurationError):
    """
    Raised when configuration loading or validation fails.

    Attributes:
        missingFields: List of required field paths that are missing
        invalidFields: List of field paths with invalid values
    """

    def __init__(
        self,
        message: str,
        missingFields: list[str] | None = None,
        invalidFields: list[str] | None = None
    ):
        """
        Initialize the configuration error.

        Args:
            message: Human-readable error description
            missingFields: List of required field paths that are missing
            invalidFields: List of field paths with invalid values
        """
        super().__init__(message)
        self.missingFields = missingFields or []
        self.invalidFields = invalidFields or []
