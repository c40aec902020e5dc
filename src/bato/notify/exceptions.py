################################################################################
# File Name: exceptions.py
# Purpose/Description: Desktop notifier exceptions
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
Desktop notifier exceptions.

Exception hierarchy:
    SystemFailureError
    └── NotifierError
        ├── NotifierNotAvailableError
        └── NotifierInitError
"""

from ..common.error_handler import SystemFailureError


class NotifierError(SystemFailureError):
    """Base exception for desktop notifier errors."""
    pass


class NotifierNotAvailableError(NotifierError):
    """The libnotify bindings cannot be imported on this system."""
    pass


class NotifierInitError(NotifierError):
    """libnotify refused to initialize or create a notification."""
    pass
