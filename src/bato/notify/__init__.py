################################################################################
# File Name: __init__.py
# Purpose/Description: Notification subpackage
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
Notification Subpackage.

Exports:
    Types:
        - Urgency: Notification urgency enum
        - Notification: Configured notification payload
        - NotificationSink: Protocol for anything with send(notification)

    Exceptions:
        - NotifierError: Base notifier exception
        - NotifierNotAvailableError: libnotify bindings missing
        - NotifierInitError: libnotify initialization failure

    Classes:
        - DesktopNotifier: libnotify-backed notifier
"""

from .exceptions import NotifierError, NotifierInitError, NotifierNotAvailableError
from .notifier import DEFAULT_APP_NAME, DesktopNotifier
from .types import Notification, NotificationSink, Urgency

__all__ = [
    'Urgency',
    'Notification',
    'NotificationSink',
    'NotifierError',
    'NotifierInitError',
    'NotifierNotAvailableError',
    'DesktopNotifier',
    'DEFAULT_APP_NAME',
]
