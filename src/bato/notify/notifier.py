################################################################################
# File Name: notifier.py
# Purpose/Description: libnotify desktop notifier
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
Desktop notifier backed by libnotify.

Talks to the notification daemon through the PyGObject bindings
(gi.repository.Notify). A single Notify.Notification is created when the
notifier is opened and reused for every message, so a new battery event
replaces the previous bubble instead of stacking a new one.

Usage:
    from bato.notify.notifier import DesktopNotifier
    from bato.notify.types import Notification, Urgency

    with DesktopNotifier(appName='bato') as notifier:
        notifier.send(Notification(summary='Battery low', urgency=Urgency.NORMAL))

Note:
    This module requires PyGObject and the libnotify typelib. The import is
    deferred to open(); on systems without them open() raises
    NotifierNotAvailableError.
"""

import logging
from typing import Any

from .exceptions import NotifierInitError, NotifierNotAvailableError
from .types import Notification, Urgency

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = 'bato'
NOTIFY_API_VERSION = '0.7'


def _loadLibnotify() -> tuple[Any, Any]:
    """
    Import the libnotify and GLib bindings.

    Returns:
        Tuple of (Notify module, GLib module)

    Raises:
        NotifierNotAvailableError: If PyGObject or the Notify typelib is missing
    """
    try:
        import gi
        gi.require_version('Notify', NOTIFY_API_VERSION)
        from gi.repository import GLib, Notify
    except (ImportError, ValueError) as e:
        raise NotifierNotAvailableError(
            f"libnotify bindings not available: {e}"
        ) from e
    return Notify, GLib


class DesktopNotifier:
    """
    Sends battery notifications to the desktop notification daemon.

    Attributes:
        appName: Application name registered with libnotify
        isOpen: True between open() and close()
    """

    def __init__(self, appName: str = DEFAULT_APP_NAME):
        """
        Initialize the notifier without touching libnotify.

        Args:
            appName: Application name shown by the notification daemon
        """
        self._appName = appName
        self._notify: Any = None
        self._glib: Any = None
        self._notification: Any = None

    @property
    def appName(self) -> str:
        """Get the registered application name."""
        return self._appName

    @property
    def isOpen(self) -> bool:
        """Check if the notifier has been opened."""
        return self._notification is not None

    def open(self) -> None:
        """
        Initialize libnotify and create the reusable notification.

        Raises:
            NotifierNotAvailableError: If the bindings cannot be imported
            NotifierInitError: If libnotify fails to initialize
        """
        if self.isOpen:
            return

        notify, glib = _loadLibnotify()

        if not notify.init(self._appName):
            raise NotifierInitError(
                "libnotify failed to initialize",
                details={'appName': self._appName},
            )

        notification = notify.Notification.new(self._appName, None, None)
        if notification is None:
            notify.uninit()
            raise NotifierInitError(
                "libnotify failed to create a notification",
                details={'appName': self._appName},
            )

        self._notify = notify
        self._glib = glib
        self._notification = notification
        logger.info(f"Desktop notifier initialized | app={self._appName}")

    def _mapUrgency(self, urgency: Urgency | None) -> Any:
        urgencies = self._notify.Urgency
        if urgency == Urgency.LOW:
            return urgencies.LOW
        if urgency == Urgency.CRITICAL:
            return urgencies.CRITICAL
        return urgencies.NORMAL

    def send(self, notification: Notification) -> None:
        """
        Show a notification.

        Failures to update or show are logged and do not raise, so a flaky
        notification daemon does not stop battery monitoring.

        Args:
            notification: Payload to display

        Raises:
            NotifierInitError: If the notifier has not been opened
        """
        if not self.isOpen:
            raise NotifierInitError("Notifier is not open")

        if not self._notification.update(
            notification.summary, notification.body, notification.icon
        ):
            logger.error("libnotify failed to update the notification")
            return

        self._notification.set_urgency(self._mapUrgency(notification.urgency))

        try:
            shown = self._notification.show()
        except self._glib.Error as e:
            logger.error(f"libnotify failed to show the notification: {e}")
            return

        if not shown:
            logger.error("libnotify failed to show the notification")
            return

        logger.debug(f"Notification shown | summary={notification.summary}")

    def close(self) -> None:
        """
        Release the notification and uninitialize libnotify.

        Safe to call more than once.
        """
        if not self.isOpen:
            return

        self._notification = None
        self._notify.uninit()
        logger.debug("Desktop notifier closed")

    def __enter__(self) -> 'DesktopNotifier':
        """Context manager entry, opens the notifier."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close the notifier."""
        self.close()
