################################################################################
# File Name: types.py
# Purpose/Description: Notification payload types
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
Notification payload types.

- Urgency enum mirroring the desktop notification urgency levels
- Notification dataclass holding one configured payload
- NotificationSink protocol implemented by notifiers

All types have zero project dependencies (stdlib only) to avoid circular imports.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Protocol


class Urgency(Enum):
    """
    Urgency level of a desktop notification.

    Values:
        LOW: Informational, may be shown unobtrusively
        NORMAL: Default urgency
        CRITICAL: Stays on screen until dismissed
    """

    LOW = "Low"
    NORMAL = "Normal"
    CRITICAL = "Critical"

    @classmethod
    def fromString(cls, value: str) -> 'Urgency':
        """
        Parse an urgency name, ignoring case.

        Args:
            value: Urgency name such as 'Critical' or 'low'

        Returns:
            Matching Urgency

        Raises:
            ValueError: If the name is not a known urgency
        """
        for urgency in cls:
            if urgency.value.lower() == str(value).strip().lower():
                return urgency
        valid = ', '.join(u.value for u in cls)
        raise ValueError(f"Unknown urgency '{value}', expected one of: {valid}")


@dataclass(frozen=True)
class Notification:
    """
    Content of a notification sent when entering a battery state.

    Attributes:
        summary: Title line of the notification
        body: Optional body text
        icon: Optional icon name or path
        urgency: Optional urgency, NORMAL is used when unset
    """

    summary: str
    body: Optional[str] = None
    icon: Optional[str] = None
    urgency: Optional[Urgency] = None

    def withDefaultUrgency(self, urgency: Urgency) -> 'Notification':
        """
        Return a copy with urgency filled in if it is unset.

        Args:
            urgency: Urgency to use when none is configured

        Returns:
            This notification if urgency is already set, else a copy
        """
        if self.urgency is not None:
            return self
        return replace(self, urgency=urgency)

    def toDict(self) -> dict[str, Any]:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the notification
        """
        return {
            'summary': self.summary,
            'body': self.body,
            'icon': self.icon,
            'urgency': self.urgency.value if self.urgency else None,
        }


class NotificationSink(Protocol):
    """Anything that can deliver a Notification."""

    def send(self, notification: Notification) -> None:
        ...
