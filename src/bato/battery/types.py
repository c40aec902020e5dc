################################################################################
# File Name: types.py
# Purpose/Description: Battery state keys and the per-tick reading
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
Battery state keys and the per-tick reading.

This module contains:
- Status token constants as written by the kernel in POWER_SUPPLY_STATUS
- BatteryState enum, the closed set of state machine keys
- Reading dataclass, the context passed to Fsm.shift() once per tick
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..notify.types import Notification, NotificationSink

# ================================================================================
# Status Tokens
# ================================================================================

STATUS_CHARGING = "Charging"
STATUS_DISCHARGING = "Discharging"
STATUS_FULL = "Full"


# ================================================================================
# Battery Enums
# ================================================================================

class BatteryState(Enum):
    """
    State of the battery as tracked by the state machine.

    Values:
        CHARGING: Plugged in and charging
        DISCHARGING: Running on battery above the low threshold
        FULL: Plugged in and fully charged
        LOW: Discharging at or below the low threshold
        CRITICAL: Discharging at or below the critical threshold
    """

    CHARGING = "charging"
    DISCHARGING = "discharging"
    FULL = "full"
    LOW = "low"
    CRITICAL = "critical"


# Initial state: the most common state on a running laptop
INITIAL_STATE = BatteryState.DISCHARGING


# ================================================================================
# Battery Data Classes
# ================================================================================

@dataclass
class Reading:
    """
    Snapshot of battery telemetry and settings for one tick.

    The status token is opaque: values other than Charging, Discharging and
    Full never cause a transition.

    Attributes:
        currentLevel: Charge percentage, 0-100
        status: Raw POWER_SUPPLY_STATUS token
        lowLevel: Low threshold percentage
        criticalLevel: Critical threshold percentage (<= lowLevel)
        notifier: Handle used to send payloads, never inspected here
        charging: Payload sent when entering CHARGING
        discharging: Payload sent when entering DISCHARGING
        full: Payload sent when entering FULL
        low: Payload sent when entering LOW
        critical: Payload sent when entering CRITICAL
    """

    currentLevel: int
    status: str
    lowLevel: int
    criticalLevel: int
    notifier: NotificationSink
    charging: Optional[Notification] = None
    discharging: Optional[Notification] = None
    full: Optional[Notification] = None
    low: Optional[Notification] = None
    critical: Optional[Notification] = None

    def payloadFor(self, state: BatteryState) -> Optional[Notification]:
        """
        Get the payload configured for a state.

        Args:
            state: Battery state being entered

        Returns:
            Configured notification, or None
        """
        return getattr(self, state.value)

    def toDict(self) -> dict[str, Any]:
        """
        Convert to dictionary for logging.

        Returns:
            Dictionary with the telemetry fields (payloads omitted)
        """
        return {
            'currentLevel': self.currentLevel,
            'status': self.status,
            'lowLevel': self.lowLevel,
            'criticalLevel': self.criticalLevel,
        }
