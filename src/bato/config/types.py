################################################################################
# File Name: types.py
# Purpose/Description: Configuration constants and dataclass
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
Configuration constants and the validated configuration dataclass.

The YAML file uses snake_case keys:

    tick_rate: 5
    bat_name: BAT0
    low_level: 30
    critical_level: 10
    full_design: true
    critical:
      summary: Critical battery level!
      body: Plug in the charger
      icon: battery-caution
      urgency: Critical
    low: {summary: Low battery}
    full: {summary: Battery full}
    charging: {summary: Charging}
    discharging: {summary: Discharging}
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..battery.types import BatteryState
from ..notify.types import Notification

# ================================================================================
# Configuration Constants
# ================================================================================

CONFIG_DIR_NAME = 'bato'
CONFIG_FILE_NAME = 'bato.yaml'

DEFAULT_TICK_RATE_SECONDS = 5
MIN_TICK_RATE_SECONDS = 1

MIN_LEVEL = 0
MAX_LEVEL = 100

# Payload sections, one per battery state
NOTIFICATION_SECTIONS = tuple(state.value for state in BatteryState)

REQUIRED_FIELDS = ['low_level', 'critical_level']

DEFAULTS: dict[str, Any] = {
    'tick_rate': DEFAULT_TICK_RATE_SECONDS,
    'bat_name': 'BAT0',
    'full_design': True,
}

KNOWN_KEYS = frozenset(
    ['tick_rate', 'bat_name', 'low_level', 'critical_level', 'full_design']
    + list(NOTIFICATION_SECTIONS)
)

NOTIFICATION_KEYS = frozenset(['summary', 'body', 'icon', 'urgency'])


# ================================================================================
# Configuration Data Classes
# ================================================================================

@dataclass
class BatoConfig:
    """
    Validated bato configuration.

    Attributes:
        lowLevel: Low threshold percentage
        criticalLevel: Critical threshold percentage (<= lowLevel)
        tickRate: Seconds between two polls
        batName: Battery directory under /sys/class/power_supply
        fullDesign: Use design capacity as 100% instead of last full charge
        charging: Payload for entering CHARGING
        discharging: Payload for entering DISCHARGING
        full: Payload for entering FULL
        low: Payload for entering LOW
        critical: Payload for entering CRITICAL
    """

    lowLevel: int
    criticalLevel: int
    tickRate: int = DEFAULT_TICK_RATE_SECONDS
    batName: str = 'BAT0'
    fullDesign: bool = True
    charging: Optional[Notification] = None
    discharging: Optional[Notification] = None
    full: Optional[Notification] = None
    low: Optional[Notification] = None
    critical: Optional[Notification] = None

    def notificationFor(self, state: BatteryState) -> Optional[Notification]:
        """
        Get the payload configured for a state.

        Args:
            state: Battery state

        Returns:
            Configured notification, or None
        """
        return getattr(self, state.value)

    def toDict(self) -> dict[str, Any]:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Dictionary representation using the YAML key names
        """
        result: dict[str, Any] = {
            'tick_rate': self.tickRate,
            'bat_name': self.batName,
            'low_level': self.lowLevel,
            'critical_level': self.criticalLevel,
            'full_design': self.fullDesign,
        }
        for state in BatteryState:
            notification = self.notificationFor(state)
            result[state.value] = notification.toDict() if notification else None
        return result
