################################################################################
# File Name: types.py
# Purpose/Description: Power supply constants and snapshot dataclass
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
Power supply constants and the parsed uevent snapshot.

All types have zero project dependencies (stdlib only) to avoid circular imports.
"""

from dataclasses import dataclass
from typing import Any

# ================================================================================
# Power Supply Constants
# ================================================================================

DEFAULT_SYS_PATH = '/sys/class/power_supply'
DEFAULT_BATTERY_NAME = 'BAT0'
UEVENT_FILE = 'uevent'

POWER_SUPPLY = 'POWER_SUPPLY'
CHARGE_PREFIX = 'CHARGE'
ENERGY_PREFIX = 'ENERGY'
FULL_ATTRIBUTE = 'FULL'
FULL_DESIGN_ATTRIBUTE = 'FULL_DESIGN'
NOW_ATTRIBUTE = 'NOW'
STATUS_ATTRIBUTE = 'POWER_SUPPLY_STATUS'

# Prefixes tried in order when locating the level attributes
ATTRIBUTE_PREFIXES = (ENERGY_PREFIX, CHARGE_PREFIX)


def attributeName(prefix: str, attribute: str) -> str:
    """
    Build a uevent attribute name.

    Args:
        prefix: ENERGY or CHARGE
        attribute: NOW, FULL or FULL_DESIGN

    Returns:
        Name such as 'POWER_SUPPLY_ENERGY_NOW'
    """
    return f"{POWER_SUPPLY}_{prefix}_{attribute}"


# ================================================================================
# Power Supply Data Classes
# ================================================================================

@dataclass(frozen=True)
class PowerSupplySnapshot:
    """
    Values parsed from one read of the uevent file.

    Attributes:
        now: Current energy or charge
        full: Full energy or charge (design or last full)
        status: Raw POWER_SUPPLY_STATUS token
    """

    now: int
    full: int
    status: str

    @property
    def level(self) -> int:
        """Charge percentage, truncated and clamped to 0-100."""
        return max(0, min(100, 100 * self.now // self.full))

    def toDict(self) -> dict[str, Any]:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the snapshot
        """
        return {
            'now': self.now,
            'full': self.full,
            'status': self.status,
            'level': self.level,
        }
