################################################################################
# File Name: __init__.py
# Purpose/Description: Battery state subpackage
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
Battery Subpackage.

Exports:
    Types and Constants:
        - BatteryState: Enum of the five battery states
        - Reading: Per-tick context passed to the state machine
        - INITIAL_STATE, STATUS_CHARGING, STATUS_DISCHARGING, STATUS_FULL

    Classes:
        - BatteryStateHandler and the five concrete handlers

    Factory Functions:
        - createBatteryStates: Handler table covering every state
        - createBatteryFsm: State machine positioned at DISCHARGING
"""

from .states import (
    BatteryStateHandler,
    ChargingState,
    CriticalState,
    DischargingState,
    FullState,
    LowState,
    createBatteryFsm,
    createBatteryStates,
)
from .types import (
    INITIAL_STATE,
    STATUS_CHARGING,
    STATUS_DISCHARGING,
    STATUS_FULL,
    BatteryState,
    Reading,
)

__all__ = [
    'BatteryState',
    'Reading',
    'INITIAL_STATE',
    'STATUS_CHARGING',
    'STATUS_DISCHARGING',
    'STATUS_FULL',
    'BatteryStateHandler',
    'ChargingState',
    'DischargingState',
    'FullState',
    'LowState',
    'CriticalState',
    'createBatteryStates',
    'createBatteryFsm',
]
