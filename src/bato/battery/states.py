################################################################################
# File Name: states.py
# Purpose/Description: Battery state handlers and state machine factory
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
Battery state handlers.

Five handlers, one per BatteryState. Entering a state sends that state's
payload through the reading's notifier if one is configured; leaving a
state does nothing. The transition rules are:

    CHARGING     Full -> FULL; Discharging -> CRITICAL / LOW / DISCHARGING
    DISCHARGING  Charging -> CHARGING; Full -> FULL;
                 Discharging -> CRITICAL / LOW when under a threshold
    FULL         Charging -> CHARGING; Discharging -> DISCHARGING
    LOW          Charging -> CHARGING; Discharging -> CRITICAL when critical
    CRITICAL     Charging -> CHARGING

The critical threshold is always tested before the low one, so a level at
or below critical is never reported as merely low. Since the state machine
is the only memory of what was announced, a payload is sent exactly once
per transition into its state.

Usage:
    from bato.battery.states import createBatteryFsm

    fsm = createBatteryFsm()
    fsm.shift(reading)
"""

import logging
from typing import Optional

from ..fsm import Fsm, FsmState
from .types import (
    INITIAL_STATE,
    STATUS_CHARGING,
    STATUS_DISCHARGING,
    STATUS_FULL,
    BatteryState,
    Reading,
)

logger = logging.getLogger(__name__)


def _dischargingState(reading: Reading) -> Optional[BatteryState]:
    """Classify a discharging level against the thresholds, critical first."""
    if reading.currentLevel <= reading.criticalLevel:
        return BatteryState.CRITICAL
    if reading.currentLevel <= reading.lowLevel:
        return BatteryState.LOW
    return None


class BatteryStateHandler(FsmState[BatteryState, Reading]):
    """
    Common behavior of the battery states.

    Subclasses set `state` and implement nextState().
    """

    state: BatteryState

    def enter(self, reading: Reading) -> None:
        """
        Send the payload configured for this state, if any.

        Args:
            reading: Current tick's reading
        """
        payload = reading.payloadFor(self.state)
        logger.info(
            f"Entered {self.state.value} | level={reading.currentLevel}%, "
            f"status={reading.status}"
        )
        if payload is not None:
            reading.notifier.send(payload)


class ChargingState(BatteryStateHandler):
    state = BatteryState.CHARGING

    def nextState(self, reading: Reading) -> Optional[BatteryState]:
        if reading.status == STATUS_FULL:
            return BatteryState.FULL
        if reading.status == STATUS_DISCHARGING:
            return _dischargingState(reading) or BatteryState.DISCHARGING
        return None


class DischargingState(BatteryStateHandler):
    state = BatteryState.DISCHARGING

    def nextState(self, reading: Reading) -> Optional[BatteryState]:
        if reading.status == STATUS_CHARGING:
            return BatteryState.CHARGING
        # Some batteries report Full without passing through Charging
        if reading.status == STATUS_FULL:
            return BatteryState.FULL
        if reading.status == STATUS_DISCHARGING:
            return _dischargingState(reading)
        return None


class FullState(BatteryStateHandler):
    state = BatteryState.FULL

    def nextState(self, reading: Reading) -> Optional[BatteryState]:
        if reading.status == STATUS_CHARGING:
            return BatteryState.CHARGING
        if reading.status == STATUS_DISCHARGING:
            return BatteryState.DISCHARGING
        return None


class LowState(BatteryStateHandler):
    state = BatteryState.LOW

    def nextState(self, reading: Reading) -> Optional[BatteryState]:
        if reading.status == STATUS_CHARGING:
            return BatteryState.CHARGING
        if (reading.status == STATUS_DISCHARGING
                and reading.currentLevel <= reading.criticalLevel):
            return BatteryState.CRITICAL
        return None


class CriticalState(BatteryStateHandler):
    state = BatteryState.CRITICAL

    def nextState(self, reading: Reading) -> Optional[BatteryState]:
        if reading.status == STATUS_CHARGING:
            return BatteryState.CHARGING
        return None


def createBatteryStates() -> dict[BatteryState, BatteryStateHandler]:
    """
    Build the handler table covering every BatteryState.

    Returns:
        Mapping of each state to a fresh handler
    """
    handlers: list[BatteryStateHandler] = [
        FullState(),
        ChargingState(),
        DischargingState(),
        LowState(),
        CriticalState(),
    ]
    return {handler.state: handler for handler in handlers}


def createBatteryFsm(
    initialState: BatteryState = INITIAL_STATE,
) -> Fsm[BatteryState, Reading]:
    """
    Create the battery state machine.

    Args:
        initialState: State to start in (default DISCHARGING)

    Returns:
        Fsm positioned at initialState with all five handlers registered
    """
    return Fsm(initialState, createBatteryStates())
