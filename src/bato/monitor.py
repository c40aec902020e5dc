################################################################################
# File Name: monitor.py
# Purpose/Description: Battery poll loop wiring reader, state machine and notifier
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
Battery monitor for bato.

Provides:
- One tick: read the uevent file, build a Reading, shift the state machine
- A blocking poll loop at the configured tick rate
- SIGINT/SIGTERM handling for a graceful stop
- Notifier lifecycle (open on start, close on shutdown)

Errors raised while reading the battery or shifting the state machine are
not swallowed: they stop the loop and propagate to the caller.

Usage:
    from bato.monitor import createMonitorFromConfig

    monitor = createMonitorFromConfig(config)
    monitor.registerSignalHandlers()
    try:
        monitor.start()
        monitor.runLoop()
    finally:
        monitor.close()
        monitor.restoreSignalHandlers()
"""

import logging
import signal
import sys
import threading
from typing import Any, Optional

from .battery.states import createBatteryFsm
from .battery.types import BatteryState, Reading
from .common.logging_config import logWithContext
from .config.types import BatoConfig
from .fsm import Fsm
from .notify.notifier import DesktopNotifier
from .notify.types import NotificationSink
from .power.reader import PowerSupplyReader
from .power.types import DEFAULT_SYS_PATH, PowerSupplySnapshot

logger = logging.getLogger(__name__)

# Exit code used when a second signal forces the process down
EXIT_CODE_FORCED = 130


class BatoMonitor:
    """
    Polls the battery and notifies on state changes.

    Ticks are serialized by an internal lock, so update() may be called from
    another thread while runLoop() is active.

    Example:
        monitor = BatoMonitor(config, reader, notifier)
        monitor.start()
        monitor.update()
        monitor.close()
    """

    def __init__(
        self,
        config: BatoConfig,
        reader: PowerSupplyReader,
        notifier: NotificationSink,
        fsm: Optional[Fsm[BatteryState, Reading]] = None,
    ):
        """
        Initialize the monitor.

        Args:
            config: Validated and normalized configuration
            reader: Source of power supply snapshots
            notifier: Sink passed to the state handlers
            fsm: State machine (defaults to createBatteryFsm())
        """
        self._config = config
        self._reader = reader
        self._notifier = notifier
        self._fsm = fsm if fsm is not None else createBatteryFsm()

        self._stopEvent = threading.Event()
        self._lock = threading.Lock()
        self._started = False
        self._tickCount = 0

        self._originalSigintHandler: Any = None
        self._originalSigtermHandler: Any = None

    # ================================================================================
    # Properties
    # ================================================================================

    @property
    def currentState(self) -> BatteryState:
        """Get the state machine's current state."""
        return self._fsm.currentState

    @property
    def tickCount(self) -> int:
        """Get the number of completed ticks."""
        return self._tickCount

    @property
    def isStopRequested(self) -> bool:
        """Check if a stop has been requested."""
        return self._stopEvent.is_set()

    # ================================================================================
    # Lifecycle
    # ================================================================================

    def start(self) -> None:
        """
        Open the notifier if it supports it.

        Raises:
            NotifierError: If the desktop notifier cannot be initialized
        """
        if self._started:
            return

        openFunc = getattr(self._notifier, 'open', None)
        if callable(openFunc):
            openFunc()

        self._started = True
        logger.info(
            f"Battery monitor started | state={self.currentState.value}, "
            f"low={self._config.lowLevel}%, critical={self._config.criticalLevel}%, "
            f"interval={self._config.tickRate}s"
        )

    def close(self) -> None:
        """Close the notifier. Safe to call more than once."""
        if not self._started:
            return

        closeFunc = getattr(self._notifier, 'close', None)
        if callable(closeFunc):
            closeFunc()

        self._started = False
        logger.info(f"Battery monitor stopped | ticks={self._tickCount}")

    def requestStop(self) -> None:
        """Ask runLoop() to return after the current tick."""
        self._stopEvent.set()

    def __enter__(self) -> 'BatoMonitor':
        """Context manager entry, starts the monitor."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close the monitor."""
        self.close()

    # ================================================================================
    # Ticks
    # ================================================================================

    def buildReading(self, snapshot: PowerSupplySnapshot) -> Reading:
        """
        Combine a snapshot with the configuration into a Reading.

        Args:
            snapshot: Values read from the uevent file

        Returns:
            Reading for this tick
        """
        config = self._config
        payloads = {state.value: config.notificationFor(state) for state in BatteryState}
        return Reading(
            currentLevel=snapshot.level,
            status=snapshot.status,
            lowLevel=config.lowLevel,
            criticalLevel=config.criticalLevel,
            notifier=self._notifier,
            **payloads,
        )

    def update(self) -> bool:
        """
        Run one tick.

        Returns:
            True if the battery changed state

        Raises:
            PowerSupplyError: If the battery cannot be read
            MissingStateHandlerError: If the state machine is inconsistent
        """
        snapshot = self._reader.read()
        reading = self.buildReading(snapshot)

        with self._lock:
            previousState = self._fsm.currentState
            changed = self._fsm.shift(reading)
            self._tickCount += 1

        if changed:
            logWithContext(
                logger, 'info', "Battery state changed",
                previous=previousState.value,
                current=self._fsm.currentState.value,
                percent=reading.currentLevel,
            )
        else:
            logWithContext(
                logger, 'debug', f"Tick {self._tickCount}",
                state=previousState.value,
                **reading.toDict(),
            )
        return changed

    def runLoop(self) -> None:
        """
        Poll until requestStop() is called.

        Each iteration runs one tick then waits tickRate seconds, waking
        early when a stop is requested.

        Raises:
            Any error raised by update(); the loop stops on the first failure
        """
        logger.info(f"Entering poll loop | interval={self._config.tickRate}s")

        while not self._stopEvent.is_set():
            self.update()
            self._stopEvent.wait(timeout=self._config.tickRate)

        logger.info("Poll loop exited")

    # ================================================================================
    # Signal Handling
    # ================================================================================

    def registerSignalHandlers(self) -> None:
        """
        Register SIGINT and SIGTERM handlers.

        First signal requests a graceful stop, second signal forces exit.
        """
        self._originalSigintHandler = signal.signal(
            signal.SIGINT, self._handleShutdownSignal
        )
        if hasattr(signal, 'SIGTERM'):
            self._originalSigtermHandler = signal.signal(
                signal.SIGTERM, self._handleShutdownSignal
            )
        logger.debug("Signal handlers registered")

    def restoreSignalHandlers(self) -> None:
        """Restore the original signal handlers."""
        if self._originalSigintHandler is not None:
            signal.signal(signal.SIGINT, self._originalSigintHandler)
            self._originalSigintHandler = None
        if self._originalSigtermHandler is not None and hasattr(signal, 'SIGTERM'):
            signal.signal(signal.SIGTERM, self._originalSigtermHandler)
            self._originalSigtermHandler = None
        logger.debug("Signal handlers restored")

    def _handleShutdownSignal(self, signum: int, frame: Optional[Any]) -> None:
        try:
            signalName = signal.Signals(signum).name
        except ValueError:
            signalName = str(signum)

        if self._stopEvent.is_set():
            logger.warning(f"Received second signal ({signalName}), forcing exit")
            sys.exit(EXIT_CODE_FORCED)

        logger.info(f"Received signal {signalName}, stopping")
        self._stopEvent.set()


def createMonitorFromConfig(
    config: BatoConfig,
    sysPath: str = DEFAULT_SYS_PATH,
    notifier: Optional[NotificationSink] = None,
) -> BatoMonitor:
    """
    Create a BatoMonitor from configuration.

    Args:
        config: Validated and normalized configuration
        sysPath: Root of the power supply class
        notifier: Notification sink (defaults to a DesktopNotifier)

    Returns:
        Configured BatoMonitor, not yet started

    Raises:
        PowerSupplyError: If the configured battery cannot be read
    """
    reader = PowerSupplyReader(
        batteryName=config.batName,
        fullDesign=config.fullDesign,
        sysPath=sysPath,
    )

    monitor = BatoMonitor(
        config=config,
        reader=reader,
        notifier=notifier if notifier is not None else DesktopNotifier(),
    )

    logger.info(
        f"BatoMonitor created from config | battery={config.batName}, "
        f"fullDesign={config.fullDesign}"
    )
    return monitor
