################################################################################
# File Name: machine.py
# Purpose/Description: Generic finite state machine with enter/exit hooks
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
Generic finite state machine.

The machine knows nothing about batteries. It holds one current state key
and a fixed table mapping every key to an FsmState handler. Each call to
shift() asks the current handler for the next state and, if one is
returned, runs the outgoing handler's exit hook, then the incoming
handler's enter hook, then moves the current state.

At most one transition happens per shift() call. The machine is not
internally synchronized: callers shifting from more than one thread must
serialize the calls themselves.

Usage:
    from bato.fsm import Fsm, FsmState

    class Idle(FsmState[str, dict]):
        def enter(self, context): ...
        def nextState(self, context):
            return 'busy' if context['work'] else None

    fsm = Fsm('idle', {'idle': Idle(), 'busy': Busy()})
    fsm.shift({'work': True})
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Generic, Optional, TypeVar

from .exceptions import MissingStateHandlerError

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
D = TypeVar('D')


class FsmState(ABC, Generic[K, D]):
    """
    Handler for one state of an Fsm.

    Subclasses must implement:
    - enter(): side effects when the machine moves into the state
    - nextState(): transition rule, returns the next key or None

    exit() is a no-op unless overridden.
    """

    @abstractmethod
    def enter(self, context: D) -> None:
        """
        Run when the machine enters this state.

        Args:
            context: Per-call context passed to shift()
        """
        pass

    @abstractmethod
    def nextState(self, context: D) -> Optional[K]:
        """
        Decide the next state.

        Implementations never return the key of their own state.

        Args:
            context: Per-call context passed to shift()

        Returns:
            Key of the state to move to, or None to stay
        """
        pass

    def exit(self, context: D) -> None:
        """
        Run when the machine leaves this state.

        Args:
            context: Per-call context passed to shift()
        """
        return None


class Fsm(Generic[K, D]):
    """
    Transition runner over a fixed table of state handlers.

    Attributes:
        currentState: Key of the state the machine is in
        states: Read-only view of the handler table
    """

    def __init__(self, initialState: K, states: Mapping[K, FsmState[K, D]]):
        """
        Initialize the state machine.

        Every reachable state, including initialState, must have a handler.
        A missing handler is reported by shift() the first time it is needed.

        Args:
            initialState: Key the machine starts in
            states: Mapping of state key to handler, copied at construction
        """
        self._currentState = initialState
        self._states: Mapping[K, FsmState[K, D]] = MappingProxyType(dict(states))

    @property
    def currentState(self) -> K:
        """Get the current state key."""
        return self._currentState

    @property
    def states(self) -> Mapping[K, FsmState[K, D]]:
        """Get the read-only handler table."""
        return self._states

    def _getHandler(self, state: K) -> FsmState[K, D]:
        try:
            return self._states[state]
        except KeyError:
            raise MissingStateHandlerError(state) from None

    def _setState(self, newState: K, context: D) -> None:
        # Resolve both handlers before running any hook
        currentHandler = self._getHandler(self._currentState)
        nextHandler = self._getHandler(newState)

        currentHandler.exit(context)
        nextHandler.enter(context)
        self._currentState = newState

    def shift(self, context: D) -> bool:
        """
        Evaluate one transition.

        Args:
            context: Per-call context handed to nextState, exit and enter

        Returns:
            True if the machine changed state, False otherwise

        Raises:
            MissingStateHandlerError: If the current or next state has no handler
        """
        nextState = self._getHandler(self._currentState).nextState(context)
        if nextState is None:
            return False

        previousState = self._currentState
        self._setState(nextState, context)
        logger.debug(f"Transition | {previousState} -> {nextState}")
        return True
