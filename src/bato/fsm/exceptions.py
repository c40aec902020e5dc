################################################################################
# File Name: exceptions.py
# Purpose/Description: State machine engine exceptions
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
State machine engine exceptions.

Exception hierarchy:
    ConfigurationError
    └── FsmError
        └── MissingStateHandlerError
"""

from typing import Any

from ..common.error_handler import ConfigurationError


class FsmError(ConfigurationError):
    """Base exception for state machine errors."""
    pass


class MissingStateHandlerError(FsmError):
    """
    No handler is registered for a state the machine needs.

    Raised by shift() when the current state or the state returned by
    nextState() has no entry in the handler table. The state set was
    assembled inconsistently, so this is never recoverable.
    """

    def __init__(self, state: Any):
        super().__init__(
            f"No handler registered for state {state!r}",
            details={'state': str(state)},
        )
        self.state = state
