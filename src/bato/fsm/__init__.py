################################################################################
# File Name: __init__.py
# Purpose/Description: Generic state machine subpackage
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
FSM Subpackage.

Exports:
    - Fsm: Transition runner over a fixed handler table
    - FsmState: Abstract handler with enter/nextState/exit hooks
    - FsmError: Base state machine exception
    - MissingStateHandlerError: Raised when a state has no handler
"""

from .exceptions import FsmError, MissingStateHandlerError
from .machine import Fsm, FsmState

__all__ = [
    'Fsm',
    'FsmState',
    'FsmError',
    'MissingStateHandlerError',
]
