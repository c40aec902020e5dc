################################################################################
# File Name: __init__.py
# Purpose/Description: Power supply subpackage
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
Power Supply Subpackage.

Exports:
    Types and Constants:
        - PowerSupplySnapshot: Values parsed from one uevent read
        - DEFAULT_SYS_PATH, DEFAULT_BATTERY_NAME

    Exceptions:
        - PowerSupplyError: Base power supply exception
        - PowerSupplyReadError: uevent file unreadable
        - PowerSupplyAttributeError: Required attribute missing or invalid

    Classes:
        - PowerSupplyReader: sysfs uevent reader

    Helper Functions:
        - parseUevent, parseIntAttribute, findAttributePrefix
"""

from .exceptions import PowerSupplyAttributeError, PowerSupplyError, PowerSupplyReadError
from .reader import PowerSupplyReader, findAttributePrefix, parseIntAttribute, parseUevent
from .types import DEFAULT_BATTERY_NAME, DEFAULT_SYS_PATH, PowerSupplySnapshot

__all__ = [
    'PowerSupplySnapshot',
    'DEFAULT_SYS_PATH',
    'DEFAULT_BATTERY_NAME',
    'PowerSupplyError',
    'PowerSupplyReadError',
    'PowerSupplyAttributeError',
    'PowerSupplyReader',
    'parseUevent',
    'parseIntAttribute',
    'findAttributePrefix',
]
