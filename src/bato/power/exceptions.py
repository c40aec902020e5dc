################################################################################
# File Name: exceptions.py
# Purpose/Description: Power supply reader exceptions
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
Power supply reader exceptions.

Exception hierarchy:
    DataError
    └── PowerSupplyError
        ├── PowerSupplyReadError
        └── PowerSupplyAttributeError
"""

from ..common.error_handler import DataError


class PowerSupplyError(DataError):
    """Base exception for power supply errors."""
    pass


class PowerSupplyReadError(PowerSupplyError):
    """
    The uevent file could not be read.

    Raised when the battery directory does not exist or the file is not
    readable (e.g., wrong battery name in the configuration).
    """
    pass


class PowerSupplyAttributeError(PowerSupplyError):
    """
    The uevent file lacks an attribute needed to compute the level.

    Raised when neither ENERGY nor CHARGE attributes are complete, or when
    the now/full/status values cannot be parsed.
    """
    pass
