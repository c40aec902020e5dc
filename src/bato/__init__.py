################################################################################
# File Name: __init__.py
# Purpose/Description: bato package initialization
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
bato: battery notifier.

Polls a laptop battery through the Linux power supply class and sends one
desktop notification each time the battery enters a new state (Charging,
Discharging, Full, Low, Critical).

Subpackages:
- fsm: generic state machine with enter/exit hooks
- battery: the five battery states and the per-tick reading
- power: sysfs uevent reader
- notify: notification payloads and the libnotify notifier
- config: YAML configuration loading and validation
- common: logging and error handling
"""

__version__ = '1.0.0'
