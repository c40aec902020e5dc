################################################################################
# File Name: __init__.py
# Purpose/Description: Configuration subpackage
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
Configuration Subpackage.

Exports:
    - BatoConfig: Validated configuration dataclass
    - BatoConfigError: Configuration loading/validation error
    - loadBatoConfig: Load, validate and normalize bato.yaml
    - validateBatoConfig: Validate a raw dictionary
    - normalizeConfig: Apply default urgencies
    - getDefaultConfigPath: Resolve the XDG configuration path
"""

from .exceptions import BatoConfigError
from .loader import (
    DEFAULT_URGENCIES,
    getDefaultConfigPath,
    loadBatoConfig,
    normalizeConfig,
    validateBatoConfig,
)
from .types import DEFAULT_TICK_RATE_SECONDS, BatoConfig

__all__ = [
    'BatoConfig',
    'BatoConfigError',
    'DEFAULT_TICK_RATE_SECONDS',
    'DEFAULT_URGENCIES',
    'getDefaultConfigPath',
    'loadBatoConfig',
    'normalizeConfig',
    'validateBatoConfig',
]
