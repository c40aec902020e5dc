################################################################################
# File Name: loader.py
# Purpose/Description: YAML configuration loading, validation and normalization
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
Configuration loader module.

Loads bato.yaml, validates required fields, applies defaults, checks value
ranges and normalizes notification urgencies. Any problem raises
BatoConfigError with a clear message so the program can fail before the
first poll.

Usage:
    from bato.config.loader import loadBatoConfig

    try:
        config = loadBatoConfig()
    except BatoConfigError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from ..common.config_validator import ConfigValidationError, ConfigValidator
from ..notify.types import Notification, Urgency
from .exceptions import BatoConfigError
from .types import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULTS,
    KNOWN_KEYS,
    MAX_LEVEL,
    MIN_LEVEL,
    MIN_TICK_RATE_SECONDS,
    NOTIFICATION_KEYS,
    NOTIFICATION_SECTIONS,
    REQUIRED_FIELDS,
    BatoConfig,
)

logger = logging.getLogger(__name__)

# Urgency applied when a payload does not set one
DEFAULT_URGENCIES: dict[str, Urgency] = {
    'critical': Urgency.CRITICAL,
    'low': Urgency.NORMAL,
    'full': Urgency.NORMAL,
}


# =============================================================================
# Public API
# =============================================================================

def getDefaultConfigPath(environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Resolve the default configuration file path.

    Uses $XDG_CONFIG_HOME/bato/bato.yaml, falling back to
    $HOME/.config/bato/bato.yaml.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Path of the configuration file

    Raises:
        BatoConfigError: If neither XDG_CONFIG_HOME nor HOME is set
    """
    env = os.environ if environ is None else environ

    configHome = env.get('XDG_CONFIG_HOME')
    if not configHome:
        home = env.get('HOME')
        if not home:
            raise BatoConfigError(
                "Environment variable HOME is not set",
                missingFields=['HOME']
            )
        configHome = os.path.join(home, '.config')

    return Path(configHome) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def loadBatoConfig(configPath: Optional[str] = None) -> BatoConfig:
    """
    Load, validate and normalize the configuration.

    Args:
        configPath: Path to the YAML file (defaults to getDefaultConfigPath())

    Returns:
        Validated and normalized BatoConfig

    Raises:
        BatoConfigError: If the file cannot be loaded or validation fails
    """
    path = Path(configPath) if configPath else getDefaultConfigPath()
    logger.info(f"Loading configuration from: {path}")

    rawConfig = _loadConfigFile(path)
    config = normalizeConfig(validateBatoConfig(rawConfig))

    logger.info(
        f"Configuration loaded | low={config.lowLevel}%, "
        f"critical={config.criticalLevel}%, tick={config.tickRate}s, "
        f"battery={config.batName}"
    )
    logger.debug(f"Effective configuration | {config.toDict()}")
    return config


def validateBatoConfig(rawConfig: dict[str, Any]) -> BatoConfig:
    """
    Validate a raw configuration dictionary and build a BatoConfig.

    Args:
        rawConfig: Dictionary parsed from YAML (defaults are applied in place)

    Returns:
        BatoConfig with defaults applied

    Raises:
        BatoConfigError: If validation fails
    """
    if not isinstance(rawConfig, dict):
        raise BatoConfigError(
            "Configuration must be a mapping of keys to values",
            invalidFields=['configFile']
        )

    validator = ConfigValidator(requiredKeys=REQUIRED_FIELDS, defaults=DEFAULTS)

    try:
        config = validator.validate(rawConfig)
    except ConfigValidationError as e:
        raise BatoConfigError(
            f"Configuration validation failed: {e}",
            missingFields=e.missingFields
        ) from e

    for key in config:
        if key not in KNOWN_KEYS:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    _validateTypes(validator, config)
    _validateLevels(config)

    notifications = {
        section: _parseNotification(section, config.get(section))
        for section in NOTIFICATION_SECTIONS
    }

    return BatoConfig(
        lowLevel=config['low_level'],
        criticalLevel=config['critical_level'],
        tickRate=config['tick_rate'],
        batName=config['bat_name'],
        fullDesign=config['full_design'],
        **notifications,
    )


def normalizeConfig(config: BatoConfig) -> BatoConfig:
    """
    Fill in default urgencies.

    Critical payloads default to CRITICAL urgency, low and full payloads to
    NORMAL. Charging and discharging payloads are left as configured.

    Args:
        config: Validated configuration (modified in place)

    Returns:
        The same configuration
    """
    for section, urgency in DEFAULT_URGENCIES.items():
        notification = getattr(config, section)
        if notification is not None:
            setattr(config, section, notification.withDefaultUrgency(urgency))
    return config


# =============================================================================
# Private Helpers
# =============================================================================

def _loadConfigFile(configPath: Path) -> dict[str, Any]:
    """
    Load configuration from a YAML file.

    An empty file yields an empty dictionary.

    Args:
        configPath: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        BatoConfigError: If file cannot be read or parsed
    """
    try:
        content = configPath.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        raise BatoConfigError(
            f"Configuration file not found: {configPath}",
            missingFields=['configFile']
        ) from e
    except OSError as e:
        raise BatoConfigError(
            f"Cannot read configuration file: {configPath}\nError: {e}",
            missingFields=['configFile']
        ) from e

    try:
        config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise BatoConfigError(
            f"Invalid YAML in configuration file: {configPath}\nParse error: {e}",
            invalidFields=['configFile']
        ) from e

    logger.debug(f"Configuration file loaded: {configPath}")
    return {} if config is None else config


def _validateTypes(validator: ConfigValidator, config: dict[str, Any]) -> None:
    """
    Validate scalar field types.

    Args:
        validator: Validator holding the helpers
        config: Configuration dictionary with defaults applied

    Raises:
        BatoConfigError: If a field has the wrong type
    """
    expectedTypes: dict[str, type] = {
        'low_level': int,
        'critical_level': int,
        'tick_rate': int,
        'bat_name': str,
        'full_design': bool,
    }

    invalidFields = [
        key for key, expectedType in expectedTypes.items()
        if not validator.validateField(config, key, expectedType)
    ]
    if invalidFields:
        raise BatoConfigError(
            f"Invalid types for configuration fields: {', '.join(invalidFields)}",
            invalidFields=invalidFields
        )

    if config['tick_rate'] < MIN_TICK_RATE_SECONDS:
        raise BatoConfigError(
            f"tick_rate must be at least {MIN_TICK_RATE_SECONDS} second: "
            f"{config['tick_rate']}",
            invalidFields=['tick_rate']
        )

    if not config['bat_name'].strip():
        raise BatoConfigError(
            "bat_name must not be empty",
            invalidFields=['bat_name']
        )


def _validateLevels(config: dict[str, Any]) -> None:
    """
    Validate threshold ranges and ordering.

    Args:
        config: Configuration dictionary

    Raises:
        BatoConfigError: If a level is out of range or critical > low
    """
    for key in ('low_level', 'critical_level'):
        value = config[key]
        if value < MIN_LEVEL or value > MAX_LEVEL:
            raise BatoConfigError(
                f"{key} must be between {MIN_LEVEL} and {MAX_LEVEL}: {value}",
                invalidFields=[key]
            )

    if config['critical_level'] > config['low_level']:
        raise BatoConfigError(
            f"critical_level ({config['critical_level']}) must not be greater "
            f"than low_level ({config['low_level']})",
            invalidFields=['critical_level', 'low_level']
        )


def _parseNotification(section: str, value: Any) -> Optional[Notification]:
    """
    Build a Notification from a configuration section.

    Args:
        section: Section name (e.g., 'low')
        value: Raw section value, or None if absent

    Returns:
        Notification, or None if the section is absent

    Raises:
        BatoConfigError: If the section is malformed
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        raise BatoConfigError(
            f"Notification section '{section}' must be a mapping",
            invalidFields=[section]
        )

    for key in value:
        if key not in NOTIFICATION_KEYS:
            logger.warning(f"Ignoring unknown key '{key}' in section '{section}'")

    summary = value.get('summary')
    if not isinstance(summary, str) or not summary.strip():
        raise BatoConfigError(
            f"Notification section '{section}' requires a non-empty summary",
            missingFields=[f"{section}.summary"]
        )

    optionalText: dict[str, Optional[str]] = {}
    for key in ('body', 'icon'):
        text = value.get(key)
        if text is not None and not isinstance(text, str):
            raise BatoConfigError(
                f"{section}.{key} must be a string",
                invalidFields=[f"{section}.{key}"]
            )
        optionalText[key] = text

    urgency = None
    if value.get('urgency') is not None:
        try:
            urgency = Urgency.fromString(value['urgency'])
        except ValueError as e:
            raise BatoConfigError(
                f"{section}.urgency: {e}",
                invalidFields=[f"{section}.urgency"]
            ) from e

    return Notification(
        summary=summary,
        body=optionalText['body'],
        icon=optionalText['icon'],
        urgency=urgency,
    )
