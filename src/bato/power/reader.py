################################################################################
# File Name: reader.py
# Purpose/Description: sysfs power supply uevent reader
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
Reader for the Linux power supply class uevent file.

The kernel exposes each battery under /sys/class/power_supply/<name>/uevent
as KEY=VALUE lines. Depending on the driver the level is reported either in
energy units (POWER_SUPPLY_ENERGY_*) or in charge units
(POWER_SUPPLY_CHARGE_*). The reader picks the unit once, when it is
created, and then parses now/full/status on every read.

Usage:
    from bato.power.reader import PowerSupplyReader

    reader = PowerSupplyReader(batteryName='BAT0', fullDesign=True)
    snapshot = reader.read()
    print(snapshot.level, snapshot.status)
"""

import logging
from pathlib import Path
from typing import Optional

from .exceptions import PowerSupplyAttributeError, PowerSupplyReadError
from .types import (
    ATTRIBUTE_PREFIXES,
    DEFAULT_BATTERY_NAME,
    DEFAULT_SYS_PATH,
    FULL_ATTRIBUTE,
    FULL_DESIGN_ATTRIBUTE,
    NOW_ATTRIBUTE,
    STATUS_ATTRIBUTE,
    UEVENT_FILE,
    PowerSupplySnapshot,
    attributeName,
)

logger = logging.getLogger(__name__)


# ================================================================================
# Parsing Helpers
# ================================================================================

def parseUevent(content: str) -> dict[str, str]:
    """
    Parse uevent content into a dictionary.

    Lines without '=' are ignored. When a key repeats, the first value wins.

    Args:
        content: Text of a uevent file

    Returns:
        Mapping of attribute name to raw value
    """
    attributes: dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.strip().partition('=')
        if sep and key not in attributes:
            attributes[key] = value.strip()
    return attributes


def parseIntAttribute(attributes: dict[str, str], name: str) -> Optional[int]:
    """
    Get an integer attribute.

    Args:
        attributes: Parsed uevent attributes
        name: Attribute name

    Returns:
        Integer value, or None if missing or not an integer
    """
    value = attributes.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring non-integer value for {name}: {value!r}")
        return None


def findAttributePrefix(content: str) -> str:
    """
    Find which unit (ENERGY or CHARGE) the battery reports.

    A unit is usable only when its NOW, FULL and FULL_DESIGN attributes are
    all present. ENERGY is preferred.

    Args:
        content: Text of a uevent file

    Returns:
        'ENERGY' or 'CHARGE'

    Raises:
        PowerSupplyAttributeError: If neither unit is complete
    """
    attributes = parseUevent(content)
    for prefix in ATTRIBUTE_PREFIXES:
        required = (
            attributeName(prefix, FULL_DESIGN_ATTRIBUTE),
            attributeName(prefix, FULL_ATTRIBUTE),
            attributeName(prefix, NOW_ATTRIBUTE),
        )
        if all(name in attributes for name in required):
            return prefix

    raise PowerSupplyAttributeError("Unable to find the required attributes")


# ================================================================================
# Reader Class
# ================================================================================

class PowerSupplyReader:
    """
    Reads battery level and status from a power supply uevent file.

    Attributes:
        ueventPath: Path of the uevent file
        nowAttribute: Attribute holding the current energy/charge
        fullAttribute: Attribute holding the full energy/charge
    """

    def __init__(
        self,
        batteryName: str = DEFAULT_BATTERY_NAME,
        fullDesign: bool = True,
        sysPath: str = DEFAULT_SYS_PATH,
    ):
        """
        Initialize the reader and detect the attribute unit.

        Args:
            batteryName: Directory name under sysPath (e.g., BAT0)
            fullDesign: Use the design capacity as 100% instead of last full
            sysPath: Root of the power supply class

        Raises:
            PowerSupplyReadError: If the uevent file cannot be read
            PowerSupplyAttributeError: If the level attributes are missing
        """
        self._ueventPath = Path(sysPath) / batteryName / UEVENT_FILE
        self._fullDesign = fullDesign

        try:
            prefix = findAttributePrefix(self._readContent())
        except PowerSupplyAttributeError as e:
            raise PowerSupplyAttributeError(
                e.message, details={'path': str(self._ueventPath)}
            ) from None

        fullAttr = FULL_DESIGN_ATTRIBUTE if fullDesign else FULL_ATTRIBUTE
        self._nowAttribute = attributeName(prefix, NOW_ATTRIBUTE)
        self._fullAttribute = attributeName(prefix, fullAttr)

        logger.info(
            f"Power supply reader created | path={self._ueventPath}, "
            f"now={self._nowAttribute}, full={self._fullAttribute}"
        )

    @property
    def ueventPath(self) -> Path:
        """Get the uevent file path."""
        return self._ueventPath

    @property
    def nowAttribute(self) -> str:
        """Get the name of the current energy/charge attribute."""
        return self._nowAttribute

    @property
    def fullAttribute(self) -> str:
        """Get the name of the full energy/charge attribute."""
        return self._fullAttribute

    def _readContent(self) -> str:
        try:
            return self._ueventPath.read_text(encoding='utf-8')
        except OSError as e:
            raise PowerSupplyReadError(
                f"Unable to read {self._ueventPath}: {e.strerror or e}",
                details={'path': str(self._ueventPath)},
            ) from e

    def read(self) -> PowerSupplySnapshot:
        """
        Read the current battery values.

        Returns:
            PowerSupplySnapshot with now, full and status

        Raises:
            PowerSupplyReadError: If the uevent file cannot be read
            PowerSupplyAttributeError: If a required attribute is missing,
                or the full value is not positive
        """
        attributes = parseUevent(self._readContent())

        now = parseIntAttribute(attributes, self._nowAttribute)
        full = parseIntAttribute(attributes, self._fullAttribute)
        status = attributes.get(STATUS_ATTRIBUTE)

        if now is None or full is None or status is None:
            raise PowerSupplyAttributeError(
                f"Unable to parse the required attributes in {self._ueventPath}",
                details={'now': now, 'full': full, 'status': status},
            )

        if full <= 0:
            raise PowerSupplyAttributeError(
                f"Invalid {self._fullAttribute} value in {self._ueventPath}: {full}"
            )

        snapshot = PowerSupplySnapshot(now=now, full=full, status=status)
        logger.debug(f"Power supply read | {snapshot.toDict()}")
        return snapshot
