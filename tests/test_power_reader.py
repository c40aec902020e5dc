################################################################################
# File Name: test_power_reader.py
# Purpose/Description: Tests for the power supply uevent reader
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
Tests for the power subpackage.

Run with:
    pytest tests/test_power_reader.py -v
"""

import pytest

from bato.common.error_handler import DataError
from bato.power import (
    PowerSupplyAttributeError,
    PowerSupplyReadError,
    PowerSupplyReader,
    PowerSupplySnapshot,
    findAttributePrefix,
    parseIntAttribute,
    parseUevent,
)


# ================================================================================
# Parsing Tests
# ================================================================================

class TestParseUevent:
    """Tests for parseUevent()."""

    def test_parseUevent_keyValueLines(self):
        """
        Given: uevent text with KEY=VALUE lines
        When: parseUevent() is called
        Then: Returns a dict of the pairs
        """
        content = "POWER_SUPPLY_NAME=BAT0\nPOWER_SUPPLY_STATUS=Charging\n"

        assert parseUevent(content) == {
            'POWER_SUPPLY_NAME': 'BAT0',
            'POWER_SUPPLY_STATUS': 'Charging',
        }

    def test_parseUevent_ignoresLinesWithoutEquals(self):
        """
        Given: uevent text with blank and malformed lines
        When: parseUevent() is called
        Then: Those lines are skipped
        """
        content = "\ngarbage\nPOWER_SUPPLY_PRESENT=1\n"

        assert parseUevent(content) == {'POWER_SUPPLY_PRESENT': '1'}

    def test_parseUevent_valueWithSpaces(self):
        """
        Given: A status value containing a space
        When: parseUevent() is called
        Then: The whole value is kept
        """
        content = "POWER_SUPPLY_STATUS=Not charging\n"

        assert parseUevent(content)['POWER_SUPPLY_STATUS'] == 'Not charging'

    def test_parseUevent_duplicateKey_firstWins(self):
        """
        Given: A key listed twice
        When: parseUevent() is called
        Then: The first value is kept
        """
        content = "POWER_SUPPLY_STATUS=Full\nPOWER_SUPPLY_STATUS=Charging\n"

        assert parseUevent(content)['POWER_SUPPLY_STATUS'] == 'Full'


class TestParseIntAttribute:
    """Tests for parseIntAttribute()."""

    def test_parseIntAttribute_integer(self):
        assert parseIntAttribute({'A': '42'}, 'A') == 42

    def test_parseIntAttribute_missing_returnsNone(self):
        assert parseIntAttribute({}, 'A') is None

    def test_parseIntAttribute_notInteger_returnsNone(self):
        """
        Given: A non-numeric value
        When: parseIntAttribute() is called
        Then: Returns None
        """
        assert parseIntAttribute({'A': 'abc'}, 'A') is None


class TestFindAttributePrefix:
    """Tests for findAttributePrefix()."""

    def test_findAttributePrefix_energy(self):
        content = (
            "POWER_SUPPLY_ENERGY_FULL_DESIGN=1\n"
            "POWER_SUPPLY_ENERGY_FULL=1\n"
            "POWER_SUPPLY_ENERGY_NOW=1\n"
        )

        assert findAttributePrefix(content) == 'ENERGY'

    def test_findAttributePrefix_charge(self):
        content = (
            "POWER_SUPPLY_CHARGE_FULL_DESIGN=1\n"
            "POWER_SUPPLY_CHARGE_FULL=1\n"
            "POWER_SUPPLY_CHARGE_NOW=1\n"
        )

        assert findAttributePrefix(content) == 'CHARGE'

    def test_findAttributePrefix_bothComplete_prefersEnergy(self):
        """
        Given: Complete ENERGY and CHARGE attributes
        When: findAttributePrefix() is called
        Then: ENERGY is chosen
        """
        content = (
            "POWER_SUPPLY_CHARGE_FULL_DESIGN=1\n"
            "POWER_SUPPLY_CHARGE_FULL=1\n"
            "POWER_SUPPLY_CHARGE_NOW=1\n"
            "POWER_SUPPLY_ENERGY_FULL_DESIGN=1\n"
            "POWER_SUPPLY_ENERGY_FULL=1\n"
            "POWER_SUPPLY_ENERGY_NOW=1\n"
        )

        assert findAttributePrefix(content) == 'ENERGY'

    def test_findAttributePrefix_incompleteEnergy_fallsBackToCharge(self):
        """
        Given: ENERGY lacks FULL and CHARGE is complete
        When: findAttributePrefix() is called
        Then: CHARGE is chosen
        """
        content = (
            "POWER_SUPPLY_ENERGY_FULL_DESIGN=1\n"
            "POWER_SUPPLY_ENERGY_NOW=1\n"
            "POWER_SUPPLY_CHARGE_FULL_DESIGN=1\n"
            "POWER_SUPPLY_CHARGE_FULL=1\n"
            "POWER_SUPPLY_CHARGE_NOW=1\n"
        )

        assert findAttributePrefix(content) == 'CHARGE'

    def test_findAttributePrefix_fullDesignDoesNotCountAsFull(self):
        """
        Given: Only FULL_DESIGN and NOW are present
        When: findAttributePrefix() is called
        Then: PowerSupplyAttributeError is raised
        """
        content = (
            "POWER_SUPPLY_ENERGY_FULL_DESIGN=1\n"
            "POWER_SUPPLY_ENERGY_NOW=1\n"
        )

        with pytest.raises(PowerSupplyAttributeError):
            findAttributePrefix(content)

    def test_findAttributePrefix_nothing_raises(self):
        with pytest.raises(PowerSupplyAttributeError, match='required attributes'):
            findAttributePrefix("POWER_SUPPLY_CAPACITY=50\n")


# ================================================================================
# Snapshot Tests
# ================================================================================

class TestPowerSupplySnapshot:
    """Tests for PowerSupplySnapshot.level."""

    @pytest.mark.parametrize('now,full,expected', [
        (40, 50, 80),
        (1, 3, 33),
        (2, 3, 66),
        (0, 50, 0),
        (50, 50, 100),
        (60, 50, 100),
        (-5, 50, 0),
    ])
    def test_level_truncatesAndClamps(self, now, full, expected):
        """
        Given: now and full values
        When: level is read
        Then: Returns floor(100*now/full) clamped to 0-100
        """
        snapshot = PowerSupplySnapshot(now=now, full=full, status='Discharging')

        assert snapshot.level == expected

    def test_toDict_includesLevel(self):
        snapshot = PowerSupplySnapshot(now=40, full=50, status='Charging')

        assert snapshot.toDict() == {
            'now': 40, 'full': 50, 'status': 'Charging', 'level': 80,
        }


# ================================================================================
# Reader Tests
# ================================================================================

class TestPowerSupplyReader:
    """Tests for PowerSupplyReader."""

    def test_init_energyFullDesign(self, sysPath, writeUevent):
        """
        Given: An ENERGY battery and fullDesign=True
        When: The reader is created
        Then: Uses ENERGY_NOW and ENERGY_FULL_DESIGN
        """
        writeUevent()

        reader = PowerSupplyReader('BAT0', fullDesign=True, sysPath=str(sysPath))

        assert reader.ueventPath == sysPath / 'BAT0' / 'uevent'
        assert reader.nowAttribute == 'POWER_SUPPLY_ENERGY_NOW'
        assert reader.fullAttribute == 'POWER_SUPPLY_ENERGY_FULL_DESIGN'

    def test_init_chargeLastFull(self, sysPath, writeUevent):
        """
        Given: A CHARGE battery and fullDesign=False
        When: The reader is created
        Then: Uses CHARGE_NOW and CHARGE_FULL
        """
        writeUevent(prefix='CHARGE')

        reader = PowerSupplyReader('BAT0', fullDesign=False, sysPath=str(sysPath))

        assert reader.nowAttribute == 'POWER_SUPPLY_CHARGE_NOW'
        assert reader.fullAttribute == 'POWER_SUPPLY_CHARGE_FULL'

    def test_init_missingBattery_raisesReadError(self, sysPath):
        """
        Given: No battery directory
        When: The reader is created
        Then: PowerSupplyReadError is raised
        """
        with pytest.raises(PowerSupplyReadError) as excInfo:
            PowerSupplyReader('BAT9', sysPath=str(sysPath))

        assert 'BAT9' in excInfo.value.details['path']

    def test_init_missingAttributes_raisesAttributeError(self, sysPath, writeUevent):
        """
        Given: A uevent file without level attributes
        When: The reader is created
        Then: PowerSupplyAttributeError names the path
        """
        writeUevent(content="POWER_SUPPLY_STATUS=Discharging\n")

        with pytest.raises(PowerSupplyAttributeError) as excInfo:
            PowerSupplyReader('BAT0', sysPath=str(sysPath))

        assert excInfo.value.details['path'].endswith('uevent')

    def test_read_designCapacity(self, sysPath, writeUevent):
        """
        Given: now=40, full=45, full design=50 and fullDesign=True
        When: read() is called
        Then: Level is computed against the design capacity
        """
        writeUevent(now=40, full=45, fullDesign=50, status='Discharging')
        reader = PowerSupplyReader('BAT0', fullDesign=True, sysPath=str(sysPath))

        snapshot = reader.read()

        assert snapshot.level == 80
        assert snapshot.status == 'Discharging'

    def test_read_lastFullCapacity(self, sysPath, writeUevent):
        """
        Given: now=40, full=45, full design=50 and fullDesign=False
        When: read() is called
        Then: Level is computed against the last full capacity
        """
        writeUevent(now=40, full=45, fullDesign=50)
        reader = PowerSupplyReader('BAT0', fullDesign=False, sysPath=str(sysPath))

        assert reader.read().level == 88

    def test_read_picksUpFileChanges(self, sysPath, writeUevent):
        """
        Given: A reader on an existing battery
        When: The uevent file changes between reads
        Then: Each read reflects the current file
        """
        writeUevent(now=40, full=50, fullDesign=50, status='Discharging')
        reader = PowerSupplyReader('BAT0', sysPath=str(sysPath))
        first = reader.read()

        writeUevent(now=50, full=50, fullDesign=50, status='Full')
        second = reader.read()

        assert (first.level, first.status) == (80, 'Discharging')
        assert (second.level, second.status) == (100, 'Full')

    def test_read_missingStatus_raises(self, sysPath, writeUevent):
        """
        Given: A uevent file that loses its status line
        When: read() is called
        Then: PowerSupplyAttributeError is raised
        """
        writeUevent()
        reader = PowerSupplyReader('BAT0', sysPath=str(sysPath))
        writeUevent(status=None)

        with pytest.raises(PowerSupplyAttributeError):
            reader.read()

    def test_read_nonNumericNow_raises(self, sysPath, writeUevent):
        writeUevent()
        reader = PowerSupplyReader('BAT0', sysPath=str(sysPath))
        writeUevent(now='unknown')

        with pytest.raises(PowerSupplyAttributeError):
            reader.read()

    def test_read_zeroFull_raises(self, sysPath, writeUevent):
        """
        Given: A zero design capacity
        When: read() is called
        Then: PowerSupplyAttributeError is raised instead of dividing by zero
        """
        writeUevent(fullDesign=0)
        reader = PowerSupplyReader('BAT0', fullDesign=True, sysPath=str(sysPath))

        with pytest.raises(PowerSupplyAttributeError, match='Invalid'):
            reader.read()

    def test_read_fileRemoved_raisesReadError(self, sysPath, writeUevent):
        """
        Given: A reader whose uevent file disappears
        When: read() is called
        Then: PowerSupplyReadError is raised
        """
        ueventPath = writeUevent()
        reader = PowerSupplyReader('BAT0', sysPath=str(sysPath))
        ueventPath.unlink()

        with pytest.raises(PowerSupplyReadError):
            reader.read()

    def test_errors_areDataErrors(self):
        assert issubclass(PowerSupplyReadError, DataError)
        assert issubclass(PowerSupplyAttributeError, DataError)
