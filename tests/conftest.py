################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
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
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(recordingNotifier, makeReading):
        reading = makeReading(level=25, status='Discharging')
"""

import sys
from pathlib import Path
from typing import Any, Callable, Generator, Optional

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from bato.battery.types import Reading  # noqa: E402
from bato.notify.types import Notification, Urgency  # noqa: E402


# ================================================================================
# Notification Fixtures
# ================================================================================

class RecordingNotifier:
    """Notifier double that records every payload it is asked to send."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []
        self.opened = False
        self.closed = False

    def open(self) -> None:
        self.opened = True

    def send(self, notification: Notification) -> None:
        self.sent.append(notification)

    def close(self) -> None:
        self.closed = True

    def summaries(self) -> list[str]:
        return [n.summary for n in self.sent]


@pytest.fixture
def recordingNotifier() -> RecordingNotifier:
    """
    Provide a notifier that records sent payloads.

    Returns:
        RecordingNotifier instance
    """
    return RecordingNotifier()


@pytest.fixture
def payloads() -> dict[str, Notification]:
    """
    Provide one payload per battery state, keyed by state value.

    Returns:
        Dictionary of state value to Notification
    """
    return {
        'charging': Notification(summary='Charging'),
        'discharging': Notification(summary='Discharging'),
        'full': Notification(summary='Full', urgency=Urgency.NORMAL),
        'low': Notification(summary='Low', body='Battery is low', urgency=Urgency.NORMAL),
        'critical': Notification(
            summary='Critical', body='Plug in now', icon='battery-caution',
            urgency=Urgency.CRITICAL
        ),
    }


@pytest.fixture
def makeReading(
    recordingNotifier: RecordingNotifier,
    payloads: dict[str, Notification],
) -> Callable[..., Reading]:
    """
    Provide a factory for Readings with low=30 and critical=10.

    Returns:
        Function (level, status, **overrides) -> Reading
    """
    def factory(level: int, status: str, **overrides: Any) -> Reading:
        fields: dict[str, Any] = {
            'currentLevel': level,
            'status': status,
            'lowLevel': 30,
            'criticalLevel': 10,
            'notifier': recordingNotifier,
            **payloads,
        }
        fields.update(overrides)
        return Reading(**fields)

    return factory


# ================================================================================
# Power Supply Fixtures
# ================================================================================

def buildUevent(
    prefix: str = 'ENERGY',
    now: Optional[int] = 40000000,
    full: Optional[int] = 50000000,
    fullDesign: Optional[int] = 50000000,
    status: Optional[str] = 'Discharging',
) -> str:
    """Build uevent content for a battery; None omits an attribute."""
    lines = [
        'POWER_SUPPLY_NAME=BAT0',
        'POWER_SUPPLY_TYPE=Battery',
    ]
    if status is not None:
        lines.append(f'POWER_SUPPLY_STATUS={status}')
    lines.append('POWER_SUPPLY_PRESENT=1')
    if fullDesign is not None:
        lines.append(f'POWER_SUPPLY_{prefix}_FULL_DESIGN={fullDesign}')
    if full is not None:
        lines.append(f'POWER_SUPPLY_{prefix}_FULL={full}')
    if now is not None:
        lines.append(f'POWER_SUPPLY_{prefix}_NOW={now}')
    lines.append('POWER_SUPPLY_CAPACITY=80')
    return '\n'.join(lines) + '\n'


@pytest.fixture
def sysPath(tmp_path: Path) -> Path:
    """
    Provide a fake /sys/class/power_supply directory.

    Returns:
        Path of the directory (battery directories are created by writeUevent)
    """
    path = tmp_path / 'power_supply'
    path.mkdir()
    return path


@pytest.fixture
def writeUevent(sysPath: Path) -> Callable[..., Path]:
    """
    Provide a function writing a uevent file under the fake sysfs.

    Returns:
        Function (content=None, batteryName='BAT0', **attrs) -> uevent path
    """
    def writer(
        content: Optional[str] = None,
        batteryName: str = 'BAT0',
        **attrs: Any,
    ) -> Path:
        batteryDir = sysPath / batteryName
        batteryDir.mkdir(exist_ok=True)
        ueventPath = batteryDir / 'uevent'
        ueventPath.write_text(content if content is not None else buildUevent(**attrs))
        return ueventPath

    return writer


# ================================================================================
# Configuration Fixtures
# ================================================================================

SAMPLE_CONFIG_YAML = """\
tick_rate: 2
bat_name: BAT0
low_level: 30
critical_level: 10
full_design: true
critical:
  summary: Critical battery level!
  body: Plug in the charger
  icon: battery-caution
low:
  summary: Low battery
full:
  summary: Battery full
  urgency: Low
charging:
  summary: Charging
"""


@pytest.fixture
def sampleConfigFile(tmp_path: Path) -> Path:
    """
    Provide a valid bato.yaml on disk.

    Returns:
        Path of the written file
    """
    path = tmp_path / 'bato.yaml'
    path.write_text(SAMPLE_CONFIG_YAML)
    return path


@pytest.fixture
def assertNoLogs(caplog: pytest.LogCaptureFixture) -> Generator[None, None, None]:
    """
    Fail the test if any ERROR logs are emitted.

    Usage:
        def test_something(assertNoLogs):
            # Will fail if any ERROR logs are emitted
    """
    yield

    errors = [r for r in caplog.records if r.levelname == 'ERROR']
    assert len(errors) == 0, f"Unexpected error logs: {[r.message for r in errors]}"


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
