"""
Pytest configuration and fixtures for Urlaubsplaner tests.

Provides helper factories and common fixtures.
"""
import logging
import os
import textwrap
from datetime import date, timedelta

import pytest

from urlaubsplaner.config import ENV_PREFIX, LOGGER_NAME, EngineSettings, JSONFormatter
from urlaubsplaner.models import AbsenceType


# =============================================================================
# Factory Helpers
# =============================================================================

def make_absences(dates, absence_type: AbsenceType = AbsenceType.FULL_VACATION) -> dict:
    """Mark every given date with one absence type."""
    return {d: absence_type for d in dates}


def weekdays_in(start: date, end: date) -> list:
    """Monday to Friday dates from start to end inclusive, holidays included."""
    days = []
    current = start
    while current <= end:
        if current.weekday() < 5:
            days.append(current)
        current += timedelta(days=1)
    return days


# =============================================================================
# Environment Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop URLAUBSPLANER_* variables so tests see default settings."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    yield


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Remove JSON handlers attached by configure_logging()."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JSONFormatter):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings():
    return EngineSettings()


LEDGER_YAML = textwrap.dedent(
    """\
    schema_version: "1.0.0"
    user: alice
    state: BE
    default_quota: 30
    quotas:
      2025: 28
    absences:
      2025-06-02: UR
      2025-06-03: UR/2
      2025-12-24: UR/2
    """
)


@pytest.fixture
def ledger_yaml(tmp_path):
    """Path to a valid Berlin ledger with three absences in 2025."""
    path = tmp_path / "alice.yaml"
    path.write_text(LEDGER_YAML, encoding="utf-8")
    return path


@pytest.fixture
def holiday_ledger_yaml(tmp_path):
    """Path to a Bavarian ledger with vacation booked on Epiphany."""
    path = tmp_path / "bob.yaml"
    path.write_text(
        textwrap.dedent(
            """\
            state: BY
            absences:
              2025-01-06: UR
              2025-01-07: UR
            """
        ),
        encoding="utf-8",
    )
    return path
