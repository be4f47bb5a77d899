"""
Shared pytest fixtures for the appointment screen core.

Engines and composers in tests use UTC as their calendar so results do
not depend on the machine's local time zone.
"""

from datetime import date, datetime, timezone

import pytest

import core.domain

from use_cases.appointments import (
    Appointment,
    AppointmentListComposer,
    AppointmentSelectionEngine,
    AppointmentStatus,
)

APRIL_5 = date(2025, 4, 5)
APRIL_6 = date(2025, 4, 6)

# Late evening in UTC: already April 6 east of UTC+1.
FROZEN_NOW = datetime(2025, 4, 5, 23, 0, tzinfo=timezone.utc)


def make_appointment(id, patient_name, start_date, status=AppointmentStatus.CONFIRMED, appointment_type="Consultation"):
    return Appointment(
        id=id,
        patient_name=patient_name,
        appointment_type=appointment_type,
        start_date=start_date,
        status=status,
    )


@pytest.fixture
def scenario_appointments():
    """Three appointments over two days, listed in chronological order."""
    return [
        make_appointment("1", "John Doe", datetime(2025, 4, 5, 9, 0)),
        make_appointment("2", "Sarah Smith", datetime(2025, 4, 5, 10, 30)),
        make_appointment("3", "Mike Johnson", datetime(2025, 4, 6, 11, 45), AppointmentStatus.COMPLETED),
    ]


@pytest.fixture
def engine():
    return AppointmentSelectionEngine(zone=timezone.utc)


@pytest.fixture
def composer():
    return AppointmentListComposer(zone=timezone.utc)


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin the calendar clock to FROZEN_NOW."""
    def fake_now(zone=None):
        return FROZEN_NOW.astimezone(zone)

    monkeypatch.setattr(core.domain, "_now", fake_now)
    return FROZEN_NOW
