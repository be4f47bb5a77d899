"""
Bootstrap for the Doctor App Appointment Screen.

Loads configuration, sets up logging and builds an AppointmentScreen for a
hosting UI to drive.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from config import Settings, settings as default_settings

from use_cases.appointments import (
    Appointment,
    AppointmentDelegate,
    AppointmentListComposer,
    AppointmentScreen,
    AppointmentSelectionEngine,
    InMemoryAppointmentRepository,
    SelectionState,
    sample_appointments,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str):
    """Configure root logging for the host process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


configure_logging(default_settings.log_level)


def create_appointment_screen(
    appointments: Optional[Iterable[Appointment]] = None,
    delegate: Optional[AppointmentDelegate] = None,
    app_settings: Optional[Settings] = None,
    today: Optional[date] = None,
) -> AppointmentScreen:
    """
    Build an AppointmentScreen wired from settings.

    Args:
        appointments: Already-loaded appointments; when None the screen starts
            empty, or with today's sample appointments if seeding is enabled
        delegate: Navigation capability of the hosting UI
        app_settings: Settings override (defaults to the global settings)
        today: Initial selected day (defaults to today in the calendar zone)

    Returns:
        A ready AppointmentScreen showing the selected day's appointments
    """
    app_settings = app_settings or default_settings
    zone = app_settings.calendar_tzinfo

    if appointments is None and app_settings.seed_sample_appointments:
        appointments = sample_appointments(today, zone=zone)
        logger.info("Seeded sample appointments")

    repository = InMemoryAppointmentRepository(appointments or ())
    screen = AppointmentScreen(
        repository=repository,
        engine=AppointmentSelectionEngine(zone=zone),
        composer=AppointmentListComposer(zone=zone),
        delegate=delegate,
        state=SelectionState.initial(today, zone=zone),
    )
    logger.info(
        f"Appointment screen ready ({len(repository)} appointments, "
        f"calendar zone: {app_settings.calendar_timezone or 'device local'})"
    )
    return screen
