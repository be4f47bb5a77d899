"""Appointments domain layer - pure business logic."""

from .models import (
    Appointment,
    AppointmentStatus,
    ViewMode,
)
from .services import (
    AppointmentSelectionEngine,
    SelectionResult,
    NO_APPOINTMENTS_MESSAGE,
    NO_APPOINTMENTS_ON_DATE_MESSAGE,
)

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "ViewMode",
    "AppointmentSelectionEngine",
    "SelectionResult",
    "NO_APPOINTMENTS_MESSAGE",
    "NO_APPOINTMENTS_ON_DATE_MESSAGE",
]
