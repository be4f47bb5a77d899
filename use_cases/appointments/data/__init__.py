"""Appointment data layer."""

from .repository import InMemoryAppointmentRepository, sample_appointments

__all__ = [
    "InMemoryAppointmentRepository",
    "sample_appointments",
]
