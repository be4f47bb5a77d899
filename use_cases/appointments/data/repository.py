"""
In-memory appointment source.

Holds the appointment collection the host has already loaded and hands
out immutable snapshots of it. Loading is the host's job; a refresh is
just a call to replace().
"""

import logging
from datetime import date, datetime, time, tzinfo
from typing import Iterable, List, Optional, Tuple

from core.data import ReadOnlyRepository
from core.domain import today

from ..domain.models import Appointment, AppointmentStatus

logger = logging.getLogger(__name__)


class InMemoryAppointmentRepository(ReadOnlyRepository[Appointment]):
    """Read-only repository over an in-memory appointment snapshot."""

    def __init__(self, appointments: Iterable[Appointment] = ()):
        self._appointments: Tuple[Appointment, ...] = tuple(appointments)

    def get_by_id(self, id: str) -> Optional[Appointment]:
        for appointment in self._appointments:
            if appointment.id == id:
                return appointment
        return None

    def get_all(self) -> List[Appointment]:
        return list(self._appointments)

    def snapshot(self) -> Tuple[Appointment, ...]:
        return self._appointments

    def replace(self, appointments: Iterable[Appointment]):
        """Swap in a freshly loaded collection."""
        self._appointments = tuple(appointments)
        logger.debug(f"Appointment snapshot replaced ({len(self._appointments)} appointments)")

    def __len__(self) -> int:
        return len(self._appointments)


# =============================================================================
# SAMPLE DATA
# =============================================================================

_SAMPLE_ROWS = [
    ("John Doe", "Regular Checkup", time(9, 0), AppointmentStatus.CONFIRMED),
    ("Sarah Smith", "Follow-up", time(10, 30), AppointmentStatus.CONFIRMED),
    ("Mike Johnson", "Consultation", time(11, 45), AppointmentStatus.COMPLETED),
    ("Emily Wilson", "Emergency", time(14, 15), AppointmentStatus.PENDING),
]


def sample_appointments(day: Optional[date] = None, zone: Optional[tzinfo] = None) -> List[Appointment]:
    """Demo appointments for a doctor's day (today in `zone` by default)."""
    day = day or today(zone)
    return [
        Appointment(
            id=f"sample-{index}",
            patient_name=patient_name,
            appointment_type=appointment_type,
            start_date=datetime.combine(day, start),
            status=status,
        )
        for index, (patient_name, appointment_type, start, status) in enumerate(_SAMPLE_ROWS, start=1)
    ]
