"""
Appointment Domain Services.

Decides which appointments are shown for a calendar selection.
No I/O dependencies - pure filtering, ordering and message selection.
"""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

from core.domain import DomainService, calendar_day, format_long_date, to_calendar_time

from .models import Appointment, ViewMode

if TYPE_CHECKING:
    from ..session import SelectionState


# =============================================================================
# CONSTANTS
# =============================================================================

NO_APPOINTMENTS_MESSAGE = "You don't have any appointments scheduled."

NO_APPOINTMENTS_ON_DATE_MESSAGE = (
    "You don't have any appointments scheduled for {date}. "
    "Select a different date to view other appointments."
)


# =============================================================================
# SERVICE RESULTS
# =============================================================================

@dataclass(frozen=True)
class SelectionResult:
    """The appointments to display, in display order."""
    appointments: Tuple[Appointment, ...]
    empty_state_message: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.appointments

    def __len__(self) -> int:
        return len(self.appointments)


# =============================================================================
# DOMAIN SERVICES
# =============================================================================

class AppointmentSelectionEngine(DomainService):
    """
    Projects an appointment collection onto a selection.

    ALL shows everything; BY_DATE keeps the appointments on the selected
    calendar day. Both sort ascending by start time and keep input order
    for equal start times.

    Calendar days are taken in `zone`, or the device's local zone when
    `zone` is None. Holds no state between calls.
    """

    def __init__(self, zone: Optional[tzinfo] = None):
        self.zone = zone

    def execute(
        self,
        appointments: Iterable[Appointment],
        selected_date: date,
        mode: ViewMode,
    ) -> SelectionResult:
        return self.select(appointments, selected_date, mode)

    def select(
        self,
        appointments: Iterable[Appointment],
        selected_date: date,
        mode: ViewMode,
    ) -> SelectionResult:
        """
        Select and order the appointments to display.

        Args:
            appointments: Appointments in any order; duplicates are kept
            selected_date: The calendar day picked by the user
            mode: ViewMode.ALL or ViewMode.BY_DATE

        Returns:
            SelectionResult with the ordered appointments and, when there
            are none, the empty-state message for the mode
        """
        mode = ViewMode(mode)
        day = calendar_day(selected_date, self.zone)
        keyed = [(self._localize(appt.start_date), appt) for appt in appointments]

        if mode is ViewMode.BY_DATE:
            keyed = [(moment, appt) for moment, appt in keyed if moment.date() == day]

        # sorted() is stable, so equal start times keep their input order
        ordered = tuple(appt for _, appt in sorted(keyed, key=lambda pair: pair[0]))

        message = None
        if not ordered:
            message = self.empty_state_message(day, mode)
        return SelectionResult(appointments=ordered, empty_state_message=message)

    def select_for(
        self,
        appointments: Iterable[Appointment],
        state: "SelectionState",
    ) -> SelectionResult:
        """Select using a SelectionState snapshot."""
        return self.select(appointments, state.selected_date, state.mode)

    def empty_state_message(self, selected_date: date, mode: ViewMode) -> str:
        """Message shown when the selection has no appointments."""
        if ViewMode(mode) is ViewMode.ALL:
            return NO_APPOINTMENTS_MESSAGE
        day = calendar_day(selected_date, self.zone)
        return NO_APPOINTMENTS_ON_DATE_MESSAGE.format(date=format_long_date(day))

    def _localize(self, moment: datetime) -> datetime:
        return to_calendar_time(moment, self.zone)
