"""
Appointment List Composer.

Builds the display-ready view model for the appointment screen from the
selection engine's output. Values only - the host UI draws them.
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Mapping, Optional, Tuple

from core.domain import to_calendar_time
from core.presentation import BadgeColor, TextFormatter, exhaustive_mapping

from ..domain.models import Appointment, AppointmentStatus
from ..domain.services import SelectionResult
from ..session import SelectionState

STATUS_COLORS: Mapping[AppointmentStatus, BadgeColor] = exhaustive_mapping(
    AppointmentStatus,
    {
        AppointmentStatus.CONFIRMED: BadgeColor.PRIMARY,
        AppointmentStatus.COMPLETED: BadgeColor.SUCCESS,
        AppointmentStatus.PENDING: BadgeColor.WARNING,
        AppointmentStatus.CANCELLED: BadgeColor.DANGER,
    },
)

NO_APPOINTMENTS_TITLE = "No Appointments Found"


def status_color(status: AppointmentStatus) -> BadgeColor:
    """Badge color for a status. Raises KeyError for anything outside the enum."""
    return STATUS_COLORS[status]


@dataclass(frozen=True)
class StatusBadge:
    label: str
    color: BadgeColor

    @classmethod
    def for_status(cls, status: AppointmentStatus) -> "StatusBadge":
        return cls(label=status.label, color=status_color(status))


@dataclass(frozen=True)
class AppointmentCard:
    """One row of the appointment list."""
    appointment_id: str
    patient_name: str
    appointment_type: str
    time_label: str
    badge: StatusBadge


@dataclass(frozen=True)
class EmptyState:
    title: str
    message: str
    show_go_to_today: bool


@dataclass(frozen=True)
class AppointmentListView:
    """Everything the appointment screen shows below the date picker."""
    header_title: str
    toggle_label: str
    selected_date_label: str
    cards: Tuple[AppointmentCard, ...]
    empty_state: Optional[EmptyState] = None


class AppointmentListComposer:
    """
    Composes the appointment list view model.

    Time labels are rendered in `zone` (device local when None) so they
    agree with the engine's calendar days.
    """

    def __init__(self, zone: Optional[tzinfo] = None):
        self.zone = zone

    def compose(self, result: SelectionResult, state: SelectionState) -> AppointmentListView:
        """
        Build the list view for a selection result.

        Args:
            result: Output of AppointmentSelectionEngine.select
            state: The selection the result was computed for

        Returns:
            AppointmentListView with cards in engine order, or an empty state
        """
        showing_all = state.is_showing_all
        empty_state = None
        if result.is_empty:
            empty_state = EmptyState(
                title=NO_APPOINTMENTS_TITLE,
                message=result.empty_state_message or "",
                show_go_to_today=not showing_all,
            )

        return AppointmentListView(
            header_title="All Appointments" if showing_all else "Appointments",
            toggle_label="Filter by Date" if showing_all else "See All",
            selected_date_label=TextFormatter.date(state.selected_date),
            cards=tuple(self.compose_card(appt) for appt in result.appointments),
            empty_state=empty_state,
        )

    def compose_card(self, appointment: Appointment) -> AppointmentCard:
        """Build a single appointment card."""
        start = to_calendar_time(appointment.start_date, self.zone)
        return AppointmentCard(
            appointment_id=appointment.id,
            patient_name=appointment.patient_name,
            appointment_type=appointment.appointment_type,
            time_label=TextFormatter.time_of_day(start),
            badge=StatusBadge.for_status(appointment.status),
        )
