"""
Appointment Screen Coordinator.

Wires the pieces of the appointment screen together:
- SelectionState and its transitions for user actions
- AppointmentSelectionEngine for what to show
- AppointmentListComposer for how to describe it
- AppointmentDelegate for navigating to an appointment's details

The screen holds no filtering logic of its own.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from core.data import ReadOnlyRepository
from core.domain import calendar_day

from .domain.models import Appointment
from .domain.services import AppointmentSelectionEngine, SelectionResult
from .presentation.composer import AppointmentListComposer, AppointmentListView
from .session import SelectionState, go_to_today, toggle_mode, with_selected_date

logger = logging.getLogger(__name__)


class AppointmentDelegate(ABC):
    """Navigation capability supplied by the hosting UI."""

    @abstractmethod
    def open_appointment(self, appointment: Appointment):
        """Show the detail view for an appointment."""
        pass


class AppointmentScreen:
    """
    Host-side state holder for the appointment list screen.

    Each user action replaces the current SelectionState with the result
    of a pure transition; render() re-runs the engine over a fresh
    snapshot from the repository.
    """

    def __init__(
        self,
        repository: ReadOnlyRepository[Appointment],
        engine: Optional[AppointmentSelectionEngine] = None,
        composer: Optional[AppointmentListComposer] = None,
        delegate: Optional[AppointmentDelegate] = None,
        state: Optional[SelectionState] = None,
    ):
        self.repository = repository
        self.engine = engine or AppointmentSelectionEngine()
        self.composer = composer or AppointmentListComposer(zone=self.engine.zone)
        self.delegate = delegate
        self.state = state or SelectionState.initial(zone=self.engine.zone)

    def selection(self) -> SelectionResult:
        """Run the engine for the current state."""
        return self.engine.select_for(self.repository.snapshot(), self.state)

    def render(self) -> AppointmentListView:
        """Build the view model for the current state."""
        return self.composer.compose(self.selection(), self.state)

    def pick_date(self, day: date) -> SelectionState:
        """Handle a date picked in the calendar."""
        day = calendar_day(day, self.engine.zone)
        return self._transition("pick_date", with_selected_date(self.state, day))

    def toggle_mode(self) -> SelectionState:
        """Handle the 'See All' / 'Filter by Date' control."""
        return self._transition("toggle_mode", toggle_mode(self.state))

    def go_to_today(self, today: Optional[date] = None) -> SelectionState:
        """Handle the 'Go to Today' button."""
        return self._transition("go_to_today", go_to_today(self.state, today, zone=self.engine.zone))

    def open_appointment(self, appointment_id: str) -> bool:
        """
        Navigate to a displayed appointment.

        Returns:
            True if the delegate was asked to open it, False if the
            appointment is not on screen or no delegate is attached
        """
        appointment = next(
            (appt for appt in self.selection().appointments if appt.id == appointment_id),
            None,
        )
        if appointment is None:
            logger.warning(f"Appointment {appointment_id} is not displayed; ignoring open request")
            return False
        if self.delegate is None:
            logger.warning(f"No delegate attached; cannot open appointment {appointment_id}")
            return False

        self.delegate.open_appointment(appointment)
        return True

    def _transition(self, action: str, new_state: SelectionState) -> SelectionState:
        if new_state != self.state:
            logger.debug(
                f"{action}: {self.state.selected_date} {self.state.mode.value} -> "
                f"{new_state.selected_date} {new_state.mode.value}"
            )
        self.state = new_state
        return new_state
