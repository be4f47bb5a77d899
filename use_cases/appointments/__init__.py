"""
Doctor Appointment List Use Case.

Structure:
- domain/: Pure business logic (no I/O)
  - models.py: Appointment, AppointmentStatus, ViewMode
  - services.py: AppointmentSelectionEngine
- data/: In-memory appointment source
  - repository.py: InMemoryAppointmentRepository
- presentation/: View model composition
  - composer.py: AppointmentListComposer, status badge colors
- session.py: SelectionState and its transitions
- screen.py: AppointmentScreen, AppointmentDelegate
"""

from .domain import Appointment, AppointmentStatus, AppointmentSelectionEngine, SelectionResult, ViewMode
from .data import InMemoryAppointmentRepository, sample_appointments
from .presentation import AppointmentListComposer, AppointmentListView
from .session import SelectionState, go_to_today, toggle_mode, with_selected_date
from .screen import AppointmentDelegate, AppointmentScreen

__all__ = [
    "Appointment",
    "AppointmentStatus",
    "AppointmentSelectionEngine",
    "SelectionResult",
    "ViewMode",
    "InMemoryAppointmentRepository",
    "sample_appointments",
    "AppointmentListComposer",
    "AppointmentListView",
    "SelectionState",
    "go_to_today",
    "toggle_mode",
    "with_selected_date",
    "AppointmentDelegate",
    "AppointmentScreen",
]
