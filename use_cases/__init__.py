"""
Use Cases Package.

This package contains the use cases of the doctor app's screen core.
Each use case is a self-contained module.

Available use cases:
- appointments: The doctor's appointment list with calendar filtering
- staff: Hospital staff records

Architecture:
Each use case follows the layered architecture pattern defined in core/:
- domain/: Pure business logic (models, services)
- data/: Repository pattern for data access
- presentation/: View model composition
- session.py: Use-case-specific selection state
"""

from use_cases.appointments import (
    AppointmentScreen,
    AppointmentSelectionEngine,
    InMemoryAppointmentRepository,
)
from use_cases.staff import Staff

__all__ = [
    # Appointments
    "AppointmentScreen",
    "AppointmentSelectionEngine",
    "InMemoryAppointmentRepository",
    # Staff
    "Staff",
]
