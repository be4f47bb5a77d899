"""Appointment presentation layer - view model composition."""

from .composer import (
    AppointmentCard,
    AppointmentListComposer,
    AppointmentListView,
    EmptyState,
    StatusBadge,
    STATUS_COLORS,
    status_color,
)

__all__ = [
    "AppointmentCard",
    "AppointmentListComposer",
    "AppointmentListView",
    "EmptyState",
    "StatusBadge",
    "STATUS_COLORS",
    "status_color",
]
