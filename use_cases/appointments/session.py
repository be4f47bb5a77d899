"""
Appointment Selection State.

The pair (selected calendar day, view mode) that drives which appointments
are visible, plus the pure transitions applied on each user action.
The host owns the current state and replaces it with each transition's result.
"""

from dataclasses import dataclass, replace
from datetime import date, tzinfo
from typing import Optional

from core.domain import calendar_day, today as calendar_today

from .domain.models import ViewMode


@dataclass(frozen=True)
class SelectionState:
    """
    Immutable selection snapshot.

    Any time-of-day passed as `selected_date` is dropped.
    """
    selected_date: date
    mode: ViewMode = ViewMode.BY_DATE

    def __post_init__(self):
        object.__setattr__(self, "selected_date", calendar_day(self.selected_date))
        object.__setattr__(self, "mode", ViewMode(self.mode))

    @classmethod
    def initial(cls, today: Optional[date] = None, zone: Optional[tzinfo] = None) -> "SelectionState":
        """Today's appointments (today in `zone`), filtered by date."""
        return cls(selected_date=today or calendar_today(zone))

    @property
    def is_showing_all(self) -> bool:
        return self.mode is ViewMode.ALL


# =============================================================================
# TRANSITIONS
# =============================================================================

def with_selected_date(state: SelectionState, day: date) -> SelectionState:
    """
    Pick a calendar day.

    Picking a different day while showing all appointments switches back
    to the date-filtered list. Picking the current day changes nothing.
    """
    day = calendar_day(day)
    if day == state.selected_date:
        return state
    return SelectionState(selected_date=day, mode=ViewMode.BY_DATE)


def toggle_mode(state: SelectionState) -> SelectionState:
    """Flip between 'see all' and 'filter by date'; the day is kept."""
    mode = ViewMode.BY_DATE if state.is_showing_all else ViewMode.ALL
    return replace(state, mode=mode)


def go_to_today(
    state: SelectionState,
    today: Optional[date] = None,
    zone: Optional[tzinfo] = None,
) -> SelectionState:
    """Jump the picker back to today in the calendar zone."""
    return with_selected_date(state, today or calendar_today(zone))
