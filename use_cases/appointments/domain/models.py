"""
Appointment Domain Models.

Immutable value records validated at construction time. A record that
passes construction is safe to hand to the selection engine.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.domain import PreconditionViolation, describe_errors

logger = logging.getLogger(__name__)


class AppointmentStatus(str, Enum):
    """Closed set of appointment lifecycle states."""
    CONFIRMED = "confirmed"
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Badge text; the raw status value."""
        return self.value


class ViewMode(Enum):
    """Which slice of the appointment list is shown."""
    BY_DATE = "by_date"
    ALL = "all"


class Appointment(BaseModel):
    """A scheduled patient-doctor encounter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    patient_name: str
    appointment_type: str
    start_date: datetime
    status: AppointmentStatus

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Appointment":
        """
        Build an appointment from a loaded document.

        Raises:
            PreconditionViolation: if a required field is missing or malformed,
                including a status outside the closed set
        """
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            logger.warning(f"Rejected appointment document {document.get('id', '?')}: {exc.error_count()} error(s)")
            raise PreconditionViolation("appointment", describe_errors(exc.errors())) from exc

    def to_document(self) -> Dict[str, Any]:
        """Convert to a plain JSON-ready dict."""
        return self.model_dump(mode="json")

