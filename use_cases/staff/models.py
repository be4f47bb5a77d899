"""
Staff Domain Models.

Hospital staff records as exchanged with the backend. Wire keys are
snake_case (`_id`, `first_name`, ...); Python field names are accepted too.
"""

import logging
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from core.domain import PreconditionViolation, describe_errors

logger = logging.getLogger(__name__)


class Role(str, Enum):
    DOCTOR = "doctor"


class UnavailablePeriod(BaseModel):
    """A [start_date, end_date] interval when a staff member is unavailable."""

    model_config = ConfigDict(frozen=True)

    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def _check_order(self) -> "UnavailablePeriod":
        try:
            inverted = self.end_date < self.start_date
        except TypeError as exc:
            raise ValueError("start_date and end_date mix naive and aware timestamps") from exc
        if inverted:
            raise ValueError("end_date is before start_date")
        return self


class Staff(BaseModel):
    """A hospital staff member."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="_id")
    first_name: str
    last_name: Optional[str] = None

    email_address: str
    password: str = Field(repr=False)
    contact_number: str
    specializations: List[str]
    department: str
    on_leave: bool = False

    unavailability_periods: List[UnavailablePeriod] = Field(default_factory=list)
    license_id: str
    role: Role = Role.DOCTOR

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name or ''}".strip()

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Staff":
        """
        Build a staff record from a backend document.

        Raises:
            PreconditionViolation: if the document is missing fields, has an
                unknown role, or contains an inverted unavailability period
        """
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            logger.warning(f"Rejected staff document {document.get('_id', '?')}: {exc.error_count()} error(s)")
            raise PreconditionViolation("staff", describe_errors(exc.errors())) from exc

    def to_document(self) -> Dict[str, Any]:
        """Convert to a backend document using wire keys."""
        return self.model_dump(mode="json", by_alias=True)
