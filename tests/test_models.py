"""
Unit tests for the Appointment and Staff models.

Covers construction-time validation and the document boundary.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.domain import DomainError, PreconditionViolation
from use_cases.appointments import Appointment, AppointmentStatus
from use_cases.staff import Role, Staff, UnavailablePeriod


def _appointment_document(**overrides):
    document = {
        "id": "APPT-1",
        "patient_name": "John Doe",
        "appointment_type": "Regular Checkup",
        "start_date": "2025-04-05T09:00:00",
        "status": "confirmed",
    }
    document.update(overrides)
    return document


def _staff_document(**overrides):
    document = {
        "_id": "STAFF-1",
        "first_name": "Gregory",
        "last_name": "House",
        "email_address": "house@example.org",
        "password": "vicodin",
        "contact_number": "+1 555 0100",
        "specializations": ["Diagnostics", "Nephrology"],
        "department": "Diagnostic Medicine",
        "on_leave": False,
        "unavailability_periods": [
            {"start_date": "2025-05-01T00:00:00", "end_date": "2025-05-07T23:59:00"},
        ],
        "license_id": "LIC-0042",
        "role": "doctor",
    }
    document.update(overrides)
    return document


@pytest.mark.unit
@pytest.mark.domain
class TestAppointment:
    """Appointment construction and validation."""

    def test_from_document(self):
        appt = Appointment.from_document(_appointment_document())

        assert appt.id == "APPT-1"
        assert appt.start_date == datetime(2025, 4, 5, 9, 0)
        assert appt.status is AppointmentStatus.CONFIRMED

    def test_id_is_generated_when_absent(self):
        document = _appointment_document()
        del document["id"]

        first = Appointment.from_document(document)
        second = Appointment.from_document(document)

        assert first.id
        assert first.id != second.id

    def test_appointment_is_immutable(self):
        appt = Appointment.from_document(_appointment_document())

        with pytest.raises(ValidationError):
            appt.status = AppointmentStatus.CANCELLED

    @pytest.mark.parametrize("status", ["canceled", "Confirmed", "no_show", ""])
    def test_unknown_status_is_rejected(self, status):
        with pytest.raises(PreconditionViolation) as excinfo:
            Appointment.from_document(_appointment_document(status=status))

        assert "status" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, ValidationError)

    def test_unknown_status_rejected_on_direct_construction(self):
        with pytest.raises(ValidationError):
            Appointment(
                patient_name="John Doe",
                appointment_type="Follow-up",
                start_date=datetime(2025, 4, 5, 9, 0),
                status="canceled",
            )

    def test_missing_start_date_is_rejected(self):
        document = _appointment_document()
        del document["start_date"]

        with pytest.raises(PreconditionViolation) as excinfo:
            Appointment.from_document(document)

        assert "start_date" in str(excinfo.value)

    def test_legacy_date_field_is_not_a_start_date(self):
        document = _appointment_document()
        document["date"] = document.pop("start_date")

        with pytest.raises(PreconditionViolation):
            Appointment.from_document(document)

    def test_unparsable_start_date_is_rejected(self):
        with pytest.raises(PreconditionViolation):
            Appointment.from_document(_appointment_document(start_date="next tuesday"))

    def test_violation_is_a_domain_and_value_error(self):
        with pytest.raises(DomainError):
            Appointment.from_document(_appointment_document(status="lost"))
        with pytest.raises(ValueError):
            Appointment.from_document(_appointment_document(status="lost"))

    def test_to_document(self):
        appt = Appointment.from_document(_appointment_document(status="pending"))

        assert appt.to_document() == {
            "id": "APPT-1",
            "patient_name": "John Doe",
            "appointment_type": "Regular Checkup",
            "start_date": "2025-04-05T09:00:00",
            "status": "pending",
        }

    def test_status_labels_are_the_raw_values(self):
        assert [status.label for status in AppointmentStatus] == [
            "confirmed",
            "pending",
            "completed",
            "cancelled",
        ]


@pytest.mark.unit
@pytest.mark.domain
class TestStaff:
    """Staff records and their wire keys."""

    def test_from_document(self):
        staff = Staff.from_document(_staff_document())

        assert staff.id == "STAFF-1"
        assert staff.role is Role.DOCTOR
        assert staff.specializations == ["Diagnostics", "Nephrology"]
        assert staff.unavailability_periods == [
            UnavailablePeriod(start_date=datetime(2025, 5, 1), end_date=datetime(2025, 5, 7, 23, 59)),
        ]

    def test_full_name(self):
        assert Staff.from_document(_staff_document()).full_name == "Gregory House"

    def test_full_name_without_last_name(self):
        document = _staff_document()
        del document["last_name"]

        assert Staff.from_document(document).full_name == "Gregory"

    def test_defaults(self):
        document = _staff_document()
        for key in ("_id", "on_leave", "unavailability_periods", "role"):
            del document[key]

        staff = Staff.from_document(document)

        assert staff.id
        assert staff.on_leave is False
        assert staff.unavailability_periods == []
        assert staff.role is Role.DOCTOR

    def test_field_names_are_accepted(self):
        staff = Staff(
            id="STAFF-2",
            first_name="Lisa",
            email_address="cuddy@example.org",
            password="secret",
            contact_number="+1 555 0101",
            specializations=["Endocrinology"],
            department="Administration",
            license_id="LIC-0001",
        )

        assert staff.id == "STAFF-2"
        assert staff.full_name == "Lisa"

    def test_password_is_hidden_from_repr(self):
        assert "vicodin" not in repr(Staff.from_document(_staff_document()))

    def test_to_document_uses_wire_keys(self):
        document = Staff.from_document(_staff_document()).to_document()

        assert document["_id"] == "STAFF-1"
        assert document["first_name"] == "Gregory"
        assert document["unavailability_periods"][0]["start_date"] == "2025-05-01T00:00:00"
        assert "id" not in document

    def test_unknown_role_is_rejected(self):
        with pytest.raises(PreconditionViolation) as excinfo:
            Staff.from_document(_staff_document(role="surgeon"))

        assert "role" in str(excinfo.value)

    def test_inverted_unavailability_period_is_rejected(self):
        periods = [{"start_date": "2025-05-07T00:00:00", "end_date": "2025-05-01T00:00:00"}]

        with pytest.raises(PreconditionViolation) as excinfo:
            Staff.from_document(_staff_document(unavailability_periods=periods))

        assert "end_date is before start_date" in str(excinfo.value)

    def test_single_instant_period_is_allowed(self):
        moment = datetime(2025, 5, 1, 12, 0)

        assert UnavailablePeriod(start_date=moment, end_date=moment).end_date == moment

    def test_missing_license_is_rejected(self):
        document = _staff_document()
        del document["license_id"]

        with pytest.raises(PreconditionViolation):
            Staff.from_document(document)
