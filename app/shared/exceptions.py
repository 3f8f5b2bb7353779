# app/shared/exceptions.py
"""
Domain exceptions for the data-access layer.

Services raise these; the handlers in ``app.shared.error_handlers``
translate them to HTTP responses with a ``detail`` message.
"""
from typing import Any, Optional


class HealthcareAPIError(Exception):
    """Base exception for every failure the API reports to clients."""
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message}


class NotFoundError(HealthcareAPIError):
    """Raised when an entity id does not exist."""
    status_code = 404

    def __init__(self, entity: str, entity_id: int, message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class DependentRecordsError(HealthcareAPIError):
    """
    Raised when a patient delete is blocked by dependent rows.

    Attributes:
        patient_id: The patient that was to be deleted
        appointment_count: Appointments referencing the patient
        record_count: Medical records referencing the patient
    """
    status_code = 400

    def __init__(
        self,
        *,
        patient_id: int,
        appointment_count: int,
        record_count: int,
        message: str = "Cannot delete patient with existing appointments or medical records",
    ):
        self.patient_id = patient_id
        self.appointment_count = appointment_count
        self.record_count = record_count
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "appointment_count": self.appointment_count,
            "record_count": self.record_count,
        }


class ValidationFailure(HealthcareAPIError):
    """Raised when a required field is missing or malformed."""
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {"detail": self.message}
        if self.field:
            result["field"] = self.field
        return result


class InvalidReferenceError(ValidationFailure):
    """Raised when a patient_id/doctor_id does not reference an existing row."""

    def __init__(self, field: str, value: int):
        self.value = value
        entity = field.replace("_id", "")
        super().__init__(f"{field} {value} does not reference an existing {entity}", field=field)


class AppointmentConflictError(HealthcareAPIError):
    """Raised when the optional double-booking rule rejects a slot."""
    status_code = 409

    def __init__(self, *, doctor_id: int, appointment_date: str, appointment_time: str, existing_id: int):
        self.doctor_id = doctor_id
        self.appointment_date = appointment_date
        self.appointment_time = appointment_time
        self.existing_id = existing_id
        super().__init__("Doctor already has an appointment scheduled at this date and time")

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "doctor_id": self.doctor_id,
            "appointment_date": self.appointment_date,
            "appointment_time": self.appointment_time,
            "existing_appointment_id": self.existing_id,
        }


class StorageFailure(HealthcareAPIError):
    """Connectivity or query execution error, reported without details."""
    status_code = 500

    def __init__(self, message: str = "Server error"):
        super().__init__(message)
