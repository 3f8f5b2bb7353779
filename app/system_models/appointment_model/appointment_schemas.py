# app/system_models/appointment_model/appointment_schemas.py
from typing import Optional, Literal
from datetime import date, time
from pydantic import BaseModel, ConfigDict, field_validator

from app.database.connection import ROW_ID
from app.helpers.time import today

APPOINTMENT_STATUS = Literal["Scheduled", "Completed", "Cancelled"]


class AppointmentCreate(BaseModel):
    patient_id: ROW_ID
    doctor_id: ROW_ID
    appointment_date: date
    appointment_time: time
    reason: Optional[str] = None

    @field_validator("appointment_date")
    def appointment_date_not_in_past(cls, v):
        if v < today():
            raise ValueError("appointment_date must not be in the past")
        return v


class AppointmentResponse(BaseModel):
    appointment_id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    appointment_time: time
    reason: Optional[str] = None
    status: APPOINTMENT_STATUS
    model_config = ConfigDict(from_attributes=True)


# Row of the appointment list, joined with display names
class AppointmentListItem(AppointmentResponse):
    patient_first_name: str
    patient_last_name: str
    doctor_first_name: str
    doctor_last_name: str


class AppointmentCreateResponse(BaseModel):
    appointment_id: int
    message: str = "Appointment scheduled successfully"
